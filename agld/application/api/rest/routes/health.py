"""Health check endpoint."""

from datetime import UTC, datetime
from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from agld.config import Config

router = APIRouter(tags=["health"], route_class=DishkaRoute)


@router.get("/health")
async def health(config: FromDishka[Config]) -> dict[str, Any]:
    """Liveness check. Does not touch the ledger."""
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "contractConfigured": config.ledger.contract_address is not None,
        "network": config.ledger.network,
    }
