"""Static service descriptor."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from agld.config import Config

router = APIRouter(tags=["service"], route_class=DishkaRoute)


@router.get("/")
async def describe(config: FromDishka[Config]) -> dict[str, Any]:
    return {
        "service": config.server.name,
        "version": config.server.version,
        "endpoints": {
            "health": "/health",
            "bead": "/{beadId}",
        },
        "documentation": config.server.documentation_url,
    }
