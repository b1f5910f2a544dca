"""Bead lookup route: ``GET /{bead_id}``."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from agld.domain.bead.query.resolve_bead import ResolveBead, ResolveBeadHandler

router = APIRouter(tags=["beads"], route_class=DishkaRoute)


@router.get("/{bead_id}")
async def resolve_bead(
    bead_id: str,
    handler: FromDishka[ResolveBeadHandler],
) -> dict[str, Any]:
    """Resolve a BeadId into its on-chain record.

    Errors are raised as AGLD errors and mapped by the app's exception handler.
    """
    resolved = await handler.run(ResolveBead(bead_id=bead_id))
    return resolved.to_json()
