"""ResolveBead query handler: public read access to on-chain bead records."""

import logfire

from agld.domain.bead.model.value import ResolvedBead
from agld.domain.bead.service.resolver import BeadResolver
from agld.domain.shared.query import Query, QueryHandler


class ResolveBead(Query):
    bead_id: str


class ResolveBeadHandler(QueryHandler[ResolveBead, ResolvedBead]):
    resolver: BeadResolver

    async def run(self, cmd: ResolveBead) -> ResolvedBead:
        with logfire.span("ResolveBead", bead_id=cmd.bead_id):
            return await self.resolver.resolve(cmd.bead_id)
