"""BeadResolver - turns a raw BeadId into a ResolvedBead read from the contract."""

import asyncio
import logging
from collections.abc import Awaitable
from datetime import UTC, datetime
from typing import Any

from agld.domain.bead.model.value import BeadId, BeadMetadata, BeadRecord, ResolvedBead
from agld.domain.bead.port.contract_reader import ContractReader
from agld.domain.shared.error import BeadNotFoundError, UnconfiguredError, ValueOverflowError
from agld.domain.shared.service import Service

logger = logging.getLogger(__name__)

# Largest integer a JSON consumer can represent exactly (Number.MAX_SAFE_INTEGER)
MAX_SAFE_INTEGER = 2**53 - 1


def narrow_int(field: str, value: int) -> int:
    """Check that a uint256 from the ledger fits the response's integer range."""
    if value < 0 or value > MAX_SAFE_INTEGER:
        raise ValueOverflowError(field, value)
    return value


def format_timestamp(field: str, seconds: int) -> str:
    """Render Unix seconds as ISO-8601 UTC with milliseconds, e.g. 2023-11-14T22:13:20.000Z."""
    try:
        moment = datetime.fromtimestamp(narrow_int(field, seconds), UTC)
    except (OverflowError, OSError, ValueError) as e:
        raise ValueOverflowError(field, seconds) from e
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def _gather_all(*calls: Awaitable[Any]) -> list[Any]:
    """Run calls concurrently; on the first failure cancel the rest and re-raise."""
    tasks = [asyncio.ensure_future(call) for call in calls]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise


class BeadResolver(Service):
    """Validates a BeadId, reads it from the contract and assembles the public view.

    ``reader`` is None when the deployment has no contract configured; every
    well-formed lookup then fails with UnconfiguredError.
    """

    reader: ContractReader | None
    network: str

    async def resolve(self, raw_id: str) -> ResolvedBead:
        bead_id = str(BeadId.parse(raw_id))

        if self.reader is None:
            raise UnconfiguredError()

        if not await self.reader.exists(bead_id):
            logger.debug("Bead %s does not exist on %s", bead_id, self.network)
            raise BeadNotFoundError(bead_id)

        record, metadata, token_id, transfer_count = await _gather_all(
            self.reader.get_bead(bead_id),
            self.reader.get_bead_metadata(bead_id),
            self.reader.get_token_id(bead_id),
            self.reader.get_transfer_count(bead_id),
        )

        resolved = self._assemble(
            bead_id,
            record=record,
            metadata=metadata,
            token_id=token_id,
            transfer_count=transfer_count,
        )
        logger.debug("Resolved bead %s at version %d", bead_id, resolved.version)
        return resolved

    def _assemble(
        self,
        bead_id: str,
        *,
        record: BeadRecord,
        metadata: BeadMetadata,
        token_id: int,
        transfer_count: int,
    ) -> ResolvedBead:
        assert self.reader is not None
        version = narrow_int("currentVersion", metadata.current_version)
        return ResolvedBead(
            bead_id=bead_id,
            sku=record.sku,
            version=version,
            genesis_cid=metadata.genesis_cid,
            token_id=narrow_int("tokenId", token_id),
            validated=metadata.validated,
            is_valid=metadata.is_valid,
            transfers=narrow_int("transfers", transfer_count),
            created_at=format_timestamp("createdAt", record.created_at),
            last_update=format_timestamp("lastUpdate", metadata.last_update),
            blockchain_verified=True,
            network=self.network,
            contract_address=self.reader.address,
            previous_version=version - 1 if version > 0 else None,
        )
