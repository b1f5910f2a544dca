"""Resolve a BeadId from the shell, without going through HTTP."""

import asyncio
import sys

from agld.application.di import create_container
from agld.cli.console import get_console
from agld.config import Config, configure_logging
from agld.domain.bead.model.value import ResolvedBead
from agld.domain.bead.query.resolve_bead import ResolveBead, ResolveBeadHandler
from agld.domain.shared.error import AgldError, BeadNotFoundError, UnconfiguredError
from agld.util.di.scope import Scope


async def resolve_once(bead_id: str, config: Config | None = None) -> ResolvedBead:
    """Run the resolve pipeline once in its own container."""
    container = create_container(config)
    try:
        async with container(scope=Scope.UOW) as uow:
            handler = await uow.get(ResolveBeadHandler)
            return await handler.run(ResolveBead(bead_id=bead_id))
    finally:
        await container.close()


def resolve(bead_id: str, *, json: bool = False) -> None:
    """Look up a bead on the configured contract.

    Args:
        bead_id: 8-character BeadId, e.g. AB12CD34.
        json: Print the raw JSON body the HTTP endpoint would return.
    """
    console = get_console()
    config = Config()  # type: ignore[call-arg]
    configure_logging(config.logging.model_copy(update={"level": "WARNING"}))

    try:
        bead = asyncio.run(resolve_once(bead_id, config))
    except AgldError as e:
        hint = None
        if isinstance(e, UnconfiguredError):
            hint = "Set AGLD_LEDGER__RPC_URL and AGLD_LEDGER__CONTRACT_ADDRESS"
        elif isinstance(e, BeadNotFoundError):
            hint = f"Contract: {config.ledger.contract_address}"
        console.error(f"{e.code}: {e.message}", hint=hint)
        sys.exit(1)

    if json:
        console.json(bead.to_json())
    else:
        console.bead_detail(bead)
