import logging

from dishka import provide

from agld.config import Config
from agld.domain.bead.port.contract_reader import ContractReader
from agld.domain.bead.query.resolve_bead import ResolveBeadHandler
from agld.domain.bead.service.resolver import BeadResolver
from agld.infrastructure.ledger.client import LedgerClient
from agld.infrastructure.ledger.contract import LedgerContractReader
from agld.infrastructure.ledger.di import LedgerHttpClient
from agld.util.di.base import Provider
from agld.util.di.scope import Scope

logger = logging.getLogger(__name__)


class BeadProvider(Provider):
    # Services
    @provide(scope=Scope.APP)
    def get_bead_resolver(self, config: Config, client: LedgerHttpClient) -> BeadResolver:
        ledger = config.ledger
        reader: ContractReader | None = None
        if ledger.is_configured:
            assert ledger.contract_address is not None
            reader = LedgerContractReader(
                LedgerClient(client, ledger.rpc_url, block=ledger.block, timeout=ledger.timeout),
                address=ledger.contract_address,
            )
        else:
            logger.warning("Ledger not configured; bead lookups will answer 'unconfigured'")
        return BeadResolver(reader=reader, network=ledger.network)

    # Query Handlers
    resolve_bead_handler = provide(ResolveBeadHandler, scope=Scope.UOW)
