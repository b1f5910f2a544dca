from dishka import AsyncContainer, from_context, make_async_container

from agld.config import Config
from agld.domain.bead.util.di import BeadProvider
from agld.infrastructure.ledger.di import LedgerProvider
from agld.util.di.base import Provider
from agld.util.di.scope import Scope


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_async_container(
        ConfigProvider(),
        LedgerProvider(),
        BeadProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
