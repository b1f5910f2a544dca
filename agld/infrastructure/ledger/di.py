"""DI provider for ledger infrastructure."""

from typing import AsyncIterable, NewType

import httpx
from dishka import provide

from agld.config import Config
from agld.util.di.base import Provider
from agld.util.di.scope import Scope

# Dedicated client for the blockchain node; shared by all in-flight resolutions
LedgerHttpClient = NewType("LedgerHttpClient", httpx.AsyncClient)


class LedgerProvider(Provider):
    """DI provider for the node HTTP transport."""

    @provide(scope=Scope.APP)
    async def get_ledger_http_client(self, config: Config) -> AsyncIterable[LedgerHttpClient]:
        client = httpx.AsyncClient(
            timeout=httpx.Timeout(config.ledger.timeout),
            headers={"Content-Type": "application/json"},
        )
        yield LedgerHttpClient(client)
        await client.aclose()
