"""JSON-RPC client for read-only contract calls."""

import asyncio
import itertools
import logging
from typing import Any

import httpx
import logfire
from eth_abi.exceptions import DecodingError

from agld.domain.shared.error import ConnectivityError
from agld.infrastructure.ledger.abi import ContractFunction

logger = logging.getLogger(__name__)


class LedgerClient:
    """Submits ``eth_call`` requests to one node and decodes the typed results.

    Never retries. Every failure (transport, HTTP status, timeout, JSON-RPC
    error object, empty or malformed result, ABI decode) is raised as
    ConnectivityError with a caller-safe message; details are only logged.
    The shared ``httpx.AsyncClient`` is safe for concurrent calls.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        rpc_url: str,
        *,
        block: str = "latest",
        timeout: float = 10.0,
    ) -> None:
        self._client = client
        self._rpc_url = rpc_url
        self._block = block
        self._timeout = timeout
        self._ids = itertools.count(1)

    async def call(self, to: str, function: ContractFunction, *args: Any) -> tuple[Any, ...]:
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": "eth_call",
            "params": [{"to": to, "data": function.encode_call(*args)}, self._block],
        }
        logger.debug("eth_call %s on %s", function.signature, to)

        try:
            async with asyncio.timeout(self._timeout):
                response = await self._client.post(self._rpc_url, json=payload)
            response.raise_for_status()
            body = response.json()
        except TimeoutError as e:
            raise self._failure(function, f"timed out after {self._timeout}s") from e
        except httpx.HTTPError as e:
            raise self._failure(function, f"{type(e).__name__}: {e}") from e
        except ValueError as e:
            raise self._failure(function, f"invalid JSON response: {e}") from e

        data = self._result_bytes(function, body)
        try:
            return function.decode_result(data)
        except (DecodingError, ValueError) as e:
            raise self._failure(function, f"undecodable result: {e}") from e

    def _result_bytes(self, function: ContractFunction, body: Any) -> bytes:
        if not isinstance(body, dict):
            raise self._failure(function, "response is not a JSON-RPC object")

        error = body.get("error")
        if error is not None:
            if isinstance(error, dict):
                detail = f"rpc error {error.get('code')}: {error.get('message')}"
            else:
                detail = f"rpc error: {error}"
            raise self._failure(function, detail)

        result = body.get("result")
        if not isinstance(result, str) or not result.startswith("0x"):
            raise self._failure(function, f"malformed result: {result!r}")

        try:
            data = bytes.fromhex(result[2:])
        except ValueError as e:
            raise self._failure(function, f"result is not hex: {e}") from e

        # Empty return data means no contract code at the address, or a revert
        if not data and function.outputs:
            raise self._failure(function, "empty result")

        return data

    def _failure(self, function: ContractFunction, detail: str) -> ConnectivityError:
        logger.warning("Ledger call %s failed: %s", function.signature, detail)
        logfire.error("Ledger call failed", function=function.signature, error=detail)
        return ConnectivityError()
