"""Statically declared contract function bindings.

A ContractFunction knows its Solidity parameter and return types, so calldata
encoding and result decoding are fixed at import time instead of being looked
up from a loosely typed ABI list on every call.
"""

from dataclasses import dataclass
from typing import Any

from eth_abi import decode, encode
from eth_utils import function_signature_to_4byte_selector


@dataclass(frozen=True)
class ContractFunction:
    """A read-only contract function: name, input types and output types."""

    name: str
    inputs: tuple[str, ...]
    outputs: tuple[str, ...]

    @property
    def signature(self) -> str:
        """Canonical signature used for the selector, e.g. ``exists(string)``."""
        return f"{self.name}({','.join(self.inputs)})"

    @property
    def selector(self) -> bytes:
        return function_signature_to_4byte_selector(self.signature)

    def encode_call(self, *args: Any) -> str:
        """Build the 0x-prefixed calldata for ``eth_call``."""
        if len(args) != len(self.inputs):
            raise TypeError(
                f"{self.signature} takes {len(self.inputs)} argument(s), got {len(args)}"
            )
        return "0x" + (self.selector + encode(list(self.inputs), list(args))).hex()

    def decode_result(self, data: bytes) -> tuple[Any, ...]:
        """Decode raw return data into a tuple of Python values, one per output."""
        return tuple(decode(list(self.outputs), data))
