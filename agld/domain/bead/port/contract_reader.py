"""Port for read-only access to the bead contract."""

from abc import abstractmethod
from typing import Protocol

from agld.domain.bead.model.value import BeadMetadata, BeadRecord
from agld.domain.shared.port import Port


class ContractReader(Port, Protocol):
    """Typed view functions of the bead NFT contract.

    Every method raises ConnectivityError when the ledger cannot answer.
    """

    @property
    @abstractmethod
    def address(self) -> str: ...

    @abstractmethod
    async def exists(self, bead_id: str) -> bool: ...

    @abstractmethod
    async def get_bead(self, bead_id: str) -> BeadRecord: ...

    @abstractmethod
    async def get_bead_metadata(self, bead_id: str) -> BeadMetadata: ...

    @abstractmethod
    async def get_token_id(self, bead_id: str) -> int: ...

    @abstractmethod
    async def get_transfer_count(self, bead_id: str) -> int: ...

    @abstractmethod
    async def token_uri(self, token_id: int) -> str: ...
