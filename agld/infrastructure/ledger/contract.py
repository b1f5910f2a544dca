"""ContractReader adapter for the ArtiinaNFT contract."""

from agld.domain.bead.model.value import BeadMetadata, BeadRecord
from agld.domain.bead.port.contract_reader import ContractReader
from agld.infrastructure.ledger.abi import ContractFunction
from agld.infrastructure.ledger.client import LedgerClient

# Minimal read-only interface of ArtiinaNFT
EXISTS = ContractFunction("exists", ("string",), ("bool",))
BEADS = ContractFunction(
    "beads",
    ("string",),
    ("string", "string", "uint256", "bool", "bool", "uint256", "uint256", "string"),
)
GET_BEAD_METADATA = ContractFunction(
    "getBeadMetadata",
    ("string",),
    ("uint256", "bool", "bool", "uint256", "string"),
)
BEAD_TO_TOKEN = ContractFunction("beadToToken", ("string",), ("uint256",))
GET_TRANSFER_COUNT = ContractFunction("getTransferCount", ("string",), ("uint256",))
TOKEN_URI = ContractFunction("tokenURI", ("uint256",), ("string",))


class LedgerContractReader(ContractReader):
    """Binds a LedgerClient to one ArtiinaNFT deployment."""

    def __init__(self, ledger: LedgerClient, address: str) -> None:
        self._ledger = ledger
        self._address = address

    @property
    def address(self) -> str:
        return self._address

    async def exists(self, bead_id: str) -> bool:
        (found,) = await self._ledger.call(self._address, EXISTS, bead_id)
        return found

    async def get_bead(self, bead_id: str) -> BeadRecord:
        (
            id_,
            sku,
            created_at,
            validated,
            is_valid,
            current_version,
            last_update,
            genesis_cid,
        ) = await self._ledger.call(self._address, BEADS, bead_id)
        return BeadRecord(
            id=id_,
            sku=sku,
            created_at=created_at,
            validated=validated,
            is_valid=is_valid,
            current_version=current_version,
            last_update=last_update,
            genesis_cid=genesis_cid,
        )

    async def get_bead_metadata(self, bead_id: str) -> BeadMetadata:
        current_version, validated, is_valid, last_update, genesis_cid = await self._ledger.call(
            self._address, GET_BEAD_METADATA, bead_id
        )
        return BeadMetadata(
            current_version=current_version,
            validated=validated,
            is_valid=is_valid,
            last_update=last_update,
            genesis_cid=genesis_cid,
        )

    async def get_token_id(self, bead_id: str) -> int:
        (token_id,) = await self._ledger.call(self._address, BEAD_TO_TOKEN, bead_id)
        return token_id

    async def get_transfer_count(self, bead_id: str) -> int:
        (count,) = await self._ledger.call(self._address, GET_TRANSFER_COUNT, bead_id)
        return count

    async def token_uri(self, token_id: int) -> str:
        (uri,) = await self._ledger.call(self._address, TOKEN_URI, token_id)
        return uri
