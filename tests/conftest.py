"""Global test fixtures."""

import os

# Keep the developer's deployment settings out of Config() during tests.
# This must happen at module load time, not in a fixture
for _name in ("SEPOLIA_RPC_URL", "ARTIINA_NFT_ADDRESS", "AGLD_CONFIG_FILE", "AGLD_LOG_FILE"):
    os.environ.pop(_name, None)

import logfire  # noqa: E402
import pytest  # noqa: E402

from agld.domain.bead.model.value import BeadMetadata, BeadRecord  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)

CONTRACT_ADDRESS = "0x68e00fC57974b9AeDd8f436E207BFf7B673132CC"


class StubContractReader:
    """In-memory ContractReader that records which functions were called."""

    def __init__(
        self,
        *,
        exists: bool = True,
        sku: str = "GOLD-1OZ",
        created_at: int = 1700000000,
        current_version: int = 2,
        validated: bool = True,
        is_valid: bool = True,
        last_update: int = 1700050000,
        genesis_cid: str = "bafybeigdyrzt5sfp7udm7hu76uh7y26nf3efuylqabf3oclgtqy55fbzdi",
        token_id: int = 7,
        transfer_count: int = 3,
        fail_on: set[str] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.address = CONTRACT_ADDRESS
        self.calls: list[tuple[str, object]] = []
        self._exists = exists
        self._record = BeadRecord(
            id="",
            sku=sku,
            created_at=created_at,
            validated=validated,
            is_valid=is_valid,
            current_version=current_version,
            last_update=last_update,
            genesis_cid=genesis_cid,
        )
        self._metadata = BeadMetadata(
            current_version=current_version,
            validated=validated,
            is_valid=is_valid,
            last_update=last_update,
            genesis_cid=genesis_cid,
        )
        self._token_id = token_id
        self._transfer_count = transfer_count
        self._fail_on = fail_on or set()
        self._error = error

    def _record_call(self, name: str, arg: object) -> None:
        self.calls.append((name, arg))
        if name in self._fail_on:
            assert self._error is not None
            raise self._error

    async def exists(self, bead_id: str) -> bool:
        self._record_call("exists", bead_id)
        return self._exists

    async def get_bead(self, bead_id: str) -> BeadRecord:
        self._record_call("get_bead", bead_id)
        return self._record.model_copy(update={"id": bead_id})

    async def get_bead_metadata(self, bead_id: str) -> BeadMetadata:
        self._record_call("get_bead_metadata", bead_id)
        return self._metadata

    async def get_token_id(self, bead_id: str) -> int:
        self._record_call("get_token_id", bead_id)
        return self._token_id

    async def get_transfer_count(self, bead_id: str) -> int:
        self._record_call("get_transfer_count", bead_id)
        return self._transfer_count

    async def token_uri(self, token_id: int) -> str:
        self._record_call("token_uri", token_id)
        return f"ipfs://metadata/{token_id}"


@pytest.fixture
def make_reader():
    """Factory for StubContractReader instances."""
    return StubContractReader


@pytest.fixture
def contract_address() -> str:
    return CONTRACT_ADDRESS
