"""Unit tests for BeadResolver."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from agld.domain.bead.service.resolver import (
    MAX_SAFE_INTEGER,
    BeadResolver,
    format_timestamp,
    narrow_int,
)
from agld.domain.shared.error import (
    BeadNotFoundError,
    ConnectivityError,
    InvalidBeadIdError,
    UnconfiguredError,
    ValueOverflowError,
)

READS = {"get_bead", "get_bead_metadata", "get_token_id", "get_transfer_count"}


def _make_resolver(reader) -> BeadResolver:
    return BeadResolver(reader=reader, network="sepolia")


class TestResolveFormatValidation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", ["zz999999", "AB12CD3", "AB12CD345", "", "AB12_D34"])
    async def test_malformed_id_never_reaches_the_ledger(self, raw: str):
        reader = AsyncMock()
        resolver = _make_resolver(reader)

        with pytest.raises(InvalidBeadIdError):
            await resolver.resolve(raw)

        assert reader.method_calls == []

    @pytest.mark.asyncio
    async def test_format_checked_before_configuration(self):
        resolver = _make_resolver(None)

        with pytest.raises(InvalidBeadIdError):
            await resolver.resolve("zz999999")


class TestResolveUnconfigured:
    @pytest.mark.asyncio
    async def test_well_formed_id_without_reader_is_unconfigured(self):
        resolver = _make_resolver(None)

        with pytest.raises(UnconfiguredError) as exc_info:
            await resolver.resolve("AB12CD34")

        assert exc_info.value.code == "unconfigured"


class TestResolveNotFound:
    @pytest.mark.asyncio
    async def test_missing_bead_raises_not_found_with_id(self, make_reader):
        reader = make_reader(exists=False)
        resolver = _make_resolver(reader)

        with pytest.raises(BeadNotFoundError) as exc_info:
            await resolver.resolve("AB12CD34")

        assert exc_info.value.bead_id == "AB12CD34"
        assert reader.calls == [("exists", "AB12CD34")]

    @pytest.mark.asyncio
    async def test_existence_check_failure_is_not_not_found(self, make_reader):
        reader = make_reader(fail_on={"exists"}, error=ConnectivityError())
        resolver = _make_resolver(reader)

        with pytest.raises(ConnectivityError):
            await resolver.resolve("AB12CD34")

        assert {name for name, _ in reader.calls} == {"exists"}


class TestResolveSuccess:
    @pytest.mark.asyncio
    async def test_gold_bead_scenario(self, make_reader, contract_address: str):
        resolver = _make_resolver(make_reader())

        bead = await resolver.resolve("AB12CD34")

        assert bead.bead_id == "AB12CD34"
        assert bead.sku == "GOLD-1OZ"
        assert bead.version == 2
        assert bead.previous_version == 1
        assert bead.token_id == 7
        assert bead.transfers == 3
        assert bead.created_at == "2023-11-14T22:13:20.000Z"
        assert bead.last_update == "2023-11-15T12:06:40.000Z"
        assert bead.validated is True
        assert bead.is_valid is True
        assert bead.blockchain_verified is True
        assert bead.network == "sepolia"
        assert bead.contract_address == contract_address

    @pytest.mark.asyncio
    async def test_all_reads_use_the_requested_id(self, make_reader):
        reader = make_reader()

        await _make_resolver(reader).resolve("AB12CD34")

        assert reader.calls[0] == ("exists", "AB12CD34")
        assert {name for name, _ in reader.calls[1:]} == READS
        assert all(arg == "AB12CD34" for _, arg in reader.calls)

    @pytest.mark.asyncio
    async def test_json_body_uses_camel_case_keys(self, make_reader):
        bead = await _make_resolver(make_reader()).resolve("AB12CD34")

        body = bead.to_json()

        assert list(body) == [
            "beadId",
            "sku",
            "version",
            "genesisCID",
            "tokenId",
            "validated",
            "isValid",
            "transfers",
            "createdAt",
            "lastUpdate",
            "blockchainVerified",
            "network",
            "contractAddress",
            "previousVersion",
        ]

    @pytest.mark.asyncio
    async def test_version_zero_omits_previous_version(self, make_reader):
        bead = await _make_resolver(make_reader(current_version=0)).resolve("AB12CD34")

        assert bead.version == 0
        assert bead.previous_version is None
        assert "previousVersion" not in bead.to_json()

    @pytest.mark.asyncio
    async def test_version_one_has_previous_version_zero(self, make_reader):
        bead = await _make_resolver(make_reader(current_version=1)).resolve("AB12CD34")

        assert bead.to_json()["previousVersion"] == 0

    @pytest.mark.asyncio
    async def test_created_at_round_trips_to_same_instant(self, make_reader):
        bead = await _make_resolver(make_reader(created_at=1234567890)).resolve("AB12CD34")

        parsed = datetime.fromisoformat(bead.created_at.replace("Z", "+00:00"))
        assert parsed == datetime.fromtimestamp(1234567890, UTC)

    @pytest.mark.asyncio
    async def test_repeated_resolution_is_identical(self, make_reader):
        resolver = _make_resolver(make_reader())

        first = await resolver.resolve("AB12CD34")
        second = await resolver.resolve("AB12CD34")

        assert first == second

    @pytest.mark.asyncio
    async def test_any_failed_read_fails_the_whole_resolve(self, make_reader):
        reader = make_reader(fail_on={"get_token_id"}, error=ConnectivityError())

        with pytest.raises(ConnectivityError):
            await _make_resolver(reader).resolve("AB12CD34")

    @pytest.mark.asyncio
    async def test_oversized_token_id_raises_overflow(self, make_reader):
        reader = make_reader(token_id=2**64)

        with pytest.raises(ValueOverflowError) as exc_info:
            await _make_resolver(reader).resolve("AB12CD34")

        assert exc_info.value.field == "tokenId"


class TestNarrowing:
    def test_keeps_safe_values(self):
        assert narrow_int("transfers", 0) == 0
        assert narrow_int("transfers", MAX_SAFE_INTEGER) == MAX_SAFE_INTEGER

    def test_rejects_values_above_safe_range(self):
        with pytest.raises(ValueOverflowError):
            narrow_int("transfers", MAX_SAFE_INTEGER + 1)

    def test_timestamp_beyond_datetime_range_overflows(self):
        with pytest.raises(ValueOverflowError) as exc_info:
            format_timestamp("createdAt", MAX_SAFE_INTEGER)

        assert exc_info.value.field == "createdAt"

    def test_epoch_formats_with_milliseconds(self):
        assert format_timestamp("createdAt", 0) == "1970-01-01T00:00:00.000Z"
