from __future__ import annotations

import re
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from agld.domain.shared.error import InvalidBeadIdError


class BeadId(RootModel[str]):
    """
    Physical-item identifier printed on the bead: exactly 8 characters of [A-Z0-9].
    Examples: AB12CD34, 00000001
    """

    model_config = ConfigDict(frozen=True)

    _re: ClassVar[re.Pattern] = re.compile(r"[A-Z0-9]{8}")

    @field_validator("root")
    @classmethod
    def _validate(cls, v: str) -> str:
        # No normalisation: lowercase or padded ids are rejected, not repaired
        if not cls._re.fullmatch(v):
            raise ValueError("invalid BeadId (expected 8 chars of [A-Z0-9])")
        return v

    @classmethod
    def parse(cls, raw: str) -> BeadId:
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise InvalidBeadIdError(raw) from e

    def __str__(self) -> str:
        return self.root


class BeadRecord(BaseModel):
    """Primary on-chain record, as returned by the contract's ``beads`` getter."""

    model_config = ConfigDict(frozen=True)

    id: str
    sku: str
    created_at: int  # Unix seconds
    validated: bool
    is_valid: bool
    current_version: int
    last_update: int  # Unix seconds
    genesis_cid: str


class BeadMetadata(BaseModel):
    """Derived metadata view returned by ``getBeadMetadata``."""

    model_config = ConfigDict(frozen=True)

    current_version: int
    validated: bool
    is_valid: bool
    last_update: int  # Unix seconds
    genesis_cid: str


class ResolvedBead(BaseModel):
    """Public view of a bead, assembled from several contract reads.

    Serialises with camelCase keys; ``previous_version`` is None for a bead
    that has never evolved and is left out of the JSON body entirely.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    bead_id: str
    sku: str
    version: int
    genesis_cid: str = Field(alias="genesisCID")
    token_id: int
    validated: bool
    is_valid: bool
    transfers: int
    created_at: str  # ISO-8601, UTC, millisecond precision
    last_update: str  # ISO-8601, UTC, millisecond precision
    blockchain_verified: bool = True
    network: str
    contract_address: str
    previous_version: int | None = None

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
