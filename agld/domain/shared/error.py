"""Error hierarchy for AGLD.

Error layers:
- AgldError: Base class for all AGLD errors
- DomainError: Caller-facing failures such as a malformed or unknown BeadId (4xx responses)
- InfrastructureError: Deployment and ledger failures (5xx responses)

These errors are mapped to HTTP responses by the exception handler in app.py.
"""


class AgldError(Exception):
    """Base class for all AGLD errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (caller input - typically 4xx)
# =============================================================================


class DomainError(AgldError):
    """Base class for domain errors."""


class InvalidBeadIdError(DomainError):
    """BeadId is not 8 characters of [A-Z0-9]. Raised before any ledger access."""

    def __init__(self, bead_id: str) -> None:
        super().__init__(
            "BeadId must be 8 alphanumeric characters (A-Z, 0-9)",
            code="invalid_format",
        )
        self.bead_id = bead_id


class BeadNotFoundError(DomainError):
    """Well-formed BeadId that the contract does not know."""

    def __init__(self, bead_id: str) -> None:
        super().__init__(f"Bead not found: {bead_id}", code="not_found")
        self.bead_id = bead_id


# =============================================================================
# Infrastructure Errors (deployment and ledger failures - 5xx)
# =============================================================================


class InfrastructureError(AgldError):
    """Base class for infrastructure/system errors."""


class UnconfiguredError(InfrastructureError):
    """No contract is bound; the RPC endpoint or contract address is missing."""

    def __init__(self, message: str = "Contract address not set") -> None:
        super().__init__(message, code="unconfigured")


class ConnectivityError(InfrastructureError):
    """The ledger could not be reached, answered with an error, or returned undecodable data.

    ``message`` is safe to show to callers. The underlying exception, if any,
    is chained as ``__cause__`` and only logged.
    """

    def __init__(self, message: str = "Blockchain node unavailable") -> None:
        super().__init__(message, code="ledger_unavailable")


class ValueOverflowError(InfrastructureError):
    """A ledger integer does not fit the response's integer range."""

    def __init__(self, field: str, value: int) -> None:
        super().__init__(
            f"Ledger value for {field} is out of range",
            code="value_overflow",
        )
        self.field = field
        self.value = value
