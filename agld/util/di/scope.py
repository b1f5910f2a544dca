"""Custom Dishka scopes for AGLD."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """AGLD dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (config, node transport, resolver)
    - UOW: Unit of Work (one HTTP request or one CLI invocation)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
