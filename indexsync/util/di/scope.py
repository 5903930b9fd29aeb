"""Custom Dishka scopes for indexsync."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """indexsync dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Process lifetime (config, engine, search backend)
    - UOW: Unit of Work (one CLI command, one worker poll)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
