"""Persistence exceptions."""


class PersistenceError(RuntimeError):
    """
    Raised when a data-access operation fails.

    Covers every cause (connectivity, constraint violations, malformed
    statements, missing rows). The driver exception, when there is one,
    is chained as ``__cause__``.
    """


__all__ = ["PersistenceError"]
