"""
Prism Errors
=============

The primitives are total functions with a single exception: the fuzzy
fingerprint capability may be unable to produce a digest for a given
input.  That condition is reported as :class:`FingerprintUnavailable`.
"""

from __future__ import annotations


class FingerprintUnavailable(Exception):
    """The fuzzy-hash capability could not fingerprint a buffer.

    Raised for degenerate input (e.g. an empty buffer) and for any failure
    inside the underlying capability.  The original exception, if any, is
    chained as ``__cause__`` and also exposed as :attr:`cause`.

    Callers must treat a missing fuzzy digest as *unknown*, never as a
    property of the content.
    """

    def __init__(self, reason: str, cause: BaseException | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.reason}: {self.cause}"
        return self.reason
