"""
Fuzzy Fingerprint Adapter
==========================

Approximate ("fuzzy") fingerprints for near-duplicate detection across
samples.  The context-triggered piecewise hashing scheme itself (ssdeep:
content-defined chunking with a rolling checksum, compared by an
edit-distance score) is not implemented here.  It is an injected
capability behind the :class:`FuzzyHasher` protocol; production code uses
:class:`PpdeepHasher`, backed by the ``ppdeep`` library.

The adapter's job is narrow:

* hand the buffer to the capability unchanged,
* reject degenerate input it cannot meaningfully fingerprint (an empty
  buffer raises :class:`FingerprintUnavailable`; the capability is not
  invoked),
* turn every failure of the capability into a
  :class:`FingerprintUnavailable` carrying the original cause.

References:
    - Kornblum, J. (2006). Identifying Almost Identical Files Using
      Context Triggered Piecewise Hashing. Digital Investigation, 3S, 91-97.
    - ppdeep: https://github.com/elceef/ppdeep
"""

from __future__ import annotations

from typing import Protocol

import ppdeep

from shared.math_utils import BytesLike

from prism.core.errors import FingerprintUnavailable


# ---------------------------------------------------------------------------
# Capability interface
# ---------------------------------------------------------------------------

class FuzzyHasher(Protocol):
    """Interface of a fuzzy-hash capability."""

    def hash(self, data: BytesLike) -> str:
        """Return the fingerprint of *data*."""
        ...

    def compare(self, left: str, right: str) -> int:
        """Return a 0-100 similarity score of two fingerprints."""
        ...


class PpdeepHasher:
    """Production capability backed by the pure-Python ``ppdeep`` package.

    ``ppdeep`` only accepts ``bytes``, so any other buffer type (including
    an ``mmap`` of a whole file) is copied once before hashing.  This is
    the one primitive that copies its input; callers bound the copy with
    the engine's ``profile.max_buffer_size``.
    """

    def hash(self, data: BytesLike) -> str:
        if not isinstance(data, bytes):
            data = bytes(data)
        return ppdeep.hash(data)

    def compare(self, left: str, right: str) -> int:
        return int(ppdeep.compare(left, right))


# ---------------------------------------------------------------------------
# Adapter
# ---------------------------------------------------------------------------

class FuzzyFingerprintAdapter:
    """Classifies the outcome of a fuzzy-hash capability.

    Usage::

        adapter = FuzzyFingerprintAdapter()
        try:
            fingerprint = adapter.fingerprint(section_bytes)
        except FingerprintUnavailable:
            fingerprint = None  # unknown, not a content property

    Args:
        hasher: Capability to delegate to.  Defaults to :class:`PpdeepHasher`.
    """

    def __init__(self, hasher: FuzzyHasher | None = None) -> None:
        self._hasher: FuzzyHasher = hasher if hasher is not None else PpdeepHasher()

    @property
    def hasher(self) -> FuzzyHasher:
        return self._hasher

    def fingerprint(self, buffer: BytesLike) -> str:
        """Return the fuzzy fingerprint of *buffer*.

        Raises:
            FingerprintUnavailable: For an empty buffer, when the capability
                raises, or when it returns an empty result.
        """
        if len(buffer) == 0:
            raise FingerprintUnavailable("empty buffer has no fuzzy fingerprint")

        try:
            result = self._hasher.hash(buffer)
        except Exception as exc:
            raise FingerprintUnavailable("fuzzy hash capability failed", exc) from exc

        if not isinstance(result, str) or not result.strip():
            raise FingerprintUnavailable(
                f"fuzzy hash capability returned no fingerprint ({result!r})"
            )
        return result

    def similarity(self, left: str, right: str) -> int:
        """Compare two fingerprints produced by the same capability.

        Returns:
            Score from 0 (no similarity) to 100 (identical).

        Raises:
            FingerprintUnavailable: When the capability cannot compare them.
        """
        try:
            score = int(self._hasher.compare(left, right))
        except Exception as exc:
            raise FingerprintUnavailable("fuzzy hash comparison failed", exc) from exc
        return max(0, min(100, score))


# ---------------------------------------------------------------------------
# Module-level convenience
# ---------------------------------------------------------------------------

_DEFAULT_ADAPTER = FuzzyFingerprintAdapter()


def fuzzy_fingerprint(buffer: BytesLike) -> str:
    """Fingerprint *buffer* with the process-wide ``ppdeep`` adapter."""
    return _DEFAULT_ADAPTER.fingerprint(buffer)


def fuzzy_similarity(left: str, right: str) -> int:
    """Compare two fingerprints with the process-wide ``ppdeep`` adapter."""
    return _DEFAULT_ADAPTER.similarity(left, right)
