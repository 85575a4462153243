"""
Digest Computer
================

Deterministic cryptographic fingerprints of byte ranges for exact-match
identification of samples and sections.  Three algorithms are supported:
MD5 (128-bit), SHA-1 (160-bit) and SHA-256 (256-bit).  MD5 and SHA-1 are
kept for interoperability with threat-intelligence feeds, not for any
security property, so they are requested with ``usedforsecurity=False``
and remain available on FIPS-restricted interpreters.

References:
    - Rivest, R. L. (1992). RFC 1321 -- The MD5 Message-Digest Algorithm.
    - NIST FIPS 180-4 (2015). Secure Hash Standard (SHS).
"""

from __future__ import annotations

import hashlib
from typing import Any, Callable, Iterable

from shared.math_utils import BytesLike, byte_view

from prism.core.models import DigestAlgorithm


# ---------------------------------------------------------------------------
# Algorithm table
# ---------------------------------------------------------------------------

_CONSTRUCTORS: dict[DigestAlgorithm, Callable[..., Any]] = {
    DigestAlgorithm.MD5: hashlib.md5,
    DigestAlgorithm.SHA1: hashlib.sha1,
    DigestAlgorithm.SHA256: hashlib.sha256,
}

DEFAULT_ALGORITHMS: tuple[DigestAlgorithm, ...] = (
    DigestAlgorithm.MD5,
    DigestAlgorithm.SHA1,
    DigestAlgorithm.SHA256,
)


def digest(buffer: BytesLike, algorithm: DigestAlgorithm | str) -> str:
    """Return the lowercase hex digest of *buffer*.

    The whole buffer is fed to the accumulator in a single update, read
    through the buffer protocol; only a strided view is materialised.

    Args:
        buffer: Bytes-like object to digest.
        algorithm: A :class:`DigestAlgorithm` or its name (``"sha256"``).

    Returns:
        Hex string of ``algorithm.hex_length`` characters.

    Raises:
        ValueError: If *algorithm* names no supported algorithm.
    """
    algo = DigestAlgorithm.parse(algorithm)
    hasher = _CONSTRUCTORS[algo](usedforsecurity=False)
    hasher.update(byte_view(buffer))
    return hasher.hexdigest()


def md5_hex(buffer: BytesLike) -> str:
    return digest(buffer, DigestAlgorithm.MD5)


def sha1_hex(buffer: BytesLike) -> str:
    return digest(buffer, DigestAlgorithm.SHA1)


def sha256_hex(buffer: BytesLike) -> str:
    return digest(buffer, DigestAlgorithm.SHA256)


def digest_all(
    buffer: BytesLike,
    algorithms: Iterable[DigestAlgorithm | str] | None = None,
) -> dict[str, str]:
    """Compute several digests of the same buffer.

    Args:
        buffer: Bytes-like object to digest.
        algorithms: Algorithms to compute; defaults to MD5, SHA-1, SHA-256.
            Duplicates are computed once.

    Returns:
        Mapping of algorithm name (``"md5"`` ...) to hex digest, in the
        order the algorithms were requested.
    """
    selected = DEFAULT_ALGORITHMS if algorithms is None else algorithms
    results: dict[str, str] = {}
    for algorithm in selected:
        algo = DigestAlgorithm.parse(algorithm)
        if algo.value not in results:
            results[algo.value] = digest(buffer, algo)
    return results
