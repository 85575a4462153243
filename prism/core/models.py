"""
Prism Data Models
==================

Enumerations selecting digest algorithms and name-validator kinds, and
Pydantic models for the results the engine hands back to callers.

Every model is a plain value object: it is built fresh for a single call
and carries no identity beyond value equality.

References:
    - Rivest, R. L. (1992). RFC 1321 -- The MD5 Message-Digest Algorithm.
    - NIST FIPS 180-4 (2015). Secure Hash Standard (SHS).
    - Kornblum, J. (2006). Identifying Almost Identical Files Using
      Context Triggered Piecewise Hashing. Digital Investigation, 3S.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class DigestAlgorithm(str, enum.Enum):
    """Cryptographic digest algorithms supported by the digest computer."""
    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"

    @property
    def hex_length(self) -> int:
        """Length of the hex-encoded digest in characters."""
        return _HEX_LENGTHS[self]

    @classmethod
    def parse(cls, value: DigestAlgorithm | str) -> DigestAlgorithm:
        """Resolve an algorithm from a member or a loose name.

        Names are case-insensitive and may contain dashes or underscores
        (``"SHA-256"``, ``"sha_1"``).

        Raises:
            ValueError: If *value* names no supported algorithm.
        """
        if isinstance(value, cls):
            return value
        normalised = str(value).strip().lower().replace("-", "").replace("_", "")
        try:
            return cls(normalised)
        except ValueError:
            supported = ", ".join(member.value for member in cls)
            raise ValueError(
                f"Unsupported digest algorithm {value!r} (expected one of: {supported})"
            ) from None


_HEX_LENGTHS: dict[DigestAlgorithm, int] = {
    DigestAlgorithm.MD5: 32,
    DigestAlgorithm.SHA1: 40,
    DigestAlgorithm.SHA256: 64,
}


class NameKind(str, enum.Enum):
    """Token kinds understood by the name validator."""
    SYMBOL = "symbol"
    DOS_FILENAME = "dos"


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------

class ContentProfile(BaseModel):
    """Characterisation of a single byte range.

    Attributes:
        label: Display name of the profiled buffer (path or ``<memory>``).
        size: Buffer length in bytes.
        entropy: Shannon entropy in bits per byte, in [0.0, 8.0].
        digests: Lowercase hex digests keyed by algorithm name.
        fuzzy_hash: ssdeep-style fingerprint, ``None`` when unavailable.
        fuzzy_error: Reason the fuzzy fingerprint is missing, if it is.
    """
    label: str = "<memory>"
    size: int = 0
    entropy: float = Field(default=0.0, ge=0.0, le=8.0)
    digests: dict[str, str] = Field(default_factory=dict)
    fuzzy_hash: Optional[str] = None
    fuzzy_error: Optional[str] = None

    @property
    def has_fuzzy_hash(self) -> bool:
        return self.fuzzy_hash is not None


class NameCheck(BaseModel):
    """Outcome of validating one extracted name token.

    Attributes:
        token: The token as text (undecodable bytes shown as U+FFFD).
        kind: Validator kind applied.
        valid: Whether every character is in the kind's allow-list.
    """
    token: str
    kind: NameKind
    valid: bool


class SimilarityResult(BaseModel):
    """Fuzzy-hash comparison of two buffers.

    Attributes:
        left: Fingerprint of the first buffer.
        right: Fingerprint of the second buffer.
        score: Similarity score from 0 (unrelated) to 100 (identical).
    """
    left: str
    right: str
    score: int = Field(ge=0, le=100)
