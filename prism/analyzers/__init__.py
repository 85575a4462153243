"""
Prism Analyzers
================

The four stateless content-characterisation primitives.
"""

from prism.analyzers.digest import digest, digest_all
from prism.analyzers.entropy import entropy
from prism.analyzers.fuzzy import (
    FuzzyFingerprintAdapter,
    FuzzyHasher,
    PpdeepHasher,
    fuzzy_fingerprint,
)
from prism.analyzers.names import (
    is_valid_name,
    is_valid_short_filename,
    is_valid_symbol_name,
)

__all__ = [
    "digest",
    "digest_all",
    "entropy",
    "FuzzyFingerprintAdapter",
    "FuzzyHasher",
    "PpdeepHasher",
    "fuzzy_fingerprint",
    "is_valid_name",
    "is_valid_short_filename",
    "is_valid_symbol_name",
]
