"""
Prism Core Module
==================

Data models, errors and container constants.  The engine lives in
:mod:`prism.core.engine` and is imported from there, since it depends on
the analyzers which in turn depend on this package.
"""

from prism.core.errors import FingerprintUnavailable
from prism.core.models import (
    ContentProfile,
    DigestAlgorithm,
    NameCheck,
    NameKind,
    SimilarityResult,
)

__all__ = [
    "FingerprintUnavailable",
    "ContentProfile",
    "DigestAlgorithm",
    "NameCheck",
    "NameKind",
    "SimilarityResult",
]
