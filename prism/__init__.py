"""
Prism -- Binary Content Characterization
==========================================

Content-characterisation primitives for static inspection of executable
files: Shannon entropy, cryptographic digests, fuzzy (ssdeep) fingerprints
and lexical validation of extracted symbol and DLL names.

Capabilities:
    - Shannon entropy of any byte range, in bits per byte
    - MD5 / SHA-1 / SHA-256 digests
    - ssdeep fingerprints and similarity scores via an injectable capability
    - Allow-list validation of import/export names and DOS short filenames
    - Bit-exact DOS/PE container constants for the caller's parser

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
    - Kornblum, J. (2006). Identifying Almost Identical Files Using
      Context Triggered Piecewise Hashing.
    - Microsoft. (2024). PE Format.
"""

__version__ = "1.0.0"
__all__ = [
    "PrismEngine",
    "ContentProfile",
    "FingerprintUnavailable",
    "entropy",
    "digest",
    "fuzzy_fingerprint",
    "is_valid_symbol_name",
    "is_valid_short_filename",
]

from prism.analyzers.digest import digest
from prism.analyzers.entropy import entropy
from prism.analyzers.fuzzy import fuzzy_fingerprint
from prism.analyzers.names import is_valid_short_filename, is_valid_symbol_name
from prism.core.engine import PrismEngine
from prism.core.errors import FingerprintUnavailable
from prism.core.models import ContentProfile
