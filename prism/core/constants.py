"""
Executable Container Constants
================================

Magic signatures and structural limits of the DOS/PE family of executable
containers.  The container parser compares raw header fields against these
values directly, so every value here is bit-exact with the on-disk format.

References:
    - Microsoft. (2024). PE Format. Microsoft Learn.
    - Pietrek, M. (2002). An In-Depth Look into the Win32 Portable
      Executable File Format. MSDN Magazine.
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------

# Longest string read out of a mapped image (1 MiB).
MAX_STRING_LENGTH: int = 0x100000

IMAGE_NUMBEROF_DIRECTORY_ENTRIES: int = 16

# Used when the header declares an unusable FileAlignment.
FILE_ALIGNMENT_HARDCODED_VALUE: int = 0x200


# ---------------------------------------------------------------------------
# Header signatures
# ---------------------------------------------------------------------------

IMAGE_DOS_SIGNATURE: int = 0x5A4D      # "MZ"
IMAGE_DOSZM_SIGNATURE: int = 0x4D5A    # "ZM"
IMAGE_NE_SIGNATURE: int = 0x454E       # "NE"
IMAGE_LE_SIGNATURE: int = 0x454C       # "LE"
IMAGE_LX_SIGNATURE: int = 0x584C       # "LX"
IMAGE_TE_SIGNATURE: int = 0x5A56       # "VZ", terse executables
IMAGE_NT_SIGNATURE: int = 0x00004550   # "PE\0\0"


# ---------------------------------------------------------------------------
# Import table / optional header
# ---------------------------------------------------------------------------

IMAGE_ORDINAL_FLAG: int = 0x80000000
IMAGE_ORDINAL_FLAG64: int = 0x8000000000000000

OPTIONAL_HEADER_MAGIC_PE: int = 0x10B
OPTIONAL_HEADER_MAGIC_PE_PLUS: int = 0x20B
