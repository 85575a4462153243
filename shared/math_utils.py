"""
Prism Mathematical Utilities
==============================

Numeric primitives shared by the Prism content-characterisation toolkit:
the 256-bucket byte histogram, Shannon entropy over that histogram, and
the integer helpers used when checking executable alignment fields.

Byte buffers are read through the buffer protocol (``numpy.frombuffer``),
so ``bytes``, ``bytearray``, ``memoryview`` and ``mmap`` objects are
histogrammed in place without an intermediate copy.  Only a strided
(non-contiguous) memoryview is materialised once, see :func:`byte_view`.

References:
    [1] Shannon, C. E. (1948). A Mathematical Theory of Communication.
        Bell System Technical Journal, 27(3), 379-423.
    [2] Lyda, R. & Hamrock, J. (2007). Using Entropy Analysis to Find
        Encrypted and Packed Malware. IEEE Security & Privacy, 5(2), 40-45.
    [3] Microsoft. (2024). PE Format. Microsoft Learn.
"""

from __future__ import annotations

from typing import Union

import numpy as np
from numpy.typing import NDArray


# ---------------------------------------------------------------------------
#  Type aliases for readability
# ---------------------------------------------------------------------------
BytesLike = Union[bytes, bytearray, memoryview]
IntArray = NDArray[np.int64]

# Number of distinct values an 8-bit symbol can take.
BYTE_ALPHABET_SIZE: int = 256

# Upper bound of Shannon entropy for an 8-bit alphabet (log2(256)).
MAX_BYTE_ENTROPY: float = 8.0


# ========================== Histogram ======================================


def byte_view(data: BytesLike) -> memoryview:
    """Return a flat, C-contiguous unsigned-byte view of *data*.

    Contiguous buffers are wrapped without copying.  A strided view (for
    example ``memoryview(buf)[::2]``) cannot be exported as a single
    block, so its bytes are gathered into a new buffer first.
    """
    view = memoryview(data)
    if not view.c_contiguous:
        return memoryview(view.tobytes())
    return view.cast("B")


def byte_histogram(data: BytesLike) -> IntArray:
    """Count occurrences of every byte value in *data*.

    The histogram always has exactly 256 buckets, one per byte value,
    regardless of which values actually occur.  A single linear pass is
    made over the input.

    Args:
        data: Any object exposing a byte buffer.

    Returns:
        ``int64`` array of shape ``(256,)``; ``histogram[v]`` is the number
        of occurrences of byte value *v*.
    """
    view = np.frombuffer(byte_view(data), dtype=np.uint8)
    return np.bincount(view, minlength=BYTE_ALPHABET_SIZE).astype(np.int64)


# ========================== Entropy Measures ===============================


def shannon_entropy(data: BytesLike) -> float:
    """Compute the Shannon entropy of a byte sequence.

    .. math::

        H = -\\sum_{i=0}^{255} p_i \\, \\log_2(p_i)

    where :math:`p_i` is the relative frequency of byte value *i* and the
    sum only runs over buckets with a nonzero count.  The result is in
    **bits per byte** and ranges from 0.0 (constant stream) to 8.0
    (perfectly uniform distribution over 256 symbols).

    Reference:
        Shannon, C. E. (1948). A Mathematical Theory of Communication.
        Bell System Technical Journal, 27(3), 379-423.

    Args:
        data: Raw byte sequence to analyse.

    Returns:
        Shannon entropy in bits per byte. Returns 0.0 for empty input.
    """
    counts = byte_histogram(data)
    length = int(counts.sum())
    if length == 0:
        return 0.0

    probabilities = counts[counts > 0] / float(length)
    entropy = float(np.sum(-probabilities * np.log2(probabilities)))

    # Summation noise must not leave the theoretical range (or yield -0.0).
    return min(MAX_BYTE_ENTROPY, max(0.0, entropy))


# ========================== Integer helpers ================================


def is_power_of_two(value: int) -> bool:
    """Return ``True`` when *value* is a positive power of two.

    PE section and file alignment fields must satisfy this property.

    Args:
        value: Unsigned integer to test.
    """
    return value != 0 and (value & (value - 1)) == 0
