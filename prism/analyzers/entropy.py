"""
Entropy Meter
==============

Shannon entropy of arbitrary byte ranges (whole files, sections, resource
blobs).  High values (close to 8.0 bits per byte) are typical of
compressed or encrypted content; code and structured data usually sit
well below that.

The meter is a total function: every byte buffer, including an empty
one, has a defined entropy.

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
      Bell System Technical Journal, 27(3), 379-423.
    - Lyda, R., & Hamrock, J. (2007). Using Entropy Analysis to Find
      Encrypted and Packed Malware. IEEE Security & Privacy, 5(2), 40-45.
"""

from __future__ import annotations

from shared.math_utils import BytesLike, shannon_entropy


def entropy(buffer: BytesLike) -> float:
    """Return the Shannon entropy of *buffer* in bits per byte.

    Args:
        buffer: Bytes-like object; read in place, never modified.

    Returns:
        A float in ``[0.0, 8.0]``; ``0.0`` for an empty buffer or a buffer
        made of a single repeated byte value.
    """
    return shannon_entropy(buffer)
