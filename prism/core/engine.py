"""
Prism Profiling Engine
=======================

Runs the content-characterisation primitives over a buffer or file and
aggregates their output into a :class:`ContentProfile`.

Pipeline for one buffer:
    1. Enforce the configured maximum buffer size
    2. Shannon entropy
    3. Cryptographic digests for the configured algorithms
    4. Fuzzy fingerprint (optional); an unavailable fingerprint is
       recorded as absent and logged, never fatal

The engine is synchronous and keeps no state between calls, so a single
instance may be shared between threads.

References:
    - Sikorski, M., & Honig, A. (2012). Practical Malware Analysis.
      No Starch Press. Chapter 1: Basic Static Techniques.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from shared.config import PrismConfig
from shared.logger import PrismLogger
from shared.math_utils import BytesLike

from prism.analyzers.digest import digest, digest_all
from prism.analyzers.entropy import entropy
from prism.analyzers.fuzzy import FuzzyFingerprintAdapter
from prism.analyzers.names import decode_token, is_valid_name
from prism.core.errors import FingerprintUnavailable
from prism.core.models import (
    ContentProfile,
    DigestAlgorithm,
    NameCheck,
    NameKind,
    SimilarityResult,
)


class PrismEngine:
    """Orchestrates entropy, digest and fuzzy-hash profiling.

    Usage::

        engine = PrismEngine()
        profile = engine.profile_file("/path/to/sample.exe")
        print(profile.entropy, profile.digests["sha256"])
    """

    def __init__(
        self,
        config: PrismConfig | None = None,
        logger: PrismLogger | None = None,
        fuzzy: FuzzyFingerprintAdapter | None = None,
    ) -> None:
        """Initialise the engine.

        Args:
            config: Prism configuration.  Defaults are used if not provided.
            logger: Logger instance.  A new one is created if not provided.
            fuzzy: Fuzzy fingerprint adapter; defaults to the ``ppdeep`` one.

        Raises:
            TypeError: If ``profile.digest_algorithms`` is not a list.
            ValueError: If an algorithm name is unknown or
                ``profile.max_buffer_size`` is not a non-negative integer.
        """
        self._config: PrismConfig = config or PrismConfig()
        self._logger: PrismLogger = logger or PrismLogger.from_config(
            "engine", self._config.global_settings
        )
        self._fuzzy: FuzzyFingerprintAdapter = fuzzy or FuzzyFingerprintAdapter()

        names = self._config.profile.digest_algorithms
        if isinstance(names, (str, bytes)) or not isinstance(names, (list, tuple)):
            raise TypeError(
                "profile.digest_algorithms must be a list of algorithm names, "
                f"got {names!r}"
            )
        self._algorithms: tuple[DigestAlgorithm, ...] = tuple(
            DigestAlgorithm.parse(name) for name in names
        )

        max_size = self._config.profile.max_buffer_size
        if isinstance(max_size, bool) or not isinstance(max_size, int) or max_size < 0:
            raise ValueError(
                f"profile.max_buffer_size must be a non-negative integer, got {max_size!r}"
            )

    @property
    def algorithms(self) -> tuple[DigestAlgorithm, ...]:
        """Digest algorithms computed by :meth:`profile`."""
        return self._algorithms

    # ------------------------------------------------------------------ #
    #  Profiling
    # ------------------------------------------------------------------ #

    def profile(self, buffer: BytesLike, label: str = "<memory>") -> ContentProfile:
        """Characterise *buffer*.

        Args:
            buffer: Bytes-like object; read in place, never modified.
            label: Display name stored on the result.

        Returns:
            Populated :class:`ContentProfile`.

        Raises:
            ValueError: If *buffer* exceeds ``profile.max_buffer_size``.
        """
        self._check_size(len(buffer), label)

        with self._logger.operation("profile"), self._logger.timed(label):
            self._logger.debug("Profiling %s", label, size=len(buffer))

            result = ContentProfile(
                label=label,
                size=len(buffer),
                entropy=entropy(buffer),
                digests=digest_all(buffer, self._algorithms),
            )

            if self._config.profile.fuzzy_hash:
                try:
                    result.fuzzy_hash = self._fuzzy.fingerprint(buffer)
                except FingerprintUnavailable as exc:
                    result.fuzzy_error = str(exc)
                    self._logger.warning(
                        "Fuzzy fingerprint unavailable for %s: %s", label, exc
                    )

        return result

    def profile_file(self, path: str | Path) -> ContentProfile:
        """Read *path* and characterise its contents.

        Raises:
            FileNotFoundError: If *path* does not exist.
            ValueError: If the file exceeds ``profile.max_buffer_size``.
        """
        file_path = Path(path)
        self._check_size(file_path.stat().st_size, str(file_path))
        return self.profile(file_path.read_bytes(), label=str(file_path))

    def digest(self, buffer: BytesLike, algorithm: DigestAlgorithm | str) -> str:
        """Single digest of *buffer*, subject to the size limit."""
        self._check_size(len(buffer), "<memory>")
        return digest(buffer, algorithm)

    # ------------------------------------------------------------------ #
    #  Similarity
    # ------------------------------------------------------------------ #

    def compare(self, left: BytesLike, right: BytesLike) -> SimilarityResult:
        """Fuzzy-compare two buffers.

        Raises:
            FingerprintUnavailable: If either buffer cannot be fingerprinted.
                Unlike :meth:`profile`, there is no meaningful partial
                result here, so the error reaches the caller.
        """
        self._check_size(len(left), "<left>")
        self._check_size(len(right), "<right>")

        with self._logger.operation("compare"):
            left_hash = self._fuzzy.fingerprint(left)
            right_hash = self._fuzzy.fingerprint(right)
            score = self._fuzzy.similarity(left_hash, right_hash)
            self._logger.debug("Similarity score %d", score)

        return SimilarityResult(left=left_hash, right=right_hash, score=score)

    # ------------------------------------------------------------------ #
    #  Name validation
    # ------------------------------------------------------------------ #

    def check_names(
        self, tokens: Iterable[BytesLike], kind: NameKind | str
    ) -> list[NameCheck]:
        """Validate every token in *tokens* against the *kind* allow-list."""
        name_kind = NameKind(kind)
        checks = [
            NameCheck(
                token=decode_token(token),
                kind=name_kind,
                valid=is_valid_name(token, name_kind),
            )
            for token in tokens
        ]
        rejected = sum(1 for check in checks if not check.valid)
        if rejected:
            self._logger.debug(
                "%d of %d %s names rejected", rejected, len(checks), name_kind.value
            )
        return checks

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    def _check_size(self, size: int, label: str) -> None:
        max_size = self._config.profile.max_buffer_size
        if size > max_size:
            raise ValueError(
                f"{label} too large: {size:,} bytes (max: {max_size:,} bytes)"
            )
