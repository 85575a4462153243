"""
Prism Configuration Management
================================

Centralized configuration for the Prism toolkit using Python dataclasses
and TOML-based persistence.

Configuration lives in a single ``config.toml`` with two tables::

    [global]
    log_level = "DEBUG"
    log_file = "prism.log"

    [profile]
    max_buffer_size = 104857600
    digest_algorithms = ["sha256"]
    fuzzy_hash = false

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import MISSING, asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class ProfileConfig:
    """Configuration for content profiling.

    Controls which digests are computed, whether a fuzzy fingerprint is
    attempted, and the largest buffer the engine will hand to the
    primitives (callers wanting bounded latency cap the input here).
    """

    max_buffer_size: int = 52_428_800  # 50 MiB
    digest_algorithms: list[str] = field(
        default_factory=lambda: ["md5", "sha1", "sha256"]
    )
    fuzzy_hash: bool = True
    output_format: str = "console"


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity and destinations."""

    log_level: str = "INFO"
    log_file: str | None = None
    log_json: bool = False
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class PrismConfig:
    """Master configuration aggregating global and profiling settings.

    Usage:
        >>> config = PrismConfig.load()                  # from default path
        >>> config = PrismConfig.load("custom.toml")     # from custom path
        >>> config.profile.digest_algorithms
        ['md5', 'sha1', 'sha256']
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    profile: ProfileConfig = field(default_factory=ProfileConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> PrismConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`PrismConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
            tomllib.TOMLDecodeError: If the file is not valid TOML.
            TypeError: If a known key holds a value of the wrong type.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(
                GlobalConfig, raw.get("global", {}), "global"
            ),
            profile=cls._build_section(ProfileConfig, raw.get("profile", {}), "profile"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: Any, table: str) -> Any:
        """Instantiate dataclass *cls* from the keys it declares.

        Unknown keys are ignored so newer config files keep loading.  Known
        keys must match the type of the field's default value.

        Raises:
            TypeError: If the table or one of its known keys has the wrong type.
        """
        if not isinstance(data, dict):
            raise TypeError(f"[{table}] must be a table, got {type(data).__name__}")

        values: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            default = f.default_factory() if f.default is MISSING else f.default
            expected = str if default is None else type(default)
            # bool is an int subclass; neither may stand in for the other.
            if isinstance(value, bool) is not (expected is bool) or not isinstance(
                value, expected
            ):
                raise TypeError(
                    f"[{table}] {f.name} must be {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
            if expected is list and not all(isinstance(item, str) for item in value):
                raise TypeError(f"[{table}] {f.name} must be a list of strings")
            values[f.name] = value
        return cls(**values)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> PrismConfig:
    """Module-level convenience wrapper around :meth:`PrismConfig.load`.

    Caches the result so that repeated callers share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = PrismConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
