"""
Prism CLI
==========

Click-based command-line interface for the Prism content-characterisation
toolkit.

Usage::

    python -m prism profile /path/to/sample.exe
    python -m prism --output json profile /path/to/sample.exe
    python -m prism digest /path/to/sample.exe --algorithm sha1
    python -m prism compare sample_a.exe sample_b.exe
    python -m prism names --kind symbol CreateFileA "foo bar"
    python -m prism names --kind dos KERNEL32.DLL

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click
from rich.markup import escape

from shared.config import PrismConfig
from shared.console import PrismConsole
from shared.logger import PrismLogger

from prism import __version__
from prism.core.engine import PrismEngine
from prism.core.errors import FingerprintUnavailable
from prism.core.models import DigestAlgorithm, NameKind
from prism.output.console import ProfileConsoleOutput


_OUTPUT_FORMATS = ("console", "json")


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to Prism configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(_OUTPUT_FORMATS),
    default=None,
    help="Output format (default: profile.output_format from config).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
@click.version_option(__version__, prog_name="prism")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: Optional[str],
    quiet: bool,
    verbose: bool,
) -> None:
    """Prism -- Binary Content Characterization.

    Entropy, cryptographic digests, fuzzy fingerprints and name
    validation for executable files and their parts.
    """
    ctx.ensure_object(dict)

    overrides = {"log_level": "DEBUG"} if verbose else {}

    # No console exists yet, so configuration problems go straight to stderr.
    try:
        prism_config = PrismConfig.load(config)
        output_format = output or prism_config.profile.output_format
        if output_format not in _OUTPUT_FORMATS:
            raise ValueError(
                f"profile.output_format must be one of {', '.join(_OUTPUT_FORMATS)}, "
                f"got {output_format!r}"
            )
        logger = PrismLogger.from_config(
            "cli", prism_config.global_settings, **overrides
        )
        engine = PrismEngine(
            prism_config,
            logger=PrismLogger.from_config(
                "engine", prism_config.global_settings, **overrides
            ),
        )
    except (OSError, ValueError, TypeError) as exc:
        click.echo(f"Error: invalid configuration: {exc}", err=True)
        sys.exit(1)

    console = PrismConsole(quiet=quiet or output_format == "json")
    ctx.obj["config"] = prism_config
    ctx.obj["output_format"] = output_format
    ctx.obj["console"] = console
    ctx.obj["logger"] = logger
    ctx.obj["engine"] = engine
    ctx.obj["display"] = ProfileConsoleOutput(console)

    if not quiet:
        console.banner(version=__version__)


def _fail(ctx: click.Context, message: str) -> NoReturn:
    """Report *message* on the console and log, then exit with status 1."""
    if ctx.obj["output_format"] == "json":
        click.echo(f"Error: {message}", err=True)
    else:
        ctx.obj["console"].error(escape(message))
    ctx.obj["logger"].debug(message, exc_info=True)
    sys.exit(1)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def profile(ctx: click.Context, file: str) -> None:
    """Entropy, digests and fuzzy hash of FILE."""
    engine: PrismEngine = ctx.obj["engine"]

    try:
        result = engine.profile_file(Path(file))
    except (OSError, ValueError) as exc:
        _fail(ctx, f"Profiling failed: {exc}")

    if ctx.obj["output_format"] == "json":
        click.echo(result.model_dump_json(indent=2))
    else:
        ctx.obj["display"].display_profile(result)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--algorithm", "-a",
    type=click.Choice([algo.value for algo in DigestAlgorithm], case_sensitive=False),
    default=DigestAlgorithm.SHA256.value,
    show_default=True,
    help="Digest algorithm.",
)
@click.pass_context
def digest(ctx: click.Context, file: str, algorithm: str) -> None:
    """Single cryptographic digest of FILE."""
    engine: PrismEngine = ctx.obj["engine"]

    try:
        value = engine.digest(Path(file).read_bytes(), algorithm)
    except (OSError, ValueError) as exc:
        _fail(ctx, f"Digest failed: {exc}")

    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps({"file": file, algorithm.lower(): value}, indent=2))
    else:
        ctx.obj["display"].display_digest(file, algorithm, value)


@cli.command()
@click.argument("file_a", type=click.Path(exists=True, dir_okay=False))
@click.argument("file_b", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def compare(ctx: click.Context, file_a: str, file_b: str) -> None:
    """Fuzzy-hash similarity of FILE_A and FILE_B (0-100)."""
    engine: PrismEngine = ctx.obj["engine"]

    try:
        result = engine.compare(Path(file_a).read_bytes(), Path(file_b).read_bytes())
    except FingerprintUnavailable as exc:
        _fail(ctx, f"Comparison unavailable: {exc}")
    except (OSError, ValueError) as exc:
        _fail(ctx, f"Comparison failed: {exc}")

    if ctx.obj["output_format"] == "json":
        click.echo(result.model_dump_json(indent=2))
    else:
        ctx.obj["display"].display_similarity(file_a, file_b, result)


@cli.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option(
    "--kind", "-k",
    type=click.Choice([kind.value for kind in NameKind]),
    default=NameKind.SYMBOL.value,
    show_default=True,
    help="Validator kind: mangled symbol name or DOS short filename.",
)
@click.pass_context
def names(ctx: click.Context, tokens: tuple[str, ...], kind: str) -> None:
    """Validate extracted name TOKENS.

    Exits with status 2 when at least one token is rejected.
    """
    engine: PrismEngine = ctx.obj["engine"]
    checks = engine.check_names((os.fsencode(token) for token in tokens), kind)

    if ctx.obj["output_format"] == "json":
        click.echo("[" + ", ".join(check.model_dump_json() for check in checks) + "]")
    else:
        ctx.obj["display"].display_names(checks)

    if not all(check.valid for check in checks):
        sys.exit(2)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Prism CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
