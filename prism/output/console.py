"""
Prism Console Output
=====================

Rich terminal rendering of profiles, similarity results and name checks,
built on the :class:`~shared.console.PrismConsole` abstraction.
"""

from __future__ import annotations

from typing import Sequence

from rich.markup import escape

from shared.console import PrismConsole

from prism.core.models import ContentProfile, NameCheck, SimilarityResult


# ---------------------------------------------------------------------------
# Colour helpers
# ---------------------------------------------------------------------------

_ENTROPY_COLOUR_THRESHOLDS: list[tuple[float, str]] = [
    (1.0, "bright_green"),
    (4.5, "green"),
    (6.5, "yellow"),
    (7.0, "bright_yellow"),
    (7.5, "red"),
    (8.1, "bright_red"),
]


def _entropy_colour(value: float) -> str:
    for threshold, colour in _ENTROPY_COLOUR_THRESHOLDS:
        if value < threshold:
            return colour
    return "bright_red"


def _entropy_bar(value: float, width: int = 32) -> str:
    filled = int(round(value / 8.0 * width))
    colour = _entropy_colour(value)
    return f"[{colour}]{'█' * filled}[/{colour}][dim]{'░' * (width - filled)}[/dim]"


def _similarity_colour(score: int) -> str:
    if score >= 80:
        return "bright_red"
    if score >= 40:
        return "yellow"
    return "green"


class ProfileConsoleOutput:
    """Renders Prism results to the terminal."""

    def __init__(self, console: PrismConsole | None = None) -> None:
        self._con = console or PrismConsole()

    def display_profile(self, profile: ContentProfile) -> None:
        self._con.section(f"Profile: {escape(profile.label)}")
        colour = _entropy_colour(profile.entropy)
        self._con.key_values(
            {
                "Size": f"{profile.size:,} bytes",
                "Entropy": f"[{colour}]{profile.entropy:.4f}[/{colour}] bits/byte",
                "": _entropy_bar(profile.entropy),
            }
        )

        if profile.digests:
            self._con.key_values(
                {name.upper(): value for name, value in profile.digests.items()},
                title="Digests",
            )

        if profile.fuzzy_hash is not None:
            self._con.key_values({"ssdeep": profile.fuzzy_hash}, title="Fuzzy Hash")
        elif profile.fuzzy_error is not None:
            self._con.warning(f"Fuzzy hash unavailable: {escape(profile.fuzzy_error)}")

    def display_digest(self, label: str, algorithm: str, value: str) -> None:
        self._con.key_values({algorithm.upper(): value}, title=escape(label))

    def display_similarity(
        self, left_label: str, right_label: str, result: SimilarityResult
    ) -> None:
        self._con.section("Fuzzy Similarity")
        colour = _similarity_colour(result.score)
        self._con.key_values(
            {
                escape(left_label): result.left,
                escape(right_label): result.right,
                "Score": f"[{colour}]{result.score}[/{colour}] / 100",
            }
        )

    def display_names(self, checks: Sequence[NameCheck]) -> None:
        rows = [
            (
                escape(check.token),
                check.kind.value,
                "[green]valid[/green]" if check.valid else "[red]invalid[/red]",
            )
            for check in checks
        ]
        self._con.table("Name Validation", ["Token", "Kind", "Result"], rows)

        rejected = sum(1 for check in checks if not check.valid)
        if rejected:
            self._con.warning(f"{rejected} of {len(checks)} names rejected")
        else:
            self._con.success(f"All {len(checks)} names accepted")
