"""Ordinal answer token -> numeric score (0-100 scale).

Five tiers, best to worst: 100, 80, 60, 40, 20. Tokens outside the
vocabulary score DEFAULT_SCORE, which is deliberately not one of the tiers.
"""

from __future__ import annotations

DEFAULT_SCORE = 50

_TIERS: dict[int, tuple[str, ...]] = {
    100: (
        "always",
        "completely",
        "very-comfortable",
        "very-well",
        "very-supported",
        "very-effectively",
        "very-approachable",
        "very-connected",
        "very-successful",
        "very-valued",
    ),
    80: (
        "usually",
        "mostly",
        "somewhat-comfortable",
        "somewhat-well",
        "somewhat-supported",
        "somewhat-effectively",
        "somewhat-approachable",
        "somewhat-connected",
        "somewhat-successful",
        "somewhat-valued",
    ),
    60: (
        "sometimes",
        "neutral",
        "somewhat",
        "regularly",
        "not-applicable",
    ),
    40: (
        "rarely",
        "a-little",
        "not-very-well",
        "somewhat-uncomfortable",
        "somewhat-unsupported",
        "somewhat-ineffectively",
        "somewhat-unapproachable",
        "somewhat-disconnected",
        "somewhat-unsuccessful",
        "somewhat-undervalued",
    ),
    20: (
        "never",
        "not-at-all",
        "very-uncomfortable",
        "very-unsupported",
        "very-ineffectively",
        "very-unapproachable",
        "very-disconnected",
        "very-unsuccessful",
        "very-undervalued",
    ),
}

SCORE_TABLE: dict[str, int] = {token: score for score, tokens in _TIERS.items() for token in tokens}


def convert_answer(answer: str) -> int:
    """Return the numeric score for an answer token, DEFAULT_SCORE if unknown."""
    return SCORE_TABLE.get(answer, DEFAULT_SCORE)
