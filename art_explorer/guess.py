"""Scoring for the "guess the artist and year" game."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .models import Artwork

YEAR_TOLERANCE = 5

_YEAR_RE = re.compile(r"\b(1[89]\d{2}|20\d{2})\b")


@dataclass(frozen=True)
class GuessResult:
    artist_correct: bool
    year_correct: bool
    correct_year: int


def normalize_artist(name: str) -> str:
    """Lower-case, trim and collapse whitespace."""
    return " ".join(name.lower().split())


def extract_year(date_display: str | None, primary_year: int | None) -> int:
    """Year to score against; 0 when nothing usable is known."""
    if primary_year is not None:
        return primary_year

    if date_display:
        match = _YEAR_RE.search(date_display)
        if match:
            return int(match.group(1))

    return 0


def is_artist_match(correct: str, guess: str) -> bool:
    # Lenient: either name containing the other counts, so "Monet" matches
    # "Claude Monet". Short guesses can match by accident.
    correct = normalize_artist(correct)
    guess = normalize_artist(guess)
    if not correct or not guess:
        return False
    return correct in guess or guess in correct


def score_guess(artwork: Artwork, artist_guess: str, year_guess: str) -> GuessResult:
    correct_year = extract_year(artwork.date_display, artwork.primary_year)

    try:
        guessed_year = int(year_guess.strip())
    except ValueError:
        year_correct = False
    else:
        year_correct = abs(correct_year - guessed_year) <= YEAR_TOLERANCE

    return GuessResult(
        artist_correct=is_artist_match(artwork.artist or "", artist_guess),
        year_correct=year_correct,
        correct_year=correct_year,
    )
