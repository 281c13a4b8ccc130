#!/usr/bin/env python3
"""
Name Scoring
============
Likelihood of a word under a bigram matrix.

- score(): raw product of transition probabilities
- log_likelihood(): the same in log10 space, safe for long words
- surprisal(): -log10(likelihood) / len(word), the per-character figure
  used in reports
"""

import math
from dataclasses import dataclass
from typing import Iterable

from bigramkit.alphabet import Symbol, bigrams
from bigramkit.model import TransitionMatrix


def _transitions(word: str, matrix: TransitionMatrix):
    for first, second in bigrams(word):
        yield matrix.rows[Symbol.from_char(first).value][Symbol.from_char(second).value]


def score(word: str, matrix: TransitionMatrix) -> float:
    """
    Likelihood of ``word`` as the product of its bigram probabilities.

    Words shorter than two characters have no bigrams and score 1.0.
    '..' scores 0.0 since boundary->boundary is never allowed.

    Raises:
        UnknownSymbolError: If ``word`` contains a character outside the alphabet
    """
    likelihood = 1.0
    for p in _transitions(word, matrix):
        likelihood *= p
    return likelihood


def log_likelihood(word: str, matrix: TransitionMatrix) -> float:
    """Log10 likelihood of ``word``; -inf if any transition is impossible."""
    total = 0.0
    for p in _transitions(word, matrix):
        if p <= 0.0:
            return -math.inf
        total += math.log10(p)
    return total


def surprisal(word: str, matrix: TransitionMatrix) -> float:
    """Average negative log10 likelihood per character of ``word``."""
    if not word:
        return 0.0
    return -log_likelihood(word, matrix) / len(word)


@dataclass(frozen=True)
class ScoredName:
    """A word with its likelihood and per-character surprisal."""
    name: str
    likelihood: float
    surprisal: float


def score_name(word: str, matrix: TransitionMatrix) -> ScoredName:
    return ScoredName(
        name=word,
        likelihood=score(word, matrix),
        surprisal=surprisal(word, matrix),
    )


def score_names(words: Iterable[str], matrix: TransitionMatrix) -> list[ScoredName]:
    return [score_name(word, matrix) for word in words]


__all__ = [
    "ScoredName",
    "log_likelihood",
    "score",
    "score_name",
    "score_names",
    "surprisal",
]
