#!/usr/bin/env python3
"""
Bigram Transition Matrix
========================
Builds the 27x27 matrix of P(next symbol | current symbol) from a corpus
of names, using additive (Laplace) smoothing.

Construction goes through a mutable ``MatrixBuilder`` which is frozen into
an immutable ``TransitionMatrix`` once every name has been counted. Scoring
and sampling only ever see the frozen matrix.

The boundary->boundary transition (cell 0,0) is never smoothed and never
counted, so a generated name can not end before it has started.

Usage:
    from bigramkit.model import build_model

    matrix = build_model(["Emma", "Olivia", "Ava"], smoothing=1.0)
    matrix.probability('.', 'e')
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Union

from bigramkit.alphabet import (
    ALPHABET_SIZE,
    Symbol,
    bigrams,
    normalize_name,
)

logger = logging.getLogger(__name__)

DEFAULT_SMOOTHING = 1.0

SymbolLike = Union[Symbol, int, str]


def _index(symbol: SymbolLike) -> int:
    if isinstance(symbol, str):
        return Symbol.from_char(symbol).value
    return Symbol(symbol).value


def _check_smoothing(smoothing: float) -> float:
    smoothing = float(smoothing)
    if not math.isfinite(smoothing) or smoothing < 0:
        raise ValueError(f"smoothing must be a non-negative finite number, got {smoothing}")
    return smoothing


# =============================================================================
# Immutable Matrix
# =============================================================================

@dataclass(frozen=True)
class TransitionMatrix:
    """Row-normalized bigram probabilities. Row = current, column = next."""
    rows: tuple[tuple[float, ...], ...]
    row_totals: tuple[float, ...]
    smoothing: float = DEFAULT_SMOOTHING

    def __post_init__(self):
        if len(self.rows) != ALPHABET_SIZE or any(len(r) != ALPHABET_SIZE for r in self.rows):
            raise ValueError(f"TransitionMatrix must be {ALPHABET_SIZE}x{ALPHABET_SIZE}")

    def row(self, symbol: SymbolLike) -> tuple[float, ...]:
        """Distribution over the next symbol given ``symbol``."""
        return self.rows[_index(symbol)]

    def probability(self, first: SymbolLike, second: SymbolLike) -> float:
        """P(second | first). Accepts symbols, indices or characters."""
        return self.rows[_index(first)][_index(second)]

    def row_sum(self, symbol: SymbolLike) -> float:
        return math.fsum(self.row(symbol))

    def as_lists(self) -> list[list[float]]:
        """Mutable copy, e.g. for printing or numeric libraries."""
        return [list(r) for r in self.rows]

    def __getitem__(self, index: int) -> tuple[float, ...]:
        return self.rows[index]

    def __len__(self) -> int:
        return len(self.rows)


# =============================================================================
# Builder
# =============================================================================

class MatrixBuilder:
    """
    Accumulates smoothed bigram counts over normalized names.

    The builder owns its counts until ``build()`` freezes them; after that
    the builder can keep counting but the returned matrix never changes.
    """

    def __init__(self, smoothing: float = DEFAULT_SMOOTHING):
        self.smoothing = _check_smoothing(smoothing)
        self._counts = [[self.smoothing] * ALPHABET_SIZE for _ in range(ALPHABET_SIZE)]
        self._totals = [self.smoothing * ALPHABET_SIZE] * ALPHABET_SIZE

        # boundary->boundary stays at zero and contributes nothing to row 0
        self._counts[0][0] = 0.0
        self._totals[0] = self.smoothing * (ALPHABET_SIZE - 1)

        self.names_seen = 0
        self.bigrams_counted = 0

    def add_name(self, name: str) -> None:
        """
        Count every adjacent pair of an already normalized name.

        Raises:
            UnknownSymbolError: If ``name`` was not normalized first
        """
        self.names_seen += 1
        for first, second in bigrams(name):
            row = Symbol.from_char(first).value
            col = Symbol.from_char(second).value
            if row == 0 and col == 0:
                continue

            self._counts[row][col] += 1
            self._totals[row] += 1
            self.bigrams_counted += 1

    def add_names(self, names: Iterable[str]) -> 'MatrixBuilder':
        for name in names:
            self.add_name(name)
        return self

    def count(self, first: SymbolLike, second: SymbolLike) -> float:
        """Smoothed count for one cell."""
        return self._counts[_index(first)][_index(second)]

    def total(self, symbol: SymbolLike) -> float:
        return self._totals[_index(symbol)]

    def build(self) -> TransitionMatrix:
        """Normalize every row and freeze the result."""
        rows = []
        for counts, total in zip(self._counts, self._totals):
            if total > 0:
                rows.append(tuple(c / total for c in counts))
            else:
                rows.append((0.0,) * ALPHABET_SIZE)

        logger.debug(
            f"Built bigram matrix from {self.names_seen} names: "
            f"{self.bigrams_counted} bigrams counted, "
            f"smoothing={self.smoothing}"
        )
        return TransitionMatrix(
            rows=tuple(rows),
            row_totals=tuple(self._totals),
            smoothing=self.smoothing,
        )


def build_model(names: Iterable[str], smoothing: float = DEFAULT_SMOOTHING) -> TransitionMatrix:
    """
    Train a bigram matrix on raw names.

    Args:
        names: Raw name strings; each is normalized before counting
        smoothing: Additive smoothing constant (>= 0)

    Returns:
        Frozen TransitionMatrix

    Raises:
        ValueError: If smoothing is negative or not finite
    """
    builder = MatrixBuilder(smoothing=smoothing)
    builder.add_names(normalize_name(name) for name in names)
    return builder.build()


__all__ = [
    "DEFAULT_SMOOTHING",
    "MatrixBuilder",
    "TransitionMatrix",
    "build_model",
]
