#!/usr/bin/env python3
"""
Name Sampling
=============
Generates new names by walking the bigram matrix as a Markov chain.

Generation starts at the boundary symbol, repeatedly draws the next symbol
from the current row and stops right after drawing the boundary again.
The boundary is included at both ends of the result, e.g. '.ava.'.

Randomness comes from a ``RandomSource``: anything with a
``draw(weights) -> int`` method. ``SeededRandomSource`` wraps
``random.Random``; ``SequenceRandomSource`` replays fixed draws for tests.

Usage:
    from bigramkit.sampling import SeededRandomSource, generate

    rng = SeededRandomSource(seed=42)
    generate(matrix, rng)
"""

import logging
import math
import random
from typing import Iterable, Optional, Protocol, Sequence

from bigramkit.alphabet import Symbol
from bigramkit.model import TransitionMatrix

logger = logging.getLogger(__name__)


class InvalidDistribution(ValueError):
    """A row of weights can not be sampled from."""


# =============================================================================
# Random Sources
# =============================================================================

class RandomSource(Protocol):
    """Single categorical draw: return an index with probability ~ weight."""

    def draw(self, weights: Sequence[float]) -> int:
        ...


class SeededRandomSource:
    """RandomSource backed by ``random.Random``."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def draw(self, weights: Sequence[float]) -> int:
        return self._rng.choices(range(len(weights)), weights=weights)[0]


class SequenceRandomSource:
    """Replays a fixed sequence of indices, ignoring the weights."""

    def __init__(self, indices: Iterable[int]):
        self._indices = iter(indices)

    def draw(self, weights: Sequence[float]) -> int:
        try:
            return next(self._indices)
        except StopIteration:
            raise InvalidDistribution("SequenceRandomSource ran out of draws") from None


# =============================================================================
# Sampling
# =============================================================================

def _check_weights(weights: Sequence[float], state: int) -> None:
    total = 0.0
    for w in weights:
        if not math.isfinite(w) or w < 0:
            raise InvalidDistribution(
                f"Row {Symbol(state).char!r} has an invalid weight: {w}"
            )
        total += w
    if total <= 0:
        raise InvalidDistribution(f"Row {Symbol(state).char!r} has no probability mass")


def sample_next(matrix: TransitionMatrix, state: int, rng: RandomSource) -> int:
    """
    Draw the index of the symbol following ``state``.

    Raises:
        InvalidDistribution: If the row is empty, or the source returns an
            index that is out of range or has zero weight
    """
    weights = matrix.rows[state]
    _check_weights(weights, state)

    index = rng.draw(weights)
    if not 0 <= index < len(weights):
        raise InvalidDistribution(f"Random source drew index {index} outside the alphabet")
    if weights[index] <= 0:
        raise InvalidDistribution(
            f"Random source drew {Symbol(index).char!r} after {Symbol(state).char!r}, "
            f"which has zero probability"
        )
    return index


def generate(matrix: TransitionMatrix, rng: RandomSource) -> str:
    """
    Generate one normalized name, boundaries included.

    Raises:
        InvalidDistribution: If generation reaches a row with no mass
    """
    state = Symbol.BOUNDARY.value
    chars = [Symbol.BOUNDARY.char]
    while True:
        state = sample_next(matrix, state, rng)
        chars.append(Symbol(state).char)
        if state == Symbol.BOUNDARY:
            break
    return ''.join(chars)


def generate_batch(matrix: TransitionMatrix,
                   count: int,
                   rng: RandomSource,
                   unique: bool = False,
                   max_attempts: Optional[int] = None) -> list[str]:
    """
    Generate several names.

    Args:
        matrix: Trained transition matrix
        count: Number of names wanted
        rng: Random source shared by all draws
        unique: Drop duplicates
        max_attempts: Cap on generate() calls when ``unique`` (default: count * 20)

    Returns:
        Generated names in order; fewer than ``count`` if ``unique`` could
        not find enough distinct names within ``max_attempts``
    """
    if count <= 0:
        return []

    if not unique:
        return [generate(matrix, rng) for _ in range(count)]

    if max_attempts is None:
        max_attempts = count * 20

    results = []
    seen = set()
    attempts = 0
    while len(results) < count and attempts < max_attempts:
        attempts += 1
        name = generate(matrix, rng)
        if name not in seen:
            seen.add(name)
            results.append(name)

    if len(results) < count:
        logger.warning(f"Only {len(results)}/{count} unique names after {attempts} attempts")
    return results


__all__ = [
    "InvalidDistribution",
    "RandomSource",
    "SeededRandomSource",
    "SequenceRandomSource",
    "generate",
    "generate_batch",
    "sample_next",
]
