"""
Tests for Name Scoring
======================
Tests for score(), log_likelihood() and surprisal() in bigramkit/scoring.py.
"""

import math
import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bigramkit.alphabet import UnknownSymbolError, normalize_name
from bigramkit.model import build_model
from bigramkit.scoring import (
    ScoredName,
    log_likelihood,
    score,
    score_name,
    score_names,
    surprisal,
)


@pytest.fixture
def emma():
    return build_model(["emma"], smoothing=1.0)


@pytest.fixture
def matrix():
    return build_model(["Emma", "Olivia", "Ava", "Mia", "Liam", "Noah"], smoothing=1.0)


class TestScore:
    """Tests for the raw likelihood."""

    def test_single_name_exact(self, emma):
        expected = (2 / 27) * (2 / 28) * (2 / 29) * (2 / 29) * (2 / 28)
        assert score(".emma.", emma) == pytest.approx(expected, rel=1e-12)

    def test_deterministic(self, matrix):
        assert score(".ava.", matrix) == score(".ava.", matrix)

    def test_short_inputs_are_empty_product(self, matrix):
        assert score("", matrix) == 1.0
        assert score(".", matrix) == 1.0
        assert score("a", matrix) == 1.0

    def test_empty_name_scores_zero(self, matrix):
        assert score("..", matrix) == 0.0

    def test_seen_name_beats_unseen(self, matrix):
        assert score(".ava.", matrix) > score(".qxz.", matrix)

    def test_rejects_unknown_characters(self, matrix):
        with pytest.raises(UnknownSymbolError):
            score(".Ava.", matrix)

    def test_tolerates_undelimited_strings(self, matrix):
        assert score("av", matrix) == pytest.approx(matrix.probability('a', 'v'))

    def test_normalized_accented_name_scores(self):
        matrix = build_model(["emma", "Zoë"])
        word = normalize_name("Zoë")
        assert word == ".zoe."
        assert score(word, matrix) == score(".zoe.", matrix) > 0.0


class TestLogDomain:
    """Tests for log_likelihood() and surprisal()."""

    def test_matches_raw_product(self, emma):
        assert log_likelihood(".emma.", emma) == pytest.approx(math.log10(score(".emma.", emma)))

    def test_impossible_transition(self, matrix):
        assert log_likelihood("..", matrix) == -math.inf
        assert surprisal("..", matrix) == math.inf

    def test_surprisal_formula(self, emma):
        word = ".emma."
        expected = -math.log10(score(word, emma)) / len(word)
        assert surprisal(word, emma) == pytest.approx(expected)

    def test_surprisal_empty_word(self, matrix):
        assert surprisal("", matrix) == 0.0

    def test_long_word_does_not_underflow(self, matrix):
        word = "." + "qz" * 400 + "."
        assert score(word, matrix) == 0.0
        assert math.isfinite(log_likelihood(word, matrix))
        assert surprisal(word, matrix) > 0


class TestScoredName:
    """Tests for batch scoring helpers."""

    def test_score_name(self, emma):
        result = score_name(".emma.", emma)
        assert isinstance(result, ScoredName)
        assert result.name == ".emma."
        assert result.likelihood == score(".emma.", emma)
        assert result.surprisal == pytest.approx(surprisal(".emma.", emma))

    def test_score_names_keeps_order(self, matrix):
        results = score_names([".mia.", ".noah."], matrix)
        assert [r.name for r in results] == [".mia.", ".noah."]
