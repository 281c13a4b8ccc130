#!/usr/bin/env python3
"""
bigramkit - Bigram Name Model
=============================

A character-level bigram language model for names: learn transition
probabilities from a name list, score how likely a name is, and sample
new ones.

Quick Start
-----------
    from bigramkit import build_model, score, generate, SeededRandomSource

    matrix = build_model(["Emma", "Olivia", "Ava"], smoothing=1.0)

    score(".ava.", matrix)                       # raw likelihood
    generate(matrix, SeededRandomSource(42))     # e.g. '.olia.'

Modules
-------
    bigramkit.alphabet  - 27-symbol alphabet and name normalization
    bigramkit.model     - Matrix builder and immutable transition matrix
    bigramkit.scoring   - Likelihood, log-likelihood and surprisal
    bigramkit.sampling  - Random sources and name generation
    bigramkit.corpus    - Loading newline-delimited name files
    bigramkit.settings  - YAML configuration

CLI Usage
---------
    python -m bigramkit report
    python -m bigramkit score Emma Zyx
    python -m bigramkit generate -n 10 --seed 42
    python -m bigramkit matrix --row e
"""

__version__ = "0.1.0"
__author__ = "bigramkit"

# =============================================================================
# Public API
# =============================================================================

from .alphabet import (
    ALPHABET_SIZE,
    BOUNDARY_CHAR,
    Symbol,
    UnknownSymbolError,
    normalize_name,
)
from .model import (
    DEFAULT_SMOOTHING,
    MatrixBuilder,
    TransitionMatrix,
    build_model,
)
from .scoring import (
    ScoredName,
    log_likelihood,
    score,
    score_names,
    surprisal,
)
from .sampling import (
    InvalidDistribution,
    RandomSource,
    SeededRandomSource,
    SequenceRandomSource,
    generate,
    generate_batch,
)
from .corpus import load_names

__all__ = [
    "__version__",
    # Alphabet
    "ALPHABET_SIZE",
    "BOUNDARY_CHAR",
    "Symbol",
    "UnknownSymbolError",
    "normalize_name",
    # Model
    "DEFAULT_SMOOTHING",
    "MatrixBuilder",
    "TransitionMatrix",
    "build_model",
    # Scoring
    "ScoredName",
    "log_likelihood",
    "score",
    "score_names",
    "surprisal",
    # Sampling
    "InvalidDistribution",
    "RandomSource",
    "SeededRandomSource",
    "SequenceRandomSource",
    "generate",
    "generate_batch",
    # Corpus
    "load_names",
]
