#!/usr/bin/env python3
"""
Alphabet and Name Normalization
===============================
The model works over a closed set of 27 symbols: the boundary marker '.'
at index 0 followed by the lowercase letters 'a'..'z' at indices 1..26.

Every other module converts between characters and indices through
``Symbol``; nothing outside this file does arithmetic on character codes.

Usage:
    from bigramkit.alphabet import Symbol, normalize_name

    normalize_name("Ab3c!")      # '.abc.'
    Symbol.from_char('e')        # <Symbol.E: 5>
    Symbol.E.char                # 'e'
"""

import unicodedata
from enum import IntEnum


BOUNDARY_CHAR = '.'
LETTERS = 'abcdefghijklmnopqrstuvwxyz'


# =============================================================================
# Symbol Enumeration
# =============================================================================

class UnknownSymbolError(ValueError):
    """Raised when a character has no place in the 27-symbol alphabet."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Character {char!r} is not in the bigram alphabet")


class Symbol(IntEnum):
    """One of the 27 model symbols. The value is the matrix index."""
    BOUNDARY = 0
    A = 1
    B = 2
    C = 3
    D = 4
    E = 5
    F = 6
    G = 7
    H = 8
    I = 9
    J = 10
    K = 11
    L = 12
    M = 13
    N = 14
    O = 15
    P = 16
    Q = 17
    R = 18
    S = 19
    T = 20
    U = 21
    V = 22
    W = 23
    X = 24
    Y = 25
    Z = 26

    @property
    def char(self) -> str:
        """The character this symbol stands for."""
        return _INDEX_TO_CHAR[self.value]

    @property
    def is_boundary(self) -> bool:
        return self is Symbol.BOUNDARY

    @classmethod
    def from_char(cls, char: str) -> 'Symbol':
        """
        Map a single character to its symbol.

        Raises:
            UnknownSymbolError: If the character is outside the alphabet
                (uppercase letters included; normalize first).
        """
        index = _CHAR_TO_INDEX.get(char)
        if index is None:
            raise UnknownSymbolError(char)
        return cls(index)


_INDEX_TO_CHAR = (BOUNDARY_CHAR,) + tuple(LETTERS)
_CHAR_TO_INDEX = {char: index for index, char in enumerate(_INDEX_TO_CHAR)}

ALPHABET_SIZE = len(_INDEX_TO_CHAR)


def is_symbol_char(char: str) -> bool:
    """True if ``char`` maps to a symbol."""
    return char in _CHAR_TO_INDEX


def to_indices(text: str) -> list[int]:
    """Map every character of ``text`` to its index. Raises on unknown chars."""
    return [Symbol.from_char(char).value for char in text]


def from_indices(indices) -> str:
    """Inverse of ``to_indices``."""
    return ''.join(Symbol(index).char for index in indices)


# =============================================================================
# Normalization
# =============================================================================

def normalize_name(raw: str) -> str:
    """
    Turn a raw name into its boundary-delimited canonical form.

    Accents are folded away first (NFKD + casefold: 'é' -> 'e', 'ß' -> 'ss').
    Whatever is still not one of 'a'..'z' (digits, punctuation, whitespace,
    other scripts) is dropped, and the rest is wrapped in boundary markers.
    A name with no usable letters at all becomes '..'.

    Args:
        raw: Any string

    Returns:
        Normalized name, e.g. 'Ab3c!' -> '.abc.'
    """
    folded = unicodedata.normalize('NFKD', raw).casefold()
    letters = ''.join(char for char in folded if char.isalpha() and is_symbol_char(char))
    return f"{BOUNDARY_CHAR}{letters}{BOUNDARY_CHAR}"


def bigrams(name: str):
    """Yield each adjacent character pair of ``name`` in order."""
    for first, second in zip(name, name[1:]):
        yield first, second


__all__ = [
    "ALPHABET_SIZE",
    "BOUNDARY_CHAR",
    "LETTERS",
    "Symbol",
    "UnknownSymbolError",
    "bigrams",
    "from_indices",
    "is_symbol_char",
    "normalize_name",
    "to_indices",
]
