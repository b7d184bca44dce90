"""Character to Morse mark lookup table."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from morsetone.core.enums import Mark

logger = logging.getLogger(__name__)

WORD_SEPARATOR = " "

# International Morse, letters/digits plus a few punctuation marks
_CODES: Dict[str, str] = {
    'A': ".-", 'B': "-...", 'C': "-.-.", 'D': "-..", 'E': ".", 'F': "..-.",
    'G': "--.", 'H': "....", 'I': "..", 'J': ".---", 'K': "-.-", 'L': ".-..",
    'M': "--", 'N': "-.", 'O': "---", 'P': ".--.", 'Q': "--.-", 'R': ".-.",
    'S': "...", 'T': "-", 'U': "..-", 'V': "...-", 'W': ".--", 'X': "-..-",
    'Y': "-.--", 'Z': "--..",
    '0': "-----", '1': ".----", '2': "..---", '3': "...--", '4': "....-",
    '5': ".....", '6': "-....", '7': "--...", '8': "---..", '9': "----.",
    '/': "-..-.", '?': "..--..", '.': ".-.-.-", ',': "--..--",
}


def _build_table() -> Mapping[str, Tuple[Mark, ...]]:
    table = {
        char: tuple(Mark.from_char(c) for c in code)
        for char, code in _CODES.items()
    }
    logger.debug("Morse table built with %d characters", len(table))
    return MappingProxyType(table)


MORSE_TABLE: Mapping[str, Tuple[Mark, ...]] = _build_table()


def fold_case(text: str) -> str:
    """Upper-case *text* one character at a time.

    Characters whose upper-case form is longer than one character
    (``'ß'`` -> ``'SS'``) are left unchanged, so folding never turns one
    unsupported character into several supported ones.
    """
    return "".join(_fold_char(c) for c in text)


def _fold_char(char: str) -> str:
    up = char.upper()
    return up if len(up) == 1 else char


def lookup(char: str) -> Tuple[Mark, ...] | None:
    """Return the marks for *char* (case-insensitive), or None if unsupported."""
    return MORSE_TABLE.get(fold_case(char))


def text_to_morse(text: str) -> str:
    """Render *text* as dots and dashes.

    Letters are separated by a single space and words by ``" / "``.
    Unsupported characters are dropped.
    """
    words = []
    for word in fold_case(text).split(WORD_SEPARATOR):
        letters = [
            "".join(mark.value for mark in MORSE_TABLE[char])
            for char in word
            if char in MORSE_TABLE
        ]
        if letters:
            words.append(" ".join(letters))
    return " / ".join(words)
