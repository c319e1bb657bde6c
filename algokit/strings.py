"""Routines on strings and character sequences."""

import re
import string
from collections import Counter

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
    "IV": 4,
    "IX": 9,
    "XL": 40,
    "XC": 90,
    "CD": 400,
    "CM": 900,
}
_ROMAN_PATTERN = re.compile(r"I[VX]|X[LC]|C[DM]|.", re.DOTALL)

_CLOSER_FOR = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset("([{")

_ASCII_ALNUM = frozenset(string.ascii_lowercase + string.digits)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_MOVES = {"U": (0, 1), "D": (0, -1), "L": (-1, 0), "R": (1, 0)}


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer.

    Raises ValueError if ``s`` contains a character that is not a Roman digit.
    """
    total = 0
    for match in _ROMAN_PATTERN.finditer(s):
        numeral = match.group()
        try:
            total += _ROMAN_VALUES[numeral]
        except KeyError:
            raise ValueError(
                f"invalid Roman numeral character {numeral!r} at position {match.start()}"
            ) from None
    return total


def is_valid_parentheses(s: str) -> bool:
    """Return True if the brackets in ``s`` are balanced and properly nested.

    Every character that is not an opening bracket closes the most recent
    opening bracket; ``)``, ``]`` and ``}`` must match the bracket they close.
    """
    if len(s) % 2:
        return False
    stack = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
            continue
        if not stack:
            return False
        last = stack.pop()
        expected = _CLOSER_FOR.get(char)
        if expected is not None and last != expected:
            return False
    return not stack


def find_substring(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    return haystack.find(needle)


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word in ``s``."""
    words = [word for word in s.split(" ") if word]
    return len(words[-1]) if words else 0


def is_palindrome_text(s: str) -> bool:
    """Return True if the ASCII letters and digits of ``s`` form a palindrome.

    Case is ignored for ASCII letters; all other characters are skipped.
    """
    cleaned = [char for char in s.translate(_TO_LOWER) if char in _ASCII_ALNUM]
    return cleaned == cleaned[::-1]


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` is a rearrangement of the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def returns_to_origin(moves: str) -> bool:
    """Return True if the moves ``U``, ``D``, ``L``, ``R`` end at the start.

    Any other character makes the sequence invalid and yields False.
    """
    x = y = 0
    for move in moves:
        step = _MOVES.get(move)
        if step is None:
            return False
        x += step[0]
        y += step[1]
    return x == 0 and y == 0


def to_lower_case(s: str) -> str:
    """Return ``s`` with ASCII uppercase letters lowered; others unchanged."""
    return s.translate(_TO_LOWER)


def reverse_in_place(chars: list) -> None:
    """Reverse the list ``chars`` in place."""
    chars.reverse()