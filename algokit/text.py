"""Small text utilities: letter positions, repetition, word and letter counts."""

from __future__ import annotations

import os
from collections import Counter
from string import ascii_lowercase


def first_positions(text: str) -> list[int]:
    """Return, for each letter a..z, the index of its first occurrence in text or -1.

    Only lowercase ASCII letters are looked for.
    """
    positions = dict.fromkeys(ascii_lowercase, -1)
    for index, char in enumerate(text):
        if positions.get(char) == -1:
            positions[char] = index
    return list(positions.values())


def repeat_characters(text: str, times: int) -> str:
    """Return text with every character repeated times times in place."""
    if times < 0:
        raise ValueError(f"times must not be negative, got {times}")
    return "".join(char * times for char in text)


def word_count(line: str) -> int:
    """Return the number of space-separated words in line."""
    return len(line.split())


def most_frequent_letter(word: str) -> str:
    """Return the most frequent letter of word in upper case, ignoring case.

    Returns "?" when several letters share the highest count and raises
    ValueError when word holds no letters.
    """
    counts = Counter(char.upper() for char in word if char.isascii() and char.isalpha())
    if not counts:
        raise ValueError("word holds no letters")
    (top, top_count), *runner_up = counts.most_common(2)
    if runner_up and runner_up[0][1] == top_count:
        return "?"
    return top


def write_text_file(path: str | os.PathLike[str], text: str) -> None:
    """Write text to path, replacing any existing content."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)