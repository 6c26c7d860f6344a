"""Sentence, word and readability analysis of text."""

from __future__ import annotations

import argparse
import re
import sys
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

END_MARKER = "END"
_SENTENCE_ENDS = ".!?"
_WORD_SEPARATORS = re.compile(r"[ \n\t.,!?]+")
_VOWELS = frozenset("aeiou")


@dataclass(frozen=True)
class TextCounts:
    sentences: int
    words: int
    average_word_length: int


def read_text(lines: Iterable[str]) -> str:
    """Join lines until one that holds only END; the END line is left out."""
    collected = []
    for line in lines:
        if line.rstrip("\r\n") == END_MARKER:
            break
        collected.append(line)
    return "".join(collected)


def _words(text: str) -> list[str]:
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _sentence_count(text: str) -> int:
    return sum(1 for char in text if char in _SENTENCE_ENDS)


def count_text(text: str) -> TextCounts:
    """Count sentences and words.

    Words are one more than the number of spaces; the average length is the
    number of non-space characters divided by the words, rounded down.
    """
    spaces = text.count(" ")
    words = spaces + 1
    return TextCounts(
        sentences=_sentence_count(text),
        words=words,
        average_word_length=(len(text) - spaces) // words,
    )


def frequent_word(text: str) -> tuple[str, int]:
    """The most frequent word and its count; ties go to the first seen."""
    counts = Counter(_words(text))
    if not counts:
        raise ValueError("text holds no words")
    word = max(counts, key=counts.__getitem__)
    return word, counts[word]


def readability(text: str) -> float:
    """Flesch-style score from whole words per sentence and vowels per word."""
    sentences = _sentence_count(text)
    if sentences == 0:
        raise ValueError("text holds no sentences")
    words = _words(text)
    if not words:
        raise ValueError("text holds no words")
    vowels = sum(1 for word in words for char in word if char in _VOWELS)
    words_per_sentence = len(words) // sentences
    vowels_per_word = vowels // len(words)
    return 206.835 - 1.015 * words_per_sentence - 84.6 * vowels_per_word


def main(argv: list[str] | None = None) -> int:
    """Read text from standard input up to END and print its analysis."""
    parser = argparse.ArgumentParser(prog="textanalysis", description="Analyse text.")
    parser.parse_args(argv)

    print("Enter some sentences (type END and hit enter to finish):")
    text = read_text(sys.stdin)
    counts = count_text(text)
    print(f"Sentences: {counts.sentences}")
    print(f"Words: {counts.words}")
    print(f"Average chars per word: {counts.average_word_length}")
    try:
        word, count = frequent_word(text)
        print(f"Most frequent word: '{word}' (appears {count} times)")
        print(f"Readability score of: {readability(text):.2f}")
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())