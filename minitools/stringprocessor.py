"""String utilities: reversal, palindromes, ROT13 and e-mail checks."""

from __future__ import annotations

import argparse
import codecs
import string
import sys


def reverse_text(text: str) -> str:
    return text[::-1]


def is_palindrome(word: str) -> bool:
    """True if the word reads the same backwards."""
    return word == word[::-1]


def count_palindrome_words(text: str) -> int:
    """Number of whitespace-separated words that are palindromes."""
    return sum(1 for word in text.split() if is_palindrome(word))


def encode_rot13(text: str) -> str:
    """Rotate each ASCII letter by 13 places; other characters are unchanged."""
    return codecs.encode(text, "rot13")


def validate_email(text: str) -> bool:
    """Loose e-mail check.

    The address must start with a lower-case letter, hold an '@' after that,
    and somewhere after the '@' a '.' followed by a lower-case letter.
    """
    if not text or text[0] not in string.ascii_lowercase:
        return False
    at = text.find("@", 1)
    if at < 0:
        return False
    domain = text[at + 1 :]
    return any(
        char == "." and following in string.ascii_lowercase
        for char, following in zip(domain, domain[1:])
    )


def main(argv: list[str] | None = None) -> int:
    """Demonstrate the utilities on fixed sample strings."""
    parser = argparse.ArgumentParser(prog="stringprocessor", description="String demo.")
    parser.parse_args(argv)

    email = "user@example.com"
    print(reverse_text(email))
    print(f"Palindromes: {count_palindrome_words('racecar bum')}")
    print(encode_rot13("hello"))
    print("Valid email." if validate_email(email) else "Invalid email.")
    return 0


if __name__ == "__main__":
    sys.exit(main())