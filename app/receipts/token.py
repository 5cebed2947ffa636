"""
Receipt token generation and validation.

A receipt token looks like ``RPG-XXXX-YYYY-DDDD``: a fixed tag, two blocks of
four uppercase ASCII letters and one block of four digits whose digit sum is
exactly 21. Authenticity is a property of the string alone, so a token can be
checked by anyone holding it without a lookup or a secret.

Example: RPG-QWER-TYUI-9534
"""

import re
import secrets
import string
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, TypeVar

TOKEN_PREFIX = "RPG"
TOKEN_SEPARATOR = "-"
LETTER_BLOCK_LENGTH = 4
DIGIT_BLOCK_LENGTH = 4
TOKEN_DIGIT_SUM = 21

TOKEN_PATTERN = re.compile(r"RPG-[A-Z]{4}-[A-Z]{4}-(?P<digits>[0-9]{4})")

# Reasons reported by check_receipt_token
REASON_FORMAT = "format"
REASON_CHECKSUM = "checksum"

_T = TypeVar("_T")

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class RandomSource(Protocol):
    def choice(self, seq: Sequence[_T]) -> _T: ...

    def randrange(self, stop: int) -> int: ...


_system_random = secrets.SystemRandom()


@dataclass(frozen=True)
class TokenCheck:
    valid: bool
    reason: str | None = None


def _letter_block(rng: RandomSource) -> str:
    return "".join(rng.choice(string.ascii_uppercase) for _ in range(LETTER_BLOCK_LENGTH))


def _digit_block(rng: RandomSource) -> str:
    # Rejection sampling: redraw all three leading digits until the remainder fits in one digit.
    # 592 of the 1000 triples fit, so each round succeeds with probability 0.592.
    while True:
        first = rng.randrange(10)
        second = rng.randrange(10)
        third = rng.randrange(10)
        fourth = TOKEN_DIGIT_SUM - (first + second + third)
        if 0 <= fourth <= 9:
            return f"{first}{second}{third}{fourth}"


def generate_receipt_token(rng: RandomSource | None = None) -> str:
    """
    Generate a fresh receipt token in format: RPG-XXXX-YYYY-DDDD

    Args:
        rng: Random source with ``choice`` and ``randrange``. Defaults to the
            operating system CSPRNG; pass ``random.Random(seed)`` for
            reproducible output.

    Returns:
        A token whose trailing digits sum to 21. Tokens are not checked for
        uniqueness.
    """
    source = rng if rng is not None else _system_random
    return TOKEN_SEPARATOR.join(
        (TOKEN_PREFIX, _letter_block(source), _letter_block(source), _digit_block(source))
    )


def digit_sum(digits: str) -> int:
    return sum(int(digit) for digit in digits)


def check_receipt_token(value: object) -> TokenCheck:
    """
    Classify a candidate token and report which check rejected it.

    The format check runs first; the digit sum is only computed for strings
    with the exact token shape. Matching is case-sensitive and never raises.
    """
    if value is None:
        value = ""
    if not isinstance(value, str):
        return TokenCheck(valid=False, reason=REASON_FORMAT)

    match = TOKEN_PATTERN.fullmatch(value)
    if match is None:
        return TokenCheck(valid=False, reason=REASON_FORMAT)

    if digit_sum(match.group("digits")) != TOKEN_DIGIT_SUM:
        return TokenCheck(valid=False, reason=REASON_CHECKSUM)

    return TokenCheck(valid=True)


def validate_receipt_token(value: object) -> bool:
    """Return True when ``value`` is a well-formed token with digit sum 21."""
    return check_receipt_token(value).valid


def normalize_token_input(raw: str | None) -> str:
    """Trim and uppercase ASCII letters of user-typed input before validation."""
    if raw is None:
        return ""
    return raw.strip().translate(_ASCII_UPPER)
