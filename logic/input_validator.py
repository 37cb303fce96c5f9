"""
Input validation for console TicTacToe.
Checks the free-form text typed at the prompts.

All validators return None when the input has no valid meaning,
so the caller can simply ask again.
"""

import random
from enum import IntEnum
from typing import Optional

from .config import GameConfig


class GameType(IntEnum):
    """Number of human players."""
    ONE_PLAYER = 1
    TWO_PLAYER = 2


GAME_TYPE_WORDS = {
    "one": GameType.ONE_PLAYER,
    "two": GameType.TWO_PLAYER,
}

YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")


def _game_type_from_number(number) -> Optional[GameType]:
    """Map 1 or 2 to a GameType."""
    for game_type in GameType:
        if number == game_type.value:
            return game_type
    return None


def _parse_number(text: str) -> Optional[float]:
    """
    Read an ASCII numeric literal such as "1", "01", "1.0", "1e0" or "0x1".

    Returns:
        The number, or None if the text is not a plain numeric literal.
    """
    if not text.isascii() or "_" in text:
        return None

    if text.startswith(("0x", "0o", "0b")):
        try:
            return int(text, 0)
        except ValueError:
            return None

    try:
        return float(text)
    except ValueError:
        return None


def validate_game_type(value) -> Optional[GameType]:
    """
    Work out the game type from what the user typed.

    Accepts "one" or "two" (any case, surrounding spaces ignored), the
    numbers 1 and 2, and ASCII numeric text equal to them ("1", "2.0", "1e0").

    Args:
        value: Raw user input.

    Returns:
        GameType.ONE_PLAYER or GameType.TWO_PLAYER, or None if invalid.
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        return _game_type_from_number(value)

    if not isinstance(value, str):
        return None

    text = value.strip().lower()

    if text in GAME_TYPE_WORDS:
        return GAME_TYPE_WORDS[text]

    number = _parse_number(text)
    if number is None:
        return None

    return _game_type_from_number(number)


def _is_name_char(char: str) -> bool:
    """Letters, spaces and hyphens are allowed in names."""
    return char in (" ", "-") or ("A" <= char <= "Z") or ("a" <= char <= "z")


def validate_name(value) -> Optional[str]:
    """
    Check a player's name.

    A name is accepted as soon as one of its characters is a letter,
    a space or a hyphen. Note that a name made only of spaces or hyphens
    passes too.

    Returns:
        The name unchanged, or None if it is not valid.
    """
    if not isinstance(value, str):
        return None

    if any(_is_name_char(char) for char in value):
        return value

    return None


def validate_yes_no(value) -> Optional[bool]:
    """
    Read a yes/no answer (case insensitive).

    Returns:
        True for "y"/"yes", False for "n"/"no", None otherwise.
    """
    if not isinstance(value, str):
        return None

    answer = value.lower()

    if answer in YES_ANSWERS:
        return True
    if answer in NO_ANSWERS:
        return False
    return None


def generate_computer_name(rng=None) -> str:
    """
    Make up a name for the computer player.

    Each character is a random code point from 0 to 50 (rounded half up),
    so the name is not always printable. It is only cosmetic.

    Args:
        rng: Anything with a random() method (default: the random module).
            Pass a seeded random.Random for repeatable names.

    Returns:
        A string of GameConfig.COMPUTER_NAME_LENGTH characters.
    """
    if rng is None:
        rng = random

    chars = []
    for _ in range(GameConfig.COMPUTER_NAME_LENGTH):
        code_point = int(rng.random() * GameConfig.COMPUTER_NAME_MAX_CODE_POINT + 0.5)
        chars.append(chr(code_point))

    return "".join(chars)
