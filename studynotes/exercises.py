"""Small string and number exercises."""

from __future__ import annotations

_NUMBER = "0123456789"


def tokenize(text: str) -> list[str]:
    """Split an arithmetic expression into tokens.

    A digit joins the previous token while that token is a run of the
    string ``0123456789`` (the empty token counts as one); every other
    character starts a token of its own. The first token starts empty, so
    an expression that begins with a non-digit yields a leading ``""``.
    """
    tokens = [""]
    for char in text:
        if char in _NUMBER and tokens[-1] in _NUMBER:
            tokens[-1] += char
        else:
            tokens.append(char)
    return tokens


def insert_sort(nums: list[int]) -> list[list[int]]:
    """Sort ``nums`` in place by insertion; return the list's state after each pass."""
    passes: list[list[int]] = []
    if len(nums) <= 1:
        return passes
    for i in range(len(nums)):
        j = i
        while j > 0 and nums[j] < nums[j - 1]:
            nums[j], nums[j - 1] = nums[j - 1], nums[j]
            j -= 1
        passes.append(list(nums))
    return passes


def extract_serial(serial: str) -> str:
    """Return the span from the first digit to the last digit of ``serial``."""
    positions = [index for index, char in enumerate(serial) if char in _NUMBER]
    if not positions:
        raise ValueError(f"no digits in {serial!r}")
    return serial[positions[0]:positions[-1] + 1]


def arithmetic_sum(m: int, n: int) -> int:
    """Sum of the integers from ``m`` to ``n`` by the closed formula."""
    return (m + n) * (n - m + 1) // 2