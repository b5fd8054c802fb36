"""Interpreter: reading a score token by token into notes and scales."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

_COMPARE = "OEGADC"
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_NOTES = {"C": "1", "D": "2", "E": "3", "F": "4", "G": "5", "A": "6", "B": "7"}
_SCALES = {1: "低音", 2: "中音", 3: "高音"}


class PlayContext:
    """The part of the score not yet played."""

    def __init__(self, text: str = "") -> None:
        self.text = text


def _to_number(text: str) -> float:
    match = _NUMBER_RE.match(text.lstrip(" \t\n\r\f\v"))
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group())


class Expression(ABC):
    """Consumes one token of the score and renders it."""

    def interpret(self, context: PlayContext) -> str:
        """Play the next token and return the output.

        The key is the token's first character. A token that is not part of
        ``OEGADC`` must start with a number. A token with no space after it
        leaves the context unchanged.
        """
        text = context.text
        if not text:
            return "无内容\n"
        key = text[:1]
        space = text.find(" ")
        token = text if space < 0 else text[:space]
        context.text = text[space + 1:]
        value = 0.0 if token in _COMPARE else _to_number(token)
        output = self.execute(key, value)
        if not context.text:
            output += "\n演奏完毕\n"
        return output

    @abstractmethod
    def execute(self, key: str, value: float) -> str:
        """Render one token."""


class Note(Expression):
    """Renders a note letter as its numbered pitch."""

    def execute(self, key: str, value: float) -> str:
        return f"{_NOTES.get(key[:1], '')} "


class Scale(Expression):
    """Renders a scale number as low, middle or high."""

    def execute(self, key: str, value: float) -> str:
        return f"{_SCALES.get(int(value), '')} "