"""Template method: exam papers that differ only in their answers."""

from __future__ import annotations


class TestPaper:
    """An exam paper; subclasses supply the answers."""

    def _answer1(self) -> str:
        return ""

    def _answer2(self) -> str:
        return ""

    def _answer3(self) -> str:
        return ""

    def question1(self) -> str:
        return f"题目1 答案：{self._answer1()}"

    def question2(self) -> str:
        return f"题目2 答案：{self._answer2()}"

    def question3(self) -> str:
        return f"题目3 答案：{self._answer3()}"


class TestPaperA(TestPaper):
    def _answer1(self) -> str:
        return "a"

    def _answer2(self) -> str:
        return "b"

    def _answer3(self) -> str:
        return "c"


class TestPaperB(TestPaper):
    def _answer1(self) -> str:
        return "c"

    def _answer2(self) -> str:
        return "b"

    def _answer3(self) -> str:
        return "a"