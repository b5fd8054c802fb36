"""Command that runs the worked examples and prints their output."""

from __future__ import annotations

import argparse

from studynotes.exercises import extract_serial, insert_sort, tokenize
from studynotes.leetcode import can_make_square
from studynotes.lists import LinkedList, StaticList
from studynotes.version_info import banner

_SAMPLE_SERIAL = "ABCD0000123XYZ"


def _linked_list_demo() -> None:
    print("\n********单链表测试********")
    list1 = LinkedList()
    print(list1.render(), end="")
    list1.create_head(10)
    print("Node_Create_Head OK!")
    print(list1.render(), end="")
    list1.insert_head(10, 55)
    print(list1.render(), end="")

    list2 = LinkedList()
    list2.create_end(10)
    print(list2.render(), end="")
    list2.insert_end(10, 55)
    print(list2.render(), end="")
    list2.delete(5)
    print(list2.render(), end="")
    list2.clear()
    print(list2.render(), end="")


def _static_list_demo() -> None:
    print("\n********静态链表测试********")
    const_list = StaticList()
    print(const_list.render(), end="")
    for value in range(1, 8):
        const_list.insert(1, value)
    print(const_list.render(), end="")
    print(f"const list length:{len(const_list)}")
    const_list.insert(5, 55)
    print(const_list.render(), end="")
    const_list.delete(5)
    print(const_list.render(), end="")


def _tokenize_demo() -> None:
    print("\n********栈实现四则运算********")
    tokens = tokenize("9+(3-1)*3+10/2")
    print(f"str:{len(tokens)}")
    print("".join(f"|{token}| " for token in tokens))


def _serial_demo() -> None:
    digits = extract_serial(_SAMPLE_SERIAL)
    first = _SAMPLE_SERIAL.index(digits)
    last = first + len(digits) - 1
    print(f"find first number:{first} last:{last}")
    print(f"serial_str:{digits}")


def _sort_demo() -> None:
    nums = [4, 6, 5, 2, 3, 1]
    print("origin nums:" + "".join(f"{value} " for value in nums))
    for i, state in enumerate(insert_sort(nums)):
        print(f"i:{i}->" + "".join(f"{value} " for value in state))
    print("sort nums:" + "".join(f"{value} " for value in nums))


def main(argv: list[str] | None = None) -> int:
    """Print the banner and run each example in turn."""
    parser = argparse.ArgumentParser(prog="studynotes", description="Run the worked examples.")
    parser.parse_args(argv)

    print(banner(), end="")

    grid = [["B", "W", "B"], ["W", "B", "W"], ["B", "W", "B"]]
    print(f"LeedCode 3127:{int(can_make_square(grid))}")

    age, name = 18, "李四"
    print(f"age:{age} ({type(age).__name__}) name:{name} ({type(name).__name__})")

    _linked_list_demo()
    _static_list_demo()
    _tokenize_demo()
    _serial_demo()
    _sort_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())