import pytest

from studynotes.patterns.responsibility import (
    CommonManager,
    GeneralManager,
    HRManager,
    Manager,
    Request,
    RequestType,
)


def _chain():
    hr = HRManager("hr")
    common = CommonManager("cm")
    general = GeneralManager("gm")
    hr.set_superior(common)
    common.set_superior(general)
    return hr


@pytest.mark.parametrize(
    "num, approver",
    [(4, "hr"), (5, "cm"), (10, "cm"), (11, "gm")],
)
def test_vacation_goes_to_right_manager(num, approver):
    decision = _chain().handle(Request(RequestType.VACATION, "leave", num))
    assert decision == f"{approver}: 批准 leave {num}"


def test_small_raise_approved_by_general():
    decision = _chain().handle(Request(RequestType.RAISES, "raise", 500))
    assert decision.startswith("gm: 批准")


def test_large_raise_rejected():
    decision = _chain().handle(Request(RequestType.RAISES, "raise", 501))
    assert decision == "gm: 不批准 raise 501 进步不明显,继续努力"


def test_request_without_superior_returns_none():
    assert HRManager("hr").handle(Request(RequestType.VACATION, "leave", 9)) is None


def test_manager_is_abstract():
    with pytest.raises(TypeError):
        Manager("x")