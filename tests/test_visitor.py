import pytest

from studynotes.patterns.visitor import (
    Action,
    Failing,
    Man,
    Marriage,
    ObjectStructure,
    Success,
    Woman,
)


def _structure():
    structure = ObjectStructure()
    man, woman = Man(), Woman()
    structure.attach(man)
    structure.attach(woman)
    return structure, man, woman


def test_success_for_both():
    structure, _, _ = _structure()
    assert structure.display(Success()) == [
        "男人成功时,背后多半有一个伟大的女人.",
        "女人成功时,背后大多有一个不成功的男人.",
    ]


def test_marriage_man():
    assert Man().accept(Marriage()) == "男人结婚时,感叹道:恋爱游戏终结时,'有妻徒刑'遥无期."


def test_detach_removes_one():
    structure, man, woman = _structure()
    structure.detach(man)
    assert structure.display(Failing()) == ["女人失败时,眼泪汪汪，谁也劝不了."]


def test_detach_unknown_keeps_all():
    structure, _, _ = _structure()
    structure.detach(Man())
    assert len(structure.display(Success())) == 2


def test_action_is_abstract():
    with pytest.raises(TypeError):
        Action()