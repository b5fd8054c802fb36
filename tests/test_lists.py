import pytest

from studynotes.lists import CAPACITY, LinkedList, StaticList


def test_create_head_reverses():
    lst = LinkedList()
    lst.create_head(10)
    assert list(lst) == list(range(9, -1, -1))


def test_create_end_keeps_order():
    lst = LinkedList()
    lst.create_end(10)
    assert list(lst) == list(range(10))


def test_insert_head_becomes_nth():
    lst = LinkedList()
    lst.create_head(10)
    lst.insert_head(10, 55)
    values = list(lst)
    assert values[9] == 55
    assert len(values) == 11
    assert values[:9] + values[10:] == list(range(9, -1, -1))


@pytest.mark.parametrize("position", [0, 11, -3])
def test_insert_head_out_of_range(position):
    lst = LinkedList()
    lst.create_end(10)
    with pytest.raises(IndexError):
        lst.insert_head(position, 1)


def test_insert_head_on_empty_fails():
    with pytest.raises(IndexError):
        LinkedList().insert_head(1, 5)


def test_insert_end_past_length_appends():
    lst = LinkedList()
    lst.create_end(10)
    lst.insert_end(10, 55)
    lst.insert_end(100, 66)
    assert list(lst) == list(range(10)) + [55, 66]


def test_insert_end_zero_is_front():
    lst = LinkedList()
    lst.create_end(3)
    lst.insert_end(0, 55)
    assert list(lst)[0] == 55


def test_insert_end_negative():
    with pytest.raises(IndexError):
        LinkedList().insert_end(-1, 5)


def test_delete_and_clear():
    lst = LinkedList()
    lst.create_end(10)
    assert lst.delete(5) == 4
    assert 4 not in list(lst)
    assert len(lst) == 9
    with pytest.raises(IndexError):
        lst.delete(10)
    lst.clear()
    assert list(lst) == []


def test_render():
    lst = LinkedList()
    assert lst.render() == "Node_Printf:\nEmpty List!!\n"
    lst.create_end(3)
    assert lst.render() == "Node_Printf:\n0 1 2 \n"


def test_static_front_inserts():
    sl = StaticList()
    for value in range(1, 8):
        sl.insert(1, value)
    assert list(sl) == list(range(7, 0, -1))
    assert len(sl) == 7


def test_static_insert_and_delete_round_trip():
    sl = StaticList()
    for value in range(1, 8):
        sl.insert(1, value)
    before = list(sl)
    sl.insert(5, 55)
    assert list(sl)[4] == 55
    assert len(sl) == 8
    assert sl.delete(5) == 55
    assert list(sl) == before


def test_static_reuses_freed_slots():
    sl = StaticList()
    for value in range(CAPACITY):
        sl.insert(len(sl) + 1, value)
    with pytest.raises(OverflowError):
        sl.insert(1, -1)
    sl.delete(1)
    sl.insert(1, -1)
    assert list(sl)[0] == -1
    assert len(sl) == CAPACITY


def test_static_bad_positions():
    sl = StaticList()
    with pytest.raises(IndexError):
        sl.insert(2, 1)
    with pytest.raises(IndexError):
        sl.delete(1)


def test_static_render():
    sl = StaticList()
    assert "Empty Const List!!" in sl.render()
    sl.insert(1, 3)
    sl.insert(2, 4)
    assert sl.render() == "const list value:\n3 4 \n"