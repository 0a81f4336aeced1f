import pytest

from containerkit.vector import Vector


def make(*values):
    v = Vector()
    for value in values:
        v.push_back(value)
    return v


def test_push_back_basic():
    v = make(10, 20, 30)
    assert len(v) == 3
    assert v[0] == 10
    assert v[1] == 20
    assert v[2] == 30


def test_push_back_resize():
    v = Vector()
    for i in range(20):
        v.push_back(i)
    assert len(v) == 20
    assert list(v) == list(range(20))
    assert v.capacity() >= 20


def test_pop_back():
    v = make(1, 2, 3, 4)
    assert len(v) == 4
    v.pop_back()
    assert len(v) == 3
    assert v[2] == 3
    v.pop_back()
    v.pop_back()
    assert len(v) == 1
    assert v[0] == 1


def test_pop_back_returns_value():
    v = make(1, 2, 3)
    assert v.pop_back() == 3


def test_pop_back_empty():
    with pytest.raises(IndexError):
        Vector().pop_back()


def test_insert_beginning():
    v = make(2, 3, 4)
    v.insert(1, 0)
    assert list(v) == [1, 2, 3, 4]


def test_insert_middle():
    v = make(1, 2, 4, 5)
    v.insert(3, 2)
    assert list(v) == [1, 2, 3, 4, 5]


def test_insert_end():
    v = make(1, 2, 3)
    v.insert(4, 3)
    assert len(v) == 4
    assert v[3] == 4


def test_insert_out_of_range():
    v = make(1, 2, 3)
    with pytest.raises(IndexError):
        v.insert(9, 4)
    assert list(v) == [1, 2, 3]


def test_erase_beginning():
    v = make(1, 2, 3, 4)
    v.erase(0)
    assert list(v) == [2, 3, 4]


def test_erase_middle():
    v = make(1, 2, 3, 4)
    v.erase(2)
    assert list(v) == [1, 2, 4]


def test_erase_end():
    v = make(1, 2, 3)
    v.erase(2)
    assert list(v) == [1, 2]


def test_erase_out_of_range():
    v = make(1, 2)
    with pytest.raises(IndexError):
        v.erase(2)
    assert len(v) == 2


def test_operator_bracket():
    v = make(10, 20, 30)
    assert v[0] == 10
    assert v[1] == 20
    assert v[2] == 30
    v[1] = 200
    assert v[1] == 200


def test_index_exception():
    v = make(1, 2)
    with pytest.raises(IndexError):
        v[10]
    with pytest.raises(IndexError):
        v[10] = 5
    assert len(v) == 2
    assert list(v) == [1, 2]


def test_negative_index_reads_from_end():
    v = make(10, 20, 30)
    assert v[-1] == 30
    assert v[-3] == 10


def test_front_back():
    v = make(10, 20, 30)
    assert v.front() == 10
    assert v.back() == 30
    v[0] = 100
    v[len(v) - 1] = 300
    assert v.front() == 100
    assert v.back() == 300


def test_front_back_single():
    v = make(42)
    assert v.front() == 42
    assert v.back() == 42


def test_front_back_empty():
    v = Vector()
    with pytest.raises(IndexError):
        v.front()
    with pytest.raises(IndexError):
        v.back()


def test_size_capacity():
    v = Vector()
    assert len(v) == 0
    assert v.capacity() == 0
    v.push_back(1)
    assert len(v) == 1
    assert v.capacity() >= 1
    old_cap = v.capacity()
    for i in range(10):
        v.push_back(i)
    assert len(v) == 11
    assert v.capacity() >= old_cap


def test_capacity_first_growth_is_one():
    v = Vector()
    v.push_back(1)
    assert v.capacity() == 1


def test_empty():
    v = Vector()
    assert not v
    v.push_back(1)
    assert v
    v.pop_back()
    assert len(v) == 0


def test_clear_keeps_capacity():
    v = make(1, 2, 3)
    old_cap = v.capacity()
    v.clear()
    assert len(v) == 0
    assert v.capacity() == old_cap
    v.push_back(10)
    assert len(v) == 1


def test_reserve():
    v = Vector()
    v.reserve(100)
    assert v.capacity() >= 100
    assert len(v) == 0
    for i in range(50):
        v.push_back(i)
    assert len(v) == 50
    assert v.capacity() >= 100


def test_reserve_smaller_does_nothing():
    v = Vector()
    v.reserve(100)
    v.reserve(5)
    assert v.capacity() == 100


def test_shrink_to_fit():
    v = Vector()
    v.reserve(100)
    v.push_back(1)
    v.push_back(2)
    v.push_back(3)
    assert v.capacity() >= 100
    v.shrink_to_fit()
    assert v.capacity() == 3
    assert len(v) == 3


def test_copy_constructor():
    v1 = make(1, 2, 3)
    v2 = v1.copy()
    assert list(v2) == [1, 2, 3]
    assert v2.capacity() == v1.capacity()
    v1[0] = 999
    assert v2[0] == 1


def test_copy_assignment_replaces_contents():
    v1 = make(1, 2, 3)
    v2 = make(100)
    v2 = v1.copy()
    assert list(v2) == [1, 2, 3]
    v1[1] = 888
    assert v2[1] == 2


def test_self_copy():
    v = make(1, 2, 3)
    v = v.copy()
    assert list(v) == [1, 2, 3]


def test_move_constructor():
    v1 = make(1, 2, 3)
    v2 = v1.take()
    assert list(v2) == [1, 2, 3]
    assert len(v1) == 0
    assert v1.capacity() == 0


def test_move_assignment():
    v1 = make(1, 2, 3)
    v2 = make(999)
    v2 = v1.take()
    assert list(v2) == [1, 2, 3]
    assert len(v1) == 0


def test_stress_large():
    v = Vector()
    for i in range(1000):
        v.push_back(i)
    assert len(v) == 1000
    assert all(v[i] == i for i in range(1000))


def test_stress_insert_erase():
    v = Vector(range(10))
    v.insert(99, 5)
    assert v[5] == 99
    assert len(v) == 11
    v.erase(5)
    assert v[5] == 5
    assert len(v) == 10
    for _ in range(5):
        v.erase(0)
    assert len(v) == 5
    assert v[0] == 5


def test_capacity_never_below_size():
    v = Vector()
    for i in range(37):
        v.insert(i, len(v) // 2)
        assert v.capacity() >= len(v)


def test_str_matches_print_format():
    assert str(make(1, 2, 3)) == "[1, 2, 3]"
    assert str(Vector()) == "[]"


def test_constructor_from_iterable_round_trip():
    data = [5, 3, 8, 1]
    assert list(Vector(data)) == data
    assert Vector(data) == Vector(data)