import pytest

from pushswap.stacks import Stacks


def test_initial_state():
    s = Stacks([3, 1, 2])
    assert list(s.a) == [3, 1, 2]
    assert list(s.b) == []
    assert s.moves == []


def test_pb_and_pa():
    s = Stacks([1, 2, 3])
    s.pb()
    s.pb()
    assert list(s.a) == [3]
    assert list(s.b) == [2, 1]
    s.pa()
    assert list(s.a) == [2, 3]
    assert list(s.b) == [1]
    assert s.moves == ["pb", "pb", "pa"]


def test_pa_on_empty_b_is_noop():
    s = Stacks([1])
    s.pa()
    assert list(s.a) == [1]
    assert s.moves == []


def test_sa_swaps_top_two():
    s = Stacks([1, 2, 3])
    s.sa()
    assert list(s.a) == [2, 1, 3]
    assert s.moves == ["sa"]


def test_sb_single_element_noop():
    s = Stacks([], [5])
    s.sb()
    assert list(s.b) == [5]
    assert s.moves == []


def test_ra_and_rra():
    s = Stacks([1, 2, 3])
    s.ra()
    assert list(s.a) == [2, 3, 1]
    s.rra()
    assert list(s.a) == [1, 2, 3]
    assert s.moves == ["ra", "rra"]


def test_rb_and_rrb():
    s = Stacks([], [4, 5, 6])
    s.rrb()
    assert list(s.b) == [6, 4, 5]
    s.rb()
    assert list(s.b) == [4, 5, 6]
    assert s.moves == ["rrb", "rb"]


def test_rotation_on_single_is_not_recorded():
    s = Stacks([7])
    s.ra()
    s.rra()
    assert s.moves == []
    assert list(s.a) == [7]


def test_rr_and_rrr_always_recorded():
    s = Stacks([1, 2], [])
    s.rr()
    assert list(s.a) == [2, 1]
    s.rrr()
    assert list(s.a) == [1, 2]
    assert s.moves == ["rr", "rrr"]


@pytest.mark.parametrize("values", [[1, 2, 3, 4], [9, -1, 5], [0, 8]])
def test_full_rotation_restores(values):
    s = Stacks(values, values[::-1])
    for _ in values:
        s.rr()
    assert list(s.a) == values
    assert list(s.b) == values[::-1]
    assert len(s.moves) == len(values)


def test_moves_preserve_elements():
    values = [5, 3, 8, 1, 9]
    s = Stacks(values)
    for move in (s.pb, s.pb, s.sa, s.rr, s.rrr, s.sb, s.pa, s.ra, s.rrb):
        move()
    assert sorted(list(s.a) + list(s.b)) == sorted(values)