import pytest

from pushswap.stacks import Op, Stacks, parse_op

ALL_NAMES = ["pa", "pb", "sa", "sb", "ss", "ra", "rb", "rr", "rra", "rrb", "rrr"]


@pytest.mark.parametrize("name", ALL_NAMES)
def test_parse_op_round_trip(name):
    assert str(parse_op(name)) == name


@pytest.mark.parametrize("text", ["", "sa\n", "SA", "rrrr", " ra", "x"])
def test_parse_op_rejects_unknown(text):
    with pytest.raises(ValueError):
        parse_op(text)


def test_swap_a_exchanges_top_two():
    s = Stacks([1, 2, 3])
    assert s.swap_a() is True
    assert list(s.a) == [2, 1, 3]
    assert s.history == [Op.SA]


def test_swap_on_short_stack_does_nothing():
    s = Stacks([7])
    assert s.swap_a() is False
    assert s.swap_b() is False
    assert list(s.a) == [7]
    assert s.history == []


def test_swap_twice_is_identity():
    s = Stacks([4, 9, 1], [5, 6])
    s.swap_ab()
    s.swap_ab()
    assert list(s.a) == [4, 9, 1]
    assert list(s.b) == [5, 6]


def test_swap_ab_records_both():
    s = Stacks([1, 2], [3, 4])
    assert s.swap_ab() is True
    assert s.history == [Op.SA, Op.SB]


def test_swap_ab_records_only_what_happened():
    s = Stacks([1, 2], [3])
    s.swap_ab()
    assert s.history == [Op.SA]


def test_push_b_moves_top():
    s = Stacks([1, 2, 3])
    assert s.push_b() is True
    assert list(s.a) == [2, 3]
    assert list(s.b) == [1]
    assert s.history == [Op.PB]


def test_push_from_empty_does_nothing():
    s = Stacks([1])
    assert s.push_a() is False
    assert list(s.a) == [1]
    assert not s.b
    assert s.history == []


def test_push_round_trip_preserves_order():
    values = [3, 1, 4, 5, 9]
    s = Stacks(values)
    for _ in values:
        s.push_b()
    assert not s.a
    assert list(s.b) == values[::-1]
    for _ in values:
        s.push_a()
    assert list(s.a) == values
    assert not s.b


def test_rotate_a_moves_top_to_bottom():
    s = Stacks([1, 2, 3])
    assert s.rotate_a() is True
    assert list(s.a) == [2, 3, 1]
    assert s.history == [Op.RA]


def test_rrotate_a_moves_bottom_to_top():
    s = Stacks([1, 2, 3])
    assert s.rrotate_a() is True
    assert list(s.a) == [3, 1, 2]
    assert s.history == [Op.RRA]


def test_rotate_then_rrotate_is_identity():
    s = Stacks([5, 8, 2, 6], [1, 3, 7])
    s.rotate_ab()
    s.rrotate_ab()
    assert list(s.a) == [5, 8, 2, 6]
    assert list(s.b) == [1, 3, 7]
    assert s.history == [Op.RA, Op.RB, Op.RRA, Op.RRB]


def test_full_rotation_is_identity():
    values = [10, 20, 30, 40]
    s = Stacks(values)
    for _ in values:
        s.rotate_a()
    assert list(s.a) == values
    assert len(s.history) == len(values)


def test_rotate_single_element_does_nothing():
    s = Stacks([], [42])
    assert s.rotate_b() is False
    assert s.rrotate_b() is False
    assert s.rotate_ab() is False
    assert s.rrotate_ab() is False
    assert list(s.b) == [42]
    assert s.history == []


@pytest.mark.parametrize(
    "name, method",
    [
        ("pa", "push_a"),
        ("pb", "push_b"),
        ("sa", "swap_a"),
        ("sb", "swap_b"),
        ("ss", "swap_ab"),
        ("ra", "rotate_a"),
        ("rb", "rotate_b"),
        ("rr", "rotate_ab"),
        ("rra", "rrotate_a"),
        ("rrb", "rrotate_b"),
        ("rrr", "rrotate_ab"),
    ],
)
def test_apply_matches_method(name, method):
    by_apply = Stacks([1, 2, 3], [4, 5, 6])
    by_method = Stacks([1, 2, 3], [4, 5, 6])
    assert by_apply.apply(name) == getattr(by_method, method)()
    assert list(by_apply.a) == list(by_method.a)
    assert list(by_apply.b) == list(by_method.b)
    assert by_apply.history == by_method.history


def test_apply_accepts_op():
    s = Stacks([2, 1])
    assert s.apply(Op.SA) is True
    assert list(s.a) == [1, 2]


def test_apply_rejects_unknown_name():
    s = Stacks([1, 2])
    with pytest.raises(ValueError):
        s.apply("swap")
    assert list(s.a) == [1, 2]


def test_is_sorted():
    assert Stacks([1, 2, 3]).is_sorted() is True
    assert Stacks([-5]).is_sorted() is True
    assert Stacks([2, 1, 3]).is_sorted() is False
    assert Stacks([]).is_sorted() is False
    assert Stacks([1, 2], [3]).is_sorted() is False


def test_sequence_sorts_three():
    s = Stacks([3, 1, 2])
    for name in ["ra"]:
        s.apply(name)
    assert s.is_sorted() is True
    assert [str(op) for op in s.history] == ["ra"]