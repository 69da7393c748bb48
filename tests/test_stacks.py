import pytest

from pushswap.parsing import InputError
from pushswap.stacks import Operation, Stacks


@pytest.mark.parametrize("name", ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"])
def test_parse_every_instruction(name):
    operation = Operation.parse(name + "\n")
    assert operation.value == name
    assert str(operation) == name


def test_parse_blank_line_is_ignored():
    assert Operation.parse("\n") is None


@pytest.mark.parametrize("text", ["sa", "rra", "sa \n", "xx\n", "rrrr\n", "SA\n", "s\n", "pa\npb\n", ""])
def test_parse_rejects_bad_lines(text):
    with pytest.raises(InputError):
        Operation.parse(text)


def test_swap_a():
    stacks = Stacks([1, 2, 3])
    stacks.apply(Operation.SA)
    assert list(stacks.a) == [2, 1, 3]


def test_rotate_a_moves_top_to_bottom():
    stacks = Stacks([1, 2, 3])
    stacks.apply(Operation.RA)
    assert list(stacks.a) == [2, 3, 1]


def test_reverse_rotate_a_moves_bottom_to_top():
    stacks = Stacks([1, 2, 3])
    stacks.apply(Operation.RRA)
    assert list(stacks.a) == [3, 1, 2]


def test_push_b_and_back():
    stacks = Stacks([1, 2, 3])
    stacks.apply(Operation.PB)
    stacks.apply(Operation.PB)
    assert list(stacks.a) == [3]
    assert list(stacks.b) == [2, 1]
    stacks.apply(Operation.PA)
    stacks.apply(Operation.PA)
    assert list(stacks.a) == [1, 2, 3]
    assert list(stacks.b) == []


@pytest.mark.parametrize(
    ("forward", "backward"),
    [
        (Operation.RA, Operation.RRA),
        (Operation.RB, Operation.RRB),
        (Operation.RR, Operation.RRR),
        (Operation.SA, Operation.SA),
        (Operation.SS, Operation.SS),
    ],
)
def test_inverse_pairs_restore_state(forward, backward):
    stacks = Stacks([4, 8, 15, 16, 23])
    for _ in range(2):
        stacks.apply(Operation.PB)
    before = (list(stacks.a), list(stacks.b))
    stacks.apply(forward)
    stacks.apply(backward)
    assert (list(stacks.a), list(stacks.b)) == before


def test_moves_on_short_stacks_do_nothing():
    stacks = Stacks([7])
    for operation in (Operation.SA, Operation.RA, Operation.RRA, Operation.PA, Operation.SB, Operation.RB):
        stacks.apply(operation)
    assert list(stacks.a) == [7]
    assert list(stacks.b) == []


def test_combined_moves_touch_both_stacks():
    stacks = Stacks([1, 2, 3, 4])
    stacks.apply(Operation.PB)
    stacks.apply(Operation.PB)
    stacks.apply(Operation.SS)
    assert list(stacks.a) == [4, 3]
    assert list(stacks.b) == [1, 2]


def test_full_rotation_is_identity():
    values = [5, 3, 9, 1]
    stacks = Stacks(values)
    for _ in values:
        stacks.apply(Operation.RA)
    assert list(stacks.a) == values


def test_is_sorted_checks_stack_a_only():
    stacks = Stacks([3, 1, 2])
    assert not stacks.is_sorted()
    stacks.apply(Operation.PB)
    assert stacks.is_sorted()
    assert list(stacks.b) == [3]


def test_is_sorted_empty_stack():
    assert Stacks([]).is_sorted()