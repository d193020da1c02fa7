import pytest

from pushswap.stack import Node, Operation, Stacks, is_ordered, only_one_section


def test_construction_keeps_order_and_b_empty():
    stacks = Stacks([3, 1, 2])
    assert stacks.values_a() == [3, 1, 2]
    assert stacks.values_b() == []


def test_sa_swaps_numbers_not_nodes():
    stacks = Stacks([2, 1, 3])
    first = stacks.a[0]
    first.correct_pos = 1
    assert stacks.sa() is True
    assert stacks.values_a() == [1, 2, 3]
    assert stacks.a[0] is first
    assert stacks.a[0].correct_pos == 1


def test_sa_on_single_element_succeeds_without_change():
    stacks = Stacks([5], record=True)
    assert stacks.sa() is True
    assert stacks.values_a() == [5]
    assert stacks.operations == [Operation.SA]


def test_sa_on_empty_fails():
    stacks = Stacks([], record=True)
    assert stacks.sa() is False
    assert stacks.operations == []


def test_sb_on_empty_fails():
    assert Stacks([1, 2]).sb() is False


def test_ss_always_succeeds():
    stacks = Stacks([1, 2], record=True)
    assert stacks.ss() is True
    assert stacks.values_a() == [2, 1]
    assert stacks.operations == [Operation.SS]


def test_pb_then_pa_round_trip():
    stacks = Stacks([4, 5, 6])
    assert stacks.pb() is True
    assert stacks.pb() is True
    assert stacks.values_a() == [6]
    assert stacks.values_b() == [5, 4]
    assert stacks.pa() is True
    assert stacks.pa() is True
    assert stacks.values_a() == [4, 5, 6]
    assert stacks.values_b() == []


def test_pa_marks_node_as_placed():
    stacks = Stacks([7, 8])
    stacks.pb()
    assert stacks.a[0].correct_pos == -1
    stacks.pa()
    assert stacks.a[0].nbr == 7
    assert stacks.a[0].correct_pos == 1


def test_pa_on_empty_b_fails():
    stacks = Stacks([1], record=True)
    assert stacks.pa() is False
    assert stacks.values_a() == [1]
    assert stacks.operations == []


def test_pb_on_empty_a_fails():
    assert Stacks([]).pb() is False


def test_ra_and_rra_are_inverse():
    stacks = Stacks([1, 2, 3, 4])
    stacks.ra()
    assert stacks.values_a() == [2, 3, 4, 1]
    stacks.rra()
    assert stacks.values_a() == [1, 2, 3, 4]


def test_rb_and_rrb_are_inverse():
    stacks = Stacks([1, 2, 3])
    for _ in range(3):
        stacks.pb()
    before = stacks.values_b()
    assert stacks.rb() is True
    assert stacks.values_b() == before[1:] + before[:1]
    assert stacks.rrb() is True
    assert stacks.values_b() == before


def test_rotations_on_empty_fail():
    stacks = Stacks([])
    assert stacks.ra() is False
    assert stacks.rra() is False
    assert stacks.rb() is False
    assert stacks.rrb() is False


def test_rr_succeeds_with_empty_b():
    stacks = Stacks([1, 2, 3], record=True)
    assert stacks.rr() is True
    assert stacks.values_a() == [2, 3, 1]
    assert stacks.operations == [Operation.RR]


def test_rrr_rotates_both():
    stacks = Stacks([1, 2, 3, 4])
    stacks.pb()
    stacks.pb()
    a_before, b_before = stacks.values_a(), stacks.values_b()
    assert stacks.rrr() is True
    assert stacks.values_a() == a_before[-1:] + a_before[:-1]
    assert stacks.values_b() == b_before[-1:] + b_before[:-1]


def test_recording_in_order():
    stacks = Stacks([3, 2, 1], record=True)
    stacks.pb()
    stacks.ra()
    stacks.pa()
    assert [str(op) for op in stacks.operations] == ["pb", "ra", "pa"]


def test_no_recording_by_default():
    stacks = Stacks([2, 1])
    stacks.sa()
    assert stacks.operations == []


@pytest.mark.parametrize("operation", list(Operation))
def test_apply_matches_named_method(operation):
    direct = Stacks([5, 3, 9, 1])
    direct.pb()
    direct.pb()
    via_apply = Stacks([5, 3, 9, 1])
    via_apply.pb()
    via_apply.pb()
    expected = getattr(direct, operation.value)()
    assert via_apply.apply(operation) == expected
    assert via_apply.values_a() == direct.values_a()
    assert via_apply.values_b() == direct.values_b()


def test_apply_accepts_operation_from_text():
    stacks = Stacks([1, 2, 3])
    assert stacks.apply(Operation("rra")) is True
    assert stacks.values_a() == [3, 1, 2]


def test_unknown_operation_text_rejected():
    with pytest.raises(ValueError):
        Operation("xx")


def test_is_sorted():
    assert Stacks([1, 2, 3]).is_sorted() is True
    assert Stacks([2, 1, 3]).is_sorted() is False
    assert Stacks([]).is_sorted() is False


def test_is_sorted_false_with_b_non_empty():
    stacks = Stacks([1, 2, 3])
    stacks.pb()
    assert stacks.values_a() == [2, 3]
    assert stacks.is_sorted() is False


def test_is_ordered_from_rotated_start():
    nodes = [Node(v) for v in [3, 4, 1, 2]]
    assert is_ordered(nodes, 2) is True
    assert is_ordered(nodes, 0) is False


def test_is_ordered_rejects_duplicates_and_empty():
    assert is_ordered([Node(1), Node(1)], 0) is False
    assert is_ordered([], 0) is False
    assert is_ordered([Node(9)], 0) is True


def test_only_one_section():
    nodes = [Node(1, section=2), Node(2, section=2)]
    assert only_one_section(nodes, 2) is True
    assert only_one_section(nodes, 3) is False
    nodes.append(Node(3, section=4))
    assert only_one_section(nodes, 2) is False


def test_node_defaults():
    node = Node(42)
    assert node.correct_pos == -1
    assert node.section == -1
    assert node.lis_prev is None
    assert node.cost == 0