"""Sorting strategies that drive stack ``a`` to sorted order."""

from __future__ import annotations

from typing import Optional, Sequence

from .analysis import (
    find_maximum,
    find_minimum,
    fix_top,
    mark_longest_increasing,
    sort_three,
)
from .cost import add_cost, set_cost, set_section_cost, set_self_cost_a
from .parsing import INT_MAX
from .stack import Node, Operation, Stacks, is_ordered

MEDIUM_LIMIT = 120
SECTION_BOUNDS = 5

_ROTATIONS = (
    Operation.RA,
    Operation.RB,
    Operation.RR,
    Operation.RRA,
    Operation.RRB,
    Operation.RRR,
)
_SOURCES = ("a", "b")


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _is_done(stacks: Stacks) -> bool:
    """True when ``b`` is empty and ``a`` is ordered going round from its minimum."""
    if stacks.b or not stacks.a:
        return False
    start = stacks.a.index(find_minimum(stacks.a))
    return is_ordered(stacks.a, start)


def _merge_back(stacks: Stacks) -> None:
    """Push every element of ``b`` back into place, then bring the minimum on top."""
    while not _is_done(stacks):
        set_cost(stacks.a, stacks.b)
        if not execute_cheapest(stacks, "b"):
            break
    fix_top(stacks)


def push_swap(stacks: Stacks) -> None:
    """Sort ``a`` with the strategy suited to its size."""
    size = len(stacks.a)
    if size <= 2:
        if size == 2 and stacks.a[0].nbr > stacks.a[1].nbr:
            stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size <= 5:
        sort_five(stacks)
    elif size < MEDIUM_LIMIT:
        sort_medium(stacks)
    else:
        sort_large(stacks)


def sort_five(stacks: Stacks) -> None:
    """Sort four or five elements: park the extras on ``b``, sort three, merge back."""
    for index, node in enumerate(stacks.a):
        node.correct_pos = index
        if node.correct_pos == 1:
            node.cost = INT_MAX
    remaining = len(stacks.a)
    while remaining > 3 and not all(node.correct_pos == 1 for node in stacks.a):
        execute_cheapest(stacks, "a")
        remaining -= 1
    if remaining == 3:
        sort_three(stacks)
    _merge_back(stacks)


def sort_medium(stacks: Stacks) -> None:
    """Keep a longest increasing run in ``a``, split the rest on ``b`` around the midpoint."""
    mark_longest_increasing(stacks.a)
    pivot = _trunc_div(find_minimum(stacks.a).nbr + find_maximum(stacks.a).nbr, 2)
    set_stack_b(stacks, pivot)
    _merge_back(stacks)


def sort_large(stacks: Stacks) -> None:
    """Keep a longest increasing run in ``a`` and move the rest to ``b`` by section."""
    mark_longest_increasing(stacks.a)
    assign_sections(stacks.a)
    set_big_stack_b(stacks)
    _merge_back(stacks)


def assign_sections(nodes: Sequence[Node]) -> None:
    """Give each node one of six value bands, 0 for the lowest and 5 for the highest.

    A node whose number equals the upper bound of the fifth band keeps its
    previous section.
    """
    if not nodes:
        return
    low = find_minimum(nodes).nbr
    high = find_maximum(nodes).nbr
    sixth = _trunc_div(high, 6) - _trunc_div(low, 6)
    bounds = [low + sixth * (index + 1) for index in range(SECTION_BOUNDS)]
    for node in nodes:
        section = next(
            (index for index, bound in enumerate(bounds) if node.nbr < bound), None
        )
        if section is not None:
            node.section = section
        elif node.nbr > bounds[-1]:
            node.section = SECTION_BOUNDS


def _last_incorrect(nodes: Sequence[Node]) -> Optional[Node]:
    """The lowest node below the top that is not part of the kept run."""
    return next((node for node in reversed(nodes[1:]) if node.correct_pos != 1), None)


def _decide_pile(stacks: Stacks, pivot: int) -> None:
    if not stacks.b or stacks.a[0].nbr < pivot:
        stacks.pb()
    else:
        stacks.pb()
        stacks.rb()


def set_stack_b(stacks: Stacks, pivot: int) -> None:
    """Push every unmarked element to ``b``, sending those not below ``pivot`` to its bottom.

    Marked elements are rotated past. Nothing is done when no element below
    the top of ``a`` is unmarked.
    """
    last = _last_incorrect(stacks.a)
    if last is None:
        return
    while stacks.a[0] is not last:
        if stacks.a[0].correct_pos != 1:
            _decide_pile(stacks, pivot)
        else:
            stacks.ra()
    _decide_pile(stacks, pivot)


def set_big_stack_b(stacks: Stacks) -> None:
    """Move unmarked elements to ``b`` one by one, cheapest first, grouped by section."""
    while not all(node.correct_pos == 1 for node in stacks.a):
        set_self_cost_a(stacks.a)
        for node in stacks.a:
            set_section_cost(node, stacks.b)
        add_cost(stacks.a)
        if not execute_cheapest(stacks, "a"):
            break


def _choose_min_a(nodes: Sequence[Node]) -> Optional[Node]:
    if not nodes:
        return None
    best = nodes[0]
    if best.correct_pos == 1:
        best.cost = INT_MAX
    for node in nodes[1:]:
        if best.cost > node.cost and node.correct_pos != 1:
            best = node
    return None if best.correct_pos == 1 else best


def _choose_min_b(nodes: Sequence[Node]) -> Optional[Node]:
    if not nodes:
        return None
    return min(nodes, key=lambda node: node.cost)


def _check_source(source: str) -> None:
    if source not in _SOURCES:
        raise ValueError(f"unknown stack {source!r}; expected 'a' or 'b'")


def execute_cheapest(stacks: Stacks, source: str) -> bool:
    """Move the cheapest node of stack ``source`` to the other stack.

    Returns False when there was no node to move.
    """
    _check_source(source)
    node = _choose_min_a(stacks.a) if source == "a" else _choose_min_b(stacks.b)
    if node is None:
        return False
    execute_moves(stacks, node, source)
    return True


def execute_moves(stacks: Stacks, node: Node, source: str) -> None:
    """Carry out the rotations recorded on ``node``, then push from ``source``."""
    _check_source(source)
    for operation in _ROTATIONS:
        field = operation.value
        while getattr(node, field) > 0 and stacks.apply(operation):
            setattr(node, field, getattr(node, field) - 1)
    if source == "a":
        stacks.pb()
    else:
        stacks.pa()