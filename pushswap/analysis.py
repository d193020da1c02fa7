"""Inspecting stack ``a`` and the small fix-ups made directly on it."""

from __future__ import annotations

from bisect import bisect_left
from typing import Sequence

from .stack import Node, Operation, Stacks


def find_minimum(nodes: Sequence[Node]) -> Node:
    """The node holding the smallest number."""
    return min(nodes, key=lambda node: node.nbr)


def find_maximum(nodes: Sequence[Node]) -> Node:
    """The node holding the largest number."""
    return max(nodes, key=lambda node: node.nbr)


def _mark_from(nodes: Sequence[Node], start: int) -> int:
    """Mark an increasing subsequence read round the stack from ``start``."""
    for node in nodes:
        node.correct_pos = -1
        node.lis_prev = None
    order = list(nodes[start:]) + list(nodes[:start])
    tails: list[Node] = [order[0]]
    tail_values: list[int] = [order[0].nbr]
    for current in order[1:]:
        index = bisect_left(tail_values, current.nbr)
        if index < len(tails):
            tails[index] = current
            tail_values[index] = current.nbr
            if index > 0:
                current.lis_prev = tails[index - 1]
        else:
            current.lis_prev = tails[-1]
            tails.append(current)
            tail_values.append(current.nbr)
    node: Node | None = tails[-1]
    while node is not None:
        node.correct_pos = 1
        node = node.lis_prev
    return len(tails)


def mark_longest_increasing(nodes: Sequence[Node]) -> int:
    """Mark with ``correct_pos == 1`` a longest circular increasing subsequence.

    Every rotation is tried; the first one giving the longest subsequence is
    the one left marked. Returns the length of the marked subsequence.
    """
    best_length = 0
    best_start = 0
    for start in range(len(nodes)):
        length = _mark_from(nodes, start)
        if length > best_length:
            best_length, best_start = length, start
    if nodes:
        _mark_from(nodes, best_start)
    return best_length


def fix_top(stacks: Stacks) -> None:
    """Rotate a circularly sorted ``a`` the short way until its minimum is on top."""
    nodes = stacks.a
    size = len(nodes)
    if size < 2:
        return
    cost = 1
    index = 0
    while nodes[index].nbr < nodes[(index + 1) % size].nbr:
        cost += 1
        index += 1
    if cost * 2 < size:
        for _ in range(cost):
            stacks.ra()
    else:
        for _ in range(size - cost):
            stacks.rra()


_THREE_MOVES: dict[int, tuple[Operation, ...]] = {
    1: (Operation.SA,),
    3: (Operation.RA,),
    4: (Operation.SA, Operation.RA),
    6: (Operation.RRA,),
    7: (Operation.SA, Operation.RRA),
}


def sort_three(stacks: Stacks) -> None:
    """Sort a three-element ``a`` in at most two operations."""
    top, middle, bottom = stacks.a[0].nbr, stacks.a[1].nbr, stacks.a[-1].nbr
    pattern = (top > middle) + 2 * (top > bottom) + 4 * (middle > bottom)
    for operation in _THREE_MOVES.get(pattern, ()):
        stacks.apply(operation)