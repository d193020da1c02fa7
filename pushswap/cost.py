"""Working out how many rotations each element needs before it is pushed."""

from __future__ import annotations

from typing import Sequence

from .analysis import find_maximum, find_minimum
from .stack import Node, only_one_section

SECTION_PRESENT = 1
SECTION_ABOVE = 9
SECTION_BELOW = -1
SECTION_NEW = 0


def set_self_cost_b(nodes: Sequence[Node]) -> None:
    """Record for each node of ``b`` the ``rb`` and ``rrb`` counts that bring it to the top."""
    size = len(nodes)
    for index, node in enumerate(nodes):
        node.rb = index
        node.rrb = size - index


def set_self_cost_a(nodes: Sequence[Node]) -> None:
    """Record for each node of ``a`` the ``ra`` and ``rra`` counts that bring it to the top."""
    size = len(nodes)
    for index, node in enumerate(nodes):
        node.ra = index
        node.rra = size - index


def _first_descent(nodes: Sequence[Node]) -> int:
    """Index of the first node, from the top, not followed by a larger one."""
    size = len(nodes)
    for index in range(size):
        if not nodes[index].nbr < nodes[(index + 1) % size].nbr:
            return index
    raise ValueError("stack has no descent")


def _insertion_index(nodes: Sequence[Node], value: int) -> int:
    """Index of the first node after which ``value`` fits between neighbours."""
    size = len(nodes)
    for index in range(size):
        if nodes[index].nbr < value < nodes[(index + 1) % size].nbr:
            return index
    raise ValueError(f"no place for {value} in the stack")


def _set_push_cost(stack_a: Sequence[Node], target: Node) -> None:
    value = target.nbr
    if find_minimum(stack_a).nbr > value or find_maximum(stack_a).nbr < value:
        index = _first_descent(stack_a)
    else:
        index = _insertion_index(stack_a, value)
    target.ra = index + 1
    target.rra = len(stack_a) - target.ra


def set_target_cost_b(stack_a: Sequence[Node], stack_b: Sequence[Node]) -> None:
    """Record for each node of ``b`` the rotations of ``a`` that open its slot."""
    for node in stack_b:
        _set_push_cost(stack_a, node)


def _route_ra_rb(node: Node) -> None:
    shared = min(node.ra, node.rb)
    node.rr = shared
    node.ra -= shared
    node.rb -= shared
    node.rra = node.rrb = node.rrr = 0
    node.cost = node.rr + node.ra + node.rb


def _route_ra_rrb(node: Node) -> None:
    node.rb = node.rr = node.rra = node.rrr = 0
    node.cost = node.ra + node.rrb


def _route_rra_rb(node: Node) -> None:
    node.ra = node.rr = node.rrb = node.rrr = 0
    node.cost = node.rra + node.rb


def _route_rra_rrb(node: Node) -> None:
    shared = min(node.rra, node.rrb)
    node.rrr = shared
    node.rra -= shared
    node.rrb -= shared
    node.ra = node.rb = node.rr = 0
    node.cost = node.rrr + node.rra + node.rrb


def choose_route(node: Node) -> None:
    """Keep only the cheapest of the four ways of rotating both stacks.

    Ties go to the first of: forward both, forward ``a`` with reverse ``b``,
    reverse ``a`` with forward ``b``, reverse both. The node's ``cost`` is
    set to the number of operations the chosen route takes.
    """
    options = (
        (max(node.ra, node.rb), _route_ra_rb),
        (node.ra + node.rrb, _route_ra_rrb),
        (node.rra + node.rb, _route_rra_rb),
        (max(node.rra, node.rrb), _route_rra_rrb),
    )
    cheapest = min(cost for cost, _ in options)
    route = next(route for cost, route in options if cost == cheapest)
    route(node)


def add_cost(nodes: Sequence[Node]) -> None:
    """Choose the cheapest route for every node."""
    for node in nodes:
        choose_route(node)


def set_cost(stack_a: Sequence[Node], stack_b: Sequence[Node]) -> None:
    """Price every node of ``b`` for being pushed back into place in ``a``."""
    set_self_cost_b(stack_b)
    set_target_cost_b(stack_a, stack_b)
    add_cost(stack_b)


def check_present_section(target: Node, stack_b: Sequence[Node]) -> int:
    """Classify ``target``'s section against ``b``.

    Returns 9 when it lies above the section of ``b``'s largest number, -1
    when below that of ``b``'s smallest number, 1 when some node of ``b``
    already has it and 0 otherwise.
    """
    if target.section > find_maximum(stack_b).section:
        return SECTION_ABOVE
    if target.section < find_minimum(stack_b).section:
        return SECTION_BELOW
    if any(node.section == target.section for node in stack_b):
        return SECTION_PRESENT
    return SECTION_NEW


def _first_index(nodes: Sequence[Node], section: int) -> int:
    return next(index for index, node in enumerate(nodes) if node.section == section)


def _count_from_bottom(nodes: Sequence[Node], section: int) -> int:
    """Number of nodes below the lowest one belonging to ``section``."""
    last = max(index for index, node in enumerate(nodes) if node.section == section)
    return len(nodes) - 1 - last


def _normal_section(target: Node, stack_b: Sequence[Node]) -> None:
    target.rb = _first_index(stack_b, target.section)
    target.rrb = _count_from_bottom(stack_b, target.section)


def _largest_section(target: Node, stack_b: Sequence[Node]) -> None:
    top_section = find_maximum(stack_b).section
    if only_one_section(stack_b, top_section):
        target.rb = target.rrb = 0
        return
    target.rrb = _count_from_bottom(stack_b, top_section)
    target.rb = len(stack_b) - target.rrb


def _smallest_section(target: Node, stack_b: Sequence[Node]) -> None:
    bottom_section = find_minimum(stack_b).section
    if only_one_section(stack_b, bottom_section):
        target.rb = target.rrb = 0
        return
    target.rb = _first_index(stack_b, bottom_section)
    target.rrb = len(stack_b) - target.rb


def _new_section(target: Node, stack_b: Sequence[Node]) -> None:
    size = len(stack_b)
    for index in range(size):
        if stack_b[index].section < target.section < stack_b[(index + 1) % size].section:
            target.rb = index + 1
            target.rrb = size - target.rb
            return
    raise ValueError(f"no place for section {target.section} in the stack")


def set_section_cost(target: Node, stack_b: Sequence[Node]) -> None:
    """Record the ``rb`` and ``rrb`` counts that bring ``b`` to where ``target`` belongs."""
    if not stack_b:
        target.rb = target.rrb = 0
        return
    choice = check_present_section(target, stack_b)
    if choice == SECTION_PRESENT:
        _normal_section(target, stack_b)
    elif choice == SECTION_ABOVE:
        _largest_section(target, stack_b)
    elif choice == SECTION_BELOW:
        _smallest_section(target, stack_b)
    else:
        _new_section(target, stack_b)