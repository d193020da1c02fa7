"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence


@dataclass(eq=False)
class Node:
    """One element of a stack with the bookkeeping the sorting strategies use."""

    nbr: int
    cost: int = 0
    correct_pos: int = -1
    lis_prev: Optional["Node"] = None
    ra: int = 0
    rra: int = 0
    rb: int = 0
    rrb: int = 0
    rr: int = 0
    rrr: int = 0
    section: int = -1


class Operation(Enum):
    """The instructions understood by the puzzle."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


class Stacks:
    """Stacks ``a`` and ``b``, each held top first.

    Every operation returns True when it was carried out and False when the
    stack it needs is empty. With ``record`` set, carried-out operations are
    appended to ``operations``.
    """

    def __init__(self, values: Iterable[int] = (), record: bool = False) -> None:
        self.a: list[Node] = [Node(value) for value in values]
        self.b: list[Node] = []
        self.record = record
        self.operations: list[Operation] = []

    def _log(self, operation: Operation) -> None:
        if self.record:
            self.operations.append(operation)

    @staticmethod
    def _swap(nodes: list[Node]) -> bool:
        if not nodes:
            return False
        if len(nodes) >= 2:
            nodes[0].nbr, nodes[1].nbr = nodes[1].nbr, nodes[0].nbr
        return True

    @staticmethod
    def _rotate(nodes: list[Node]) -> bool:
        if not nodes:
            return False
        nodes.append(nodes.pop(0))
        return True

    @staticmethod
    def _reverse_rotate(nodes: list[Node]) -> bool:
        if not nodes:
            return False
        nodes.insert(0, nodes.pop())
        return True

    def sa(self) -> bool:
        """Swap the numbers held by the top two elements of ``a``."""
        if not self._swap(self.a):
            return False
        self._log(Operation.SA)
        return True

    def sb(self) -> bool:
        """Swap the numbers held by the top two elements of ``b``."""
        if not self._swap(self.b):
            return False
        self._log(Operation.SB)
        return True

    def ss(self) -> bool:
        """Do ``sa`` and ``sb`` at once."""
        self._swap(self.a)
        self._swap(self.b)
        self._log(Operation.SS)
        return True

    def pa(self) -> bool:
        """Move the top of ``b`` onto ``a``; the moved element counts as placed."""
        if not self.b:
            return False
        node = self.b.pop(0)
        node.correct_pos = 1
        self.a.insert(0, node)
        self._log(Operation.PA)
        return True

    def pb(self) -> bool:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return False
        self.b.insert(0, self.a.pop(0))
        self._log(Operation.PB)
        return True

    def ra(self) -> bool:
        """Rotate ``a`` so that its top goes to the bottom."""
        if not self._rotate(self.a):
            return False
        self._log(Operation.RA)
        return True

    def rb(self) -> bool:
        """Rotate ``b`` so that its top goes to the bottom."""
        if not self._rotate(self.b):
            return False
        self._log(Operation.RB)
        return True

    def rr(self) -> bool:
        """Do ``ra`` and ``rb`` at once."""
        self._rotate(self.a)
        self._rotate(self.b)
        self._log(Operation.RR)
        return True

    def rra(self) -> bool:
        """Rotate ``a`` so that its bottom comes to the top."""
        if not self._reverse_rotate(self.a):
            return False
        self._log(Operation.RRA)
        return True

    def rrb(self) -> bool:
        """Rotate ``b`` so that its bottom comes to the top."""
        if not self._reverse_rotate(self.b):
            return False
        self._log(Operation.RRB)
        return True

    def rrr(self) -> bool:
        """Do ``rra`` and ``rrb`` at once."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self._log(Operation.RRR)
        return True

    def apply(self, operation: Operation) -> bool:
        """Carry out ``operation`` and report whether it took effect."""
        return getattr(self, Operation(operation).value)()

    def is_sorted(self) -> bool:
        """True when ``b`` is empty and ``a`` is strictly increasing from the top."""
        return not self.b and is_ordered(self.a, 0)

    def values_a(self) -> list[int]:
        """The numbers in ``a``, top first."""
        return [node.nbr for node in self.a]

    def values_b(self) -> list[int]:
        """The numbers in ``b``, top first."""
        return [node.nbr for node in self.b]


def is_ordered(nodes: Sequence[Node], start: int) -> bool:
    """True when the numbers strictly increase going round from ``start``."""
    if not nodes:
        return False
    values = [node.nbr for node in nodes[start:]] + [node.nbr for node in nodes[:start]]
    return all(low < high for low, high in zip(values, values[1:]))


def only_one_section(nodes: Iterable[Node], section: int) -> bool:
    """True when every node belongs to ``section``."""
    return all(node.section == section for node in nodes)