# graphad/core/node.py
from __future__ import annotations
from typing import Any, Optional, Tuple

from .numeric import check_numeric, zero_like


class Node:
    """
    One vertex of the computation graph.

    Attributes
    ----------
    value : T
        Forward result, fixed at construction (read-only).
    gradient : T
        Accumulator for d(root)/d(this node). Starts at the additive identity
        and is only ever incremented by `backward`.
    children : tuple[Node, ...]
        Operands that produced this node, in the order the op's gradient rule
        expects. Empty for leaves. A child may be shared by several parents.
    op_tag : str
        Selects the local gradient rule ("leaf", "mul", "add", ...).
    requires_grad : bool
        If False the node is a constant: backward passes through it but never
        accumulates into its `gradient`.
    name : Optional[str]
        Optional debug/pretty-print name.
    """

    __array_ufunc__ = None  # make numpy defer to __rmul__/__radd__ below

    def __init__(self, value: Any, children: Tuple["Node", ...] = (), op_tag: str = "leaf",
                 *, requires_grad: bool = True, name: Optional[str] = None):
        self._value = check_numeric(value)
        self._children = tuple(children)
        self._op_tag = op_tag
        self.gradient = zero_like(value)
        self.requires_grad = requires_grad
        self.name = name

    @property
    def value(self):
        return self._value

    @property
    def children(self) -> Tuple["Node", ...]:
        return self._children

    @property
    def op_tag(self) -> str:
        return self._op_tag

    @property
    def is_leaf(self) -> bool:
        return not self._children

    def __repr__(self):
        return (f"Node(value={self._value!r}, gradient={self.gradient!r}, "
                f"op={self._op_tag!r}, name={self.name!r})")

    # Operator overloading for arithmetic operations
    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)


def from_value(v: Any, *, requires_grad: bool = True, name: Optional[str] = None) -> Node:
    """Lift a raw numeric value into a leaf node (zero gradient, no children)."""
    return Node(v, requires_grad=requires_grad, name=name)


def as_node(x: Any) -> Node:
    """Return x if it is already a Node; otherwise lift it with `from_value`."""
    return x if isinstance(x, Node) else from_value(x)
