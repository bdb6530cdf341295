# graphad/ops/arithmetic.py
from ..core.node import Node, as_node
from .registry import register_rule


def _binary(x, y, f, tag):
    """
    Generic binary primitive:
      - lifts raw operands to leaf nodes
      - computes out.value = f(x.value, y.value)
      - attaches (x, y) as children, in that order
    The matching gradient rule is registered under `tag`.
    """
    x = as_node(x)
    y = as_node(y)
    return Node(f(x.value, y.value), (x, y), tag)


def mul(x, y): return _binary(x, y, lambda a, b: a * b, "mul")
def add(x, y): return _binary(x, y, lambda a, b: a + b, "add")


def _mul_rule(node, g):
    # d(a*b)/da = b, d(a*b)/db = a
    a, b = node.children
    return [g * b.value, g * a.value]


def _add_rule(node, g):
    return [g, g]


register_rule("mul", _mul_rule)
register_rule("add", _add_rule)
