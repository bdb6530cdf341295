# graphad/core/__init__.py

"""
Core public API for graphad.

Exports:
    Node              : A vertex of the computation graph (value, gradient, children).
    from_value        : Lift a raw numeric value into a leaf Node.
    topological_order : Children-before-parents ordering of a graph, root last.
    backward          : Run a single reverse pass, accumulating gradients.
    zero_gradients    : Reset all gradients reachable from a root to zero.
    grad              : Convenience: gradient of f at a single input.
    value             : Convenience: extract the primal value from a Node.
"""

from .node import Node, from_value, as_node
from .engine import topological_order, backward
from .errors import GradientArityError, UnknownOperatorError
from .seeds import grad, grads, grads_list, value, zero_gradients

__all__ = [
    "Node", "from_value", "as_node",
    "topological_order", "backward",
    "GradientArityError", "UnknownOperatorError",
    "grad", "grads", "grads_list", "value", "zero_gradients",
]
