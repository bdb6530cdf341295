# graphad/__init__.py
# Reverse-mode automatic differentiation over a graph of scalar nodes

from .core.node import Node, from_value
from .core.engine import topological_order, backward
from .core.errors import GradientArityError, UnknownOperatorError
from .core.seeds import grad, grads, grads_list, value, zero_gradients
from .core.graph_utils import get_graph_stats, print_graph_summary, print_computation_graph

# Operators (importing registers their gradient rules)
from . import ops
from .ops import mul, add, register_rule

__all__ = [
    # Core
    'Node',
    'from_value',
    # Engine
    'topological_order',
    'backward',
    'GradientArityError',
    'UnknownOperatorError',
    # Helpers
    'grad',
    'grads',
    'grads_list',
    'value',
    'zero_gradients',
    # Graph utilities
    'get_graph_stats',
    'print_graph_summary',
    'print_computation_graph',
    # Operators
    'ops',
    'mul',
    'add',
    'register_rule',
]
