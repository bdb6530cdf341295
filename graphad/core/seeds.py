# graphad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the output and let gradients grow
# backwards through the graph. Helpers here live outside the engine: they
# build fresh leaves, run one backward pass and read the gradients off.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List

from .node import Node, from_value
from .numeric import zero_like
from .engine import backward, topological_order


def value(x: Any) -> Any:
    """Return the numeric value of a Node; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Node) else x


def zero_gradients(root: Node) -> None:
    """
    Reset the gradient of every node reachable from `root` to the additive
    identity. `backward` never does this itself.
    """
    for node in topological_order(root):
        node.gradient = zero_like(node.value)


def _run(y: Any) -> None:
    # A raw (non-Node) output does not depend on the inputs: gradients stay zero.
    if isinstance(y, Node):
        backward(y)


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Node], Any], x0: Any) -> Any:
    """
    Gradient of y=f(x) at x0 (single input), from one reverse pass over a
    freshly built graph.
    """
    x = from_value(x0, name="x")
    _run(f(x))
    return x.gradient


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Node]], Any], inputs: Dict[str, Any]) -> Dict[str, Any]:
    """
    Gradient of y=f(vars) w.r.t. ALL inputs (dict form), from ONE reverse pass.

    Parameters
    ----------
    f       : function taking a dict {name: Node} and returning a Node
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: numeric}  # gradients in the same key order as `inputs`
    """
    xs = {k: from_value(v, name=k) for k, v in inputs.items()}
    _run(f(xs))
    return {k: xs[k].gradient for k in inputs}


def grads_list(f: Callable[[List[Node]], Any], x0_list: Iterable[Any]) -> List[Any]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a
    list of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs = [from_value(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    _run(f(xs))
    return [x.gradient for x in xs]
