# graphad/core/engine.py
from __future__ import annotations
import warnings
import numpy as np
from typing import Any, Dict, List, Optional

from .node import Node
from .numeric import accumulate, one_like
from .errors import GradientArityError
from ..ops.registry import local_gradients


def topological_order(root: Node) -> List[Node]:
    """
    Depth-first post-order from `root`: every reachable node exactly once,
    children strictly before parents, root last.

    Nodes reachable along several paths (shared sub-expressions) are guarded by
    a visited set keyed by identity. Iterative so that long chains do not hit
    the interpreter's recursion limit.
    """
    order: List[Node] = []
    visited = set()
    # (node, index of the next child to visit)
    stack = [(root, 0)]
    visited.add(id(root))
    while stack:
        node, i = stack[-1]
        children = node.children
        if i < len(children):
            stack[-1] = (node, i + 1)
            child = children[i]
            if id(child) not in visited:
                visited.add(id(child))
                stack.append((child, 0))
        else:
            stack.pop()
            order.append(node)
    return order


def backward(root: Node, *, seed: Optional[Any] = None, verbose: bool = False) -> None:
    """
    Run a single reverse pass from `root`.

    Args:
        root: the node to differentiate.
        seed: adjoint planted at the root; defaults to the multiplicative
              identity shaped like root.value.
        verbose: print one trace line per node as the sweep visits it.

    Notes:
        - Gradients are additive: each call adds d(root)/d(node) * seed to every
          reachable node's `gradient`. Nothing is reset; calling twice doubles.
        - Adjoints for the current pass are kept in a local table so that
          gradient left on intermediate nodes by an earlier pass is never
          propagated a second time.
        - A node is finalised when the reverse sweep reaches it: all of its
          parents come later in topological order and have already pushed.
    """
    if seed is None:
        seed = one_like(root.value)
    elif np.shape(seed) != np.shape(root.value):
        warnings.warn(
            f"seed shape {np.shape(seed)} differs from root value shape "
            f"{np.shape(root.value)}; it will be broadcast",
            RuntimeWarning,
            stacklevel=2,
        )

    order = topological_order(root)
    adjoints: Dict[int, Any] = {id(root): seed}

    if verbose:
        print(f"backward: {len(order)} nodes, seed={seed!r}")

    # Backward sweep
    for node in reversed(order):
        # every reachable node has at least one parent edge that pushed into it
        g = adjoints.pop(id(node))
        if node.requires_grad:
            node.gradient = accumulate(node.gradient, g)
        if verbose:
            print(f"  {node.op_tag:6s} value={node.value!r} adjoint={g!r}")

        contributions = local_gradients(node, g)
        if len(contributions) != len(node.children):
            raise GradientArityError(node, len(contributions))
        for child, c in zip(node.children, contributions):
            prev = adjoints.get(id(child))
            adjoints[id(child)] = c if prev is None else accumulate(prev, c)
