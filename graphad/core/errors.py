# graphad/core/errors.py


class GradientArityError(RuntimeError):
    """A local gradient rule returned a different number of contributions than
    the node has children. This is a bug in the operator, not in user input."""

    def __init__(self, node, n_contrib: int):
        self.node = node
        self.n_contrib = n_contrib
        super().__init__(
            f"gradient rule for op {node.op_tag!r} returned {n_contrib} "
            f"contribution(s) for {len(node.children)} child(ren)"
        )


class UnknownOperatorError(KeyError):
    """No local gradient rule is registered for a node's op tag."""
