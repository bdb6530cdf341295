# graphad/ops/registry.py
#-----------------------------------------------------------------------------
# Local gradient rules, keyed by op tag. A rule receives the node and the
# upstream gradient d(root)/d(node) for the current pass, and returns one
# contribution per child, in the same order as `node.children`.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, List, Sequence

from ..core.errors import UnknownOperatorError

GradientRule = Callable[[Any, Any], Sequence[Any]]

_RULES: Dict[str, GradientRule] = {}


def register_rule(tag: str, rule: GradientRule, *, replace: bool = False) -> GradientRule:
    """
    Register the local gradient rule for op `tag`.

    Adding a new operator only needs a constructor that builds the Node with a
    fixed child order plus one call to this function; the engine is untouched.
    """
    if tag in _RULES and not replace:
        raise ValueError(f"a gradient rule for op {tag!r} is already registered")
    _RULES[tag] = rule
    return rule


def registered_ops() -> List[str]:
    return sorted(_RULES)


def local_gradients(node, upstream) -> Sequence[Any]:
    try:
        rule = _RULES[node.op_tag]
    except KeyError:
        raise UnknownOperatorError(node.op_tag) from None
    return rule(node, upstream)


# Leaves have no operands to propagate to.
register_rule("leaf", lambda node, g: [])
