"""
Operator extension point: registering a rule for a new op tag is all it
takes for the engine to differentiate through it.
"""

import numpy as np
import pytest

from graphad import Node, from_value, backward, grad
from graphad.ops import register_rule, registered_ops
from graphad.ops.arithmetic import _binary


def test_builtin_ops_registered():
    ops = registered_ops()
    for tag in ("leaf", "mul", "add"):
        assert tag in ops


def test_duplicate_registration_rejected():
    with pytest.raises(ValueError):
        register_rule("mul", lambda node, g: [g, g])


def test_new_binary_op_plugs_in():
    register_rule("sub", lambda node, g: [g, -g], replace=True)

    def sub(x, y):
        return _binary(x, y, lambda a, b: a - b, "sub")

    a = from_value(5.0)
    b = from_value(3.0)
    y = sub(a * a, b)  # y = a^2 - b
    backward(y)
    assert y.value == 22.0
    assert a.gradient == 10.0
    assert b.gradient == -1.0


def test_new_unary_op_plugs_in():
    register_rule("exp", lambda node, g: [g * node.value], replace=True)

    def exp(x):
        return Node(np.exp(x.value), (x,), "exp")

    assert np.isclose(grad(lambda x: exp(x * 2.0), 0.5), 2.0 * np.exp(1.0))
