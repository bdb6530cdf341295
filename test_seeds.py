"""
Helpers built on top of the engine: grad/grads, gradient reset and the
graph printers.
"""

import numpy as np

from graphad import (
    from_value, backward, grad, grads, grads_list, value, zero_gradients,
    get_graph_stats, print_graph_summary, print_computation_graph,
)


def test_grad_single_input():
    assert grad(lambda x: x * x * 3.0, 2.0) == 12.0


def test_grad_constant_output():
    assert grad(lambda x: 7.0, 2.0) == 0.0


def test_grads_dict_and_list():
    out = grads(lambda v: v["a"] * v["b"] + v["a"], {"a": 2.0, "b": 3.0})
    assert list(out) == ["a", "b"]
    assert out == {"a": 4.0, "b": 2.0}

    assert grads_list(lambda xs: xs[0] * xs[0] + 3 * xs[1], [2.0, 4.0]) == [4.0, 3.0]


def test_value_passthrough():
    assert value(from_value(3)) == 3
    assert value(3) == 3


def test_zero_gradients_then_fresh_pass():
    a = from_value(2)
    b = from_value(3)
    d = (a * b) * a
    backward(d)
    zero_gradients(d)
    assert a.gradient == 0 and b.gradient == 0 and d.gradient == 0
    backward(d)
    assert a.gradient == 12
    assert b.gradient == 4


def test_zero_gradients_arrays():
    a = from_value(np.array([1.0, 2.0]))
    c = a * a
    backward(c)
    zero_gradients(c)
    np.testing.assert_array_equal(a.gradient, [0.0, 0.0])


def test_graph_stats_shared_node():
    a = from_value(2)
    b = from_value(3)
    d = (a * b) * a
    stats = get_graph_stats(d)
    assert stats["nodes"] == 4
    assert stats["edges"] == 4
    assert stats["leaves"] == 2
    assert stats["max_fan_in"] == 2
    assert stats["max_fan_out"] == 2  # `a` feeds both multiplies
    assert stats["operations"] == {"leaf": 2, "mul": 2}


def test_printers(capsys):
    a = from_value(2, name="a")
    d = (a * 3) * a
    backward(d, verbose=True)
    stats = print_graph_summary(d)
    print_computation_graph(d, max_nodes=2)
    out = capsys.readouterr().out
    assert "backward: 4 nodes" in out
    assert "COMPUTATION GRAPH SUMMARY" in out
    assert "Node    0: leaf     a" in out
    assert "... (2 more nodes)" in out
    assert stats["nodes"] == 4
