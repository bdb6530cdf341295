"""
Computation graph utilities.
Print and analyse the structure of the graph reachable from a root node.
"""

import numpy as np
from typing import Dict
from collections import Counter

from .engine import topological_order


def get_graph_stats(root) -> Dict:
    """
    Collect graph statistics without printing.

    Fan-in is a node's number of operands; fan-out counts the parent edges
    pointing at it (a*a gives `a` a fan-out of 2).

    Returns:
        dict with nodes, edges, leaves, fan-in/fan-out extremes and averages,
        and an op-tag histogram.
    """
    order = topological_order(root)
    n_nodes = len(order)
    position = {id(node): i for i, node in enumerate(order)}

    fan_ins = [len(node.children) for node in order]
    fan_outs = [0] * n_nodes
    for node in order:
        for child in node.children:
            fan_outs[position[id(child)]] += 1

    op_counter = Counter(node.op_tag for node in order)

    return {
        'nodes': n_nodes,
        'edges': sum(fan_ins),
        'leaves': sum(1 for node in order if node.is_leaf),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def print_graph_summary(root) -> Dict:
    """
    Print a summary of the graph reachable from `root`.

    Returns:
        the same dict as get_graph_stats
    """
    stats = get_graph_stats(root)

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / stats['nodes']
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")
    print("="*70 + "\n")

    return stats


def print_computation_graph(root, max_nodes: int = 20) -> None:
    """
    Print the graph in topological order, one node per line.

    Args:
        root: node whose graph is printed
        max_nodes: print at most this many nodes
    """
    if max_nodes < 1:
        raise ValueError(f"max_nodes must be >= 1, got {max_nodes}")

    order = topological_order(root)
    position = {id(node): i for i, node in enumerate(order)}

    print("\n" + "="*70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("="*70)

    for i, node in enumerate(order[:max_nodes]):
        label = f" {node.name}" if node.name else ""
        if node.children:
            child_info = ", ".join(f"Node{position[id(c)]}" for c in node.children)
            print(f"Node {i:4d}: {node.op_tag:8s}{label} value={node.value!r} "
                  f"grad={node.gradient!r} <- [{child_info}]")
        else:
            print(f"Node {i:4d}: {node.op_tag:8s}{label} value={node.value!r} "
                  f"grad={node.gradient!r} [leaf/input]")

    if len(order) > max_nodes:
        print(f"... ({len(order) - max_nodes} more nodes)")

    print("="*70 + "\n")
