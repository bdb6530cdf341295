# graphad/ops/__init__.py

# Ensure gradient rules are registered
from . import registry
from . import arithmetic

# Convenience re-exports so users can do: from graphad.ops import mul, add
from .arithmetic import mul, add
from .registry import register_rule, registered_ops, local_gradients

__all__ = [
    "mul", "add",
    "register_rule", "registered_ops", "local_gradients",
]
