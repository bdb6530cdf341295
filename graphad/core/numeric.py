# graphad/core/numeric.py
#-----------------------------------------------------------------------------
# The only things the engine needs from a value type: a zero, a one, `+` and
# `*`. Python numbers, numpy scalars and numpy arrays (elementwise) qualify.
#-----------------------------------------------------------------------------
from __future__ import annotations
import numbers
import numpy as np
from typing import Any


def is_numeric(v: Any) -> bool:
    """True for numbers.Number, numpy scalars and numeric ndarrays (bool excluded)."""
    if isinstance(v, (bool, np.bool_)):
        return False
    if isinstance(v, np.ndarray):
        return v.dtype.kind in "iufc"
    return isinstance(v, (numbers.Number, np.generic))


def check_numeric(v: Any) -> Any:
    if not is_numeric(v):
        raise TypeError(
            f"graphad only accepts numeric values (Number, numpy scalar, ndarray), "
            f"but got {type(v)}"
        )
    return v


def zero_like(v: Any) -> Any:
    """Additive identity of the same type (and shape) as v."""
    if isinstance(v, np.ndarray):
        return np.zeros_like(v)
    return type(v)(0)


def one_like(v: Any) -> Any:
    """Multiplicative identity of the same type (and shape) as v."""
    if isinstance(v, np.ndarray):
        return np.ones_like(v)
    return type(v)(1)


def accumulate(acc: Any, inc: Any) -> Any:
    # Out-of-place: an ndarray held by a node is never written through an alias.
    return acc + inc
