"""Forwards-mode automatic differentiation with dual numbers."""
import logging

from dual_autodiff.forwards import (
    DualValue,
    add,
    constant,
    cos,
    cosh,
    derivative,
    divide,
    erf,
    exp,
    gradient,
    log,
    log_base,
    multiply,
    power,
    sin,
    sinh,
    subtract,
    tanh,
    variable,
)
from dual_autodiff.checks import (
    TaylorCheckResult,
    check_derivative,
    finite_difference,
    taylor_check,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "DualValue",
    "variable",
    "constant",
    "add",
    "subtract",
    "multiply",
    "divide",
    "sin",
    "cos",
    "sinh",
    "cosh",
    "tanh",
    "exp",
    "log",
    "log_base",
    "power",
    "erf",
    "derivative",
    "gradient",
    "TaylorCheckResult",
    "check_derivative",
    "finite_difference",
    "taylor_check",
]
