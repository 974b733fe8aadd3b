# Forwards-mode Autodiff
from dataclasses import dataclass
from numbers import Real

import numpy as np
from scipy import special

TWO_OVER_SQRT_PI = 2.0 / np.sqrt(np.pi)


@dataclass(frozen=True)
class DualValue:
    """A value paired with its derivative w.r.t. one seed variable.

    Seed with derivative 1.0 for the variable being differentiated and 0.0
    for everything else. Both parts are kept as numpy float64, so division by
    zero and out-of-domain inputs give inf/nan instead of raising.
    """

    value: float
    derivative: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", np.float64(self.value))
        object.__setattr__(self, "derivative", np.float64(self.derivative))

    # operators
    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return add(self, other)

    def __radd__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return add(other, self)

    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return subtract(self, other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return subtract(other, self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return multiply(self, other)

    def __rmul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return multiply(other, self)

    def __truediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return divide(self, other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return divide(other, self)

    def __pow__(self, exponent):
        if isinstance(exponent, DualValue):
            return NotImplemented
        return power(self, exponent)

    def __neg__(self):
        return DualValue(-self.value, -self.derivative)

    def __pos__(self):
        return self

    # maths, also picked up by numpy ufuncs (np.sin(x) calls x.sin())
    def sin(self):
        return sin(self)

    def cos(self):
        return cos(self)

    def sinh(self):
        return sinh(self)

    def cosh(self):
        return cosh(self)

    def tanh(self):
        return tanh(self)

    def exp(self):
        return exp(self)

    def log(self):
        return log(self)

    def __repr__(self) -> str:
        return f"DualValue(value={float(self.value)!r}, derivative={float(self.derivative)!r})"

    def __str__(self) -> str:
        return str(float(self.value)) + " + " + str(float(self.derivative)) + "E"


def _coerce(other):
    if isinstance(other, DualValue):
        return other
    if isinstance(other, (Real, np.floating, np.integer)):
        return DualValue(other, 0.0)
    return NotImplemented


def _scalar(arg, name: str):
    if isinstance(arg, DualValue):
        raise TypeError(f"{name} must be a plain number, got DualValue")
    return np.float64(arg)


# seeding
def variable(value: float) -> DualValue:
    return DualValue(value, 1.0)


def constant(value: float) -> DualValue:
    return DualValue(value, 0.0)


# arithmetic
def add(a: DualValue, b: DualValue) -> DualValue:
    with np.errstate(all="ignore"):
        return DualValue(a.value + b.value, a.derivative + b.derivative)


def subtract(a: DualValue, b: DualValue) -> DualValue:
    with np.errstate(all="ignore"):
        return DualValue(a.value - b.value, a.derivative - b.derivative)


def multiply(a: DualValue, b: DualValue) -> DualValue:
    with np.errstate(all="ignore"):
        return DualValue(
            a.value * b.value,
            a.derivative * b.value + a.value * b.derivative,
        )


def divide(a: DualValue, b: DualValue) -> DualValue:
    with np.errstate(all="ignore"):
        return DualValue(
            a.value / b.value,
            (a.derivative * b.value - a.value * b.derivative) / (b.value * b.value),
        )


# elementary functions, each applies the chain rule against x.derivative
def sin(x: DualValue) -> DualValue:
    with np.errstate(all="ignore"):
        return DualValue(np.sin(x.value), np.cos(x.value) * x.derivative)


def cos(x: DualValue) -> DualValue:
    with np.errstate(all="ignore"):
        return DualValue(np.cos(x.value), -np.sin(x.value) * x.derivative)


def sinh(x: DualValue) -> DualValue:
    with np.errstate(all="ignore"):
        return DualValue(np.sinh(x.value), np.cosh(x.value) * x.derivative)


def cosh(x: DualValue) -> DualValue:
    with np.errstate(all="ignore"):
        return DualValue(np.cosh(x.value), np.sinh(x.value) * x.derivative)


def tanh(x: DualValue) -> DualValue:
    with np.errstate(all="ignore"):
        t = np.tanh(x.value)
        return DualValue(t, (1 - t ** 2) * x.derivative)


def exp(x: DualValue) -> DualValue:
    with np.errstate(all="ignore"):
        y = np.exp(x.value)
        return DualValue(y, y * x.derivative)


def log_base(x: DualValue, base: float) -> DualValue:
    """Logarithm of ``x`` in a constant ``base``."""
    base = _scalar(base, "base")
    with np.errstate(all="ignore"):
        ln_base = np.log(base)
        return DualValue(
            np.log(x.value) / ln_base,
            x.derivative / (ln_base * x.value),
        )


def log(x: DualValue) -> DualValue:
    with np.errstate(all="ignore"):
        return DualValue(np.log(x.value), x.derivative / x.value)


def power(x: DualValue, exponent: float) -> DualValue:
    """Raise ``x`` to a constant ``exponent``.

    The exponent carries no derivative; differentiating through a variable
    exponent needs the x**y * ln(x) * dy term, which is not provided here.
    """
    exponent = _scalar(exponent, "exponent")
    with np.errstate(all="ignore"):
        return DualValue(
            np.power(x.value, exponent),
            exponent * np.power(x.value, exponent - 1) * x.derivative,
        )


def erf(x: DualValue) -> DualValue:
    with np.errstate(all="ignore"):
        return DualValue(
            special.erf(x.value),
            TWO_OVER_SQRT_PI * np.exp(-x.value * x.value) * x.derivative,
        )


# composition
def _seed(args, wrt: int):
    if not 0 <= wrt < len(args):
        raise IndexError(f"wrt={wrt} out of range for {len(args)} argument(s)")
    return [DualValue(arg, 1.0 if i == wrt else 0.0) for i, arg in enumerate(args)]


def derivative(f, *args, wrt: int = 0) -> DualValue:
    """Evaluate ``f`` with argument ``wrt`` seeded as the variable.

    Returns the output ``DualValue``; its ``derivative`` is the partial
    derivative of ``f`` w.r.t. ``args[wrt]`` at the given point.
    """
    result = f(*_seed(args, wrt))
    if not isinstance(result, DualValue):
        raise TypeError(f"f must return a DualValue, got {type(result).__name__}")
    return result


def gradient(f, *args) -> np.ndarray:
    """Partial derivatives of ``f`` w.r.t. every argument.

    ``f`` is re-evaluated once per argument.
    """
    return np.array([derivative(f, *args, wrt=i).derivative for i in range(len(args))])
