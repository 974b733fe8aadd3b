# Checking forwards-mode derivatives against finite differences
import logging
from dataclasses import dataclass

import matplotlib.pyplot as plt
import numpy as np

from dual_autodiff.forwards import DualValue, constant, derivative, gradient

logger = logging.getLogger(__name__)

DEFAULT_STEP = 1e-6
DEFAULT_MAX_ITERS = 32
DEFAULT_RTOL = 1e-6
DEFAULT_ATOL = 1e-8


def _evaluate(f, args) -> float:
    result = f(*[constant(arg) for arg in args])
    if not isinstance(result, DualValue):
        raise TypeError(f"f must return a DualValue, got {type(result).__name__}")
    return float(result.value)


def finite_difference(f, *args, wrt: int = 0, h: float = DEFAULT_STEP) -> float:
    """Central difference approximation of df/d(args[wrt])."""
    if h <= 0:
        raise ValueError(f"h must be positive, got {h}")
    if not 0 <= wrt < len(args):
        raise IndexError(f"wrt={wrt} out of range for {len(args)} argument(s)")

    forward = list(args)
    backward = list(args)
    forward[wrt] = args[wrt] + h
    backward[wrt] = args[wrt] - h
    return (_evaluate(f, forward) - _evaluate(f, backward)) / (2 * h)


def check_derivative(
    f,
    *args,
    wrt: int = 0,
    h: float = DEFAULT_STEP,
    rtol: float = DEFAULT_RTOL,
    atol: float = DEFAULT_ATOL,
) -> bool:
    ad = float(derivative(f, *args, wrt=wrt).derivative)
    fd = finite_difference(f, *args, wrt=wrt, h=h)
    ok = bool(np.isclose(ad, fd, rtol=rtol, atol=atol))
    if not ok:
        logger.warning("derivative mismatch wrt=%d: dual=%.12g finite=%.12g", wrt, ad, fd)
    return ok


@dataclass(frozen=True, eq=False)
class TaylorCheckResult:
    """Errors of the zeroth and first order Taylor expansions per step size.

    ``err0`` should shrink linearly with the step and ``err1`` quadratically
    when the derivative is right.
    """

    value: float
    steps: np.ndarray
    err0: np.ndarray
    err1: np.ndarray

    def convergence_order(self, min_index: int = 4) -> float:
        """Log-log slope of ``err1`` over the steps above roundoff.

        Returns nan when fewer than two usable points remain, e.g. for a
        function that is exactly linear along the direction.
        """
        floor = 1e3 * np.finfo(float).eps * max(1.0, abs(self.value))
        usable = np.arange(len(self.steps)) >= min_index
        usable &= np.isfinite(self.err1) & (self.err1 > floor)
        if np.count_nonzero(usable) < 2:
            return float("nan")
        slope, _ = np.polyfit(np.log(self.steps[usable]), np.log(self.err1[usable]), 1)
        return float(slope)

    def plot(self, ax=None):
        ax = ax if ax is not None else plt.gca()
        ax.loglog(self.steps, self.err0, linewidth=3)
        ax.loglog(self.steps, self.err1, linewidth=3)
        ax.legend([r'$\|f(x) - T_0(x)\|$', r'$\|f(x)-T_1(x)\|$'], fontsize=15)
        ax.tick_params(labelsize=15)
        return ax


def taylor_check(
    f,
    *args,
    direction=None,
    max_iters: int = DEFAULT_MAX_ITERS,
    seed=None,
    plot: bool = False,
) -> TaylorCheckResult:
    """Taylor remainder test of the dual-number gradient of ``f``.

    Steps along ``direction`` (random normal if omitted) with ``h = 2**-i``
    and compares f(x + h*v) to f(x) and to f(x) + h * grad(f) . v.
    """
    if max_iters < 2:
        raise ValueError(f"max_iters must be at least 2, got {max_iters}")

    x = np.asarray(args, dtype=float)
    if direction is None:
        v = np.random.default_rng(seed).standard_normal(len(x))
    else:
        v = np.asarray(direction, dtype=float)
        if v.shape != x.shape:
            raise ValueError(f"direction has shape {v.shape}, expected {x.shape}")

    T0 = _evaluate(f, x)
    T0_grad = gradient(f, *x)

    h = np.zeros(max_iters)
    err0 = np.zeros(max_iters)
    err1 = np.zeros(max_iters)

    for i in range(max_iters):
        h[i] = 2**(-i)  # halve our stepsize every time

        fv = _evaluate(f, x + h[i] * v)
        T1 = T0 + h[i] * np.dot(T0_grad, v)

        err0[i] = abs(fv - T0)  # this error should be linear
        err1[i] = abs(fv - T1)  # this error should be quadratic

        logger.debug("h: %.3e, \t err0: %.3e, \t err1: %.3e", h[i], err0[i], err1[i])

    result = TaylorCheckResult(value=T0, steps=h, err0=err0, err1=err1)
    if plot:
        result.plot()
    return result
