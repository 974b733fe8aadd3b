import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from dual_autodiff import DualValue


@pytest.fixture
def scenario_inputs():
    """x = [(PI, 1), (2, 0), (1, 0)], differentiating w.r.t. x0."""
    return [DualValue(np.pi, 1.0), DualValue(2.0, 0.0), DualValue(1.0, 0.0)]
