"""
End-to-end scenario: differentiate

    z1 = x1 * exp(x0) + x2 * x0**2
    z2 = x2 * exp(x0) - x1 * x0**2

w.r.t. x0 at x0 = pi, x1 = 2, x2 = 1.
"""

import math
import runpy
from pathlib import Path

import pytest

from dual_autodiff import derivative, exp, power

E_PI = math.exp(math.pi)
SCENARIO_SCRIPT = Path(__file__).resolve().parents[2] / "experiments" / "scenario.py"


def compose(x):
    y1 = exp(x[0])
    y2 = power(x[0], 2)
    y3 = x[1] * y1
    y4 = x[2] * y2
    y5 = x[1] * y2
    y6 = x[2] * y1
    return y1, y2, y3 + y4, y6 - y5


class TestScenario:
    """Reference values of the composed expressions"""

    def test_intermediate_values(self, scenario_inputs):
        y1, y2, _, _ = compose(scenario_inputs)
        assert y1.value == pytest.approx(23.1407, abs=1e-4)
        assert y2.value == pytest.approx(9.8696, abs=1e-4)
        assert y1.derivative == pytest.approx(E_PI, rel=1e-12)
        assert y2.derivative == pytest.approx(2 * math.pi, rel=1e-12)

    def test_output_values(self, scenario_inputs):
        _, _, z1, z2 = compose(scenario_inputs)
        assert z1.value == pytest.approx(2 * E_PI + math.pi**2, rel=1e-12)
        assert z2.value == pytest.approx(E_PI - 2 * math.pi**2, rel=1e-12)
        assert z1.value == pytest.approx(56.1510, abs=1e-4)
        assert z2.value == pytest.approx(3.4015, abs=1e-4)

    def test_output_derivatives(self, scenario_inputs):
        _, _, z1, z2 = compose(scenario_inputs)
        assert z1.derivative == pytest.approx(2 * E_PI + 2 * math.pi, rel=1e-12)
        assert z2.derivative == pytest.approx(E_PI - 4 * math.pi, rel=1e-12)
        assert z1.derivative == pytest.approx(52.5646, abs=1e-4)
        assert z2.derivative == pytest.approx(10.5743, abs=1e-4)

    def test_inputs_untouched(self, scenario_inputs):
        before = list(scenario_inputs)
        compose(scenario_inputs)
        assert scenario_inputs == before

    def test_other_seeds(self):
        # dz1/dx1 = exp(x0), dz2/dx2 = exp(x0)
        z1 = derivative(lambda x0, x1, x2: compose([x0, x1, x2])[2], math.pi, 2.0, 1.0, wrt=1)
        z2 = derivative(lambda x0, x1, x2: compose([x0, x1, x2])[3], math.pi, 2.0, 1.0, wrt=2)
        assert z1.derivative == pytest.approx(E_PI, rel=1e-12)
        assert z2.derivative == pytest.approx(E_PI, rel=1e-12)

    def test_driver_script(self, capsys):
        runpy.run_path(str(SCENARIO_SCRIPT), run_name="__main__")
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 4
        assert lines[0].startswith("x.val = [3.14159")
        assert lines[1] == "x.dval = [1.0, 0.0, 0.0]"
        assert lines[2].startswith("z = [56.15")
        assert lines[3].startswith("[dz1/dx0, dz2/dx0] = [52.56")
