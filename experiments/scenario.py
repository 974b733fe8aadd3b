# Differentiates z1 = x1*exp(x0) + x2*x0**2 and z2 = x2*exp(x0) - x1*x0**2 w.r.t. x0
import numpy as np

from dual_autodiff import DualValue, exp, power


def run():
    x = [DualValue(np.pi, 1), DualValue(2, 0), DualValue(1, 0)]  # x = [(PI, 1), (2, 0), (1, 0)]

    y1 = exp(x[0])
    y2 = power(x[0], 2)
    y3 = x[1] * y1
    y4 = x[2] * y2
    y5 = x[1] * y2
    y6 = x[2] * y1

    z1 = y3 + y4
    z2 = y6 - y5

    return x, [z1, z2]


def main():
    x, z = run()
    print("x.val = [" + ", ".join(str(float(item.value)) for item in x) + "]")
    print("x.dval = [" + ", ".join(str(float(item.derivative)) for item in x) + "]")
    print("z = [" + ", ".join(str(float(item.value)) for item in z) + "]")
    print("[dz1/dx0, dz2/dx0] = [" + ", ".join(str(float(item.derivative)) for item in z) + "]")


if __name__ == "__main__":
    main()
