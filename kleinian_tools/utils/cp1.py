"""Helpers for points on CP^1 (the Riemann sphere), viewed in the
affine chart containing the complex plane.

The point at infinity is stored as a complex number with an infinite
real part.

"""

import numpy as np

INFINITY = complex(np.inf, 0.0)

def is_infinite(z):
    z = np.asarray(z)
    return np.isinf(z.real) | np.isinf(z.imag)

def c_to_r(cx_array):
    cx = np.asarray(cx_array, dtype="complex128")
    return np.stack([cx.real, cx.imag], axis=-1)
