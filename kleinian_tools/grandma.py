"""Build two-generator Kleinian groups with a parabolic commutator,
following "Grandma's recipe" from Mumford, Series and Wright's *Indra's
Pearls*.

Given complex traces `ta` and `tb`, `grandma(ta, tb)` returns
generators `a` and `b` with `tr(a) = ta`, `tr(b) = tb`, and
`tr(a b a^-1 b^-1) = -2`. The point 1 is the fixed point of the
commutator.

```python
from kleinian_tools import grandma

a, b = grandma.grandma(2.0, 2.0)
```

No attempt is made to check that the resulting group is discrete.

"""

import numpy as np

from kleinian_tools.base import GeometryError
from kleinian_tools.mobius import MobiusTransformation

def trace_ab(ta, tb):
    """Get the trace of the product ab, as the smaller root of
    x^2 - ta tb x + ta^2 + tb^2 = 0.

    """
    ta = np.complex128(ta)
    tb = np.complex128(tb)
    with np.errstate(all="ignore"):
        disc = ta * ta * tb * tb - 4. * ta * ta - 4. * tb * tb
        return complex(0.5 * (ta * tb - np.sqrt(disc)))

def grandma(ta, tb):
    """Get generators for a group with a parabolic commutator.

    Parameters
    ----------
    ta, tb : complex
        Traces of the two generators.

    Returns
    -------
    tuple
        Pair `(a, b)` of unit-determinant `MobiusTransformation`
        objects.

    Raises
    ------
    GeometryError
        If the traces are degenerate, so that the recipe divides by
        zero.

    """
    i = 1j
    ta = np.complex128(ta)
    tb = np.complex128(tb)
    tab = np.complex128(trace_ab(ta, tb))

    with np.errstate(all="ignore"):
        scale = (tab - 2.) * tb / (tb * tab - 2. * ta + 2. * i * tab)

        a = np.array([
            [ta / 2.,
             (ta * tab - 2. * tb + 4. * i) / ((2. * tab + 4.) * scale)],
            [scale * (ta * tab - 2. * tb - 4. * i) / (2. * tab - 4.),
             ta / 2.]
        ])
        b = np.array([
            [(tb - 2. * i) / 2., tb / 2.],
            [tb / 2., (tb + 2. * i) / 2.]
        ])

    if not (np.all(np.isfinite(a)) and np.all(np.isfinite(b))):
        raise GeometryError(
            "Degenerate traces ta={}, tb={}: Grandma's recipe does not"
            " give finite generators".format(complex(ta), complex(tb))
        )

    return MobiusTransformation(a), MobiusTransformation(b)
