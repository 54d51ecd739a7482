"""Work with Mobius transformations of the Riemann sphere in numerical
coordinates.

A Mobius transformation z -> (az + b)/(cz + d) is stored as the 2x2
complex matrix

```
[[a, b],
 [c, d]]
```

The main class is `MobiusTransformation`. Like the objects in the rest
of this package, a `MobiusTransformation` may be *composite*: its
underlying data is an ndarray of shape `(..., 2, 2)`, and every
operation broadcasts over the leading axes.

```python
from kleinian_tools import mobius

parabolic = mobius.MobiusTransformation([[1.0, 1.0],
                                         [0.0, 1.0]])
parabolic @ 2.0j
```

    (1+2j)

Points of the Riemann sphere are complex numbers (or complex
ndarrays). The point at infinity is `kleinian_tools.utils.cp1.INFINITY`.

"""

import numpy as np

from kleinian_tools.base import GeometryError
from kleinian_tools.utils import cp1

#tolerance for deciding whether a trace is "really" +/-2
ERROR_THRESHOLD = 1e-8

def _unwrap(result):
    result = np.asarray(result)
    if result.ndim == 0:
        return complex(result)
    return result

class MobiusTransformation:
    """A Mobius transformation (or a composite object consisting of a
    collection of Mobius transformations).
    """
    def __init__(self, matrix):
        """
        Parameters
        ----------
        matrix : MobiusTransformation or array-like
            Data to construct the transformation from. Array data must
            have shape `(..., 2, 2)`.
        """
        try:
            data = matrix.matrix
        except AttributeError:
            data = matrix

        data = np.asarray(data, dtype="complex128")
        self._assert_geometry_valid(data)
        self.matrix = data

    @classmethod
    def from_entries(cls, a, b, c, d):
        """Build a transformation from its four matrix entries.

        The entries may be scalars or arrays of a common shape.
        """
        a, b, c, d = np.broadcast_arrays(*[np.asarray(x, dtype="complex128")
                                           for x in (a, b, c, d)])
        return cls(np.stack([np.stack([a, b], axis=-1),
                             np.stack([c, d], axis=-1)], axis=-2))

    def _assert_geometry_valid(self, matrix):
        if matrix.ndim < 2 or matrix.shape[-2:] != (2, 2):
            raise GeometryError(
                ("Mobius transformation must be ndarray of 2 x 2"
                 " matrices, got array with shape {}").format(
                     matrix.shape))

    @property
    def shape(self):
        return self.matrix.shape[:-2]

    @property
    def a(self):
        return self.matrix[..., 0, 0]

    @property
    def b(self):
        return self.matrix[..., 0, 1]

    @property
    def c(self):
        return self.matrix[..., 1, 0]

    @property
    def d(self):
        return self.matrix[..., 1, 1]

    def entries(self):
        return self.a, self.b, self.c, self.d

    def __repr__(self):
        return "MobiusTransformation({})".format(self.matrix.__repr__())

    def __str__(self):
        return "MobiusTransformation with data:\n" + self.matrix.__str__()

    def __getitem__(self, item):
        return self.__class__(self.matrix[item])

    def det(self):
        return _unwrap(self.a * self.d - self.b * self.c)

    def trace(self):
        return _unwrap(self.a + self.d)

    def adj(self):
        """Get the adjugate matrix (d, -b, -c, a).

        For a transformation with determinant 1 this is its inverse;
        in general `adj(M) @ M` is `det(M)` times the identity.

        """
        a, b, c, d = self.entries()
        return self.__class__.from_entries(d, -b, -c, a)

    def inv(self):
        """Get the inverse matrix, scaling the adjugate by the
        determinant.

        """
        det = np.expand_dims(np.asarray(self.det()), axis=(-1, -2))
        return self.__class__(self.adj().matrix / det)

    def compose(self, other):
        """Matrix product of this transformation with another one.

        The product acts by first applying `other`, then `self`.
        """
        return self.__class__(self.matrix @ other.matrix)

    def apply(self, z):
        """Apply this transformation to a point (or array of points) on
        the Riemann sphere.

        Points sent to a pole become `INFINITY`, and `INFINITY` is
        sent to `a/c`. No exceptions are raised for poles.

        """
        if self.matrix.ndim == 2 and np.ndim(z) == 0:
            return self._apply_single(complex(z))

        z = np.asarray(z, dtype="complex128")
        a, b, c, d = self.entries()
        at_infinity = cp1.is_infinite(z)

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            finite_z = np.where(at_infinity, 0., z)
            num = a * finite_z + b
            den = c * finite_z + d
            result = num / den
            image_of_infinity = a / c

        result = np.where(den == 0, cp1.INFINITY, result)
        result = np.where(at_infinity,
                          np.where(c == 0, cp1.INFINITY, image_of_infinity),
                          result)
        return _unwrap(result)

    def _apply_single(self, z):
        a, b, c, d = (complex(x) for x in self.matrix.flat)
        if cp1.is_infinite(z):
            if c == 0:
                return cp1.INFINITY
            return a / c

        den = c * z + d
        if den == 0:
            return cp1.INFINITY
        return (a * z + b) / den

    def __matmul__(self, other):
        if isinstance(other, MobiusTransformation):
            return self.compose(other)
        return self.apply(other)

    def fixed_point(self):
        """Find the attracting fixed point of this transformation.

        Returns
        -------
        complex or ndarray
            The attracting fixed point(s), with `INFINITY` standing
            for the point at infinity. See `fixed_points`.

        """
        return _unwrap(self.fixed_points()[..., 0])

    def fixed_points(self):
        """Find both fixed points of this transformation.

        This solves cz^2 + (d - a)z - b = 0. When c is nonzero, the
        sign of the square root of the discriminant is taken opposite
        to the sign of Re(a + d), which picks out the root whose
        eigenvalue has larger modulus (so the derivative there is
        small) as the attracting one.

        When c is exactly zero, infinity is attracting if |a| > |d|;
        otherwise the attracting point is b / (d - a). If a == d as
        well (a translation or the identity), both points returned are
        infinity.

        Returns
        -------
        ndarray
            Array of shape `(..., 2)`. The attracting fixed point comes
            first.
        """
        a, b, c, d = self.entries()
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            sqrt_disc = np.sqrt((d - a)**2 + 4 * b * c)
            sqrt_disc = np.where(np.real(a + d) > 0, -sqrt_disc, sqrt_disc)
            attracting = (a - d - sqrt_disc) / (2 * c)
            repelling = (a - d + sqrt_disc) / (2 * c)
            finite_pt = b / (d - a)

        infinity_attracts = np.abs(a) > np.abs(d)
        ut_attracting = np.where(infinity_attracts | (a == d),
                                 cp1.INFINITY, finite_pt)
        ut_repelling = np.where(infinity_attracts & (a != d),
                                finite_pt, cp1.INFINITY)

        attracting = np.where(c == 0, ut_attracting, attracting)
        repelling = np.where(c == 0, ut_repelling, repelling)

        return np.stack([attracting, repelling], axis=-1)

    def is_parabolic(self, tolerance=ERROR_THRESHOLD):
        """Check whether trace^2 = 4 det, up to `tolerance`."""
        tr = np.asarray(self.trace())
        det = np.asarray(self.det())
        res = np.abs(tr * tr - 4 * det) < tolerance
        if res.ndim == 0:
            return bool(res)
        return res

def identity():
    """Get the identity transformation (1, 0, 0, 1)."""
    return MobiusTransformation(np.identity(2))

def mul(m1, m2):
    return m1.compose(m2)

def adj(mat):
    return mat.adj()

def apply(mat, z):
    return mat.apply(z)

def fixed_point(mat):
    return mat.fixed_point()

def commutator(g, h):
    """Get g h g^-1 h^-1, using adjugates as inverses.

    The adjugate is only the inverse for unit-determinant
    transformations.

    """
    return g @ h @ g.adj() @ h.adj()
