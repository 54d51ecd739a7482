"""Trace the limit set of a two-generator Kleinian group with a
parabolic commutator, as a single polyline.

The limit set is traced by a depth-first search through reduced words
in the generators. Children of each letter are visited in a fixed
"left, straight, right" order (see
`kleinian_tools.representation.NEIGHBORS`), so consecutive leaves of
the search give neighboring points of the limit set. A word is not
extended any further once the limit points at either end of the piece
of limit set it represents are closer than `EPSILON`, or once the
maximum depth is reached.

```python
from kleinian_tools import limit_set

path = limit_set.limit_set(2.0, 2.0, max_level=50)
path.points
```

Points are emitted through a *path builder*: any object with
`move_to(x, y)` and `line_to(x, y)` methods. `PolylinePath` is the
builder used by default.

"""

import logging

import numpy as np
from matplotlib.path import Path

from kleinian_tools import mobius
from kleinian_tools.representation import KleinianRepresentation, SEED

logger = logging.getLogger(__name__)

#below drawing resolution, in world units
EPSILON = 1e-3

DEFAULT_MAX_LEVEL = 50

# traversing the four sides of the fundamental commutator square in
# this order gives a closed curve
TOP_LEVEL_ORDER = ("a", "B", "A", "b")

class PolylinePath:
    """Accumulate `move_to`/`line_to` commands as vertices and
    matplotlib path codes.
    """
    def __init__(self):
        self._vertices = []
        self._codes = []

    def move_to(self, x, y):
        self._vertices.append((x, y))
        self._codes.append(Path.MOVETO)

    def line_to(self, x, y):
        self._vertices.append((x, y))
        self._codes.append(Path.LINETO)

    def __len__(self):
        return len(self._vertices)

    @property
    def vertices(self):
        return np.array(self._vertices, dtype="float64").reshape((-1, 2))

    @property
    def codes(self):
        return np.array(self._codes, dtype=Path.code_type)

    @property
    def points(self):
        """Vertices of the path, as complex numbers."""
        vertices = self.vertices
        return vertices[:, 0] + vertices[:, 1] * 1j

    def to_mpl_path(self):
        return Path(self.vertices, self.codes)

    def svg_data(self):
        """Get the `d` attribute of an SVG path element for this path."""
        commands = []
        for (x, y), code in zip(self._vertices, self._codes):
            letter = "M" if code == Path.MOVETO else "L"
            commands.append("{}{!r},{!r}".format(letter, float(x), float(y)))
        return " ".join(commands)

class LimitSetTraversal:
    """Mutable state for tracing a limit set: the generators, the path
    being built, and the last point plotted.
    """
    def __init__(self, representation, path=None, epsilon=EPSILON):
        """
        Parameters
        ----------
        representation : KleinianRepresentation
            Generators of the group.
        path : path builder
            Object receiving `move_to` and `line_to` calls. If `None`,
            use a new `PolylinePath`.
        epsilon : float
            Stop subdividing once consecutive limit points are closer
            than this.
        """
        if epsilon <= 0:
            raise ValueError("epsilon must be positive, got {}".format(epsilon))

        if path is None:
            path = PolylinePath()

        self.representation = representation
        self.path = path
        self.epsilon = epsilon
        self.last_point = SEED
        self.segments = 0

    def move(self, z):
        self.path.move_to(z.real, z.imag)
        self.last_point = z

    def line(self, z):
        self.path.line_to(z.real, z.imag)
        self.last_point = z
        self.segments += 1

    def branch(self, level, last, prefix):
        """Trace the part of the limit set lying under the word `prefix`
        followed by `last`.

        Parameters
        ----------
        level : int
            Remaining recursion depth.
        last : string
            Last letter of the word being extended.
        prefix : MobiusTransformation
            Image of the word before `last`.

        """
        rep = self.representation
        prefix = prefix @ rep.generator(last)
        z = prefix @ rep.endpoint(last)

        diff = self.last_point - z
        if (level <= 0 or
            diff.real * diff.real + diff.imag * diff.imag <
            self.epsilon * self.epsilon):
            self.line(z)
            return

        for child in rep.children(last):
            self.branch(level - 1, child, prefix)

    def limit_set(self, max_level=DEFAULT_MAX_LEVEL):
        """Trace the whole limit set.

        Parameters
        ----------
        max_level : int
            Maximum length of a word in the search.

        Returns
        -------
        path builder
            The path passed to this object on construction, with the
            traced curve appended.

        """
        if max_level < 1:
            raise ValueError(
                "max_level must be at least 1, got {}".format(max_level)
            )

        start = mobius.identity()
        self.move(SEED)
        for letter in TOP_LEVEL_ORDER:
            self.branch(max_level - 1, letter, start)

        logger.debug("traced limit set with %d segments (max_level=%d,"
                     " epsilon=%g)", self.segments, max_level, self.epsilon)

        return self.path

def limit_set(ta, tb, max_level=DEFAULT_MAX_LEVEL, epsilon=EPSILON,
              path=None):
    """Trace the limit set of the group with generator traces `ta` and
    `tb` given by Grandma's recipe.

    Returns
    -------
    path builder
        `path` (or a new `PolylinePath`) holding the traced curve.

    """
    rep = KleinianRepresentation.from_traces(ta, tb)
    traversal = LimitSetTraversal(rep, path=path, epsilon=epsilon)
    return traversal.limit_set(max_level)
