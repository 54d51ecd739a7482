r"""
kleinian_tools
==============

`kleinian_tools` is a small Python package for drawing limit sets of
two-generator Kleinian groups, in the style of Mumford, Series and
Wright's *Indra's Pearls*.

The package is built on top of [numpy](https://numpy.org/) and
[matplotlib](https://matplotlib.org/), and provides modules to:

- compute with Mobius transformations, stored as 2x2 complex matrices
  (`kleinian_tools.mobius`)

- build groups whose commutator is parabolic from a pair of traces,
  using "Grandma's recipe" (`kleinian_tools.grandma`)

- trace the limit set of such a group as a single closed polyline, by
  a depth-first search through reduced words in the generators
  (`kleinian_tools.limit_set`)

- write the result out as SVG, or draw it with matplotlib
  (`kleinian_tools.drawtools`)

## Example usage

To draw the limit set of the group with both traces equal to 2 (an
Apollonian gasket):

```python
from kleinian_tools import limit_set, drawtools

path = limit_set.limit_set(2.0, 2.0, max_level=50)
drawtools.write_svg(path, "gasket.svg")
```

The same picture is produced from the command line by

```
python -m kleinian_tools --ta 2 --tb 2 -o gasket.svg
```

"""

from .base import GeometryError
