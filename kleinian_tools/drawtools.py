"""Output traced limit sets, either as a bare SVG document or as a
[matplotlib](https://matplotlib.org/) figure.

```python
from kleinian_tools import limit_set, drawtools

path = limit_set.limit_set(2.0, 2.0)

# a single SVG path element
drawtools.write_svg(path, "gasket.svg")

# or a matplotlib figure
drawing = drawtools.LimitSetDrawing()
drawing.draw_limit_set(path)
drawing.show()
```

"""

import numpy as np

import matplotlib.pyplot as plt
from matplotlib.patches import PathPatch

from kleinian_tools.utils import cp1

# (min x, min y, width, height) of the region we draw
VIEW_BOX = (-1.2, -1.2, 2.4, 2.4)

STROKE_WIDTH = 0.001

SVG_TEMPLATE = """<svg viewBox="{view_box}" xmlns="http://www.w3.org/2000/svg">
<path d="{data}" fill="{fill}" stroke="{stroke}" stroke-width="{stroke_width}"/>
</svg>
"""

class DrawingError(Exception):
    """Thrown if we try and draw something which can't be drawn (e.g. an
    empty path).

    """
    pass

def svg_document(path, view_box=VIEW_BOX, stroke="black",
                 stroke_width=STROKE_WIDTH, fill="none"):
    """Get the text of an SVG document containing a single path.

    Parameters
    ----------
    path : PolylinePath
        Path builder holding the curve to draw.
    view_box : tuple
        `(min_x, min_y, width, height)` for the SVG viewBox.

    Returns
    -------
    string
        The SVG document.

    """
    return SVG_TEMPLATE.format(
        view_box=" ".join(str(v) for v in view_box),
        data=path.svg_data(),
        fill=fill,
        stroke=stroke,
        stroke_width=stroke_width
    )

def write_svg(path, filename, **kwargs):
    """Write an SVG document containing `path` to `filename`. Keyword
    arguments are passed on to `svg_document`.

    """
    document = svg_document(path, **kwargs)
    with open(filename, "w", encoding="utf-8") as svg_file:
        svg_file.write(document)

class LimitSetDrawing:
    def __init__(self, figsize=8,
                 ax=None,
                 fig=None,
                 view_box=VIEW_BOX):

        if ax is None or fig is None:
            fig, ax = plt.subplots(figsize=(figsize, figsize))

        min_x, min_y, width, height = view_box
        self.xlim = (min_x, min_x + width)
        self.ylim = (min_y, min_y + height)

        self.ax, self.fig = ax, fig

        plt.tight_layout()
        self.ax.axis("off")
        self.ax.set_aspect("equal")
        self.ax.set_xlim(self.xlim)
        self.ax.set_ylim(self.ylim)

    def draw_limit_set(self, path, **kwargs):
        if len(path) == 0:
            raise DrawingError("Cannot draw an empty path")

        default_kwargs = {
            "facecolor": "none",
            "edgecolor": "black",
            "linewidth": 0.5
        }
        for key, value in kwargs.items():
            default_kwargs[key] = value

        patch = PathPatch(path.to_mpl_path(), **default_kwargs)
        self.ax.add_patch(patch)
        return patch

    def draw_point(self, point, **kwargs):
        default_kwargs = {
            "color" : "black",
            "marker": "o",
            "linestyle":"none"
        }
        for key, value in kwargs.items():
            default_kwargs[key] = value

        points = np.atleast_1d(point)
        points = points[~cp1.is_infinite(points)]
        x, y = cp1.c_to_r(points).T
        return self.ax.plot(x, y, **default_kwargs)

    def save(self, filename, **kwargs):
        self.fig.savefig(filename, **kwargs)

    def close(self):
        plt.close(self.fig)

    def show(self):
        plt.show()
