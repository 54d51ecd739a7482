import numpy as np

from kleinian_tools import limit_set, drawtools
from kleinian_tools.representation import KleinianRepresentation

# Grandma's recipe with traces sqrt(3) + i and 2
ta, tb = np.sqrt(3) + 1j, 2.0
rep = KleinianRepresentation.from_traces(ta, tb)

# trace the limit set, then mark where each generator's side starts
path = limit_set.LimitSetTraversal(rep).limit_set(30)
endpoints = np.array([rep.endpoint(letter) for letter in "abAB"])

fig = drawtools.LimitSetDrawing()
fig.draw_limit_set(path, edgecolor="royalblue")
fig.draw_point(endpoints, color="firebrick", markersize=4)
fig.show()
