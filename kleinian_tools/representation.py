"""Hold the generators of a two-generator Kleinian group, and the
combinatorial data needed to trace its limit set.

Generators are named by the letters `a` and `b`, and their inverses
by the capital letters `A` and `B`. Use square brackets to get the
image of a word in the generators.

```python
from kleinian_tools.representation import KleinianRepresentation

rep = KleinianRepresentation.from_traces(2.0, 2.0)
rep["abAB"].trace()
```

    (-2+0j)

The four generators are fixed when the representation is created: the
inverse generators are computed as adjugates, which is only correct
because Grandma's recipe produces matrices with determinant 1.

"""

from types import MappingProxyType

from kleinian_tools.base import GeometryError
from kleinian_tools import mobius, grandma
from kleinian_tools.utils import words
from kleinian_tools.utils.words import LETTERS

#the parabolic fixed point of the commutator baBA
SEED = 1 + 0j

# continuations of a word ending in a given letter, in the order
# (left, straight, right) around the limit set
NEIGHBORS = {
    "a": ("b", "a", "B"),
    "b": ("A", "b", "a"),
    "A": ("B", "A", "b"),
    "B": ("a", "B", "A"),
}

# applying the tail word to SEED gives the limit point of an infinite
# word ending in the given letter
ENDPOINT_TAILS = {
    "a": "BA",
    "b": "B",
    "A": "",
    "B": "A",
}

# the commutator fixing SEED
BASE_COMMUTATOR = words.commutator("b", "a")

# conjugating by the tail gives the commutator fixing each endpoint
COMMUTATOR_CYCLE = {
    letter: words.conjugate(BASE_COMMUTATOR, tail)
    for letter, tail in ENDPOINT_TAILS.items()
}

def check_tables(neighbors=NEIGHBORS, cycle=COMMUTATOR_CYCLE):
    """Check that the traversal tables only ever build reduced words.

    Every letter must continue straight on to itself, its three
    continuations must be distinct and never cancel it, and each
    cyclic commutator must be a reduced word of length 4.

    """
    for letter in LETTERS:
        children = neighbors.get(letter)
        if (children is None or len(set(children)) != 3 or
            children[1] != letter or
            not all(words.is_reduced(letter + child) for child in children)):
            raise GeometryError(
                "Bad continuations {} for letter '{}'".format(children, letter)
            )

        word = cycle.get(letter)
        if word is None or len(word) != 4 or not words.is_reduced(word):
            raise GeometryError(
                "Bad commutator word {} for letter '{}'".format(word, letter)
            )

check_tables()

class KleinianRepresentation:
    """Model a representation of the free group on two generators into
    SL(2, C), acting on the Riemann sphere by Mobius transformations.
    """
    def __init__(self, a, b):
        """
        Parameters
        ----------
        a, b : MobiusTransformation or array-like
            Unit-determinant images of the two generators.
        """
        a = mobius.MobiusTransformation(a)
        b = mobius.MobiusTransformation(b)

        for name, gen in (("a", a), ("b", b)):
            if gen.shape != ():
                raise GeometryError(
                    "Generator {} must be a single 2 x 2 matrix, got data"
                    " with shape {}".format(name, gen.matrix.shape)
                )

        self._generators = MappingProxyType({
            "a": a,
            "b": b,
            "A": a.adj(),
            "B": b.adj(),
        })

        self._endpoints = {
            letter: self[tail].apply(SEED)
            for letter, tail in ENDPOINT_TAILS.items()
        }

    @classmethod
    def from_traces(cls, ta, tb):
        """Build a representation from generator traces, using Grandma's
        recipe."""
        return cls(*grandma.grandma(ta, tb))

    @property
    def generators(self):
        return self._generators

    def generator(self, letter):
        try:
            return self._generators[letter]
        except KeyError as err:
            raise GeometryError(
                "'{}' is not one of the generators {}".format(letter, LETTERS)
            ) from err

    def __getitem__(self, word):
        return self.element(word)

    def element(self, word):
        """Get the product of the generators in `word`, read left to
        right. The empty word gives the identity.
        """
        matrix = mobius.identity()
        for letter in word:
            matrix = matrix @ self.generator(letter)
        return matrix

    def children(self, letter):
        """Get the three letters which can follow `letter` in a reduced
        word, ordered left, straight, right.
        """
        try:
            return NEIGHBORS[letter]
        except KeyError as err:
            raise GeometryError(
                "'{}' is not one of the generators {}".format(letter, LETTERS)
            ) from err

    def endpoint(self, letter):
        """Get the limit point of an infinite word ending in `letter`,
        before applying the prefix."""
        try:
            return self._endpoints[letter]
        except KeyError as err:
            raise GeometryError(
                "'{}' is not one of the generators {}".format(letter, LETTERS)
            ) from err

    def commutator(self):
        return mobius.commutator(self.generator("a"), self.generator("b"))

