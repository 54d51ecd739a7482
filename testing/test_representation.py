import itertools

import pytest
import numpy as np

from kleinian_tools import mobius
from kleinian_tools.representation import (KleinianRepresentation,
                                           NEIGHBORS, ENDPOINT_TAILS,
                                           COMMUTATOR_CYCLE, SEED,
                                           check_tables)
from kleinian_tools.utils import words
from kleinian_tools import GeometryError

@pytest.fixture
def gasket_representation():
    return KleinianRepresentation.from_traces(2.0, 2.0)

@pytest.fixture(params=[(2.0, 2.0), (complex(np.sqrt(3), 1.0), 2.0)])
def representation(request):
    return KleinianRepresentation.from_traces(*request.param)

def test_generators(representation):
    a = representation.generator("a")
    b = representation.generator("b")
    assert np.allclose(representation.generator("A").matrix, a.adj().matrix)
    assert np.allclose(representation.generator("B").matrix, b.adj().matrix)
    assert np.allclose(representation["aA"].matrix, np.identity(2))
    assert np.allclose(representation["bB"].matrix, np.identity(2))
    assert np.allclose(representation[""].matrix, np.identity(2))
    assert np.allclose(representation["abAB"].matrix,
                       representation.commutator().matrix)

def test_word_product(representation):
    word = "abbAB"
    expected = mobius.identity()
    for letter in word:
        expected = expected @ representation.generator(letter)
    assert np.allclose(representation[word].matrix, expected.matrix)

def test_generators_read_only(gasket_representation):
    with pytest.raises(TypeError):
        gasket_representation.generators["a"] = mobius.identity()

def test_bad_letters(gasket_representation):
    with pytest.raises(GeometryError):
        gasket_representation.generator("c")
    with pytest.raises(GeometryError):
        gasket_representation["abc"]
    with pytest.raises(GeometryError):
        gasket_representation.children("x")
    with pytest.raises(GeometryError):
        gasket_representation.endpoint("")

def test_bad_generator_shape():
    with pytest.raises(GeometryError):
        KleinianRepresentation(np.array([np.identity(2), np.identity(2)]),
                               np.identity(2))

def test_children(gasket_representation):
    for letter in words.LETTERS:
        left, straight, right = gasket_representation.children(letter)
        assert straight == letter
        assert words.invert_gen(letter) not in (left, straight, right)
        assert len({left, straight, right}) == 3

    assert NEIGHBORS["a"] == ("b", "a", "B")
    assert NEIGHBORS["b"] == ("A", "b", "a")
    assert NEIGHBORS["A"] == ("B", "A", "b")
    assert NEIGHBORS["B"] == ("a", "B", "A")

def test_gasket_endpoints(gasket_representation):
    rep = gasket_representation
    assert np.isclose(rep.endpoint("a"), (-1 - 2j) / 5)
    assert np.isclose(rep.endpoint("b"), -1.0)
    assert np.isclose(rep.endpoint("A"), 1.0)
    assert np.isclose(rep.endpoint("B"), (1 - 2j) / 5)

def test_endpoint_tails(representation):
    for letter, tail in ENDPOINT_TAILS.items():
        assert np.isclose(representation.endpoint(letter),
                          representation[tail] @ SEED)

def test_commutator_cycle(representation):
    for letter, tail in ENDPOINT_TAILS.items():
        cycle = COMMUTATOR_CYCLE[letter]
        assert cycle == words.simplify_word(
            tail + "baBA" + words.formal_inverse(tail)
        )
        endpoint = representation.endpoint(letter)
        assert np.isclose(representation[cycle] @ endpoint, endpoint,
                          rtol=0, atol=1e-9)

def test_commutator_cycle_words():
    assert COMMUTATOR_CYCLE == {
        "a": "BAba",
        "b": "aBAb",
        "A": "baBA",
        "B": "AbaB",
    }

def test_check_tables():
    check_tables()

    cancelling = dict(NEIGHBORS)
    cancelling["a"] = ("b", "a", "A")
    with pytest.raises(GeometryError):
        check_tables(neighbors=cancelling)

    crooked = dict(NEIGHBORS)
    crooked["b"] = ("b", "A", "a")
    with pytest.raises(GeometryError):
        check_tables(neighbors=crooked)

    missing = dict(NEIGHBORS)
    del missing["B"]
    with pytest.raises(GeometryError):
        check_tables(neighbors=missing)

    unreduced = dict(COMMUTATOR_CYCLE)
    unreduced["A"] = "baAb"
    with pytest.raises(GeometryError):
        check_tables(cycle=unreduced)

def test_unit_determinant_words(representation):
    for length in range(1, 5):
        for letters in itertools.product(words.LETTERS, repeat=length):
            word = "".join(letters)
            if not words.is_reduced(word):
                continue
            assert np.isclose(representation[word].det(), 1.0,
                              rtol=0, atol=1e-9)
