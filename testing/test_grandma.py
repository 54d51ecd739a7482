import pytest
import numpy as np

from kleinian_tools import grandma, mobius
from kleinian_tools import GeometryError

SQRT3_TRACE = complex(np.sqrt(3), 1.0)

@pytest.fixture(params=[(2.0, 2.0), (SQRT3_TRACE, 2.0)])
def normalized_traces(request):
    return request.param

@pytest.fixture(params=[(2.0, 2.0),
                        (SQRT3_TRACE, 2.0),
                        (1.91 + 0.05j, 1.91 + 0.05j),
                        (2.2 + 0.3j, 1.8 - 0.1j)])
def traces(request):
    return request.param

def test_gasket_generators():
    a, b = grandma.grandma(2.0, 2.0)
    assert np.allclose(a.matrix, np.array([[1.0, 0.0],
                                           [-2.0j, 1.0]]))
    assert np.allclose(b.matrix, np.array([[1.0 - 1.0j, 1.0],
                                           [1.0, 1.0 + 1.0j]]))

def test_traces(traces):
    ta, tb = traces
    a, b = grandma.grandma(ta, tb)
    assert np.isclose(a.trace(), ta)
    assert np.isclose(b.trace(), tb)
    assert np.isclose((a @ b).trace(), grandma.trace_ab(ta, tb))

def test_unit_determinant(traces):
    a, b = grandma.grandma(*traces)
    assert np.isclose(a.det(), 1.0, rtol=0, atol=1e-12)
    assert np.isclose(b.det(), 1.0, rtol=0, atol=1e-12)

def test_parabolic_commutator(traces):
    a, b = grandma.grandma(*traces)
    comm = mobius.commutator(a, b)
    assert np.isclose(comm.trace(), -2.0, rtol=0, atol=1e-9)
    assert comm.is_parabolic()

def test_commutator_fixes_seed(normalized_traces):
    a, b = grandma.grandma(*normalized_traces)
    comm = mobius.commutator(a, b)
    assert np.isclose(comm @ 1.0, 1.0, rtol=0, atol=1e-9)
    assert np.isclose(comm.fixed_point(), 1.0, rtol=0, atol=1e-6)

def test_trace_ab():
    assert np.isclose(grandma.trace_ab(2.0, 2.0), 2.0 - 2.0j)
    assert np.isclose(grandma.trace_ab(SQRT3_TRACE, 2.0),
                      complex(np.sqrt(3), -1.0))

def test_degenerate_traces():
    with pytest.raises(GeometryError):
        grandma.grandma(0.0, 0.0)
