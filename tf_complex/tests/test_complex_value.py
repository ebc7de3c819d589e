import math
import pickle
import warnings

import numpy as np
import pytest

from tf_complex.complex_value import Complex
from tf_complex.config import temp_config

inf = float("inf")
nan = float("nan")


def test_construct():
    a = Complex()
    assert a.real == 0.0 and a.imaginary == 0.0
    assert a.dtype == np.float64
    b = Complex(np.float32(1.5))
    assert b.dtype == np.float32
    assert isinstance(b.imaginary, np.float32)
    c = Complex(1, 2, dtype="float16")
    assert c.dtype == np.float16
    with temp_config("dtype", "float32"):
        assert Complex(1.0).dtype == np.float32
    assert Complex(1.0).dtype == np.float64
    with pytest.raises(TypeError):
        Complex(1, 2, dtype="int32")


def test_immutable():
    a = Complex(1.0, 2.0)
    with pytest.raises(AttributeError):
        a.real = 3.0
    b = -a
    assert a == Complex(1.0, 2.0)
    assert b == Complex(-1.0, -2.0)


def test_from_integer():
    a = Complex.from_integer(3)
    assert a == Complex(3.0, 0.0)
    assert Complex.zero() == Complex(0.0, 0.0)
    assert Complex.unit_imaginary() == Complex(0.0, 1.0)


def test_from_integer_range():
    with pytest.raises(TypeError):
        Complex.from_integer(1.5)
    with pytest.raises(TypeError):
        Complex.from_integer(True)
    assert Complex.from_integer(np.int32(-4)) == Complex(-4.0)
    a = Complex.from_integer(10**400)
    assert a == Complex(inf, 0.0)
    assert Complex.from_integer(-(10**400)).real == -inf
    b = Complex.from_integer(70000, dtype="float16")
    assert b.real == inf
    assert b.dtype == np.float16


def test_narrowing_no_warning():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        a = Complex(1e300, -1e300, dtype="float32")
        Complex.from_integer(70000, dtype="float16")
    assert a.real == inf
    assert a.imaginary == -inf


def test_exactly():
    a = Complex.exactly(2**53)
    assert a == Complex(float(2**53))
    assert Complex.exactly(2**53 + 1) is None
    assert Complex.exactly(2**24 + 1, dtype="float32") is None
    assert Complex.exactly(2**24, dtype="float32").real == 2**24
    assert Complex.exactly(70000, dtype="float16") is None
    assert Complex.exactly(10**400) is None
    assert Complex.exactly(np.int64(-7)) == Complex(-7.0)
    with pytest.raises(TypeError):
        Complex.exactly(1.5)


def test_predicates():
    assert Complex(1.0, 2.0).is_finite
    assert not Complex(inf, 2.0).is_finite
    assert not Complex(1.0, nan).is_finite
    assert Complex(1.0, -inf).is_infinite
    assert Complex(nan, inf).is_infinite
    assert not Complex(nan, 1.0).is_infinite
    assert Complex(0.0, -0.0).is_zero
    assert not Complex(0.0, 1e-300).is_zero


def test_is_nan():
    assert not Complex(nan, inf).is_nan
    assert not Complex(-inf, nan).is_nan
    assert Complex(nan, 1.0).is_nan
    assert Complex(1.0, nan).is_nan
    assert Complex(nan, nan).is_nan
    assert not Complex(inf, inf).is_nan


def test_magnitude():
    assert Complex(3.0, 4.0).magnitude == 5.0
    assert Complex(-4.0, 3.0).magnitude == 5.0
    assert Complex(0.0, -2.0).magnitude == 2.0
    M = np.finfo(np.float64).max
    assert Complex(M, 0.0).magnitude == M
    assert Complex(0.0, M).magnitude == M
    a = Complex(M / 2, M / 2).magnitude
    assert np.isfinite(a)
    assert math.isclose(a, M / math.sqrt(2))
    assert Complex(inf, nan).magnitude == inf
    assert Complex(nan, -inf).magnitude == inf
    M32 = np.finfo(np.float32).max
    assert Complex(M32, 0, dtype="float32").magnitude == M32


def test_abs_conjugate():
    a = abs(Complex(3.0, -4.0))
    assert isinstance(a, Complex)
    assert a == Complex(5.0, 0.0)
    b = Complex(1.0, 2.0).conjugate()
    assert b == Complex(1.0, -2.0)
    c = Complex(1.0, 0.0).conjugate()
    assert np.signbit(c.imaginary)


def test_equal():
    assert Complex(1.0, 2.0) == Complex(1.0, 2.0)
    assert Complex(1.0, 2.0) != Complex(1.0, 3.0)
    assert Complex(0.0, 0.0) == Complex(-0.0, -0.0)
    assert Complex(nan, 0.0) != Complex(nan, 0.0)
    assert Complex(1.0) != 1.0
    assert hash(Complex(0.0, 0.0)) == hash(Complex(-0.0, -0.0))
    assert len({Complex(1.0, 2.0), Complex(1.0, 2.0)}) == 1


def test_no_implicit_conversion():
    with pytest.raises(TypeError):
        Complex(1.0) + 1.0
    with pytest.raises(TypeError):
        2.0 * Complex(1.0)
    with pytest.raises(TypeError):
        Complex(1.0) + Complex(1.0, dtype="float32")


def test_str():
    assert str(Complex(1.0, 2.0)) == "1.0 + 2.0i"
    assert str(Complex(1.0, -2.0)) == "1.0 - 2.0i"
    assert str(Complex(1.0, -0.0)) == "1.0 - 0.0i"
    assert str(Complex(-inf, inf)) == "-inf + infi"
    assert str(Complex(-np.float64(nan), 1.0)) == "-nan + 1.0i"
    assert str(Complex(-np.float64(nan), -1.0)) == "-nan - 1.0i"
    assert str(Complex(np.float64(nan), 1.0)) == "nan + 1.0i"
    assert repr(Complex(1.0, 2.0)) == (
        "Complex(real=1.0, imaginary=2.0, dtype=float64)"
    )
    assert repr(Complex(1.5, -2.0, dtype="float32")) == (
        "Complex(real=1.5, imaginary=-2.0, dtype=float32)"
    )


def test_pickle():
    a = Complex(1.0, 2.0, dtype="float32")
    b = pickle.loads(pickle.dumps(a))
    assert a == b
    assert b.dtype == np.float32
