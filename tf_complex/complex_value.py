"""
Immutable complex value over a floating point component type.
"""
import numbers

import numpy as np

from . import arithmetic
from .floating import get_float_type


def _component_type(dtype, *values):
    if dtype is not None:
        return get_float_type(dtype)
    for i in values:
        dt = getattr(i, "dtype", None)
        if dt is not None and getattr(dt, "kind", None) == "f":
            return get_float_type(dt)
    return get_float_type()


class Complex(object):
    """
    complex number ``real + imaginary i``

    Both components share one :class:`~tf_complex.floating.FloatType`.
    Arithmetic never raises, special values (infinity, NaN, signed zero)
    are results.

    >>> a = Complex(2.0, 3.0)
    >>> b = Complex(1.0, 1.0)
    >>> print(a * b)
    -1.0 + 5.0i
    """

    __slots__ = ("_F", "_real", "_imaginary")

    def __init__(self, real=0, imaginary=0, dtype=None):
        F = _component_type(dtype, real, imaginary)
        self._F = F
        with F.errstate():
            self._real = F(real)
            self._imaginary = F(imaginary)

    @classmethod
    def _make(cls, F, real, imaginary):
        ret = object.__new__(cls)
        ret._F = F
        ret._real = F(real)
        ret._imaginary = F(imaginary)
        return ret

    @classmethod
    def zero(cls, dtype=None):
        F = get_float_type(dtype)
        return cls._make(F, F.zero, F.zero)

    @classmethod
    def unit_imaginary(cls, dtype=None):
        F = get_float_type(dtype)
        return cls._make(F, F.zero, F.one)

    @classmethod
    def from_integer(cls, value, dtype=None):
        """
        integer literal, the imaginary part is zero

        An integer beyond the range of the component type becomes an
        infinity of its sign.
        """
        if isinstance(value, bool) or not isinstance(
            value, (numbers.Integral, np.integer)
        ):
            raise TypeError(
                "integer literal needs an integer, got {}".format(
                    type(value).__name__
                )
            )
        F = get_float_type(dtype)
        value = int(value)
        try:
            with F.errstate():
                real = F(value)
        except OverflowError:
            real = F.copysign(-1 if value < 0 else 1, F.infinity)
        return cls._make(F, real, F.zero)

    @classmethod
    def exactly(cls, source, dtype=None):
        """
        Exact conversion from an integer.

        :return: Complex value, or ``None`` if the component type can not
            represent ``source`` exactly.
        """
        F = get_float_type(dtype)
        t = F.exactly(source)
        if t is None:
            return None
        return cls._make(F, t, F.zero)

    @classmethod
    def from_complex(cls, z, dtype=None):
        """build from a Python or numpy complex scalar"""
        F = get_float_type(dtype)
        return cls._make(F, z.real, z.imag)

    def to_complex(self):
        return complex(float(self._real), float(self._imaginary))

    @property
    def real(self):
        return self._real

    @property
    def imaginary(self):
        return self._imaginary

    @property
    def float_type(self):
        return self._F

    @property
    def dtype(self):
        return self._F.dtype

    @property
    def is_finite(self):
        F = self._F
        return F.is_finite(self._real) and F.is_finite(self._imaginary)

    @property
    def is_infinite(self):
        F = self._F
        return F.is_infinite(self._real) or F.is_infinite(self._imaginary)

    @property
    def is_nan(self):
        """NaN unless the other component is infinite, infinity wins"""
        F = self._F
        return (F.is_nan(self._real) and not F.is_infinite(self._imaginary)) or (
            F.is_nan(self._imaginary) and not F.is_infinite(self._real)
        )

    @property
    def is_zero(self):
        F = self._F
        return F.is_zero(self._real) and F.is_zero(self._imaginary)

    @property
    def magnitude(self):
        """
        ``sqrt(real**2 + imaginary**2)`` without squaring a large component.
        """
        F = self._F
        x = F.abs(self._real)
        y = F.abs(self._imaginary)
        if F.is_infinite(x):
            return x
        if F.is_infinite(y):
            return y
        if x == 0:
            return y
        if x < y:
            x, y = y, x
        with F.errstate():
            ratio = y / x
            return F(x * F.sqrt(F.one + ratio * ratio))

    def conjugate(self):
        return arithmetic.conjugate(self)

    def adding_real(self, real):
        return arithmetic.adding_real(self, real)

    def subtracting_real(self, real):
        return arithmetic.subtracting_real(self, real)

    def adding_imaginary(self, imaginary):
        return arithmetic.adding_imaginary(self, imaginary)

    def subtracting_imaginary(self, imaginary):
        return arithmetic.subtracting_imaginary(self, imaginary)

    def __add__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return arithmetic.add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return arithmetic.subtract(self, other)

    def __mul__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return arithmetic.multiply(self, other)

    def __truediv__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return arithmetic.divide(self, other)

    def __neg__(self):
        return arithmetic.negate(self)

    def __pos__(self):
        return self

    def __abs__(self):
        return arithmetic.complex_abs(self)

    def __eq__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return bool(
            self._real == other._real and self._imaginary == other._imaginary
        )

    def __ne__(self, other):
        ret = self.__eq__(other)
        if ret is NotImplemented:
            return ret
        return not ret

    def __hash__(self):
        return hash((float(self._real), float(self._imaginary)))

    def __str__(self):
        F = self._F
        real, imag = self._real, self._imaginary
        if F.is_nan(real) and F.sign_minus(real):
            real_s = "-{}".format(-real)
        else:
            real_s = "{}".format(real)
        if F.sign_minus(imag):
            return "{} - {}i".format(real_s, -imag)
        return "{} + {}i".format(real_s, imag)

    def __repr__(self):
        return "Complex(real={}, imaginary={}, dtype={})".format(
            float(self._real), float(self._imaginary), self._F.name
        )

    def __reduce__(self):
        return (Complex, (self._real, self._imaginary, self._F.name))
