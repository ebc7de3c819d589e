"""
Floating point capability of the component type.

A :class:`FloatType` wraps one numpy floating dtype and exposes the
operations the complex arithmetic needs: special values, predicates on them,
``copysign`` and square root. Components are always stored as the numpy
scalar type, Python numbers are converted when a value is built.

>>> F = get_float_type("float32")
>>> float(F.copysign(-0.0, 1))
-1.0
>>> F.exactly(2**24 + 1) is None
True
"""
import functools
import numbers

import numpy as np

from .config import get_config


class FloatType(object):
    """floating point component type"""

    def __init__(self, dtype):
        dtype = np.dtype(dtype)
        if not issubclass(dtype.type, np.floating):
            raise TypeError("{} is not a floating point type".format(dtype))
        self.dtype = dtype
        self.type = dtype.type
        self.zero = self.type(0)
        self.one = self.type(1)
        self.nan = self.type(np.nan)
        self.infinity = self.type(np.inf)
        self.max = np.finfo(dtype).max

    @property
    def name(self):
        return self.dtype.name

    def __call__(self, x):
        return self.type(x)

    def __repr__(self):
        return "FloatType({})".format(self.name)

    def __eq__(self, other):
        if not isinstance(other, FloatType):
            return NotImplemented
        return self.dtype == other.dtype

    def __hash__(self):
        return hash(self.dtype)

    @staticmethod
    def errstate():
        """numpy context in which overflow, division by zero and invalid
        operations produce IEEE results silently"""
        return np.errstate(all="ignore")

    @staticmethod
    def is_nan(x):
        return bool(np.isnan(x))

    @staticmethod
    def is_infinite(x):
        return bool(np.isinf(x))

    @staticmethod
    def is_finite(x):
        return bool(np.isfinite(x))

    @staticmethod
    def is_zero(x):
        return bool(x == 0)

    @staticmethod
    def sign_minus(x):
        """sign bit, also for NaN and signed zero"""
        return bool(np.signbit(x))

    def abs(self, x):
        return self.type(np.abs(x))

    def sqrt(self, x):
        return self.type(np.sqrt(x))

    def copysign(self, sign_of, magnitude_of):
        """value with the sign of ``sign_of`` and the magnitude of
        ``magnitude_of``"""
        return self.type(np.copysign(self.type(magnitude_of), sign_of))

    def exactly(self, source):
        """
        Convert an integer without rounding.

        :param source: Integer value.
        :return: Component value, or ``None`` if it can not be represented
            exactly.
        """
        if isinstance(source, bool) or not isinstance(
            source, (numbers.Integral, np.integer)
        ):
            raise TypeError(
                "exact conversion needs an integer, got {}".format(
                    type(source).__name__
                )
            )
        source = int(source)
        try:
            with self.errstate():
                value = self.type(source)
        except OverflowError:
            return None
        if not np.isfinite(value):
            return None
        if int(value) != source:
            return None
        return value


@functools.lru_cache(maxsize=None)
def _float_type(name):
    return FloatType(name)


def get_float_type(dtype=None):
    """
    Get the :class:`FloatType` of a dtype.

    :param dtype: numpy dtype, its name, or a FloatType. ``None`` means the
        configured ``dtype``.
    """
    if isinstance(dtype, FloatType):
        return dtype
    if dtype is None:
        dtype = get_config("dtype")
    return _float_type(np.dtype(dtype).name)
