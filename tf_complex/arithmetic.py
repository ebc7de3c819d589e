"""
Arithmetic of :class:`~tf_complex.complex_value.Complex`.

``add``, ``subtract`` and ``negate`` work componentwise, IEEE arithmetic of
the components already gives the right special values. ``multiply`` and
``divide`` follow C99 Annex G: when the naive formula produces NaN in both
components, the operands are inspected for infinities and the result is
recomputed, so that

* a nonzero finite value times an infinity is an infinity,
* a nonzero value over zero is an infinity,
* a finite value over an infinity is a zero,

with signs taken from the operands. Genuinely indeterminate forms stay NaN.
"""
import logging

logger = logging.getLogger(__name__)


def _float_type(lhs, rhs):
    F = lhs.float_type
    if rhs.float_type != F:
        raise TypeError(
            "component types differ: {} and {}".format(
                F.name, rhs.float_type.name
            )
        )
    return F


def add(lhs, rhs):
    F = _float_type(lhs, rhs)
    with F.errstate():
        return lhs._make(
            F, lhs.real + rhs.real, lhs.imaginary + rhs.imaginary
        )


def subtract(lhs, rhs):
    F = _float_type(lhs, rhs)
    with F.errstate():
        return lhs._make(
            F, lhs.real - rhs.real, lhs.imaginary - rhs.imaginary
        )


def negate(x):
    return x._make(x.float_type, -x.real, -x.imaginary)


def conjugate(x):
    return x._make(x.float_type, x.real, -x.imaginary)


def complex_abs(x):
    """magnitude as a purely real complex value"""
    F = x.float_type
    return x._make(F, x.magnitude, F.zero)


def adding_real(x, real):
    F = x.float_type
    with F.errstate():
        return x._make(F, x.real + F(real), x.imaginary)


def subtracting_real(x, real):
    F = x.float_type
    with F.errstate():
        return x._make(F, x.real - F(real), x.imaginary)


def adding_imaginary(x, imaginary):
    F = x.float_type
    with F.errstate():
        return x._make(F, x.real, x.imaginary + F(imaginary))


def subtracting_imaginary(x, imaginary):
    F = x.float_type
    with F.errstate():
        return x._make(F, x.real, x.imaginary - F(imaginary))


def _unit_or_zero(F, x):
    """signed 1 for an infinity, signed 0 otherwise"""
    return F.copysign(x, F.one if F.is_infinite(x) else F.zero)


def _nan_to_zero(F, x):
    if F.is_nan(x):
        return F.copysign(x, F.zero)
    return x


def multiply(lhs, rhs):
    """
    ``(a + bi) * (c + di)``

    Recovery when ``ac - bd`` and ``ad + bc`` are both NaN:

    1. an infinite left operand is reduced to signed units, NaN in the
       right operand to signed zeros;
    2. the same for an infinite right operand;
    3. otherwise, if one of the partial products overflowed, every NaN
       becomes a signed zero.

    After any of them the result is ``inf * (ac - bd), inf * (ad + bc)``
    on the reduced values.
    """
    F = _float_type(lhs, rhs)
    a, b, c, d = lhs.real, lhs.imaginary, rhs.real, rhs.imaginary
    with F.errstate():
        ac, bd, ad, bc = a * c, b * d, a * d, b * c
        x = ac - bd
        y = ad + bc

        if F.is_nan(x) and F.is_nan(y):
            recalculate = False
            if F.is_infinite(a) or F.is_infinite(b):
                a = _unit_or_zero(F, a)
                b = _unit_or_zero(F, b)
                c = _nan_to_zero(F, c)
                d = _nan_to_zero(F, d)
                recalculate = True
            if F.is_infinite(c) or F.is_infinite(d):
                a = _nan_to_zero(F, a)
                b = _nan_to_zero(F, b)
                c = _unit_or_zero(F, c)
                d = _unit_or_zero(F, d)
                recalculate = True
            if not recalculate and any(
                F.is_infinite(i) for i in (ac, bd, ad, bc)
            ):
                a = _nan_to_zero(F, a)
                b = _nan_to_zero(F, b)
                c = _nan_to_zero(F, c)
                d = _nan_to_zero(F, d)
                recalculate = True
            if recalculate:
                logger.debug("multiply: recover infinity of %s * %s", lhs, rhs)
                x = F.infinity * (a * c - b * d)
                y = F.infinity * (a * d + b * c)
        return lhs._make(F, x, y)


def divide(lhs, rhs):
    """
    ``(a + bi) / (c + di)`` by Smith's algorithm.

    The ratio of the smaller to the larger denominator component keeps the
    denominator from overflowing. When both parts come out NaN, the first
    matching case is used:

    1. zero denominator, numerator not NaN: infinity with the sign of ``c``
       times the numerator;
    2. infinite numerator, finite denominator: infinity;
    3. finite numerator, infinite denominator: signed zero.
    """
    F = _float_type(lhs, rhs)
    a, b, c, d = lhs.real, lhs.imaginary, rhs.real, rhs.imaginary
    with F.errstate():
        if F.abs(c) >= F.abs(d):
            ratio = d / c
            denominator = c + d * ratio
            x = (a + b * ratio) / denominator
            y = (b - a * ratio) / denominator
        else:
            ratio = c / d
            denominator = c * ratio + d
            x = (a * ratio + b) / denominator
            y = (b * ratio - a) / denominator

        if F.is_nan(x) and F.is_nan(y):
            if c == 0 and d == 0 and (not F.is_nan(a) or not F.is_nan(b)):
                logger.debug("divide: %s by zero", lhs)
                inf = F.copysign(c, F.infinity)
                x = inf * a
                y = inf * b
            elif (F.is_infinite(a) or F.is_infinite(b)) and (
                F.is_finite(c) and F.is_finite(d)
            ):
                logger.debug("divide: infinite %s by finite %s", lhs, rhs)
                a = _unit_or_zero(F, a)
                b = _unit_or_zero(F, b)
                x = F.infinity * (a * c + b * d)
                y = F.infinity * (b * c - a * d)
            elif (F.is_infinite(c) or F.is_infinite(d)) and (
                F.is_finite(a) and F.is_finite(b)
            ):
                logger.debug("divide: finite %s by infinite %s", lhs, rhs)
                c = _unit_or_zero(F, c)
                d = _unit_or_zero(F, d)
                x = F.zero * (a * c + b * d)
                y = F.zero * (b * c - a * d)
        return lhs._make(F, x, y)
