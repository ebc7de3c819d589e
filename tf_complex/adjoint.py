"""
Reverse mode differentiation rules.

Every rule takes the operands of a primal operation and returns the primal
result together with a backward function. The backward function maps the
cotangent ``v`` of the result to the cotangents of the operands, it is only
called by a differentiation engine in its backward pass.

==========================  ===========================
primal                      cotangents
==========================  ===========================
add(l, r)                   v, v
subtract(l, r)              v, -v
multiply(l, r)              r*v, l*v
divide(l, r)                v/r, -l/(r*r)*v
negate(x)                   -v
adding_real(x, r)           v, v.real
subtracting_real(x, r)      v, -v.real
adding_imaginary(x, i)      v, v.imaginary
subtracting_imaginary(x, i) v, -v.imaginary
==========================  ===========================

>>> from tf_complex import Complex
>>> z, backward = get_adjoint("multiply")(Complex(2.0, 3.0), Complex(1.0, 1.0))
>>> print(z)
-1.0 + 5.0i
>>> dl, dr = backward(Complex(1.0, 0.0))
>>> print(dl, "|", dr)
1.0 + 1.0i | 2.0 + 3.0i
"""
import warnings

from . import arithmetic as ops
from .config import get_config, regist_config

ADJOINT = "adjoint"
regist_config(ADJOINT, {})


def regist_adjoint(name=None, f=None):
    """register an adjoint

    :params name: name of the primal operation, default is the function name
        without the ``vjp_`` prefix
    :params f: adjoint function
    """

    def regist(g):
        if name is None:
            my_name = g.__name__
            if my_name.startswith("vjp_"):
                my_name = my_name[4:]
        else:
            my_name = name
        config = get_config(ADJOINT)
        if my_name in config:
            warnings.warn("Override adjoint {}".format(my_name))
        config[my_name] = g
        return g

    if f is None:
        return regist
    return regist(f)


def get_adjoint(name):
    """adjoint of the primal operation ``name``"""
    config = get_config(ADJOINT)
    if name not in config:
        raise KeyError("No adjoint named {} found.".format(name))
    return config[name]


def list_adjoints():
    return sorted(get_config(ADJOINT))


@regist_adjoint()
def vjp_add(lhs, rhs):
    return ops.add(lhs, rhs), lambda v: (v, v)


@regist_adjoint()
def vjp_subtract(lhs, rhs):
    return ops.subtract(lhs, rhs), lambda v: (v, ops.negate(v))


@regist_adjoint()
def vjp_multiply(lhs, rhs):
    def _grad(v):
        return ops.multiply(rhs, v), ops.multiply(lhs, v)

    return ops.multiply(lhs, rhs), _grad


@regist_adjoint()
def vjp_divide(lhs, rhs):
    def _grad(v):
        d_lhs = ops.divide(v, rhs)
        d_rhs = ops.multiply(
            ops.divide(ops.negate(lhs), ops.multiply(rhs, rhs)), v
        )
        return d_lhs, d_rhs

    return ops.divide(lhs, rhs), _grad


@regist_adjoint()
def vjp_negate(x):
    return ops.negate(x), ops.negate


@regist_adjoint()
def vjp_adding_real(x, real):
    return ops.adding_real(x, real), lambda v: (v, v.real)


@regist_adjoint()
def vjp_subtracting_real(x, real):
    return ops.subtracting_real(x, real), lambda v: (v, -v.real)


@regist_adjoint()
def vjp_adding_imaginary(x, imaginary):
    return ops.adding_imaginary(x, imaginary), lambda v: (v, v.imaginary)


@regist_adjoint()
def vjp_subtracting_imaginary(x, imaginary):
    return (
        ops.subtracting_imaginary(x, imaginary),
        lambda v: (v, -v.imaginary),
    )
