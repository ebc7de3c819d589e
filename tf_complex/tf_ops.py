"""
TensorFlow operations whose gradients are the registered adjoints.

The forward pass runs the complex arithmetic of this package elementwise on
the values of eager tensors, the backward pass applies the adjoint of the
operation to the upstream gradient. TensorFlow gradients of complex values
are conjugated cotangents, they are conjugated on the way in and out so that
the ops chain with the ones of TensorFlow.

>>> a = tf.constant([2.0 + 3.0j])
>>> b = tf.constant([1.0 + 1.0j])
>>> with tf.GradientTape() as tape:
...     tape.watch(a)
...     c = tf_multiply(a, b)
...
>>> tape.gradient(c, a).numpy()
array([1.-1.j])

Only eager execution is supported, tensors are converted with ``.numpy()``.
"""
import os

import numpy as np

# default configurations
os.environ["TF_CPP_MIN_LOG_LEVEL"] = "1"

import tensorflow as tf  # pylint: disable=wrong-import-position

from .adjoint import get_adjoint
from .complex_value import Complex
from .config import get_config
from .floating import get_float_type

COMPLEX = "complex"
REAL = "real"

_component_dtype = {"complex64": "float32", "complex128": "float64"}


def get_dtypes():
    """(complex dtype, component dtype) from the configuration"""
    complex_dtype = get_config("complex_dtype")
    if complex_dtype not in _component_dtype:
        raise TypeError("unsupported complex dtype {}".format(complex_dtype))
    return complex_dtype, _component_dtype[complex_dtype]


def _as_tuple(g):
    if isinstance(g, tuple):
        return g
    return (g,)


def _unbroadcast(g, shape):
    """sum ``g`` over the axes broadcast from ``shape``"""
    while g.ndim > len(shape):
        g = g.sum(axis=0)
    for i, n in enumerate(shape):
        if n == 1 and g.shape[i] != 1:
            g = g.sum(axis=i, keepdims=True)
    return g


def complex_op(name, kinds=(COMPLEX, COMPLEX)):
    """
    Build a TensorFlow function from the adjoint registered as ``name``.

    :param name: name of the adjoint, see :func:`~tf_complex.adjoint.get_adjoint`
    :param kinds: ``"complex"`` or ``"real"`` for every operand
    :return: function of tensors
    """

    def _f(*args):
        complex_dtype, real_dtype = get_dtypes()
        F = get_float_type(real_dtype)
        adjoint = get_adjoint(name)
        dtypes = [complex_dtype if k == COMPLEX else real_dtype for k in kinds]

        @tf.custom_gradient
        def _op(*xs):
            values = [x.numpy() for x in xs]
            shape = np.broadcast_shapes(*[v.shape for v in values])
            flat = [np.broadcast_to(v, shape).ravel() for v in values]
            results = []
            backwards = []
            for items in zip(*flat):
                operands = [
                    Complex.from_complex(i, F) if k == COMPLEX else F(i)
                    for k, i in zip(kinds, items)
                ]
                z, backward = adjoint(*operands)
                results.append(z.to_complex())
                backwards.append(backward)
            y = np.array(results, dtype=complex_dtype).reshape(shape)

            def _grad(dy):
                dy = np.broadcast_to(dy.numpy(), shape).ravel()
                grads = [np.zeros(dy.shape, dtype=dt) for dt in dtypes]
                for j, (backward, v) in enumerate(zip(backwards, dy)):
                    g = _as_tuple(backward(Complex.from_complex(np.conj(v), F)))
                    # real operands take the cotangent of the gradient itself
                    if REAL in kinds:
                        g_real = _as_tuple(backward(Complex.from_complex(v, F)))
                    for k, kind in enumerate(kinds):
                        if kind == COMPLEX:
                            grads[k][j] = np.conj(g[k].to_complex())
                        else:
                            grads[k][j] = g_real[k]
                return tuple(
                    tf.constant(
                        _unbroadcast(g.reshape(shape), v.shape), dtype=dt
                    )
                    for g, v, dt in zip(grads, values, dtypes)
                )

            return tf.constant(y, dtype=complex_dtype), _grad

        xs = [tf.convert_to_tensor(x, dtype=dt) for x, dt in zip(args, dtypes)]
        return _op(*xs)

    _f.__name__ = "tf_" + name
    _f.__doc__ = "{} of tensors, differentiable with the registered adjoint".format(
        name
    )
    return _f


tf_add = complex_op("add")
tf_subtract = complex_op("subtract")
tf_multiply = complex_op("multiply")
tf_divide = complex_op("divide")
tf_negate = complex_op("negate", (COMPLEX,))
tf_adding_real = complex_op("adding_real", (COMPLEX, REAL))
tf_subtracting_real = complex_op("subtracting_real", (COMPLEX, REAL))
tf_adding_imaginary = complex_op("adding_imaginary", (COMPLEX, REAL))
tf_subtracting_imaginary = complex_op("subtracting_imaginary", (COMPLEX, REAL))
