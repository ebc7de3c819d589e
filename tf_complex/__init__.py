"""
 Complex numbers with Annex G special values and reverse-mode adjoints

"""
from .version import __version__
from .config import get_config, set_config, temp_config
from .floating import FloatType, get_float_type
from .complex_value import Complex
from .arithmetic import (
    add,
    subtract,
    multiply,
    divide,
    negate,
    conjugate,
    complex_abs,
    adding_real,
    subtracting_real,
    adding_imaginary,
    subtracting_imaginary,
)
from .adjoint import get_adjoint, regist_adjoint, list_adjoints
