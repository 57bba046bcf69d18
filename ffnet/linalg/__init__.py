# flake8: noqa

from .matrix import (
    format_vector,
    hadamard_product,
    Matrix,
    print_vector,
)
