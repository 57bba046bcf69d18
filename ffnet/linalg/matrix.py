import sys

import numpy

from ffnet.core.exception import DimensionMismatch, OutOfRange


class Matrix(object):
    """ A dense, real-valued matrix with the handful of operations needed
    for feedforward and backpropagation: matrix-vector products,
    transposition and entry access
    """
    def __init__(self, n_rows, n_cols, random_double=None):
        """ Initialize a matrix instance

        Parameters
        ----------
        n_rows, n_cols: int
            The matrix dimensions; both must be positive.

        random_double: RandomDouble, default=None
            If provided, every entry is an independent draw from this
            generator. Otherwise the matrix is filled with zeros.

        """
        for name, value in (('n_rows', n_rows), ('n_cols', n_cols)):
            if int(value) != value or value < 1:
                msg = "`{}` ({}) must be a positive integer"
                raise ValueError(msg.format(name, value))

        shape = (int(n_rows), int(n_cols))

        if random_double is None:
            self.values = numpy.zeros(shape, dtype=float)
        else:
            self.values = numpy.asarray(random_double(size=shape), dtype=float)

    @classmethod
    def from_array(cls, arr):
        """ Build a matrix holding a copy of the two-dimensional `arr`
        """
        arr = numpy.array(arr, dtype=float)

        if arr.ndim != 2:
            msg = "`arr` (ndim={}) must be two-dimensional"
            raise DimensionMismatch(msg.format(arr.ndim))

        matrix = cls(*arr.shape)
        matrix.values[...] = arr
        return matrix

    def __repr__(self):
        return "<Matrix n_rows={}, n_cols={}>".format(*self.shape)

    @property
    def shape(self):
        return self.values.shape

    @property
    def n_rows(self):
        return self.values.shape[0]

    @property
    def n_cols(self):
        return self.values.shape[1]

    def _validate_index(self, index):
        try:
            row, col = index
        except (TypeError, ValueError):
            msg = "Matrix index {} should be a (row, col) pair"
            raise TypeError(msg.format(index))

        if not (0 <= row < self.n_rows and 0 <= col < self.n_cols):
            msg = "Index ({}, {}) out of range for matrix of shape {}"
            raise OutOfRange(msg.format(row, col, self.shape))

        return row, col

    def __getitem__(self, index):
        return float(self.values[self._validate_index(index)])

    def __setitem__(self, index, value):
        self.values[self._validate_index(index)] = value

    def dot(self, vector):
        """ Multiply this (R x C) matrix by a length C vector

        Returns
        -------
        product: numpy.ndarray, shape=(R,)

        """
        vector = numpy.asarray(vector, dtype=float)

        if vector.shape != (self.n_cols,):
            msg = "Cannot multiply matrix of shape {} by vector of shape {}"
            raise DimensionMismatch(msg.format(self.shape, vector.shape))

        return self.values.dot(vector)

    __matmul__ = dot

    def transpose(self):
        """ Return a new (C x R) matrix
        """
        return Matrix.from_array(self.values.T)

    def copy(self):
        return Matrix.from_array(self.values)


def hadamard_product(a, b):
    """ Elementwise product of two equal-length vectors
    """
    a = numpy.asarray(a, dtype=float)
    b = numpy.asarray(b, dtype=float)

    if a.ndim != 1 or a.shape != b.shape:
        msg = "Hadamard product needs equal-length vectors, got {} and {}"
        raise DimensionMismatch(msg.format(a.shape, b.shape))

    return a * b


def format_vector(vector, precision=6):
    """ Format a vector as space-separated, fixed precision numbers
    """
    fmt = "{{:.{:d}f}}".format(precision)
    return " ".join(fmt.format(value) for value in numpy.ravel(vector))


def print_vector(vector, stream=None, precision=6):
    """ Write :func:`format_vector` of `vector` on its own line to `stream`
    (standard output by default)
    """
    stream = stream or sys.stdout
    stream.write("\t" + format_vector(vector, precision=precision) + "\n")
