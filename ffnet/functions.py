import numpy
from scipy.special import expit

from ffnet.core.exception import DimensionMismatch


def sigmoid(z):
    """ The logistic function, `1 / (1 + exp(-z))`
    """
    return expit(z)


def sigmoid_derivative(z):
    """ Derivative of :func:`sigmoid` evaluated at `z`
    """
    s = expit(z)
    return s * (1.0 - s)


def quadratic_cost_gradient(output, target):
    """ Gradient of :func:`quadratic_cost` with respect to `output`, i.e.,
    `output - target`
    """
    output = numpy.asarray(output, dtype=float)
    target = numpy.asarray(target, dtype=float)

    if output.shape != target.shape:
        msg = "`output` shape {} does not match `target` shape {}"
        raise DimensionMismatch(msg.format(output.shape, target.shape))

    return output - target


def quadratic_cost(output, target):
    """ Compute the quadratic cost `0.5 * sum((output - target)**2)`
    between an output activation vector and the target vector
    """
    diff = quadratic_cost_gradient(output, target)
    return 0.5 * float(numpy.dot(diff, diff))
