class DimensionMismatch(ValueError):
    """ Raised when a vector or matrix does not have the length or shape
    required by the layer or matrix it is combined with
    """


class OutOfRange(IndexError):
    """ Raised when addressing a neuron, layer, or matrix entry beyond
    its valid index range
    """


class MalformedSample(ValueError):
    """ Raised when a training sample is not an (input, target) pair
    """


class TargetNotSet(RuntimeError):
    """ Raised when backpropagating before a target output has been set
    """


class ErrorsNotComputed(RuntimeError):
    """ Raised when updating parameters before errors have been
    backpropagated for the current sample
    """
