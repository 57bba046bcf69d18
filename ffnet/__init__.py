# flake8: noqa

from .core.exception import (
    DimensionMismatch,
    ErrorsNotComputed,
    MalformedSample,
    OutOfRange,
    TargetNotSet,
)
from .core.layer import Layer
from .core.network import Network
from .core.neuron import Neuron
from .util.random_double import RandomDouble
