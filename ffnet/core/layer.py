import numpy

from .exception import DimensionMismatch, OutOfRange
from .neuron import Neuron


class Layer(object):
    """ A fixed-size, ordered collection of neurons
    """
    def __init__(self, size, is_input=False, biases=None):
        """ Initialize a layer instance

        Parameters
        ----------
        size: int
            Number of neurons in the layer. Fixed for the layer's lifetime.

        is_input: bool, default=False
            If True, the layer is built from input neurons, which have an
            identity activation and no bias.

        biases: array-like, default=None
            Initial biases for non-input layers. Zeros if None.

        """
        if int(size) != size or size < 1:
            msg = "Layer `size` ({}) must be a positive integer"
            raise ValueError(msg.format(size))

        self.is_input = is_input

        if is_input:
            if biases is not None:
                raise ValueError("Input layers do not take biases")
            self.neurons = [Neuron() for _ in range(int(size))]
        else:
            self.neurons = [Neuron(bias=0.0) for _ in range(int(size))]
            if biases is not None:
                self.set_biases(biases)

    def __repr__(self):
        return "<Layer size={}, is_input={}>".format(self.size, self.is_input)

    def __len__(self):
        return len(self.neurons)

    def __getitem__(self, index):
        return self.neurons[self._validate_index(index)]

    @property
    def size(self):
        return len(self.neurons)

    def _validate_index(self, index):
        if not 0 <= index < self.size:
            msg = "Neuron index {} out of range for layer of size {}"
            raise OutOfRange(msg.format(index, self.size))
        return index

    def set_input_at(self, index, value):
        """ Set the input of neuron `index`. Its activation and derivative
        are recomputed immediately.
        """
        self.neurons[self._validate_index(index)].set_input(value)

    def set_bias_at(self, index, value):
        self.neurons[self._validate_index(index)].set_bias(value)

    def get_bias_at(self, index):
        return self.neurons[self._validate_index(index)].bias

    def set_biases(self, values):
        values = numpy.asarray(values, dtype=float)

        if values.shape != (self.size,):
            msg = "Got biases of shape {} for layer of size {}"
            raise DimensionMismatch(msg.format(values.shape, self.size))

        for neuron, value in zip(self.neurons, values):
            neuron.set_bias(value)

    def get_inputs(self):
        return numpy.array([neuron.input for neuron in self.neurons])

    def get_activations(self):
        return numpy.array([neuron.activation for neuron in self.neurons])

    def get_derivatives(self):
        return numpy.array([neuron.derivative for neuron in self.neurons])

    def get_biases(self):
        return numpy.array([neuron.bias for neuron in self.neurons])
