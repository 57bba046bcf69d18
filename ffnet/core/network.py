import logging

import numpy

from .exception import (
    DimensionMismatch, ErrorsNotComputed, MalformedSample, OutOfRange,
    TargetNotSet)
from .layer import Layer
from ffnet.functions import quadratic_cost, quadratic_cost_gradient
from ffnet.linalg import Matrix, format_vector, hadamard_product
from ffnet.util.random_double import RandomDouble


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)

DEFAULT_LEARNING_RATE = 0.1


class Network(object):
    """ A fully-connected feedforward network trained one sample at a time
    by gradient descent on the quadratic cost.

    Layer 0 is the input layer. Weight matrix `l` connects layer `l` to
    layer `l+1` and has shape `(size[l+1], size[l])`, so that entry
    `(j, i)` is the weight from neuron `i` of layer `l` to neuron `j` of
    layer `l+1`.
    """
    def __init__(self, layer_sizes, learning_rate=DEFAULT_LEARNING_RATE,
                 random_double=None):
        """ Initialize a network instance

        Parameters
        ----------
        layer_sizes: list of int
            Number of neurons per layer, input layer first. At least two
            layers, each with at least one neuron.

        learning_rate: float, default=0.1
            The fixed gradient descent step size.

        random_double: RandomDouble, default=None
            Generator used to initialize weights and biases. Provide a
            seeded instance for reproducible results.

        """
        self._validate_layer_sizes(layer_sizes)

        try:
            learning_rate = float(learning_rate)
        except (ValueError, TypeError):
            msg = "`learning_rate` ({}) must be numeric"
            raise ValueError(msg.format(learning_rate))

        if not learning_rate > 0:
            msg = "`learning_rate` ({}) must be positive"
            raise ValueError(msg.format(learning_rate))

        if random_double is None:
            random_double = RandomDouble()

        if not getattr(random_double, 'seeded', True):
            msg = ("RandomDouble not seeded; weight initialization "
                   "will not be reproducible")
            logger.warning(msg)

        self.learning_rate = learning_rate
        self.layers = []
        self.weight_matrices = []

        for index, size in enumerate(layer_sizes):
            self.layers.append(Layer(size, is_input=(index == 0)))

        for index in range(self.n_layers - 1):
            # Rows correspond to neurons in the next layer, columns
            # to neurons in the current one.
            self.weight_matrices.append(
                Matrix(layer_sizes[index+1], layer_sizes[index],
                       random_double=random_double))

            next_layer = self.layers[index+1]
            for neuron_index in range(next_layer.size):
                next_layer.set_bias_at(neuron_index, random_double())

        self.input = None
        self.target = None
        self.errors = {}
        self._errors_applied = False

        logger.debug("Created network with layer sizes {}".format(
            self.layer_sizes))

    def __repr__(self):
        return "<Network layer_sizes={}, learning_rate={:g}>".format(
            self.layer_sizes, self.learning_rate)

    @staticmethod
    def _validate_layer_sizes(layer_sizes):
        if not numpy.iterable(layer_sizes):
            raise TypeError("`layer_sizes` was not iterable")

        if len(layer_sizes) < 2:
            msg = "A network needs at least 2 layers, got {}"
            raise ValueError(msg.format(len(layer_sizes)))

        for index, size in enumerate(layer_sizes):
            if (isinstance(size, bool) or
                    not isinstance(size, (int, numpy.integer)) or size < 1):
                msg = "Layer {} size ({}) must be a positive integer"
                raise ValueError(msg.format(index, size))

    @property
    def n_layers(self):
        return len(self.layers)

    @property
    def layer_sizes(self):
        return [layer.size for layer in self.layers]

    @property
    def output(self):
        return self.layers[-1].get_activations()

    def _as_vector(self, values, size, name):
        vector = numpy.array(values, dtype=float)

        if vector.shape != (size,):
            msg = "`{}` has shape {} but should have shape {}"
            raise DimensionMismatch(msg.format(name, vector.shape, (size,)))

        return vector

    def set_weights(self, index, weights):
        """ Overwrite weight matrix `index` with a copy of `weights`, which
        must have the matrix's shape
        """
        if not 0 <= index < len(self.weight_matrices):
            msg = "Weight matrix index {} out of range ({} matrices)"
            raise OutOfRange(msg.format(index, len(self.weight_matrices)))

        matrix = Matrix.from_array(weights)
        expected_shape = self.weight_matrices[index].shape

        if matrix.shape != expected_shape:
            msg = "Weights for matrix {} have shape {} but should be {}"
            raise DimensionMismatch(
                msg.format(index, matrix.shape, expected_shape))

        self.weight_matrices[index] = matrix

    def set_input(self, input):
        """ Set the inputs of the neurons in the input layer
        """
        input = self._as_vector(input, self.layers[0].size, 'input')
        self.input = input

        for neuron_index, value in enumerate(input):
            self.layers[0].set_input_at(neuron_index, value)

    def set_target(self, target):
        """ Set the target output that the output layer is trained toward
        """
        self.target = self._as_vector(target, self.layers[-1].size, 'target')

    def feed_forward(self):
        """ Propagate the input layer's activations through the network,
        setting the inputs (and so the activations) of every later layer

        Returns
        -------
        output: numpy.ndarray
            The output layer activations

        """
        # Errors from an earlier pass no longer match the activations
        self.errors.clear()

        for index, weights in enumerate(self.weight_matrices):
            next_inputs = weights.dot(self.layers[index].get_activations())
            next_layer = self.layers[index+1]

            for neuron_index, value in enumerate(next_inputs):
                next_layer.set_input_at(neuron_index, value)

        return self.output

    def predict(self, input):
        """ Set `input` and run the forward pass, returning the output
        layer activations
        """
        self.set_input(input)
        return self.feed_forward()

    def cost(self):
        """ The quadratic cost of the current output against the target
        """
        if self.target is None:
            raise TargetNotSet("No target output has been set")
        return quadratic_cost(self.output, self.target)

    def back_propagate(self):
        """ Compute the error of every non-input layer for the current
        sample, under the quadratic cost, and store them in `errors`
        keyed by layer index.
        """
        if self.target is None:
            raise TargetNotSet("No target output has been set")

        output_layer = len(self.layers) - 1

        gradient = quadratic_cost_gradient(self.output, self.target)
        self.errors[output_layer] = hadamard_product(
            gradient, self.layers[output_layer].get_derivatives())

        # Layer 0 has no incoming weights, and so no error.
        for index in range(output_layer - 1, 0, -1):
            backpropagated = self.weight_matrices[index].transpose().dot(
                self.errors[index+1])
            self.errors[index] = hadamard_product(
                backpropagated, self.layers[index].get_derivatives())

        self._errors_applied = False
        return self.errors

    def update(self):
        """ Take a gradient descent step on every weight matrix and every
        non-input bias using the most recently computed errors
        """
        missing = [index for index in range(1, self.n_layers)
                   if index not in self.errors]
        if missing:
            msg = "No errors computed for layers {}; run back_propagate first"
            raise ErrorsNotComputed(msg.format(missing))

        if self._errors_applied:
            msg = "Errors were already applied; run back_propagate first"
            raise ErrorsNotComputed(msg)

        # Setting a bias recomputes the neuron's activation, so the
        # forward pass activations are read before anything changes.
        activations = [layer.get_activations() for layer in self.layers]

        for index, weights in enumerate(self.weight_matrices):
            error = self.errors[index+1]

            weights.values -= self.learning_rate * numpy.outer(
                error, activations[index])

            next_layer = self.layers[index+1]
            for neuron_index, neuron_error in enumerate(error):
                bias = next_layer.get_bias_at(neuron_index)
                next_layer.set_bias_at(
                    neuron_index, bias - self.learning_rate * neuron_error)

        self._errors_applied = True

    def train(self, samples, on_sample=None):
        """ Train the network online, taking one gradient descent step per
        sample, in order

        Parameters
        ----------
        samples: iterable of (input, target) pairs
            The training samples. One pass is made over them; call `train`
            again to run further epochs.

        on_sample: list of callables, default=None
            Each is called as `func(i, network)` after the forward pass of
            the i'th sample, before backpropagation. See
            :mod:`ffnet.util.on_sample`.

        """
        if on_sample is None:
            on_sample = []
        elif callable(on_sample):
            on_sample = [on_sample]

        samples = list(samples)
        logger.info("Training on {} samples".format(len(samples)))

        for i, sample in enumerate(samples):

            input, target = self._unpack_sample(i, sample)

            # Validate both before touching the input layer
            input = self._as_vector(input, self.layers[0].size, 'input')
            target = self._as_vector(
                target, self.layers[-1].size, 'target')

            self.set_input(input)
            self.set_target(target)

            self.feed_forward()

            for func in on_sample:
                func(i, self)

            logger.debug("(Sample = {:d}) cost = {:.6f}".format(
                i, self.cost()))

            # Clear the errors from any previous sample
            self.errors.clear()
            self.back_propagate()

            self.update()

    @staticmethod
    def _unpack_sample(i, sample):
        try:
            n_parts = len(sample)
        except TypeError:
            msg = "Sample {} ({}) is not an (input, target) pair"
            raise MalformedSample(msg.format(i, type(sample)))

        if n_parts != 2:
            msg = "Sample {} has {} parts but should be (input, target)"
            raise MalformedSample(msg.format(i, n_parts))

        input, target = sample

        if input is None or target is None:
            msg = "Sample {} is missing its {}"
            raise MalformedSample(
                msg.format(i, 'input' if input is None else 'target'))

        return input, target

    def format_layers(self):
        """ Text of the input layer's inputs, followed by the activations
        of every other layer
        """
        lines = []

        for index, layer in enumerate(self.layers):
            if index == 0:
                label, values = "INPUT LAYER:", layer.get_inputs()
            elif index == self.n_layers - 1:
                label, values = "OUTPUT LAYER:", layer.get_activations()
            else:
                label = "LAYER {}:".format(index)
                values = layer.get_activations()

            lines.append("{}\t{}".format(label, format_vector(values)))

        return "\n".join(lines)
