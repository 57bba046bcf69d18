from ffnet.functions import sigmoid, sigmoid_derivative


class Neuron(object):
    """ A single unit of a feedforward network, holding an input value,
    a bias, the activation, and the derivative of the activation.

    Input-layer neurons (built with `bias=None`) pass their input through
    unchanged: the activation is the input and the derivative is one.
    All other neurons squash the biased input, so that::

        activation = sigmoid(input + bias)
        derivative = sigmoid'(input + bias)

    Activation and derivative are recomputed every time the input or the
    bias is set, so they are never stale.
    """
    def __init__(self, input=0.0, bias=None):
        """
        Parameters
        ----------
        input: float, default=0.0
            The initial input value.

        bias: float, default=None
            The bias. None marks an input-layer neuron, which carries no
            trainable bias.

        """
        self._input = float(input)
        self._bias = None if bias is None else float(bias)
        self.activate()
        self.derive()

    def __repr__(self):
        if self.is_input:
            return "<Neuron input={:g}>".format(self._input)
        return "<Neuron input={:g}, bias={:g}>".format(self._input,
                                                      self._bias)

    @property
    def is_input(self):
        return self._bias is None

    @property
    def input(self):
        return self._input

    @property
    def bias(self):
        return 0.0 if self._bias is None else self._bias

    @property
    def activation(self):
        return self._activation

    @property
    def derivative(self):
        return self._derivative

    def set_input(self, input):
        self._input = float(input)
        self.activate()
        self.derive()

    def set_bias(self, bias):
        if self.is_input:
            raise ValueError("Input-layer neurons carry no bias")
        self._bias = float(bias)
        self.activate()
        self.derive()

    def activate(self):
        """ Recompute the activation from the current input and bias
        """
        if self.is_input:
            self._activation = self._input
        else:
            self._activation = float(sigmoid(self._input + self._bias))

    def derive(self):
        """ Recompute the derivative of the activation from the current
        input and bias
        """
        if self.is_input:
            self._derivative = 1.0
        else:
            self._derivative = float(
                sigmoid_derivative(self._input + self._bias))
