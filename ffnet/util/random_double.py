import numpy


DEFAULT_LOW = -1.0
DEFAULT_HIGH = 1.0


class RandomDouble:
    """ A seedable source of independent, uniformly distributed reals in
    the interval `[low, high)`. Used to initialize weights and biases.
    """

    def __init__(self, random_state=None, low=DEFAULT_LOW, high=DEFAULT_HIGH):
        """ Initialize the generator

        Parameters
        ----------
        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results. If None,
            a fresh, unseeded RandomState is created.

        low, high: float, defaults=-1.0, 1.0
            The bounds of the uniform distribution.

        """
        if random_state is None:
            random_state = numpy.random.RandomState()
            self.seeded = False
        elif not isinstance(random_state, numpy.random.RandomState):
            msg = "`random_state` ({}) not instance numpy.random.RandomState"
            raise TypeError(msg.format(type(random_state)))
        else:
            self.seeded = True

        low = float(low)
        high = float(high)

        if low >= high:
            msg = "`low` ({}) must be less than `high` ({})"
            raise ValueError(msg.format(low, high))

        self.random_state = random_state
        self.low = low
        self.high = high

    def __repr__(self):
        return "<RandomDouble low={}, high={}>".format(self.low, self.high)

    def __call__(self, size=None):
        """ Draw a single float (`size=None`) or an array of independent
        draws with the given shape
        """
        values = self.random_state.uniform(self.low, self.high, size=size)

        if size is None:
            return float(values)
        return values
