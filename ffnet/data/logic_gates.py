import logging

import numpy


logger = logging.getLogger(__name__)


INPUTS = ((0., 0.), (0., 1.), (1., 0.), (1., 1.))

GATES = {
    'and': lambda a, b: a and b,
    'or': lambda a, b: a or b,
    'xor': lambda a, b: a != b,
    'nand': lambda a, b: not (a and b),
}


def make(gate):
    """
    Make the truth table of a two-input logic gate as training samples.

    Parameters
    ----------
    gate: str
        One of 'and', 'or', 'xor', 'nand' (case insensitive).

    Returns
    -------
    samples: list of (ndarray, ndarray)
        Four (input, target) pairs with input shape (2,) and target
        shape (1,).
    """
    try:
        func = GATES[gate.lower()]
    except (KeyError, AttributeError):
        msg = "Unknown gate {}; should be one of {}"
        raise ValueError(msg.format(gate, sorted(GATES)))

    return [
        (numpy.array(inputs), numpy.array([float(func(*map(bool, inputs)))]))
        for inputs in INPUTS
    ]


def make_dataset(gate, n_epochs, shuffle=False, random_state=None):
    """
    Make a training set of `n_epochs` repetitions of a gate's truth table,
    suitable for a single call to `Network.train`.

    Parameters
    ----------
    gate: str
        See :func:`make`.

    n_epochs: int
        The number of times each truth table row appears.

    shuffle: bool, default=False
        If True, the rows are reordered at random within each epoch.

    random_state: numpy.random.RandomState, default=None
        RandomState object for reproducible shuffling.

    Returns
    -------
    samples: list of (ndarray, ndarray)
    """
    if int(n_epochs) != n_epochs or n_epochs < 1:
        msg = "`n_epochs` ({}) must be a positive integer"
        raise ValueError(msg.format(n_epochs))

    table = make(gate)

    if shuffle and random_state is None:
        random_state = numpy.random.RandomState()
        logger.warning("RandomState not provided; shuffling will "
                       "not be reproducible")

    samples = []
    for _ in range(int(n_epochs)):
        order = (random_state.permutation(len(table)) if shuffle
                 else range(len(table)))
        samples.extend(table[index] for index in order)

    return samples
