""" This module provides a few simple `on_sample` functions that can be
passed to :meth:`ffnet.core.network.Network.train`. Each is called as
`on_sample(i, network)` after the forward pass of the i'th sample, and
only reads from the network.
"""
import sys

from ffnet.linalg import format_vector


def print_layers(stream=None):
    """ Print the pass number, the layer states and the target values
    of every sample to `stream` (standard output by default). Usage::

        network.train(samples, on_sample=[print_layers()])
    """

    def on_sample(i, network):
        out = stream or sys.stdout
        out.write("(PASS : {})\n".format(i))
        out.write(network.format_layers() + "\n")
        for target in network.target:
            out.write("\t(Target: {})\n".format(format_vector([target])))
        out.write("\n")

    return on_sample


def collect_costs(cost_list):
    """ Collects the quadratic cost of each sample, before its update.
    Costs are appended to :code:`cost_list` and so an empty list should be
    provided. Usage::

        costs = []
        network.train(samples, on_sample=[collect_costs(costs)])
    """

    def on_sample(i, network):
        cost_list.append(network.cost())

    return on_sample


def log_progress(logger, n_samples, every=1):
    """ Log the sample number and cost through a
    :class:`ffnet.core.logger.TrainingLogger` on every `every`'th sample
    """
    if int(every) != every or every < 1:
        msg = "`every` ({}) must be a positive integer"
        raise ValueError(msg.format(every))

    def on_sample(i, network):
        if i % every == 0 or i == n_samples - 1:
            msg = "cost = {:.6f}".format(network.cost())
            logger.progress(msg, i + 1, n_samples)

    return on_sample


def plot_costs(window=1, line_kwargs=None, pause=0.001):
    """ Plot the running cost on the current matplotlib axis as training
    proceeds. With `window > 1`, the moving average over the last
    `window` samples is plotted instead. :code:`line_kwargs` is a dictionary
    of keyword arguments that, if provided, is supplied to the `plot`
    function
    """

    import matplotlib.pyplot as plt
    import numpy

    costs = []
    kwargs = line_kwargs or {'color': 'red'}
    line, = plt.plot([], [], **kwargs)
    plt.xlabel('sample')
    plt.ylabel('cost')

    def on_sample(i, network):
        costs.append(network.cost())

        values = numpy.array(costs)
        if window > 1 and len(values) >= window:
            kernel = numpy.ones(window) / window
            values = numpy.convolve(values, kernel, mode='valid')

        line.set_data(numpy.arange(len(values)), values)
        ax = line.axes
        ax.relim()
        ax.autoscale_view()
        plt.pause(pause)

    return on_sample
