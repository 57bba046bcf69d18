import unittest

import numpy

from ffnet.core.exception import DimensionMismatch, OutOfRange
from ffnet.core.layer import Layer


class TestLayer(unittest.TestCase):

    def test_size(self):
        layer = Layer(4)

        self.assertEqual(layer.size, 4)
        self.assertEqual(len(layer), 4)
        self.assertEqual(len(layer.get_inputs()), 4)
        self.assertEqual(len(layer.get_activations()), 4)
        self.assertEqual(len(layer.get_derivatives()), 4)

    def test_bad_size(self):
        for size in [0, -2, 1.5]:
            with self.assertRaises(ValueError):
                Layer(size)

    def test_set_input_at(self):
        layer = Layer(3, biases=[0.0, 0.0, 0.0])
        layer.set_input_at(1, 2.0)

        inputs = layer.get_inputs()
        self.assertEqual(list(inputs), [0.0, 2.0, 0.0])

        activations = layer.get_activations()
        self.assertAlmostEqual(activations[0], 0.5)
        self.assertAlmostEqual(activations[1], 1.0 / (1.0 + numpy.exp(-2.0)))

    def test_input_layer_activations_equal_inputs(self):
        layer = Layer(3, is_input=True)
        for index, value in enumerate([0.1, -2.0, 3.5]):
            layer.set_input_at(index, value)

        self.assertTrue(
            (layer.get_activations() == layer.get_inputs()).all())
        self.assertTrue((layer.get_derivatives() == 1.0).all())
        self.assertTrue((layer.get_biases() == 0.0).all())

    def test_input_layer_rejects_biases(self):
        with self.assertRaises(ValueError):
            Layer(2, is_input=True, biases=[1.0, 2.0])

        layer = Layer(2, is_input=True)
        with self.assertRaises(ValueError):
            layer.set_bias_at(0, 1.0)

    def test_bias_accessors(self):
        layer = Layer(2)
        layer.set_bias_at(1, 0.25)

        self.assertEqual(layer.get_bias_at(0), 0.0)
        self.assertEqual(layer.get_bias_at(1), 0.25)

        layer.set_biases([1.0, -1.0])
        self.assertEqual(list(layer.get_biases()), [1.0, -1.0])

    def test_set_biases_wrong_length(self):
        layer = Layer(2)

        with self.assertRaises(DimensionMismatch):
            layer.set_biases([1.0, 2.0, 3.0])

    def test_index_out_of_range(self):
        layer = Layer(2)

        for index in [-1, 2, 10]:
            with self.assertRaises(OutOfRange):
                layer.set_input_at(index, 1.0)
            with self.assertRaises(OutOfRange):
                layer.set_bias_at(index, 1.0)
            with self.assertRaises(OutOfRange):
                layer.get_bias_at(index)
            with self.assertRaises(OutOfRange):
                layer[index]

    def test_getters_are_idempotent(self):
        layer = Layer(3, biases=[0.1, 0.2, 0.3])
        layer.set_input_at(0, 1.0)

        first = (layer.get_inputs(), layer.get_activations())
        second = (layer.get_inputs(), layer.get_activations())

        self.assertTrue((first[0] == second[0]).all())
        self.assertTrue((first[1] == second[1]).all())
