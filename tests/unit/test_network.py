import numpy as np
import pytest

from layernet.core.errors import ShapeMismatchError, TopologyError
from layernet.core.init import WeightInitializer
from layernet.core.layers import dense, dense_output, passthrough
from layernet.core.network import Network


@pytest.mark.parametrize(
    "layers",
    [
        [passthrough(3), dense(3, 20), dense(20, 2)],
        [passthrough(1), dense_output(1, 1)],
        [passthrough(4), dense(4, 4), dense(4, 8), dense_output(8, 3)],
    ],
)
def test_validate_accepts_chained_dimensions(layers):
    Network(layers).validate()


@pytest.mark.parametrize(
    "layers",
    [
        [],
        [passthrough(3)],
        [passthrough(3), dense(5, 2)],
        [passthrough(3), dense(3, 4), dense(5, 2)],
        [passthrough(3), dense(3, 0), dense(0, 2)],
    ],
)
def test_validate_rejects_broken_chains(layers):
    with pytest.raises(TopologyError):
        Network(layers).validate()


def test_validate_error_names_offending_layer():
    with pytest.raises(TopologyError, match="Layer 2"):
        Network([passthrough(3), dense(3, 4), dense(5, 2)]).validate()


def test_forward_threads_through_every_layer():
    net = Network([passthrough(3), dense(3, 20), dense_output(20, 2)])
    net.initialize_weights(WeightInitializer(seed=0))
    x = np.array([0.5, 0.5, 0.5])
    expected = x
    for layer in net:
        expected = layer.forward_propagate(expected)
    out = net.forward(x)
    np.testing.assert_array_equal(out, expected)
    assert out.shape == (2,)


def test_forward_rejects_wrong_input_length():
    net = Network([passthrough(3), dense(3, 2)])
    net.initialize_weights(WeightInitializer(seed=0))
    with pytest.raises(ShapeMismatchError):
        net.forward([1.0, 2.0, 3.0, 4.0])


def test_initialize_weights_is_reproducible():
    nets = []
    for _ in range(2):
        net = Network([passthrough(2), dense(2, 3), dense_output(3, 1)])
        net.initialize_weights(WeightInitializer(seed=11))
        nets.append(net)
    for a, b in zip(*nets):
        np.testing.assert_array_equal(a.weights, b.weights)


def test_layers_own_distinct_weight_buffers():
    net = Network([passthrough(2), dense(2, 2), dense(2, 2)])
    net.initialize_weights(WeightInitializer(seed=0))
    assert net.layers[1].weights is not net.layers[2].weights
    assert not np.array_equal(net.layers[1].weights, net.layers[2].weights)


def test_describe_and_parameter_count():
    net = Network([passthrough(3), dense(3, 20), dense_output(20, 2)])
    desc = net.describe()
    assert desc.layer_dims == [3, 3, 20, 2]
    assert desc.layer_kinds == ["passthrough", "dense", "dense_output"]
    assert net.parameter_count() == 3 * 20 + 20 * 2
    assert net.input_dim == 3
    assert net.output_dim == 2
    assert len(net) == 3


def test_backward_is_not_implemented():
    net = Network([passthrough(2), dense_output(2, 1)])
    with pytest.raises(NotImplementedError):
        net.backward(np.zeros(1))
