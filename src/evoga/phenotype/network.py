"""
Evoga Network Module

This module implements the phenotype of the genetic algorithm: a fully connected
feedforward neural network with rectified-linear activation. It also implements
the codec between a network and its chromosome (see 'evoga.genotype.chromosome'
for the gene order).

The network is represented the object-oriented way, with explicit Neuron and
Layer objects:
    Neuron  - a bias plus one weight per input
    Layer   - neurons sharing the same input width
    Network - layers where each layer's input width is the previous layer's output width

Classes:
    LayerTopology: Width (neuron count) of one layer in a topology description
    Neuron:        A computational node: relu(bias + weights . inputs)
    Layer:         An ordered group of neurons reading the same inputs
    Network:       A feedforward neural network

Functions:
    topology_widths:   Validate a topology and return its widths as ints
    chromosome_length: Number of genes encoding a network of a given topology
"""

from dataclasses import dataclass
from typing      import Sequence, Union

import numpy as np

from evoga.errors   import ChromosomeLengthError, InputSizeError, TopologyError
from evoga.genotype import GENE_DTYPE, Chromosome

# Range of the uniform distribution used for random weights and biases.
INIT_MIN = -1.0
INIT_MAX = +1.0


@dataclass(frozen=True)
class LayerTopology:
    """The number of neurons in one layer of a topology."""
    neurons: int


Topology = Sequence[Union[LayerTopology, int]]


def topology_widths(topology: Topology) -> list[int]:
    """
    Validate a topology description and return the layer widths.

    Parameters:
        topology: layer widths, input layer first, output layer last;
                  entries are either LayerTopology instances or plain ints

    Returns:
        the widths, as a list of ints

    Raises:
        TopologyError: if there are fewer than 2 entries, or a width is not a positive integer
    """
    widths = [entry.neurons if isinstance(entry, LayerTopology) else entry for entry in topology]

    if len(widths) < 2:
        raise TopologyError(f"A topology needs at least 2 layer widths, got {len(widths)}")

    for position, width in enumerate(widths):
        if isinstance(width, bool) or not isinstance(width, (int, np.integer)) or width < 1:
            raise TopologyError(f"Layer width at position {position} must be a positive integer, got {width!r}")

    return [int(w) for w in widths]


def chromosome_length(topology: Topology) -> int:
    """
    Calculate the number of genes encoding a network with the given topology.
    Each neuron contributes one bias plus one weight per input.
    """
    widths = topology_widths(topology)
    return sum(n_out * (n_in + 1) for n_in, n_out in zip(widths[:-1], widths[1:]))


class Neuron:
    """
    A single neuron of a feedforward network.

    The neuron computes: max(0, bias + sum(weight_i * input_i))

    Public Attributes:
        bias:    Value added to the weighted sum of the inputs
        weights: One weight per input (numpy float32 array)

    Public Properties:
        input_width: Number of inputs the neuron expects

    Public Methods:
        random(rng, input_width): Create a neuron with random bias and weights
        propagate(inputs):        Compute the neuron's output
    """

    def __init__(self, bias: float, weights: Sequence[float]):
        """
        Parameters:
            bias:    the neuron bias
            weights: the weights of the incoming connections, one per input
        """
        self.bias   : np.float32 = GENE_DTYPE(bias)
        self.weights: np.ndarray = np.asarray(weights, dtype=GENE_DTYPE).reshape(-1)

    @classmethod
    def random(cls,
               rng        : np.random.Generator,
               input_width: int,
               low        : float = INIT_MIN,
               high       : float = INIT_MAX) -> 'Neuron':
        """
        Create a neuron whose bias and weights are drawn uniformly from [low, high).
        The bias is drawn first, then the weights in input order.
        """
        bias    = rng.uniform(low, high)
        weights = rng.uniform(low, high, size=input_width)
        return cls(bias, weights)

    @property
    def input_width(self) -> int:
        return len(self.weights)

    def propagate(self, inputs: Sequence[float]) -> np.float32:
        """
        Compute the neuron's output for the given inputs.
        Inputs are cast to the gene dtype, so the whole computation runs in float32.

        Parameters:
            inputs: one value per weight

        Returns:
            the rectified weighted sum of the inputs, plus the bias (float32)
        """
        if len(inputs) != len(self.weights):
            raise InputSizeError(f"Neuron expected {len(self.weights)} inputs, got {len(inputs)}")

        output = np.dot(np.asarray(inputs, dtype=GENE_DTYPE), self.weights) + self.bias
        return max(GENE_DTYPE(0.0), GENE_DTYPE(output))

    def __eq__(self, other):
        if not isinstance(other, Neuron):
            return NotImplemented
        return bool(self.bias == other.bias) and bool(np.array_equal(self.weights, other.weights))

    def __repr__(self):
        return f"Neuron(bias={self.bias:+.6f}, weights={self.weights!r})"


class Layer:
    """
    An ordered group of neurons, all reading the same inputs.

    The output width of a layer is its neuron count.

    Public Attributes:
        neurons: the neurons of this layer, in order

    Public Properties:
        input_width:  Number of inputs each neuron expects
        output_width: Number of neurons in the layer
    """

    def __init__(self, neurons: Sequence[Neuron]):
        """
        Parameters:
            neurons: the neurons making up the layer (at least one)
        """
        if not neurons:
            raise TopologyError("A layer needs at least one neuron")

        widths = {neuron.input_width for neuron in neurons}
        if len(widths) != 1:
            raise TopologyError(f"All neurons in a layer must share one input width, got {sorted(widths)}")

        self.neurons: list[Neuron] = list(neurons)

    @classmethod
    def random(cls,
               rng         : np.random.Generator,
               input_width : int,
               output_width: int,
               low         : float = INIT_MIN,
               high        : float = INIT_MAX) -> 'Layer':
        """Create a layer of 'output_width' random neurons, each reading 'input_width' inputs."""
        return cls([Neuron.random(rng, input_width, low, high) for _ in range(output_width)])

    @property
    def input_width(self) -> int:
        return self.neurons[0].input_width

    @property
    def output_width(self) -> int:
        return len(self.neurons)

    def propagate(self, inputs: Sequence[float]) -> np.ndarray:
        """Return the output of every neuron, in neuron order."""
        return np.array([neuron.propagate(inputs) for neuron in self.neurons], dtype=GENE_DTYPE)

    def __eq__(self, other):
        if not isinstance(other, Layer):
            return NotImplemented
        return self.neurons == other.neurons

    def __repr__(self):
        return f"Layer(input_width={self.input_width}, output_width={self.output_width})"


class Network:
    """
    A fully connected feedforward neural network with relu activation.

    Networks are created either at random (initial population) or by decoding
    a chromosome (offspring). Propagation is deterministic and side-effect free.

    Public Attributes:
        layers: the layers of the network, in propagation order

    Public Properties:
        topology:     Layer widths, input width first
        input_width:  Number of network inputs
        output_width: Number of network outputs

    Public Methods:
        random(rng, topology):           Create a network with random parameters
        from_weights(topology, weights): Decode a chromosome into a network
        weights():                       Encode the network into a chromosome
        propagate(inputs):               Run a forward pass
    """

    def __init__(self, layers: Sequence[Layer]):
        """
        Parameters:
            layers: the layers of the network; each layer's input width must
                    equal the output width of the layer before it
        """
        if not layers:
            raise TopologyError("A network needs at least one layer")

        for i in range(1, len(layers)):
            if layers[i].input_width != layers[i - 1].output_width:
                raise TopologyError(f"Layer {i} expects {layers[i].input_width} inputs "
                                    f"but layer {i - 1} has {layers[i - 1].output_width} outputs")

        self.layers: list[Layer] = list(layers)

    @classmethod
    def random(cls,
               rng     : np.random.Generator,
               topology: Topology,
               low     : float = INIT_MIN,
               high    : float = INIT_MAX) -> 'Network':
        """
        Create a network with weights and biases drawn uniformly from [low, high).

        Parameters:
            rng:      source of randomness
            topology: layer widths, input width first (at least 2 entries)
            low:      lower bound of the initialization range
            high:     upper bound of the initialization range

        Returns:
            a network with len(topology) - 1 layers
        """
        widths = topology_widths(topology)
        layers = [Layer.random(rng, n_in, n_out, low, high) for n_in, n_out in zip(widths[:-1], widths[1:])]
        return cls(layers)

    @classmethod
    def from_weights(cls, topology: Topology, weights: Union[Chromosome, Sequence[float]]) -> 'Network':
        """
        Decode a chromosome into a network.

        Parameters:
            topology: layer widths, input width first (at least 2 entries)
            weights:  the genes, in traversal order (bias then weights, per neuron, per layer)

        Returns:
            the decoded network

        Raises:
            ChromosomeLengthError: if the number of genes does not match the topology
        """
        widths   = topology_widths(topology)
        genes    = weights.genes if isinstance(weights, Chromosome) else np.asarray(weights, dtype=GENE_DTYPE)
        expected = chromosome_length(widths)

        if len(genes) != expected:
            raise ChromosomeLengthError(f"Topology {widths} needs {expected} genes, got {len(genes)}")

        layers   = []
        position = 0
        for n_in, n_out in zip(widths[:-1], widths[1:]):
            neurons = []
            for _ in range(n_out):
                bias           = genes[position]
                neuron_weights = genes[position + 1: position + 1 + n_in]
                neurons.append(Neuron(bias, neuron_weights.copy()))
                position += n_in + 1
            layers.append(Layer(neurons))

        return cls(layers)

    @property
    def topology(self) -> list[int]:
        return [self.layers[0].input_width] + [layer.output_width for layer in self.layers]

    @property
    def input_width(self) -> int:
        return self.layers[0].input_width

    @property
    def output_width(self) -> int:
        return self.layers[-1].output_width

    def weights(self) -> Chromosome:
        """
        Encode the network into a chromosome.
        Genes follow the traversal order: per layer, per neuron, bias then weights.
        """
        parts = []
        for layer in self.layers:
            for neuron in layer.neurons:
                parts.append(np.array([neuron.bias], dtype=GENE_DTYPE))
                parts.append(neuron.weights)
        return Chromosome(np.concatenate(parts))

    def propagate(self, inputs: Sequence[float]) -> np.ndarray:
        """
        Perform a complete forward pass through the network.

        Parameters:
            inputs: the network inputs (as many as the input width)

        Returns:
            the output of the last layer (as many float32 values as the output width)
        """
        if len(inputs) != self.input_width:
            raise InputSizeError(f"Expected {self.input_width} inputs, got {len(inputs)}")

        values = np.asarray(inputs, dtype=GENE_DTYPE)
        for layer in self.layers:
            values = layer.propagate(values)
        return values

    def __eq__(self, other):
        if not isinstance(other, Network):
            return NotImplemented
        return self.topology == other.topology and self.weights() == other.weights()

    def __repr__(self):
        return f"Network(topology={self.topology})"
