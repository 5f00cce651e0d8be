import logging
import random
from time import monotonic
from typing import Iterator, List, Sequence, Tuple

import networkx as nx

from .genes import Node
from .generator import generate_hidden_layers
from .resolver import find_orphans, generate_output_layer
from ..data import NetworkStats

logger = logging.getLogger("NetworkSimulation")

class NeuralNetwork:
    """Sparse layered network; layer 0 holds the inputs, outputs are kept apart."""
    def __init__(self, num: int, input_size: int, output_size: int):
        self.num = num
        self.input_size = input_size
        self.output_size = output_size
        self.layers: List[List[Node]] = [[]]
        self.outputs: List[Node] = []

    @classmethod
    def generate(cls, num: int, input_size: int, output_size: int, rng: random.Random) -> "NeuralNetwork":
        """Build hidden layers then the output layer, drawing from `rng` in that order."""
        net = cls(num, input_size, output_size)
        start = monotonic()
        generate_hidden_layers(net.layers, rng)
        logger.debug(f"Network {num}: hidden layers generated in {monotonic() - start:.4f}s")
        net.outputs = generate_output_layer(net.layers, output_size, rng)
        logger.debug(f"Network {num}: output layer generated in {monotonic() - start:.4f}s")
        return net

    # --- evaluation ---
    def update(self, inputs: Sequence[float]) -> List[float]:
        """Append `inputs` to the input layer, propagate, and return the output values."""
        if len(inputs) != self.input_size:
            raise ValueError(f"Expected {self.input_size} inputs, got {len(inputs)}")

        # Inputs accumulate in layer 0 across ticks
        self.layers[0].extend(Node(value=float(x)) for x in inputs)
        self.propagate()
        return [node.value for node in self.outputs]

    def propagate(self):
        """Recompute every hidden and output node once, in layer then index order.

        References are read, not forced: a node not yet recomputed in this
        sweep (same layer, or itself) contributes its value from the last sweep.
        """
        assert self.layers[0], "Cannot propagate because input is empty!"
        for layer in self.layers[1:]:
            for node in layer:
                node.value = self.compute_value(node)
        for node in self.outputs:
            node.value = self.compute_value(node)

    def compute_value(self, node: Node) -> float:
        v = 0.0
        if node.references is not None:
            for ref in node.references:
                v += self.layers[ref.layer][ref.index].value * ref.weight
        if node.bias is not None:
            v += node.bias
        return min(1.0, max(-1.0, v))

    # --- introspection ---
    @property
    def num_layers(self) -> int:
        return len(self.layers)

    @property
    def num_nodes(self) -> int:
        return sum(len(layer) for layer in self.layers[1:])

    @property
    def num_references(self) -> int:
        return sum(
            len(node.references)
            for _, _, node in self.iter_nodes()
            if node.references is not None
        )

    def iter_nodes(self) -> Iterator[Tuple[int, int, Node]]:
        """Yield (layer, index, node) for every node; outputs report layer len(layers)."""
        for i, layer in enumerate(self.layers):
            for j, node in enumerate(layer):
                yield i, j, node
        out_layer = len(self.layers)
        for j, node in enumerate(self.outputs):
            yield out_layer, j, node

    def to_digraph(self) -> nx.DiGraph:
        """Directed graph of the network, edges run from the referenced node to its reader."""
        G = nx.DiGraph()
        out_layer = len(self.layers)
        for i, j, node in self.iter_nodes():
            if i == 0:
                kind = "input"
            elif i == out_layer:
                kind = "output"
            else:
                kind = "hidden"
            G.add_node((i, j), layer=i, value=node.value, bias=node.bias, kind=kind)

        for i, j, node in self.iter_nodes():
            if node.references is None:
                continue
            for ref in node.references:
                source = (ref.layer, ref.index)
                if source not in G:
                    # Input slot read before any input was supplied
                    G.add_node(source, layer=ref.layer, value=0.0, bias=None, kind="input")
                G.add_edge((ref.layer, ref.index), (i, j), weight=ref.weight)
        return G

    def stats(self) -> NetworkStats:
        return NetworkStats(
            id=self.num,
            num_layers=self.num_layers,
            num_nodes=self.num_nodes,
            num_inputs=len(self.layers[0]),
            num_references=self.num_references,
            num_outputs=len(self.outputs),
            num_orphans=sum(1 for layer, _ in find_orphans(self.layers) if layer > 0),
        )

    def __repr__(self):
        return f"NeuralNetwork(num={self.num}, layers={self.num_layers}, nodes={self.num_nodes}, outputs={len(self.outputs)})"
