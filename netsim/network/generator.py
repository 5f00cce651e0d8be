import random
from typing import List

from .genes import Node, Reference

MIN_LAYERS = 1
MAX_LAYERS = 5
MIN_NODES = 3
MAX_NODES = 99
MIN_REFERENCES = 1
MAX_REFERENCES = 9
SAME_LAYER_PROB = 0.1

def pick_source_layer(layers: List[List[Node]], rng: random.Random) -> int:
    """Pick the layer a new reference reads from.

    The layer being populated is always the last one. Its own nodes can only
    be referenced while it is still empty or on a same-layer roll; otherwise
    the reference goes strictly backwards.
    """
    current = len(layers) - 1
    if not layers[current] or rng.random() < SAME_LAYER_PROB:
        return rng.randint(0, current)
    return rng.randrange(current)

def pick_source_index(layer: List[Node], rng: random.Random) -> int:
    if not layer:
        return 0
    return rng.randrange(len(layer))

def generate_node(layers: List[List[Node]], rng: random.Random) -> Node:
    num_refs = rng.randint(MIN_REFERENCES, MAX_REFERENCES)
    node = Node(bias=rng.uniform(-1.0, 1.0))
    for _ in range(num_refs):
        layer_idx = pick_source_layer(layers, rng)
        node_idx = pick_source_index(layers[layer_idx], rng)
        node.add_reference(Reference(layer_idx, node_idx, rng.uniform(-1.0, 1.0)))
    return node

def generate_hidden_layers(layers: List[List[Node]], rng: random.Random) -> None:
    """Append 1-5 randomly wired hidden layers after the input layer."""
    num_layers = rng.randint(MIN_LAYERS, MAX_LAYERS)
    for _ in range(num_layers):
        num_nodes = rng.randint(MIN_NODES, MAX_NODES)
        layers.append([])
        for _ in range(num_nodes):
            layers[-1].append(generate_node(layers, rng))
