from .genes import Node, Reference
from .neural_network import NeuralNetwork
from .generator import generate_hidden_layers
from .resolver import find_orphans, generate_output_layer

__all__ = [
    "Node",
    "Reference",
    "NeuralNetwork",
    "generate_hidden_layers",
    "find_orphans",
    "generate_output_layer",
]
