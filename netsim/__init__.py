from .config import Config
from .network import NeuralNetwork, Node, Reference
from .simulation import Simulation, setup_logging
from .visualize import visualize_network

__all__ = [
    "Config",
    "NeuralNetwork",
    "Node",
    "Reference",
    "Simulation",
    "setup_logging",
    "visualize_network",
]
