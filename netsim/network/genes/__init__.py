from .node import Node
from .reference import Reference

__all__ = ["Node", "Reference"]
