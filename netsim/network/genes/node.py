from typing import List, Optional

from .reference import Reference

class Node:
    """A vertex of the network holding its last computed value."""
    def __init__(self, value=0.0, bias=None, references=None):
        self.value: float = value
        self.bias: Optional[float] = bias
        self.references: Optional[List[Reference]] = references

    def add_reference(self, reference: Reference):
        if self.references is None:
            self.references = []
        self.references.append(reference)

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return (
            self.value == other.value
            and self.bias == other.bias
            and self.references == other.references
        )

    def __repr__(self):
        refs = len(self.references) if self.references is not None else 0
        return f"Node(value={self.value:.3f}, bias={self.bias}, refs={refs})"
