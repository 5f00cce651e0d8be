class Reference:
    """A weighted edge reading the value of the node at (layer, index)."""
    def __init__(self, layer, index, weight):
        self.layer = layer
        self.index = index
        self.weight = weight

    def __eq__(self, other):
        if not isinstance(other, Reference):
            return NotImplemented
        return (self.layer, self.index, self.weight) == (other.layer, other.index, other.weight)

    def __repr__(self):
        return f"Reference(({self.layer}, {self.index}), w={self.weight:.2f})"
