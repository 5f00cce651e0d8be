import logging
import random
from typing import List, Tuple

from .genes import Node, Reference

OUTPUT_BIAS = 0.3

logger = logging.getLogger("NetworkSimulation")

def find_orphans(layers: List[List[Node]]) -> List[Tuple[int, int]]:
    """Return the coordinates of nodes no reference list names, in (layer, index) order."""
    referenced = set()
    for layer in layers:
        for node in layer:
            if node.references is not None:
                for ref in node.references:
                    referenced.add((ref.layer, ref.index))

    return [
        (i, j)
        for i, layer in enumerate(layers)
        for j in range(len(layer))
        if (i, j) not in referenced
    ]

def generate_output_layer(layers: List[List[Node]], size: int, rng: random.Random) -> List[Node]:
    """Build `size` output nodes that together consume every orphan."""
    orphans = find_orphans(layers)
    used = [False] * len(orphans)
    outputs: List[Node] = []

    for _ in range(size):
        node = Node()
        prob = 100 // size + 1
        for k, (layer_idx, node_idx) in enumerate(orphans):
            # Roughly even spread, orphans missed here are force-attached below
            if used[k] or rng.randrange(100) >= prob:
                continue
            used[k] = True
            node.add_reference(Reference(layer_idx, node_idx, rng.uniform(-1.0, 1.0)))
        node.bias = rng.uniform(-OUTPUT_BIAS, OUTPUT_BIAS)
        outputs.append(node)

    remaining = [orph for orph, was_used in zip(orphans, used) if not was_used]
    if not outputs:
        if remaining:
            logger.warning(f"No output nodes, dropping {len(remaining)} orphans")
        return outputs

    for layer_idx, node_idx in remaining:
        node = outputs[rng.randrange(len(outputs))]
        node.add_reference(Reference(layer_idx, node_idx, rng.uniform(-1.0, 1.0)))

    logger.debug(f"Resolved {len(orphans)} orphans, {len(remaining)} force-attached")
    return outputs
