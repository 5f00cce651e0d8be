from dataclasses import dataclass, asdict
from typing import Dict

@dataclass
class NetworkStats:
    id: int
    num_layers: int
    num_nodes: int
    num_inputs: int
    num_references: int
    num_outputs: int
    num_orphans: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)
