import logging
import os
import random
from time import monotonic
from typing import List, Sequence

import pandas as pd

from .config import Config
from .network import NeuralNetwork

# -------------------------------
# Logging helpers
# -------------------------------
def setup_logging(log_file: str) -> logging.Logger:
    logger = logging.getLogger("NetworkSimulation")
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)

    fh = logging.FileHandler(log_file)
    fh.setLevel(logging.DEBUG)

    fmt = logging.Formatter("[%(asctime)s][%(processName)s][%(levelname)s] %(message)s")
    ch.setFormatter(fmt)
    fh.setFormatter(fmt)

    logger.addHandler(ch)
    logger.addHandler(fh)
    return logger

logger = logging.getLogger("NetworkSimulation")

# -------------------------------
# Simulation
# -------------------------------
class Simulation:
    """A population of networks generated from one seeded random stream.

    Networks are generated one after another from the same stream, so
    network k depends on every network generated before it.
    """
    def __init__(self, seed: int, population_size: int, input_size: int, output_size: int) -> None:
        for name, value in (
            ("population_size", population_size),
            ("input_size", input_size),
            ("output_size", output_size),
        ):
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

        self.seed = seed
        self.population_size = population_size
        self.input_size = input_size
        self.output_size = output_size
        self._rng = random.Random(seed)
        self.networks: List[NeuralNetwork] = []

        self._init()

    @classmethod
    def from_config(cls, config: Config) -> "Simulation":
        return cls(config.seed, config.population_size, config.input_size, config.output_size)

    def _init(self) -> None:
        logger.info(f"Generating {self.population_size} networks (seed={self.seed})")
        start = monotonic()
        for num in range(self.population_size):
            net = NeuralNetwork.generate(num, self.input_size, self.output_size, self._rng)
            self.networks.append(net)
        logger.info(f"Generated {len(self.networks)} networks in {monotonic() - start:.3f}s")

    def update(self, network: int, inputs: Sequence[float]) -> List[float]:
        """Evaluate one network for a tick."""
        if network < 0:
            raise IndexError(f"Network handle out of range: {network}")
        return self.networks[network].update(inputs)

    def update_all(self, inputs: Sequence[float]) -> List[List[float]]:
        return [net.update(inputs) for net in self.networks]

    # --- stats ---
    def stats(self) -> pd.DataFrame:
        rows = [net.stats().to_dict() for net in self.networks]
        columns = [
            "id", "num_layers", "num_nodes", "num_inputs",
            "num_references", "num_outputs", "num_orphans",
        ]
        return pd.DataFrame(rows, columns=columns)

    def write_stats(self, path: str) -> None:
        stats_dir = os.path.dirname(path)
        if stats_dir:
            os.makedirs(stats_dir, exist_ok=True)
        self.stats().to_csv(path, index=False)
        logger.info(f"Wrote stats for {len(self.networks)} networks to {path}")
