from time import monotonic

from netsim import Config, Simulation, setup_logging

if __name__ == "__main__":
    config = Config()
    logger = setup_logging(config.log_path)

    start = monotonic()
    simulation = Simulation.from_config(config)
    assert simulation.networks[0].outputs, "First network has no outputs"

    inputs = [0.1 * (i + 1) for i in range(config.input_size)]
    simulation.update_all(inputs)
    logger.info(f"Updated {len(simulation.networks)} networks, {monotonic() - start:.3f}s elapsed")

    simulation.write_stats(config.stats_path)
