import logging

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from netsim import Simulation, setup_logging, visualize_network
from netsim.network import Node, Reference, NeuralNetwork, find_orphans


def _small_net():
    net = NeuralNetwork(0, 2, 1)
    net.layers.append([
        Node(bias=0.1, references=[Reference(0, 0, 0.5)]),
        Node(bias=0.2, references=[Reference(0, 1, -0.5), Reference(1, 0, 1.0)]),
    ])
    net.outputs = [Node(bias=0.0, references=[Reference(1, 1, 1.0)])]
    return net


def test_iter_nodes_reports_outputs_after_layers():
    net = _small_net()
    net.update([0.1, 0.2])
    coords = [(i, j) for i, j, _ in net.iter_nodes()]
    assert coords == [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0)]


def test_counts():
    net = _small_net()
    assert net.num_layers == 2
    assert net.num_nodes == 2
    assert net.num_references == 4


def test_to_digraph():
    net = _small_net()
    net.update([0.1, 0.2])
    G = net.to_digraph()

    assert G.number_of_nodes() == 5
    assert G.number_of_edges() == 4
    assert G.nodes[(0, 0)]["kind"] == "input"
    assert G.nodes[(1, 1)]["kind"] == "hidden"
    assert G.nodes[(2, 0)]["kind"] == "output"
    assert G.edges[(1, 0), (1, 1)]["weight"] == 1.0
    assert G.nodes[(2, 0)]["value"] == net.outputs[0].value


def test_to_digraph_before_inputs():
    net = _small_net()
    G = net.to_digraph()
    assert G.nodes[(0, 0)]["kind"] == "input"
    assert G.nodes[(0, 0)]["value"] == 0.0


def test_generated_digraph_edges_point_forward():
    sim = Simulation(4, 2, 2, 2)
    net = sim.networks[1]
    net.update([0.3, 0.3])
    G = net.to_digraph()
    assert G.number_of_edges() <= net.num_references
    for source, target in G.edges():
        assert source[0] <= target[0]


def test_stats_record():
    net = _small_net()
    net.update([0.1, 0.2])
    stats = net.stats()
    assert stats.id == 0
    assert stats.num_inputs == 2
    assert stats.num_outputs == 1
    assert stats.num_references == 4
    # only the output reads (1, 1)
    assert stats.num_orphans == len(find_orphans(net.layers)) == 1
    assert stats.to_dict()["num_layers"] == 2


def test_visualize_network():
    net = _small_net()
    net.update([0.1, 0.2])
    fig, ax = plt.subplots()
    visualize_network(net, ax=ax)
    assert len(ax.collections) > 0
    plt.close(fig)


def test_setup_logging(tmp_path):
    log_file = tmp_path / "logs" / "simulation.log"
    logger = setup_logging(str(log_file))
    try:
        Simulation(1, 1, 2, 2)
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text()
        assert "Generating 1 networks" in text
        assert "hidden layers generated" in text
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_setup_logging_twice_keeps_one_handler_pair(tmp_path):
    log_file = tmp_path / "simulation.log"
    logger = setup_logging(str(log_file))
    try:
        assert setup_logging(str(log_file)) is logger
        assert len(logger.handlers) == 2
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_orphan_stat_ignores_inputs():
    sim = Simulation(6, 1, 3, 2)
    net = sim.networks[0]
    before = net.stats().num_orphans
    for _ in range(4):
        net.update([0.1, 0.2, 0.3])
    after = net.stats()
    assert after.num_inputs == 12
    assert after.num_orphans == before
