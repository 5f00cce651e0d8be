import matplotlib.pyplot as plt
import networkx as nx

from .network import NeuralNetwork

COLORS = {
    "input": "lightgreen",
    "hidden": "lightblue",
    "output": "salmon",
}

def visualize_network(network: NeuralNetwork, ax=None):
    """
    Draw a NeuralNetwork as a directed graph, one column per layer.
    Inputs = green, hidden = blue, outputs = red.
    Edges to nodes of the same layer are drawn dashed.
    """
    G = network.to_digraph()

    # Layout: group nodes by layer
    pos = {}
    layer_nodes = {}
    for node_id, data in G.nodes(data=True):
        layer_nodes.setdefault(data["layer"], []).append(node_id)

    for layer, nodes in layer_nodes.items():
        for i, n in enumerate(sorted(nodes)):
            pos[n] = (layer, -i)

    node_colors = [COLORS[G.nodes[n]["kind"]] for n in G.nodes()]
    nx.draw_networkx_nodes(G, pos, node_color=node_colors, node_size=300, ax=ax)

    styles = ["dashed" if u[0] == v[0] else "solid" for u, v in G.edges()]
    nx.draw_networkx_edges(G, pos, edgelist=list(G.edges()), edge_color="black", style=styles, ax=ax)

    labels = {n: f"{n[0]},{n[1]}\n{G.nodes[n]['value']:.2f}" for n in G.nodes()}
    nx.draw_networkx_labels(G, pos, labels=labels, font_size=6, ax=ax)

    if ax is None:
        plt.show()
