"""Plotting utilities for training error and fitted curves."""

from __future__ import annotations

from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from .data import ExampleTable
from .network import TwoLayerNetwork


def fitted_curve(network: TwoLayerNetwork, table: ExampleTable, resolution: int = 200) -> tuple[np.ndarray, np.ndarray]:
    """Sample a single-input, single-output network over the table's input range."""

    xs = np.linspace(table.inputs.min(), table.inputs.max(), resolution)
    # Straight through the layers so an attached reporter stays quiet.
    ys = np.array([network.output.propagate(network.hidden.propagate([x]))[0] for x in xs])
    return xs, ys


def plot_error_history(errors: Sequence[float], ax=None) -> None:
    """Plot the accumulated squared error across epochs."""

    if ax is None:
        plt.figure()
        ax = plt.gca()
    ax.plot(errors)
    ax.set_xlabel("Epoch")
    ax.set_ylabel("Squared error")
    ax.set_title("Training Error")


def plot_fit(network: TwoLayerNetwork, table: ExampleTable, ax=None, *, resolution: int = 200) -> None:
    """Plot the network's curve against its training examples."""

    if ax is None:
        plt.figure()
        ax = plt.gca()
    xs, ys = fitted_curve(network, table, resolution)
    ax.plot(xs, ys, label="network")
    ax.scatter(table.flat_inputs, table.flat_targets, color="black", label="examples")
    ax.set_xlabel("Input")
    ax.set_ylabel("Output")
    ax.set_title("Fitted Curve")
    ax.legend()


def save_report(path: str, errors: Sequence[float], network: TwoLayerNetwork, table: ExampleTable) -> None:
    """Draw both plots side by side and write them to ``path``."""

    fig, (ax_error, ax_fit) = plt.subplots(1, 2, figsize=(10, 4))
    plot_error_history(errors, ax_error)
    plot_fit(network, table, ax_fit)
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)


__all__ = ["fitted_curve", "plot_error_history", "plot_fit", "save_report"]
