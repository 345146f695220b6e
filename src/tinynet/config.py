"""Configuration dataclasses for the two-layer network and its training loop."""
from __future__ import annotations

from dataclasses import dataclass

from .activations import DEFAULT_ACTIVATION, Activation


@dataclass(slots=True)
class NetworkConfig:
    """Configuration controlling network structure and initialisation.

    Parameters
    ----------
    input_dim:
        Number of values in one input example.
    hidden_dim:
        Number of units in the hidden layer.
    output_dim:
        Number of values in one expected output.
    activation:
        Transfer function shared by every unit of both layers. Strings are
        accepted and converted to :class:`~tinynet.activations.Activation`.
    init_low, init_high:
        Bounds of the uniform distribution each weight and bias is drawn
        from at construction. The upper bound is exclusive.
    seed:
        Optional seed for the default random generator. Ignored when a
        generator is passed to the network directly.
    """

    input_dim: int
    hidden_dim: int
    output_dim: int
    activation: Activation = DEFAULT_ACTIVATION
    init_low: float = 0.5
    init_high: float = 0.9
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.input_dim <= 0:
            raise ValueError("input_dim must be positive")
        if self.hidden_dim <= 0:
            raise ValueError("hidden_dim must be positive")
        if self.output_dim <= 0:
            raise ValueError("output_dim must be positive")
        if self.init_low >= self.init_high:
            raise ValueError("init_low must be smaller than init_high")
        self.activation = Activation.parse(self.activation)


@dataclass(slots=True)
class TrainingConfig:
    """Parameters for :meth:`tinynet.network.TwoLayerNetwork.fit`."""

    epochs: int = 50
    learning_rate: float = 0.2

    def __post_init__(self) -> None:
        if self.epochs <= 0:
            raise ValueError("epochs must be positive")
        if self.learning_rate <= 0.0:
            raise ValueError("learning_rate must be positive")
