"""Minimal two-layer neural network for 1-D curve fitting."""

from .activations import DEFAULT_ACTIVATION, Activation, TransferFunction, get_transfer
from .config import NetworkConfig, TrainingConfig
from .data import ExampleTable, descending_ramp, sample_function
from .layer import Layer
from .network import TrainingHistory, TwoLayerNetwork
from .reporting import ConsoleReporter, TrainingReporter, format_values

__all__ = [
    "Activation",
    "ConsoleReporter",
    "DEFAULT_ACTIVATION",
    "ExampleTable",
    "Layer",
    "NetworkConfig",
    "TrainingConfig",
    "TrainingHistory",
    "TrainingReporter",
    "TransferFunction",
    "TwoLayerNetwork",
    "descending_ramp",
    "format_values",
    "get_transfer",
    "sample_function",
]
