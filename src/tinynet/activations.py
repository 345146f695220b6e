"""Elementwise transfer functions and their derivatives.

Every derivative except softplus is expressed in terms of the function's own
output ``y`` rather than the pre-activation ``x``. The softplus derivative is
``sigmoid(x)`` and takes the pre-activation; :meth:`TransferFunction.slope`
hides that difference from the layers, which only keep outputs around.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

import numpy as np

ArrayFn = Callable[[np.ndarray], np.ndarray]


def sigmoid(x: np.ndarray) -> np.ndarray:
    return 1.0 / (1.0 + np.exp(-x))


def sigmoid_derivative(y: np.ndarray) -> np.ndarray:
    return y * (1.0 - y)


def relu(x: np.ndarray) -> np.ndarray:
    return np.maximum(0.0, x)


def relu_derivative(y: np.ndarray) -> np.ndarray:
    return np.where(y > 0.0, 1.0, 0.0)


def softplus(x: np.ndarray) -> np.ndarray:
    return np.logaddexp(0.0, x)


def softplus_derivative(x: np.ndarray) -> np.ndarray:
    """Derivative of softplus at the pre-activation ``x``."""

    return sigmoid(x)


def softplus_slope(y: np.ndarray) -> np.ndarray:
    # e^x = e^y - 1, so sigmoid(x) = 1 - e^-y.
    return -np.expm1(-y)


def elu(x: np.ndarray) -> np.ndarray:
    return np.where(x >= 0.0, x, np.expm1(np.minimum(x, 0.0)))


def elu_derivative(y: np.ndarray) -> np.ndarray:
    return np.where(y >= 0.0, 1.0, y + 1.0)


@dataclass(frozen=True, slots=True)
class TransferFunction:
    """A transfer function together with its derivative.

    ``derivative`` takes the pre-activation when ``takes_preactivation`` is
    set and the function output otherwise. ``slope`` always takes outputs.
    """

    name: str
    function: ArrayFn
    derivative: ArrayFn
    takes_preactivation: bool = False
    output_slope: ArrayFn | None = None

    def __call__(self, x: np.ndarray) -> np.ndarray:
        return self.function(np.asarray(x, dtype=np.float64))

    def slope(self, y: np.ndarray) -> np.ndarray:
        """Derivative evaluated from post-activation values ``y``."""

        y = np.asarray(y, dtype=np.float64)
        if self.output_slope is not None:
            return self.output_slope(y)
        return self.derivative(y)


class Activation(str, Enum):
    """The supported transfer functions."""

    SIGMOID = "sigmoid"
    RELU = "relu"
    SOFTPLUS = "softplus"
    ELU = "elu"

    @classmethod
    def parse(cls, value: Activation | str) -> Activation:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown activation {value!r}; expected one of: {choices}") from None

    @property
    def transfer(self) -> TransferFunction:
        return TRANSFER_FUNCTIONS[self]


DEFAULT_ACTIVATION = Activation.ELU

TRANSFER_FUNCTIONS: dict[Activation, TransferFunction] = {
    Activation.SIGMOID: TransferFunction("sigmoid", sigmoid, sigmoid_derivative),
    Activation.RELU: TransferFunction("relu", relu, relu_derivative),
    Activation.SOFTPLUS: TransferFunction(
        "softplus",
        softplus,
        softplus_derivative,
        takes_preactivation=True,
        output_slope=softplus_slope,
    ),
    Activation.ELU: TransferFunction("elu", elu, elu_derivative),
}


def get_transfer(activation: Activation | str = DEFAULT_ACTIVATION) -> TransferFunction:
    """Resolve an activation name or member to its :class:`TransferFunction`."""

    return Activation.parse(activation).transfer


__all__ = [
    "Activation",
    "DEFAULT_ACTIVATION",
    "TRANSFER_FUNCTIONS",
    "TransferFunction",
    "elu",
    "elu_derivative",
    "get_transfer",
    "relu",
    "relu_derivative",
    "sigmoid",
    "sigmoid_derivative",
    "softplus",
    "softplus_derivative",
]
