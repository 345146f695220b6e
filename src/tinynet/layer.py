"""Fully-connected layer with the backpropagation primitives it needs."""
from __future__ import annotations

from typing import Sequence

import numpy as np

from .activations import DEFAULT_ACTIVATION, Activation, TransferFunction

DTYPE = np.float64

ArrayLike = Sequence[float] | np.ndarray


def _readonly(array: np.ndarray) -> np.ndarray:
    view = array.view()
    view.flags.writeable = False
    return view


class Layer:
    """One dense layer: an affine map followed by an elementwise transfer.

    Weights live in a single contiguous buffer of ``input_count *
    output_count`` values, row-major by output unit, so the weight from input
    ``i`` into unit ``o`` sits at offset ``input_count * o + i``. Weights and
    biases only change through :meth:`update_weights`.

    Buffer sizes passed to the numeric methods are not checked.
    """

    def __init__(
        self,
        input_count: int,
        output_count: int,
        *,
        activation: Activation | str = DEFAULT_ACTIVATION,
        rng: np.random.Generator | None = None,
        init_low: float = 0.5,
        init_high: float = 0.9,
        weights: ArrayLike | None = None,
        biases: ArrayLike | None = None,
    ) -> None:
        self._input_count = int(input_count)
        self._output_count = int(output_count)
        self.activation = Activation.parse(activation)
        self.transfer: TransferFunction = self.activation.transfer

        rng = np.random.default_rng() if rng is None else rng
        size = self._input_count * self._output_count
        if weights is None:
            self._weights = rng.uniform(init_low, init_high, size).astype(DTYPE)
        else:
            self._weights = np.array(weights, dtype=DTYPE).reshape(size)
        if biases is None:
            self._biases = rng.uniform(init_low, init_high, self._output_count).astype(DTYPE)
        else:
            self._biases = np.array(biases, dtype=DTYPE).reshape(self._output_count)

        # Shares memory with ``_weights``.
        self._matrix = self._weights.reshape(self._output_count, self._input_count)

    def __repr__(self) -> str:
        return f"<Layer {self._input_count}x{self._output_count} {self.activation.value}>"

    @property
    def input_count(self) -> int:
        return self._input_count

    @property
    def output_count(self) -> int:
        return self._output_count

    @property
    def weights(self) -> np.ndarray:
        """Read-only view of the flat weight buffer."""

        return _readonly(self._weights)

    @property
    def matrix(self) -> np.ndarray:
        """Read-only ``(output_count, input_count)`` view of the weights."""

        return _readonly(self._matrix)

    @property
    def biases(self) -> np.ndarray:
        return _readonly(self._biases)

    def weight(self, o: int, i: int) -> float:
        return float(self._weights[self._input_count * o + i])

    def propagate(self, inputs: ArrayLike, out: np.ndarray | None = None) -> np.ndarray:
        """Compute ``f(bias + W @ inputs)`` for every output unit."""

        activation = np.dot(self._matrix, np.asarray(inputs, dtype=DTYPE))
        activation += self._biases
        values = self.transfer.function(activation)
        if out is None:
            return values
        out[...] = values
        return out

    def compute_output_deltas(
        self,
        output_values: ArrayLike,
        expected_values: ArrayLike,
        out: np.ndarray | None = None,
    ) -> tuple[np.ndarray, float]:
        """Deltas of the final layer and the example's total squared error.

        The returned error total is diagnostic only.
        """

        output_values = np.asarray(output_values, dtype=DTYPE)
        error = np.asarray(expected_values, dtype=DTYPE) - output_values
        deltas = error * self.transfer.slope(output_values)
        total = float(np.dot(error, error))
        if out is None:
            return deltas, total
        out[...] = deltas
        return out, total

    def compute_deltas(
        self,
        next_layer: Layer,
        next_deltas: ArrayLike,
        values: ArrayLike,
        out: np.ndarray | None = None,
    ) -> np.ndarray:
        """Back-propagate ``next_deltas`` through ``next_layer``'s weights.

        Unit ``o`` of this layer feeds input slot ``o`` of every unit in
        ``next_layer``, hence the transpose.
        """

        error = np.dot(next_layer.matrix.T, np.asarray(next_deltas, dtype=DTYPE))
        deltas = error * self.transfer.slope(values)
        if out is None:
            return deltas
        out[...] = deltas
        return out

    def update_weights(self, inputs: ArrayLike, deltas: ArrayLike, learning_rate: float) -> None:
        """Apply one gradient step in place."""

        change = np.asarray(deltas, dtype=DTYPE) * learning_rate
        self._matrix += np.outer(change, np.asarray(inputs, dtype=DTYPE))
        self._biases += change


__all__ = ["DTYPE", "Layer"]
