"""Two-layer network trained by online backpropagation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np
from tqdm.auto import tqdm

from .config import NetworkConfig, TrainingConfig
from .data import ExampleTable
from .layer import DTYPE, Layer
from .reporting import TrainingReporter


@dataclass
class TrainingHistory:
    """Squared-error totals collected by :meth:`TwoLayerNetwork.train`, one per epoch."""

    errors: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.errors)

    @property
    def final_error(self) -> float:
        """Error of the last epoch, or NaN when no epoch has run."""

        return self.errors[-1] if self.errors else float("nan")


class TwoLayerNetwork:
    """A hidden layer followed by an output layer, both using one transfer function.

    Training is plain per-example gradient descent on the squared error, in
    table order, for a fixed number of epochs. ``evaluate`` reads whatever
    weights currently exist and may be called between training runs. Neither
    method is safe to call concurrently with ``train``.
    """

    def __init__(
        self,
        config: NetworkConfig,
        *,
        rng: np.random.Generator | None = None,
        reporter: TrainingReporter | None = None,
    ) -> None:
        self.config = config
        self.rng = np.random.default_rng(config.seed) if rng is None else rng
        self.reporter = reporter
        init = {"rng": self.rng, "init_low": config.init_low, "init_high": config.init_high}
        self.hidden = Layer(config.input_dim, config.hidden_dim, activation=config.activation, **init)
        self.output = Layer(config.hidden_dim, config.output_dim, activation=config.activation, **init)

        # Scratch space reused across calls, never handed out.
        self._hidden_values = np.zeros(config.hidden_dim, dtype=DTYPE)
        self._hidden_deltas = np.zeros(config.hidden_dim, dtype=DTYPE)
        self._output_values = np.zeros(config.output_dim, dtype=DTYPE)
        self._output_deltas = np.zeros(config.output_dim, dtype=DTYPE)
        self._evaluate_hidden = np.zeros(config.hidden_dim, dtype=DTYPE)

    def __repr__(self) -> str:
        cfg = self.config
        return (
            f"<TwoLayerNetwork {cfg.input_dim}-{cfg.hidden_dim}-{cfg.output_dim} "
            f"activation={cfg.activation.value}>"
        )

    @property
    def input_count(self) -> int:
        return self.hidden.input_count

    @property
    def hidden_count(self) -> int:
        return self.hidden.output_count

    @property
    def output_count(self) -> int:
        return self.output.output_count

    def evaluate(self, inputs: Sequence[float] | np.ndarray) -> np.ndarray:
        """Run a forward pass and return a new array of outputs."""

        hidden = self.hidden.propagate(inputs, out=self._evaluate_hidden)
        outputs = self.output.propagate(hidden)
        if self.reporter is not None:
            self.reporter.on_evaluate(np.asarray(inputs, dtype=DTYPE), outputs)
        return outputs

    def train(
        self,
        all_inputs: Sequence[float] | np.ndarray,
        all_expected_outputs: Sequence[float] | np.ndarray,
        example_count: int | None = None,
        epoch_count: int = 50,
        learning_rate: float = 0.2,
        *,
        progress: bool = False,
    ) -> TrainingHistory:
        """Train in place on concatenated example tables.

        ``all_inputs`` holds ``example_count * input_count`` values and
        ``all_expected_outputs`` holds ``example_count * output_count``; when
        ``example_count`` is omitted it is inferred from ``all_inputs``.
        """

        input_count = self.input_count
        output_count = self.output_count
        inputs = np.asarray(all_inputs, dtype=DTYPE).reshape(-1)
        expected = np.asarray(all_expected_outputs, dtype=DTYPE).reshape(-1)
        if example_count is None:
            example_count = inputs.size // input_count

        hidden_values = self._hidden_values
        hidden_deltas = self._hidden_deltas
        output_values = self._output_values
        output_deltas = self._output_deltas

        history = TrainingHistory()
        epochs = range(epoch_count)
        if progress:
            epochs = tqdm(epochs, desc="Training", leave=False)

        for epoch in epochs:
            total_error = 0.0
            for example in range(example_count):
                example_inputs = inputs[example * input_count : (example + 1) * input_count]
                example_expected = expected[example * output_count : (example + 1) * output_count]

                # Forward pass with the current weights.
                self.hidden.propagate(example_inputs, out=hidden_values)
                self.output.propagate(hidden_values, out=output_values)

                # Errors to deltas, before touching any weight.
                _, squared_error = self.output.compute_output_deltas(
                    output_values, example_expected, out=output_deltas
                )
                total_error += squared_error
                self.hidden.compute_deltas(self.output, output_deltas, hidden_values, out=hidden_deltas)

                self.output.update_weights(hidden_values, output_deltas, learning_rate)
                self.hidden.update_weights(example_inputs, hidden_deltas, learning_rate)

            history.errors.append(total_error)
            if progress:
                epochs.set_postfix(error=f"{total_error:.4f}")
            if self.reporter is not None:
                self.reporter.on_epoch(epoch, total_error)

        return history

    def fit(
        self,
        table: ExampleTable,
        training: TrainingConfig | None = None,
        *,
        progress: bool = False,
    ) -> TrainingHistory:
        """Train on an :class:`~tinynet.data.ExampleTable`."""

        training = training or TrainingConfig()
        return self.train(
            table.flat_inputs,
            table.flat_targets,
            len(table),
            training.epochs,
            training.learning_rate,
            progress=progress,
        )

    def predict(self, table: ExampleTable) -> np.ndarray:
        """Evaluate every row of ``table.inputs``; returns ``(len(table), output_count)``."""

        return np.stack([self.evaluate(row) for row in table.inputs])

    def parameters(self) -> dict[str, np.ndarray]:
        return {
            "hidden.weights": self.hidden.weights.copy(),
            "hidden.biases": self.hidden.biases.copy(),
            "output.weights": self.output.weights.copy(),
            "output.biases": self.output.biases.copy(),
        }


__all__ = ["TrainingHistory", "TwoLayerNetwork"]
