"""Diagnostic sinks notified during training and evaluation."""
from __future__ import annotations

from typing import Protocol, Sequence, TextIO

import numpy as np


class TrainingReporter(Protocol):
    """Receives observations from a network. Has no effect on training."""

    def on_epoch(self, epoch: int, total_error: float) -> None:
        ...

    def on_evaluate(self, inputs: np.ndarray, outputs: np.ndarray) -> None:
        ...


class ConsoleReporter:
    """Print one line per epoch and per evaluated example."""

    def __init__(self, stream: TextIO | None = None, *, every: int = 1) -> None:
        if every <= 0:
            raise ValueError("every must be positive")
        self.stream = stream
        self.every = every

    def on_epoch(self, epoch: int, total_error: float) -> None:
        if epoch % self.every == 0:
            print(f"epoch: {epoch}  error: {total_error:.3f}", file=self.stream)

    def on_evaluate(self, inputs: np.ndarray, outputs: np.ndarray) -> None:
        print(f"input {_join(inputs)}  outputs {_join(outputs)}", file=self.stream)


def _join(values: Sequence[float]) -> str:
    return " ".join(f"{float(value):.3f}" for value in np.ravel(values))


def format_values(name: str, values: Sequence[float]) -> str:
    """Render a buffer as ``name[i] value`` lines."""

    return "\n".join(f"{name}[{index}] {float(value):.5f}" for index, value in enumerate(np.ravel(values)))


__all__ = ["ConsoleReporter", "TrainingReporter", "format_values"]
