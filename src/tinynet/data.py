"""Example tables for supervised curve fitting."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

import numpy as np


def _as_rows(values) -> np.ndarray:
    array = np.asarray(values, dtype=np.float64)
    if array.ndim == 1:
        # One column per scalar example.
        return array.reshape(-1, 1)
    return array


@dataclass(frozen=True, slots=True)
class ExampleTable:
    """Paired inputs and expected outputs, one example per row."""

    inputs: np.ndarray
    targets: np.ndarray

    def __post_init__(self) -> None:
        inputs = _as_rows(self.inputs)
        targets = _as_rows(self.targets)
        if inputs.shape[0] != targets.shape[0]:
            raise ValueError("inputs and targets must have the same number of examples")
        object.__setattr__(self, "inputs", inputs)
        object.__setattr__(self, "targets", targets)

    @classmethod
    def from_flat(
        cls,
        inputs: Sequence[float],
        targets: Sequence[float],
        *,
        input_dim: int = 1,
        output_dim: int = 1,
    ) -> ExampleTable:
        """Build a table from example-by-example concatenated values."""

        return cls(
            np.asarray(inputs, dtype=np.float64).reshape(-1, input_dim),
            np.asarray(targets, dtype=np.float64).reshape(-1, output_dim),
        )

    def __len__(self) -> int:
        return self.inputs.shape[0]

    @property
    def input_dim(self) -> int:
        return self.inputs.shape[1]

    @property
    def output_dim(self) -> int:
        return self.targets.shape[1]

    @property
    def flat_inputs(self) -> np.ndarray:
        return self.inputs.reshape(-1)

    @property
    def flat_targets(self) -> np.ndarray:
        return self.targets.reshape(-1)


def sample_function(func: Callable[[float], float], points: Sequence[float]) -> ExampleTable:
    """Tabulate a scalar function at ``points``."""

    xs = [float(x) for x in points]
    return ExampleTable.from_flat(xs, [float(func(x)) for x in xs])


def descending_ramp() -> ExampleTable:
    """The four-point table used by the demo: ``y = 1 - x`` at 0, 0.2, 0.8, 1."""

    return ExampleTable.from_flat([0.0, 0.2, 0.8, 1.0], [1.0, 0.8, 0.2, 0.0])


__all__ = ["ExampleTable", "descending_ramp", "sample_function"]
