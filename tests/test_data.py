import numpy as np
import pytest

from tinynet import ExampleTable, descending_ramp, sample_function


def test_descending_ramp_table() -> None:
    table = descending_ramp()
    assert len(table) == 4
    assert (table.input_dim, table.output_dim) == (1, 1)
    np.testing.assert_allclose(table.flat_inputs, [0.0, 0.2, 0.8, 1.0])
    np.testing.assert_allclose(table.flat_targets, [1.0, 0.8, 0.2, 0.0])


def test_from_flat_groups_values_by_example() -> None:
    table = ExampleTable.from_flat([1, 2, 3, 4], [5, 6], input_dim=2, output_dim=1)
    assert table.inputs.shape == (2, 2)
    assert table.targets.shape == (2, 1)
    np.testing.assert_array_equal(table.inputs[1], [3.0, 4.0])


def test_scalar_columns_and_mismatch() -> None:
    table = ExampleTable(np.array([0.1, 0.2]), np.array([1.0, 2.0]))
    assert table.inputs.shape == (2, 1)
    with pytest.raises(ValueError):
        ExampleTable(np.zeros((3, 1)), np.zeros((2, 1)))


def test_sample_function() -> None:
    table = sample_function(lambda x: x * x, [0.0, 0.5, 1.0])
    np.testing.assert_allclose(table.flat_targets, [0.0, 0.25, 1.0])
