import numpy as np
import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

from tinynet import NetworkConfig, TwoLayerNetwork, descending_ramp
from tinynet.visualization import fitted_curve, save_report


def test_fitted_curve_spans_table_range() -> None:
    network = TwoLayerNetwork(NetworkConfig(input_dim=1, hidden_dim=4, output_dim=1, seed=0))
    xs, ys = fitted_curve(network, descending_ramp(), resolution=11)
    assert xs[0] == 0.0 and xs[-1] == 1.0
    assert ys.shape == (11,)
    assert ys[5] == pytest.approx(network.evaluate([xs[5]])[0])
    assert np.all(np.isfinite(ys))


def test_save_report_writes_file(tmp_path) -> None:
    table = descending_ramp()
    network = TwoLayerNetwork(NetworkConfig(input_dim=1, hidden_dim=4, output_dim=1, seed=0))
    history = network.fit(table)
    path = tmp_path / "fit.png"
    save_report(str(path), history.errors, network, table)
    assert path.exists() and path.stat().st_size > 0
