import os
import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = REPO_ROOT / "src"


def _env_with_src() -> dict[str, str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_PATH)
    env["MPLBACKEND"] = "Agg"
    return env


def _run(*args: str) -> str:
    result = subprocess.run(
        [sys.executable, "scripts/fit_curve.py", *args],
        cwd=REPO_ROOT,
        env=_env_with_src(),
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout


def test_fit_curve_prints_epochs_and_evaluations() -> None:
    lines = _run("--epochs", "5", "--seed", "0").splitlines()
    assert [line for line in lines if line.startswith("epoch:")][-1].startswith("epoch: 4 ")
    assert sum(line.startswith("epoch:") for line in lines) == 5
    assert sum(line.startswith("input ") for line in lines) == 4


def test_fit_curve_dumps_weights_and_plots(tmp_path) -> None:
    plot_path = tmp_path / "fit.png"
    out = _run("--epochs", "3", "--seed", "1", "--hidden", "2", "--dump-weights", "--plot", str(plot_path))
    assert "hidden.weights[1]" in out
    assert "output.biases[0]" in out
    assert plot_path.exists()
