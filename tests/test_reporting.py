import io

import numpy as np
import pytest

from tinynet import ConsoleReporter, format_values


def test_console_reporter_lines() -> None:
    stream = io.StringIO()
    reporter = ConsoleReporter(stream)
    reporter.on_epoch(3, 1.23456)
    reporter.on_evaluate(np.array([0.2]), np.array([0.8123]))
    assert stream.getvalue().splitlines() == [
        "epoch: 3  error: 1.235",
        "input 0.200  outputs 0.812",
    ]


def test_console_reporter_every() -> None:
    stream = io.StringIO()
    reporter = ConsoleReporter(stream, every=2)
    for epoch in range(5):
        reporter.on_epoch(epoch, 0.5)
    assert [line.split()[1] for line in stream.getvalue().splitlines()] == ["0", "2", "4"]
    with pytest.raises(ValueError):
        ConsoleReporter(every=0)


def test_console_reporter_defaults_to_stdout(capsys) -> None:
    ConsoleReporter().on_epoch(0, 2.0)
    assert capsys.readouterr().out == "epoch: 0  error: 2.000\n"


def test_format_values() -> None:
    assert format_values("w", [0.5, 0.25]) == "w[0] 0.50000\nw[1] 0.25000"
