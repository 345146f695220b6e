#!/usr/bin/env python3
"""Fit the two-layer network to the descending ramp and print the results."""
from __future__ import annotations

import argparse

from tinynet import (
    Activation,
    ConsoleReporter,
    NetworkConfig,
    TrainingConfig,
    TwoLayerNetwork,
    descending_ramp,
    format_values,
)
from tinynet.visualization import save_report


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--hidden", type=int, default=8, help="hidden layer size")
    p.add_argument("--epochs", type=int, default=50)
    p.add_argument("--lr", type=float, default=0.2)
    p.add_argument(
        "--activation",
        type=str,
        default=Activation.ELU.value,
        choices=[member.value for member in Activation],
    )
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--report-every", type=int, default=1, help="print the error every N epochs")
    p.add_argument("--progress", action="store_true", help="show a progress bar instead of per-epoch lines")
    p.add_argument("--dump-weights", action="store_true")
    p.add_argument("--plot", type=str, default=None, help="save error and fit plots to this path")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    table = descending_ramp()
    config = NetworkConfig(
        input_dim=table.input_dim,
        hidden_dim=args.hidden,
        output_dim=table.output_dim,
        activation=args.activation,
        seed=args.seed,
    )
    training = TrainingConfig(epochs=args.epochs, learning_rate=args.lr)
    reporter = ConsoleReporter(every=args.report_every)
    network = TwoLayerNetwork(config, reporter=None if args.progress else reporter)

    history = network.fit(table, training, progress=args.progress)

    network.reporter = reporter
    for row in table.inputs:
        network.evaluate(row)

    if args.dump_weights:
        for name, values in network.parameters().items():
            print(format_values(name, values))

    if args.plot:
        save_report(args.plot, history.errors, network, table)
        print(f"Saved plots to {args.plot}")


if __name__ == "__main__":
    main()
