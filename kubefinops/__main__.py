"""Command line entry point: ``python -m kubefinops``."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from kubefinops.app import FinOpsApp
from kubefinops.models.core.workload_scope import WorkloadScope


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kubefinops",
        description="Per-container memory/CPU utilization for a Kubernetes workload.",
    )
    parser.add_argument("--namespace", "-n", required=True)
    parser.add_argument("--workload", "-w", required=True, help="Workload name")
    parser.add_argument(
        "--kind",
        "-k",
        default="Deployment",
        help="Deployment, StatefulSet or DaemonSet",
    )
    parser.add_argument("--prometheus-url", default=None)
    parser.add_argument("--settings", type=Path, default=None, help="Settings JSON/YAML file")
    parser.add_argument("--log-file", type=Path, default=None)
    parser.add_argument("--debug", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    # The TUI owns the terminal, so logs go to a file when requested.
    if args.log_file is not None:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG if args.debug else logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    scope = WorkloadScope.from_object(
        {"kind": args.kind, "metadata": {"name": args.workload, "namespace": args.namespace}}
    )
    app = FinOpsApp(
        scope,
        settings_path=args.settings,
        prometheus_url=args.prometheus_url,
        kind_label=args.kind,
    )
    try:
        app.run()
    finally:
        app.controller.close()


if __name__ == "__main__":
    main()
