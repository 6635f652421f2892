"""Command-line entry point for PodLens."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from podlens import __version__
from podlens.constants.values import APP_TITLE

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="podlens",
        description=f"{APP_TITLE}: interactive terminal dashboard for Kubernetes pods.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--context",
        default=None,
        help="kubectl context to use (default: the current context)",
    )
    parser.add_argument(
        "-n",
        "--namespace",
        default=None,
        help="Namespace to open (default: the last one used)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for --log-file (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        metavar="PATH",
        help="Write logs to this file; nothing is logged to the terminal",
    )
    return parser


def configure_logging(level: str, log_file: Path | None) -> None:
    """Log to a file only; the terminal belongs to the TUI."""
    if log_file is None:
        logging.basicConfig(level=level, handlers=[logging.NullHandler()])
        return
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(filename=str(log_file), level=level, format=_LOG_FORMAT)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    # Deferred so --help and --version stay fast.
    from podlens.app import PodLensApp
    from podlens.controllers.cluster import ClusterController

    if not ClusterController.kubectl_available():
        print("podlens: kubectl not found on PATH", file=sys.stderr)
        return 1

    context = args.context or ClusterController.resolve_current_context() or ""
    cluster = ClusterController(context=context)
    if not asyncio.run(cluster.check_connection()):
        print(
            f"podlens: cannot reach the Kubernetes API (context: {context or '-'})",
            file=sys.stderr,
        )
        return 1

    logger.info("Starting %s %s (context=%s)", APP_TITLE, __version__, context or "-")
    app = PodLensApp(cluster=cluster, namespace=args.namespace)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
