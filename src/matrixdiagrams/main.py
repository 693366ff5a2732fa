"""
Application Initialization
==========================
This module parses the command line, sets up logging, builds the main window
and starts the Qt event loop.

Usage:
    $ matrixdiagrams            # diagram 1, digit keys switch diagrams
    $ matrixdiagrams 6          # transpose diagram
    $ matrixdiagrams '#3' --log-level DEBUG
"""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from matrixdiagrams.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matrixdiagrams",
        description="Interactive diagrams of matrix multiplication, transposition and packing order.",
    )
    parser.add_argument(
        "selection",
        nargs="?",
        default=None,
        help="1-based diagram number, optionally written as a fragment ('#3').",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level of the 'matrixdiagrams' logger.",
    )
    parser.add_argument("--log-file", default=None, help="Optional file to write the log to.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args, qt_args = build_parser().parse_known_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    # Qt is imported late so --help works without a display.
    from matrixdiagrams.app.application import create_app
    from matrixdiagrams.view.main_window import MainWindow

    # 2. Create the Qt Application, passing Qt's own options through
    app = create_app(["matrixdiagrams", *qt_args])

    # 3. Initialize the Main Window with the requested diagram
    window = MainWindow(args.selection)
    window.show()

    # 4. Start Event Loop
    return app.exec()
