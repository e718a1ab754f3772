#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/main.py

import argparse
import sys

from contrastlab import __version__
from contrastlab.subcommands.command_registry import SUBCOMMANDS
from contrastlab.shared.logger import log, ContrastlabArgumentParser


def get_root_parser() -> argparse.ArgumentParser:
    """Create argument parser for the bare contrastlab command."""
    parser = ContrastlabArgumentParser(
        prog="contrastlab",
        description="contrastlab: WCAG 2.1 contrast compliance for theme presets\n\n"
                    f"commands: {', '.join(SUBCOMMANDS)}",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"contrastlab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def main() -> None:
    """Main entry point for contrastlab CLI"""
    # Subcommand Routing
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_root_parser()
    args = parser.parse_args()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getattr(module, f"get_{name}_parser")().print_help()
        sys.exit(0)

    if args.command:
        log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    parser.print_help()
    sys.exit(0)


if __name__ == "__main__":
    main()
