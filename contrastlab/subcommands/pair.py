#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/pair.py

import argparse
import sys

from contrastlab.logic.pair import engine
from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS


def get_pair_parser() -> argparse.ArgumentParser:
    parser = ContrastlabArgumentParser(
        prog="contrastlab pair",
        description="contrastlab pair: WCAG 2.1 contrast of one color pair",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-bg", "--background",
        required=True,
        type=INPUT_HANDLERS["color"],
        help="background color: oklch(L C H) or #RGB/#RRGGBB",
    )
    parser.add_argument(
        "-fg", "--foreground",
        required=True,
        type=INPUT_HANDLERS["color"],
        help="foreground color: oklch(L C H) or #RGB/#RRGGBB",
    )
    parser.add_argument(
        "-l", "--label",
        default=None,
        help="label shown above the verdict",
    )
    return parser


def main() -> None:
    parser = get_pair_parser()
    args = parser.parse_args(sys.argv[1:])
    sys.exit(engine.run(args))


if __name__ == "__main__":
    main()
