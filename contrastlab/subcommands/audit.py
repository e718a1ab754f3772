#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/audit.py

import argparse
import sys

from contrastlab.core import config as c
from contrastlab.logic.audit import engine
from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS


def get_audit_parser() -> argparse.ArgumentParser:
    parser = ContrastlabArgumentParser(
        prog="contrastlab audit",
        description="contrastlab audit: WCAG 2.1 contrast audit of a theme catalog",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "catalog",
        help="JSON theme catalog: a list of presets or {\"presets\": [...]}",
    )
    parser.add_argument(
        "-f", "--format",
        type=INPUT_HANDLERS["format"],
        default="text",
        help=f"report format: {', '.join(c.REPORT_FORMATS)} (default: text)",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="write the report to a file instead of stdout",
    )
    parser.add_argument(
        "-j", "--workers",
        type=INPUT_HANDLERS["workers"],
        default=1,
        help=f"audit themes on N threads: 1 to {c.MAX_WORKERS} (default: 1)",
    )

    config_group = parser.add_argument_group("audit configuration")
    config_group.add_argument(
        "--pairs",
        default=None,
        help="JSON list of [background, foreground(, label)] role pairs\n"
             "(default: built-in semantic + signal pairs)",
    )
    config_group.add_argument(
        "--category-order",
        type=INPUT_HANDLERS["category_order"],
        default=None,
        help=f"comma-separated category priority\n(default: {','.join(c.CATEGORY_ORDER)})",
    )
    config_group.add_argument(
        "--title",
        default=c.REPORT_SUBTITLE,
        help=f"report subtitle (default: {c.REPORT_SUBTITLE})",
    )
    config_group.add_argument(
        "--strict",
        action="store_true",
        help="exit with status 1 when any pair fails WCAG AA",
    )
    return parser


def main() -> None:
    parser = get_audit_parser()
    args = parser.parse_args(sys.argv[1:])
    sys.exit(engine.run(args))


if __name__ == "__main__":
    main()
