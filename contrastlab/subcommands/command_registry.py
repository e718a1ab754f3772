#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/command_registry.py

from . import (
    audit,
    pair
)

SUBCOMMANDS = {
    'audit': audit,
    'pair': pair
}
