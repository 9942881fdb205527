"""Command-line interface for titletotags."""

from __future__ import annotations

import asyncio as asyncio
import logging as logging

from titletotags import ConfigError as ConfigError
from titletotags import TitleToTags as TitleToTags
from titletotags import load_config as load_config
from titletotags import scaffold_config as scaffold_config
from titletotags import write_config as write_config
from titletotags.cli.app import main as main
from titletotags.cli.commands import harness as harness_command
from titletotags.cli.commands import init as init_command
from titletotags.cli.commands import parse as parse_command
from titletotags.cli.commands import run as run_command
from titletotags.cli.parser import _package_version as _package_version
from titletotags.cli.parser import build_parser as build_parser

_format_run_summary = run_command.format_run_summary

_run_parse = parse_command.run_parse
_run_init = init_command.run_init
_run_init_defaults = init_command.run_init_defaults
_run_init_interactive = init_command.run_init_interactive
_run_cleanup = run_command.run_cleanup
_run_harness = harness_command.run_harness
