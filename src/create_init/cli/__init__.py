"""Command-line interface for create-init."""

from __future__ import annotations

import logging as logging

from create_init.cli.app import main as main
from create_init.cli.parser import build_parser as build_parser
from create_init.cli.parser import invocation_from_args as invocation_from_args
from create_init.cli.prompter import QuestionaryPrompter as QuestionaryPrompter
from create_init.cli.render import print_cancelled as print_cancelled
from create_init.cli.render import print_help as print_help
from create_init.cli.render import print_summary as print_summary
from create_init.cli.render import template_color as template_color
from create_init.config import ScaffoldSettings as ScaffoldSettings
from create_init.config import load_config as load_config
from create_init.flow import run_flow as run_flow
from create_init.materializer import materialize as materialize
