# -*- coding: utf-8 -*-
"""Argument handling shared by the ``ass-split`` and ``ass-time`` tools."""
import argparse
import logging
import math
import os
from typing import Iterable, List, Optional, Sequence

from asstools.constants import (
    DEFAULT_ENCODING,
    DEFAULT_OUTPUT_ENCODING,
    DESCRIPTION,
    PROJECT_NAME,
    SCRIPT_COMMENT_TEMPLATE,
)
from asstools.script import AssScript
from asstools.sklearn_shim import TransformerMixin
from asstools.timestamps import parse_time_signed, seconds_to_centiseconds_signed
from asstools.version import get_version

logger: logging.Logger = logging.getLogger(__name__)

STDIO = '-'


def stdio_or_path(path: str) -> Optional[str]:
    return None if path == STDIO else path


def parse_time_arg(text: str) -> int:
    """Centiseconds from either decimal seconds or a signed ``H:MM:SS.CC`` timestamp."""
    if ':' in text:
        return parse_time_signed(text)
    seconds = float(text)
    if not math.isfinite(seconds):
        raise ValueError('invalid time: %s' % text)
    return seconds_to_centiseconds_signed(seconds)


def make_script_comment() -> List[str]:
    return [
        line.format(project=PROJECT_NAME, version=get_version(), description=DESCRIPTION)
        for line in SCRIPT_COMMENT_TEMPLATE
    ]


class ScriptCommentStamper(TransformerMixin):
    """Replace the free-text comment written below the ``[Script Info]`` header."""

    def __init__(self, comment_lines: Sequence[str]) -> None:
        self.comment_lines: Sequence[str] = comment_lines
        self.script_: Optional[AssScript] = None

    def fit(self, script: AssScript, *_) -> 'ScriptCommentStamper':
        script.script_comment = script.line_break.join(self.comment_lines)
        self.script_ = script
        return self

    def transform(self, *_) -> AssScript:
        return self.script_


def validate_file_permissions(input_path: str, output_paths: Iterable[str]) -> None:
    error_string_template = 'unable to {action} {file}; try ensuring file exists and has correct permissions'
    if input_path != STDIO and not os.access(input_path, os.R_OK):
        raise ValueError(error_string_template.format(action='read input script', file=input_path))
    for output_path in output_paths:
        if output_path != STDIO and os.path.exists(output_path) and not os.access(output_path, os.W_OK):
            raise ValueError(error_string_template.format(action='write output script', file=output_path))


def write_script(script: AssScript, path: str, output_encoding: str) -> None:
    script.set_encoding(output_encoding)
    logger.info('writing output to %s', 'stdout' if path == STDIO else path)
    script.write_file(stdio_or_path(path))


def configure_logging(args: argparse.Namespace) -> None:
    if args.quiet:
        logging.getLogger(PROJECT_NAME).setLevel(logging.WARNING)


def add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('-v', '--version', action='version',
                        version='{package} {version}'.format(package=PROJECT_NAME, version=get_version()))
    parser.add_argument('--encoding', default=DEFAULT_ENCODING,
                        help='What encoding to use for reading the input script; "infer" to detect it '
                             '(default=%s).' % DEFAULT_ENCODING)
    parser.add_argument('--output-encoding', default=DEFAULT_OUTPUT_ENCODING,
                        help='What encoding to use for writing output scripts '
                             '(default=%s, the encoding of the input).' % DEFAULT_OUTPUT_ENCODING)
    parser.add_argument('-q', '--quiet', action='store_true', help='Only report warnings and errors.')
