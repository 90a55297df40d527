#!/usr/bin/env python
# -*- coding: utf-8 -*-
import argparse
import logging
import math
import sys
from typing import Any, Dict

from asstools.cli_common import (
    ScriptCommentStamper,
    add_common_args,
    configure_logging,
    make_script_comment,
    parse_time_arg,
    stdio_or_path,
    validate_file_permissions,
    write_script,
)
from asstools.constants import DEFAULT_SCALE_FACTOR, TIME_DESCRIPTION
from asstools.exceptions import AssToolsError
from asstools.script_parser import ScriptParser
from asstools.script_transformers import ScriptShifter
from asstools.sklearn_shim import Pipeline

logger: logging.Logger = logging.getLogger(__name__)


def validate_args(args: argparse.Namespace) -> None:
    if len(args.rest) == 1:
        args.scale_factor = DEFAULT_SCALE_FACTOR
        args.output = args.rest[0]
    elif len(args.rest) == 2:
        args.scale_factor = float(args.rest[0])
        args.output = args.rest[1]
    else:
        raise ValueError('expected [scale] output, got %d arguments' % len(args.rest))
    if not math.isfinite(args.scale_factor) or args.scale_factor <= 0:
        raise ValueError('invalid scale: %s' % args.rest[0])


def run(args: argparse.Namespace) -> Dict[str, Any]:
    result: Dict[str, Any] = {
        'retval': 0,
        'offset': None,
        'scale_factor': None,
    }
    configure_logging(args)
    try:
        args.offset_centiseconds = parse_time_arg(args.offset)
        validate_args(args)
        validate_file_permissions(args.input, [args.output])
    except ValueError as e:
        logger.error(e)
        result['retval'] = 1
        return result
    result['offset'] = args.offset_centiseconds
    result['scale_factor'] = args.scale_factor
    try:
        logger.info('reading %s...', 'stdin' if stdio_or_path(args.input) is None else args.input)
        pipe = Pipeline([
            ('parse', ScriptParser(encoding=args.encoding)),
            ('stamp', ScriptCommentStamper(make_script_comment())),
            ('shift', ScriptShifter(args.offset_centiseconds, args.scale_factor)),
        ])
        out_script = pipe.fit_transform(stdio_or_path(args.input))
        write_script(out_script, args.output, args.output_encoding)
        logger.info('...done')
    except (AssToolsError, ValueError, LookupError, OSError) as e:
        logger.error(e)
        result['retval'] = 1
    return result


def add_cli_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('input', help='Input script ("-" for stdin).')
    parser.add_argument('offset',
                        help='Offset added after scaling, either in seconds or as H:MM:SS.CC '
                             '(put "--" before a negative H:MM:SS.CC offset).')
    parser.add_argument('rest', nargs='+', metavar='[scale] output',
                        help='Optional scale factor (default=%.1f), then the output script '
                             '("-" for stdout).' % DEFAULT_SCALE_FACTOR)


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='ass-time', description=TIME_DESCRIPTION)
    add_cli_args(parser)
    add_common_args(parser)
    return parser


def main() -> int:
    parser = make_parser()
    args = parser.parse_args()
    return run(args)['retval']


if __name__ == "__main__":
    sys.exit(main())
