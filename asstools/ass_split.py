#!/usr/bin/env python
# -*- coding: utf-8 -*-
import argparse
import logging
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
from asstools.constants import SPLIT_DESCRIPTION
from asstools.exceptions import AssToolsError
from asstools.script_parser import ScriptParser
from asstools.script_transformers import ScriptSplitter
from asstools.sklearn_shim import Pipeline

logger: logging.Logger = logging.getLogger(__name__)


def validate_args(args: argparse.Namespace) -> None:
    if len(args.outputs) not in (1, 2):
        raise ValueError('expected one or two output files, got %d' % len(args.outputs))
    if len(args.outputs) == 2 and args.second_only:
        raise ValueError('--second-only option can only be used in single output mode')
    if args.cut <= 0:
        raise ValueError('invalid split time: %s' % args.seconds)


def run(args: argparse.Namespace) -> Dict[str, Any]:
    result: Dict[str, Any] = {
        'retval': 0,
        'cut': None,
        'num_records': None,
    }
    configure_logging(args)
    try:
        args.cut = parse_time_arg(args.seconds)
        validate_args(args)
        validate_file_permissions(args.input, args.outputs)
    except ValueError as e:
        logger.error(e)
        result['retval'] = 1
        return result
    result['cut'] = args.cut
    try:
        logger.info('reading %s...', 'stdin' if stdio_or_path(args.input) is None else args.input)
        pipe = Pipeline([
            ('parse', ScriptParser(encoding=args.encoding)),
            ('stamp', ScriptCommentStamper(make_script_comment())),
            ('split', ScriptSplitter(args.cut)),
        ])
        first, second = pipe.fit_transform(stdio_or_path(args.input))
        result['num_records'] = (len(first), len(second))
        if len(args.outputs) == 2:
            write_script(first, args.outputs[0], args.output_encoding)
            write_script(second, args.outputs[1], args.output_encoding)
        elif args.second_only:
            write_script(second, args.outputs[0], args.output_encoding)
        else:
            write_script(first, args.outputs[0], args.output_encoding)
        logger.info('...done')
    except (AssToolsError, ValueError, LookupError, OSError) as e:
        logger.error(e)
        result['retval'] = 1
    return result


def add_cli_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('input', help='Input script ("-" for stdin).')
    parser.add_argument('seconds',
                        help='Split time, either in seconds or as H:MM:SS.CC. Events starting at or '
                             'after it go to the second part, moved back by the split time.')
    parser.add_argument('outputs', nargs='+', metavar='out',
                        help='Output script for the first part, optionally followed by one for '
                             'the second part ("-" for stdout).')
    parser.add_argument('--second-only', action='store_true',
                        help='Write only the second part in single output mode.')


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='ass-split', description=SPLIT_DESCRIPTION)
    add_cli_args(parser)
    add_common_args(parser)
    return parser


def main() -> int:
    parser = make_parser()
    args = parser.parse_args()
    return run(args)['retval']


if __name__ == "__main__":
    sys.exit(main())
