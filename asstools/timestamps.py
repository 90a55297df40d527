# -*- coding: utf-8 -*-
"""
Conversion between ``H:MM:SS.CC`` timestamps and integer centiseconds.

Scripts store times with a single hour digit and hundredths of a second,
so every representable timestamp lies in ``[0, MAX_TIMESTAMP)``.
"""
import re

from asstools.constants import (
    CENTISECONDS_PER_HOUR,
    CENTISECONDS_PER_MINUTE,
    CENTISECONDS_PER_SECOND,
    MAX_TIMESTAMP,
)
from asstools.exceptions import FormatError

_TIME_SEPARATOR = ':'
_HOURS_PATTERN = re.compile(r'[0-9]')
_MINUTES_PATTERN = re.compile(r'[0-9]{2}')
_SECONDS_PATTERN = re.compile(r'[0-9]{2}(?:\.[0-9]*)?')


def parse_time(text: str) -> int:
    """Parse ``H:MM:SS.CC`` into centiseconds.

    The seconds part may carry any number of decimals; it is rounded to the
    nearest hundredth.
    """
    parts = text.split(_TIME_SEPARATOR)
    if len(parts) != 3:
        raise FormatError('invalid timestamp format: %r' % text)
    hours, minutes, seconds = parts

    if _HOURS_PATTERN.fullmatch(hours) is None:
        raise FormatError('invalid timestamp format: %r' % text)

    if _MINUTES_PATTERN.fullmatch(minutes) is None or int(minutes) >= 60:
        raise FormatError('invalid timestamp format: %r' % text)

    if _SECONDS_PATTERN.fullmatch(seconds) is None:
        raise FormatError('invalid timestamp format: %r' % text)
    parsed_seconds = float(seconds)
    if parsed_seconds >= 60.:
        raise FormatError('invalid timestamp format: %r' % text)

    return (
        int(hours) * CENTISECONDS_PER_HOUR
        + int(minutes) * CENTISECONDS_PER_MINUTE
        + int(round(parsed_seconds * CENTISECONDS_PER_SECOND))
    )


def format_time(centiseconds: int) -> str:
    """Render centiseconds as ``H:MM:SS.CC``."""
    if centiseconds < 0 or centiseconds >= MAX_TIMESTAMP:
        raise FormatError('invalid timestamp value: %d' % centiseconds)
    hours, remaining = divmod(centiseconds, CENTISECONDS_PER_HOUR)
    minutes, remaining = divmod(remaining, CENTISECONDS_PER_MINUTE)
    seconds, remaining = divmod(remaining, CENTISECONDS_PER_SECOND)
    return '%01d:%02d:%02d.%02d' % (hours, minutes, seconds, remaining)


def parse_time_signed(text: str) -> int:
    """Like :func:`parse_time`, but accepts a leading sign."""
    if text[:1] == '-':
        return -parse_time(text[1:])
    if text[:1] == '+':
        return parse_time(text[1:])
    return parse_time(text)


def format_time_signed(centiseconds: int) -> str:
    if centiseconds < 0:
        return '-' + format_time(-centiseconds)
    return format_time(centiseconds)


def seconds_to_centiseconds(seconds: float) -> int:
    if seconds < 0:
        raise ValueError('negative time: %r seconds' % seconds)
    return seconds_to_centiseconds_signed(seconds)


def seconds_to_centiseconds_signed(seconds: float) -> int:
    return int(round(seconds * CENTISECONDS_PER_SECOND))
