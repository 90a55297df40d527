# -*- coding: utf-8 -*-
import pytest

from asstools.exceptions import FormatError
from asstools.timestamps import (
    format_time,
    format_time_signed,
    parse_time,
    parse_time_signed,
    seconds_to_centiseconds,
    seconds_to_centiseconds_signed,
)


@pytest.mark.parametrize('text, expected', [
    ('0:00:00.00', 0),
    ('0:00:00.01', 1),
    ('0:00:01.00', 100),
    ('0:01:00.00', 6000),
    ('1:00:00.00', 360000),
    ('1:23:45.67', 502567),
    ('9:59:59.99', 3599999),
])
def test_parse_and_format(text, expected):
    assert parse_time(text) == expected
    assert format_time(expected) == text


@pytest.mark.parametrize('text, expected', [
    ('0:00:01.5', 150),
    ('0:00:01', 100),
    ('0:00:00.126', 13),
    ('0:00:02.', 200),
])
def test_parse_uneven_decimals(text, expected):
    assert parse_time(text) == expected


@pytest.mark.parametrize('text', [
    '',
    '0:00',
    '0:00:00:00',
    '00:00:00.00',
    'a:00:00.00',
    '0:0:00.00',
    '0:000:00.00',
    '0:60:00.00',
    '0:00:60.00',
    '0:00:5.00',
    '0:00:xx.00',
    ' 0:00:05.00',
    '-0:00:05.00',
])
def test_parse_rejects_malformed(text):
    with pytest.raises(FormatError):
        parse_time(text)


@pytest.mark.parametrize('centiseconds', [-1, 3600000, 3600001])
def test_format_rejects_out_of_range(centiseconds):
    with pytest.raises(FormatError):
        format_time(centiseconds)


@pytest.mark.parametrize('centiseconds', [0, 1, 99, 100, 5999, 6000, 359999, 360000, 3599999])
def test_format_then_parse_is_identity(centiseconds):
    assert parse_time(format_time(centiseconds)) == centiseconds


@pytest.mark.parametrize('text, expected', [
    ('0:00:05.00', 500),
    ('+0:00:05.00', 500),
    ('-0:00:05.00', -500),
    ('-1:00:00.50', -360050),
])
def test_signed_timestamps(text, expected):
    assert parse_time_signed(text) == expected
    assert format_time_signed(expected) == text.lstrip('+')


@pytest.mark.parametrize('seconds, expected', [
    (0, 0),
    (1.5, 150),
    (10, 1000),
    (0.29, 29),
])
def test_seconds_to_centiseconds(seconds, expected):
    assert seconds_to_centiseconds(seconds) == expected
    assert seconds_to_centiseconds_signed(-seconds) == -expected


def test_negative_seconds_need_signed_conversion():
    with pytest.raises(ValueError):
        seconds_to_centiseconds(-0.01)
    assert seconds_to_centiseconds_signed(-2.3) == -230
