# -*- coding: utf-8 -*-
import os

import pytest

from asstools import ass_split, ass_time
from asstools.cli_common import make_script_comment, parse_time_arg
from asstools.version import get_version

fake_ass = (
    '\ufeff[Script Info]\r\n'
    '; Script generated by some editor\r\n'
    'Title: CLI\r\n'
    '\r\n'
    '[Events]\r\n'
    'Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text\r\n'
    'Dialogue: 0,0:00:05.00,0:00:09.00,Default,,0,0,0,,first\r\n'
    'Dialogue: 0,0:00:15.00,0:00:25.00,Default,,0,0,0,,second\r\n'
)

stamp = '; Script generated by asstools %s\r\n; Split and retime Advanced SubStation Alpha subtitle scripts.' % get_version()


@pytest.fixture
def input_path(tmp_path):
    path = tmp_path / 'input.ass'
    path.write_bytes(fake_ass.encode('utf-8'))
    return str(path)


def read(path):
    with open(path, 'rb') as f:
        return f.read().decode('utf-8')


@pytest.mark.parametrize('text, expected', [
    ('10', 1000),
    ('1.5', 150),
    ('-2.3', -230),
    ('0:00:10.00', 1000),
    ('-0:01:00.00', -6000),
])
def test_parse_time_arg(text, expected):
    assert parse_time_arg(text) == expected


@pytest.mark.parametrize('text', ['nan', 'inf', 'ten', '0:0:10'])
def test_parse_time_arg_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_time_arg(text)


@pytest.mark.parametrize('cut', ['10', '0:00:10.00'])
def test_split_two_outputs(tmp_path, input_path, cut):
    out1, out2 = str(tmp_path / 'out1.ass'), str(tmp_path / 'out2.ass')
    args = ass_split.make_parser().parse_args([input_path, cut, out1, out2])
    result = ass_split.run(args)
    assert result['retval'] == 0
    assert result['cut'] == 1000
    first, second = read(out1), read(out2)
    assert first.startswith('\ufeff[Script Info]\r\n%s\r\nTitle: CLI\r\n' % stamp)
    assert 'Dialogue: 0,0:00:05.00,0:00:09.00,Default,,0,0,0,,first\r\n' in first
    assert 'second' not in first
    assert 'Dialogue: 0,0:00:05.00,0:00:15.00,Default,,0,0,0,,second\r\n' in second
    assert 'first' not in second


@pytest.mark.parametrize('second_only, expected', [(False, 'first'), (True, 'second')])
def test_split_single_output(tmp_path, input_path, second_only, expected):
    out = str(tmp_path / 'out.ass')
    argv = [input_path, '10', out] + (['--second-only'] if second_only else [])
    assert ass_split.run(ass_split.make_parser().parse_args(argv))['retval'] == 0
    assert ',,%s\r\n' % expected in read(out)


@pytest.mark.parametrize('extra_argv', [
    ['0', '{out}'],
    ['-5', '{out}'],
    ['nan', '{out}'],
    ['10', '{out}', '{out}', '{out}'],
    ['10', '{out}', '{out}', '--second-only'],
])
def test_split_rejects_bad_arguments(tmp_path, input_path, extra_argv):
    out = str(tmp_path / 'out.ass')
    argv = [input_path] + [arg.format(out=out) for arg in extra_argv]
    assert ass_split.run(ass_split.make_parser().parse_args(argv))['retval'] == 1
    assert not os.path.exists(out)


def test_split_missing_input(tmp_path):
    out = str(tmp_path / 'out.ass')
    args = ass_split.make_parser().parse_args([str(tmp_path / 'missing.ass'), '10', out])
    assert ass_split.run(args)['retval'] == 1
    assert not os.path.exists(out)


def test_split_rejects_malformed_input(tmp_path):
    path = tmp_path / 'input.ass'
    path.write_text('[Events]\nFormat: Start, End, Text\n')
    out = str(tmp_path / 'out.ass')
    assert ass_split.run(ass_split.make_parser().parse_args([str(path), '10', out]))['retval'] == 1
    assert not os.path.exists(out)


def test_time_offset_only(tmp_path, input_path):
    out = str(tmp_path / 'out.ass')
    result = ass_time.run(ass_time.make_parser().parse_args([input_path, '1.5', out]))
    assert result['retval'] == 0
    assert result['offset'] == 150
    assert result['scale_factor'] == 1.
    shifted = read(out)
    assert shifted.startswith('\ufeff[Script Info]\r\n%s\r\n' % stamp)
    assert 'Dialogue: 0,0:00:06.50,0:00:10.50,Default,,0,0,0,,first\r\n' in shifted
    assert 'Dialogue: 0,0:00:16.50,0:00:26.50,Default,,0,0,0,,second\r\n' in shifted


def test_time_offset_and_scale(tmp_path, input_path):
    out = str(tmp_path / 'out.ass')
    result = ass_time.run(ass_time.make_parser().parse_args([input_path, '2', '2', out]))
    assert result['retval'] == 0
    assert result['scale_factor'] == 2.
    assert 'Dialogue: 0,0:00:12.00,0:00:20.00,Default,,0,0,0,,first\r\n' in read(out)


def test_time_negative_timestamp_offset(tmp_path, input_path):
    out = str(tmp_path / 'out.ass')
    args = ass_time.make_parser().parse_args([input_path, '--', '-0:00:05.00', out])
    assert ass_time.run(args)['retval'] == 0
    assert 'Dialogue: 0,0:00:00.00,0:00:04.00,Default,,0,0,0,,first\r\n' in read(out)


def test_time_negative_result_writes_nothing(tmp_path, input_path):
    out = str(tmp_path / 'out.ass')
    assert ass_time.run(ass_time.make_parser().parse_args([input_path, '-10', out]))['retval'] == 1
    assert not os.path.exists(out)


@pytest.mark.parametrize('scale', ['0', '-1', 'nan', 'big'])
def test_time_rejects_bad_scale(tmp_path, input_path, scale):
    out = str(tmp_path / 'out.ass')
    assert ass_time.run(ass_time.make_parser().parse_args([input_path, '1', scale, out]))['retval'] == 1
    assert not os.path.exists(out)


def test_time_output_encoding(tmp_path, input_path):
    out = str(tmp_path / 'out.ass')
    args = ass_time.make_parser().parse_args([input_path, '0', out, '--output-encoding', 'utf-16-le'])
    assert ass_time.run(args)['retval'] == 0
    with open(out, 'rb') as f:
        assert f.read().decode('utf-16-le').startswith('\ufeff[Script Info]\r\n')


def test_stamp_follows_input_line_break(tmp_path):
    path = tmp_path / 'input.ass'
    path.write_bytes(fake_ass.replace('\r\n', '\n').encode('utf-8'))
    out = str(tmp_path / 'out.ass')
    assert ass_time.run(ass_time.make_parser().parse_args([str(path), '0', out]))['retval'] == 0
    assert read(out).startswith('\ufeff[Script Info]\n%s\nTitle: CLI\n' % '\n'.join(make_script_comment()))
    assert '\r' not in read(out)


def test_unknown_encoding_is_reported(tmp_path, input_path):
    out = str(tmp_path / 'out.ass')
    args = ass_time.make_parser().parse_args([input_path, '1', out, '--encoding', 'no-such-codec'])
    assert ass_time.run(args)['retval'] == 1
    assert not os.path.exists(out)
