# -*- coding: utf-8 -*-
import codecs
import logging
import os
from typing import Any, List, Optional, Tuple

import chardet

from asstools.constants import (
    BOM,
    BOM_BYTES,
    BOM_ENCODING,
    COMMENT_PREFIX,
    CRLF,
    DEFAULT_ENCODING,
    LF,
    MULTILINE_CHUNK_WIDTH,
    MULTILINE_FIELDS,
    SCRIPT_INFO,
    SECTIONS,
    TYPE_DELIMITER,
    WHITESPACE,
)
from asstools.exceptions import FormatError, NotFoundError
from asstools.file_utils import open_file
from asstools.script import AssScript, Record, ScriptMixin
from asstools.sklearn_shim import TransformerMixin

logger: logging.Logger = logging.getLogger(__name__)


def defines_section(trimmed_line: str) -> bool:
    return trimmed_line.startswith('[') and trimmed_line.endswith(']')


def _starts_lowercase(trimmed_line: str) -> bool:
    return 'a' <= trimmed_line[:1] <= 'z'


def split_first_line(text: str) -> Tuple[str, str, List[str]]:
    """
    Split off the first line and detect the line break used by the script.

    Returns the first line (without its break), the detected line break and
    the remaining lines split on that break.
    """
    first_line, sep, rest = text.partition(LF)
    if not first_line and not sep:
        raise FormatError("can't read input script: no data")
    line_break = CRLF if first_line.endswith('\r') else LF
    return first_line, line_break, rest.split(line_break) if rest else []


class _SectionReader:
    """Line-by-line state machine that fills an :class:`AssScript`."""

    def __init__(self, script: AssScript) -> None:
        self.script = script
        self.current_section: str = SCRIPT_INFO
        self.skip_section: bool = False
        # multi-line field (embedded font or picture) being accumulated
        self.pending: Optional[Record] = None

    def feed(self, line: str) -> None:
        if line.startswith(COMMENT_PREFIX):
            return

        trimmed_line = line.strip(WHITESPACE)
        if not trimmed_line:
            return

        if defines_section(trimmed_line):
            self._flush_pending()
            self.skip_section = trimmed_line not in SECTIONS
            if not self.skip_section:
                self.current_section = trimmed_line
            elif logger.isEnabledFor(logging.DEBUG):
                logger.debug('skipping unknown section %s', trimmed_line)
            return

        if self.skip_section:
            return

        if self.pending is not None:
            self._continue_multiline(trimmed_line)
            return

        type_, sep, data = line.partition(TYPE_DELIMITER)
        if not sep:
            raise FormatError('line type delimiter not found: %r' % line)
        type_ = type_.strip(WHITESPACE)
        if type_ in MULTILINE_FIELDS:
            self.pending = Record(type_, data)
        else:
            self.script.add_line(self.current_section, type_, data)

    def _continue_multiline(self, trimmed_line: str) -> None:
        # Payload lines are wrapped at a fixed width, so a short line is the
        # last chunk. A line starting with a lowercase letter also ends the
        # field; that line is consumed here and never read as a record.
        # TODO: re-read a lowercase terminator as a new record instead of dropping it.
        ends_field = _starts_lowercase(trimmed_line)
        if not ends_field:
            self.pending = Record(
                self.pending.type,
                self.pending.data + self.script.line_break + trimmed_line,
            )
        if ends_field or len(trimmed_line) < MULTILINE_CHUNK_WIDTH:
            self._flush_pending()

    def _flush_pending(self) -> None:
        if self.pending is not None:
            self.script.add_line(self.current_section, self.pending.type, self.pending.data)
            self.pending = None

    def close(self) -> AssScript:
        self._flush_pending()
        return self.script


def parse_script(text: str, encoding: str = DEFAULT_ENCODING) -> AssScript:
    """Build an :class:`AssScript` from the decoded contents of a script file."""
    has_bom = text.startswith(BOM)
    if has_bom:
        text = text[len(BOM):]
    first_line, line_break, lines = split_first_line(text)
    if first_line.strip(WHITESPACE) != SCRIPT_INFO:
        raise FormatError('input is not a valid V4+ script')

    reader = _SectionReader(AssScript(has_bom=has_bom, line_break=line_break, encoding=encoding))
    for line in lines:
        reader.feed(line)
    return reader.close()


class ScriptParser(ScriptMixin, TransformerMixin):
    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        super(ScriptParser, self).__init__()
        self.encoding: str = encoding
        self.detected_encoding_: Optional[str] = None

    def fit(self, fname: Any, *_) -> 'ScriptParser':
        if isinstance(fname, str) and not os.path.isfile(fname):
            raise NotFoundError('file not found: %s' % fname)
        with open_file(fname, 'rb') as f:
            raw = f.read()
        has_bom = raw.startswith(BOM_BYTES)
        encoding = self.encoding
        if has_bom:
            # the marker is the UTF-8 encoding of U+FEFF
            raw = raw[len(BOM_BYTES):]
            if encoding != 'infer' and codecs.lookup(encoding).name != BOM_ENCODING:
                logger.warning('byte order mark found, reading input as %s instead of %s', BOM_ENCODING, encoding)
            encoding = BOM_ENCODING
        elif encoding == 'infer':
            encoding = chardet.detect(raw)['encoding'] or DEFAULT_ENCODING
        if self.encoding == 'infer':
            self.detected_encoding_ = encoding
            logger.info('detected encoding: %s' % encoding)
        text = raw.decode(encoding)
        self.script_ = parse_script(BOM + text if has_bom else text, encoding=encoding)
        return self

    def transform(self, *_) -> AssScript:
        return self.script_


def load_script(fname: str, encoding: str = DEFAULT_ENCODING) -> AssScript:
    return ScriptParser(encoding=encoding).fit_transform(fname)
