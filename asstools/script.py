# -*- coding: utf-8 -*-
from __future__ import annotations

from collections import OrderedDict
import logging
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional

from asstools.constants import (
    BOM,
    DEFAULT_ENCODING,
    LINE_SEPARATOR,
    SCRIPT_INFO,
    SECTION_ORDER,
    TYPE_DELIMITER,
)
from asstools.exceptions import FormatError, NotFoundError
from asstools.file_utils import open_file

logger: logging.Logger = logging.getLogger(__name__)


class Record(NamedTuple):
    """One ``type:data`` line of a section.

    ``data`` is kept exactly as read, leading spaces included.
    """
    type: str
    data: str

    def compose(self) -> str:
        return self.type + TYPE_DELIMITER + self.data


class ScriptMixin:
    def __init__(self, script: Optional[AssScript] = None) -> None:
        self.script_: Optional[AssScript] = script

    def set_encoding(self, encoding: str) -> ScriptMixin:
        self.script_.set_encoding(encoding)
        return self


class AssScript:
    """
    In-memory script: the records of each known section plus what is needed
    to write it back the way it was read (byte order marker, line break).

    A section exists only while it holds at least one record.
    """

    def __init__(
        self,
        has_bom: bool = True,
        line_break: str = LINE_SEPARATOR,
        script_comment: str = '',
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self.has_bom: bool = has_bom
        self.line_break: str = line_break
        self.script_comment: str = script_comment
        self._encoding: str = encoding
        self._sections: Dict[str, List[Record]] = OrderedDict()

    @property
    def encoding(self) -> str:
        return self._encoding

    def set_encoding(self, encoding: str) -> AssScript:
        if encoding != 'same':
            self._encoding = encoding
        return self

    @property
    def sections(self) -> List[str]:
        """Names of the sections present, in the order they were first filled."""
        return list(self._sections)

    def has_section(self, section: str) -> bool:
        return bool(self._sections.get(section))

    def section(self, section: str) -> List[Record]:
        """A copy of the records of ``section``; edit the script through its own methods."""
        return list(self._records(section))

    def _records(self, section: str) -> List[Record]:
        try:
            return self._sections[section]
        except KeyError:
            raise NotFoundError('section not found: %s' % section) from None

    def __len__(self) -> int:
        return sum(len(records) for records in self._sections.values())

    def __iter__(self) -> Iterator[str]:
        return iter(self.sections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AssScript):
            return False
        eq = True
        eq = eq and self.has_bom == other.has_bom
        eq = eq and self.line_break == other.line_break
        eq = eq and self.script_comment == other.script_comment
        eq = eq and dict(self._sections) == dict(other._sections)
        return eq

    def add_line(self, section: str, line_type: str, data: str) -> None:
        self._sections.setdefault(section, []).append(Record(line_type, data))

    def insert(self, section: str, records: Iterable[Record]) -> None:
        for record in records:
            self.add_line(section, record.type, record.data)

    def remove_line(self, section: str, index: int) -> Record:
        records = self._records(section)
        record = records.pop(index)
        if not records:
            self.remove_section(section)
        return record

    def remove_section(self, section: str) -> None:
        self._sections.pop(section, None)

    def clear(self) -> None:
        self.script_comment = ''
        self._sections.clear()

    def clone_props(self) -> AssScript:
        """An empty script that will be written with the same settings as this one."""
        return AssScript(
            has_bom=self.has_bom,
            line_break=self.line_break,
            script_comment=self.script_comment,
            encoding=self._encoding,
        )

    def to_string(self) -> str:
        if not self.has_section(SCRIPT_INFO):
            raise FormatError("missing 'Script Info' section")
        chunks = []
        if self.has_bom:
            chunks.append(BOM)
        for section in SECTION_ORDER:
            if not self.has_section(section):
                continue
            if section != SCRIPT_INFO:
                chunks.append(self.line_break)
            chunks.append(section)
            if section == SCRIPT_INFO and self.script_comment:
                chunks.append(self.line_break + self.script_comment)
            for record in self._sections[section]:
                chunks.append(self.line_break + record.compose())
            chunks.append(self.line_break)
        return ''.join(chunks)

    def write_file(self, fname: Optional[str]) -> None:
        to_write = self.to_string().encode(self._encoding)
        with open_file(fname, 'wb') as f:
            f.write(to_write)
