# -*- coding: utf-8 -*-
"""
Locating comma-delimited fields inside record data.

A ``Format`` declaration names the fields of every record that follows it
in a section, e.g. ``Layer, Start, End, Style, Name, MarginL, MarginR,
MarginV, Effect, Text``. Field names are compared after trimming, while
field spans are computed on the untouched record data so that a field can
be replaced without disturbing any other byte of the line.
"""
from typing import Dict, List, Optional, Sequence, Tuple, TypeVar

from asstools.constants import FIELD_DELIMITER, WHITESPACE
from asstools.exceptions import FormatError

T = TypeVar('T')


def split_format(format_decl: str, delim: str = FIELD_DELIMITER) -> List[str]:
    return [name.strip(WHITESPACE) for name in format_decl.split(delim)]


def field_index(format_decl: str, name: str, delim: str = FIELD_DELIMITER) -> Optional[int]:
    """Position of ``name`` in ``format_decl``, or ``None`` if it is not declared."""
    for index, field_name in enumerate(split_format(format_decl, delim)):
        if field_name == name:
            return index
    return None


def field_span(line: str, index: int, delim: str = FIELD_DELIMITER) -> Optional[Tuple[int, int]]:
    """
    Half-open range ``(start, end)`` of field ``index`` in ``line``.

    Returns ``None`` when the line has fewer than ``index`` delimiters. An
    empty span (``start == end``) means the field is present but has no
    value.
    """
    start = 0
    for _ in range(index):
        end = line.find(delim, start)
        if end < 0:
            return None
        start = end + len(delim)
    end = line.find(delim, start)
    if end < 0:
        end = len(line)
    return start, end


def _index_names(format_decl: str, delim: str) -> Dict[str, int]:
    indices: Dict[str, int] = {}
    for index, name in enumerate(split_format(format_decl, delim)):
        if name in indices:
            raise FormatError('duplicated format field: %r' % name)
        indices[name] = index
    return indices


def compute_permutation(format_a: str, format_b: str, delim: str = FIELD_DELIMITER) -> List[int]:
    """
    For each field of ``format_a``, in order, its position in ``format_b``.

    Applying the result to values laid out as ``format_b`` yields the same
    values laid out as ``format_a``.
    """
    indices_b = _index_names(format_b, delim)
    permutation = []
    for name in _index_names(format_a, delim):
        if name not in indices_b:
            raise FormatError('incompatible line formats: %r missing' % name)
        permutation.append(indices_b[name])
    return permutation


def apply_permutation(values: Sequence[T], permutation: Sequence[int]) -> List[T]:
    if len(values) != len(permutation):
        raise ValueError(
            'cannot apply a permutation of length %d to %d values' % (len(permutation), len(values))
        )
    reordered = []
    for new_index in permutation:
        if not 0 <= new_index < len(values):
            raise ValueError('permutation index %d out of range' % new_index)
        reordered.append(values[new_index])
    return reordered
