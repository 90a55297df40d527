# -*- coding: utf-8 -*-
"""
Rewriting of the Start and End times of the ``[Events]`` section.

The engine knows nothing about what a rewrite means. For every event it
decodes the two timestamps, hands them to a policy together with the
event type, and the policy answers, for each output script, either the
new timing of the event or ``None`` to leave the event out of that
output. The new timestamps are spliced into the original record data, so
every other byte of the line is preserved.
"""
import logging
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

from asstools.constants import (
    END_FIELD,
    EVENT_TYPES,
    EVENTS,
    FORMAT_LINE,
    NO_DURATION_EVENTS,
    START_FIELD,
    TEXT_FIELD,
    WHITESPACE,
)
from asstools.exceptions import FormatError
from asstools.fields import field_index, field_span, split_format
from asstools.script import AssScript, Record
from asstools.timestamps import format_time, parse_time

logger: logging.Logger = logging.getLogger(__name__)


class EventTiming(NamedTuple):
    """Start and End of an event in centiseconds; ``None`` when the field is empty."""
    start: Optional[int]
    end: Optional[int]


# (timing, event type) -> one entry per output script
EventPolicy = Callable[[EventTiming, str], Sequence[Optional[EventTiming]]]


class EventsFormat(NamedTuple):
    format_decl: str
    start_index: int
    end_index: int

    @classmethod
    def from_record(cls, record: Record) -> 'EventsFormat':
        if record.type != FORMAT_LINE:
            raise FormatError('format line must appear first in events')
        format_decl = record.data
        text_index = field_index(format_decl, TEXT_FIELD)
        if text_index is None or text_index != len(split_format(format_decl)) - 1:
            raise FormatError("'Text' field must appear in last place")
        start_index = field_index(format_decl, START_FIELD)
        if start_index is None:
            raise FormatError("'Start' field not found in format definition string")
        end_index = field_index(format_decl, END_FIELD)
        if end_index is None:
            raise FormatError("'End' field not found in format definition string")
        return cls(format_decl, start_index, end_index)


def _locate(data: str, index: int, name: str) -> Tuple[Tuple[int, int], Optional[int]]:
    span = field_span(data, index)
    if span is None:
        raise FormatError("'%s' field cannot be retrieved: %r" % (name, data))
    start, end = span
    # blanks around the timestamp stay where they are
    value = data[start:end]
    stripped = value.strip(WHITESPACE)
    start += len(value) - len(value.lstrip(WHITESPACE))
    end = start + len(stripped)
    if not stripped:
        return (start, end), None
    return (start, end), parse_time(stripped)


def splice_fields(data: str, replacements: Sequence[Tuple[Tuple[int, int], str]]) -> str:
    """Replace non-overlapping ``(span, text)`` pairs of ``data``, leaving the rest intact."""
    chunks = []
    position = 0
    for (start, end), text in sorted(replacements, key=lambda replacement: replacement[0]):
        if start < position:
            raise FormatError('overlapping fields in %r' % data)
        chunks.append(data[position:start])
        chunks.append(text)
        position = end
    chunks.append(data[position:])
    return ''.join(chunks)


def _render(timestamp: Optional[int]) -> str:
    return '' if timestamp is None else format_time(timestamp)


def rewrite_event(
    record: Record,
    events_format: EventsFormat,
    policy: EventPolicy,
    num_outputs: int = 1,
) -> List[Optional[Record]]:
    """Run one event through ``policy``; ``None`` entries mean the event is dropped from that output."""
    start_span, start = _locate(record.data, events_format.start_index, START_FIELD)
    end_span, end = _locate(record.data, events_format.end_index, END_FIELD)
    if record.type not in EVENT_TYPES:
        logger.debug('unknown event type %s', record.type)
    if record.type in NO_DURATION_EVENTS:
        end = None

    routed = list(policy(EventTiming(start, end), record.type))
    if len(routed) != num_outputs:
        raise ValueError('policy returned %d timings for %d outputs' % (len(routed), num_outputs))

    rewritten: List[Optional[Record]] = []
    for timing in routed:
        if timing is None:
            rewritten.append(None)
            continue
        data = splice_fields(record.data, [
            (start_span, _render(timing.start)),
            (end_span, _render(timing.end)),
        ])
        rewritten.append(Record(record.type, data))
    return rewritten


def rewrite_events(records: Sequence[Record], policy: EventPolicy, num_outputs: int = 1) -> List[List[Record]]:
    """Rewrite an Events section; the Format record is copied to every output."""
    outputs: List[List[Record]] = [[] for _ in range(num_outputs)]
    if not records:
        return outputs
    events_format = EventsFormat.from_record(records[0])
    for output in outputs:
        output.append(records[0])
    for record in records[1:]:
        for output, rewritten in zip(outputs, rewrite_event(record, events_format, policy, num_outputs)):
            if rewritten is not None:
                output.append(rewritten)
    return outputs


def rewrite_script(script: AssScript, policy: EventPolicy, num_outputs: int = 1) -> List[AssScript]:
    """
    Build ``num_outputs`` new scripts from ``script``.

    Sections other than Events are copied to every output unchanged. A
    script without events is not an error, but is reported.
    """
    outputs = [script.clone_props() for _ in range(num_outputs)]
    has_events = False
    for section in script.sections:
        if section == EVENTS:
            has_events = True
            for output, records in zip(outputs, rewrite_events(script.section(EVENTS), policy, num_outputs)):
                output.insert(EVENTS, records)
        else:
            for output in outputs:
                output.insert(section, script.section(section))
    if not has_events:
        logger.warning('Events section not found!')
    return outputs
