# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import numbers
from typing import Optional, Tuple

from asstools.event_rewriter import EventPolicy, EventTiming, rewrite_script
from asstools.script import AssScript, ScriptMixin
from asstools.sklearn_shim import TransformerMixin
from asstools.timestamps import format_time_signed

logger = logging.getLogger(__name__)


def make_split_policy(cut: int) -> EventPolicy:
    """
    Route events starting before ``cut`` to the first output, and the rest
    to the second output, moved back by ``cut``. All times in centiseconds.
    """
    def split_policy(timing: EventTiming, event_type: str) -> Tuple[Optional[EventTiming], Optional[EventTiming]]:
        start, end = timing
        if start is None:
            timing = EventTiming(None, None)
            return timing, timing
        if start >= cut:
            if end is not None:
                end = end - cut if end >= cut else 0
            return None, EventTiming(start - cut, end)
        if end is not None and end > cut:
            logger.warning(
                'Lossy split! %s event %s --> %s crosses %s',
                event_type, format_time_signed(start), format_time_signed(end), format_time_signed(cut),
            )
        return timing, None
    return split_policy


def make_shift_policy(offset: int, scale_factor: float = 1.) -> EventPolicy:
    """Map every timestamp ``t`` to ``scale_factor * t + offset`` (offset in centiseconds)."""
    def transform(t: int) -> int:
        return int(round(t * scale_factor)) + offset

    def shift_policy(timing: EventTiming, event_type: str) -> Tuple[EventTiming]:
        start, end = timing
        if start is None:
            return (EventTiming(None, None),)
        start = transform(start)
        if end is not None:
            end = transform(end)
        if start < 0 or (end is not None and end < 0):
            raise ValueError(
                'Transformation yields negative timestamps! (%s event starting at %s)'
                % (event_type, format_time_signed(start))
            )
        return (EventTiming(start, end),)
    return shift_policy


class ScriptSplitter(TransformerMixin):
    def __init__(self, cut: int) -> None:
        assert isinstance(cut, numbers.Integral)
        self.cut: int = cut
        self.first_: Optional[AssScript] = None
        self.second_: Optional[AssScript] = None

    def fit(self, script: AssScript, *_) -> ScriptSplitter:
        self.first_, self.second_ = rewrite_script(script, make_split_policy(self.cut), num_outputs=2)
        return self

    def transform(self, *_) -> Tuple[AssScript, AssScript]:
        return self.first_, self.second_


class ScriptShifter(ScriptMixin, TransformerMixin):
    def __init__(self, offset: int, scale_factor: float = 1.) -> None:
        assert isinstance(offset, numbers.Integral)
        assert isinstance(scale_factor, numbers.Number)
        super(ScriptShifter, self).__init__()
        self.offset: int = offset
        self.scale_factor: float = scale_factor

    def fit(self, script: AssScript, *_) -> ScriptShifter:
        self.script_ = rewrite_script(script, make_shift_policy(self.offset, self.scale_factor))[0]
        return self

    def transform(self, *_) -> AssScript:
        return self.script_
