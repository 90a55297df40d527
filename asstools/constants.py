# -*- coding: utf-8 -*-
from typing import FrozenSet, Tuple


BOM: str = '\ufeff'
BOM_BYTES: bytes = b'\xef\xbb\xbf'
BOM_ENCODING: str = 'utf-8'

LF: str = '\n'
CRLF: str = '\r\n'
LINE_SEPARATOR: str = LF
FIELD_DELIMITER: str = ','
TYPE_DELIMITER: str = ':'
COMMENT_PREFIX: str = ';'
# what the line trimmer strips; matches isspace() in the C locale
WHITESPACE: str = ' \t\n\v\f\r'

SCRIPT_INFO: str = '[Script Info]'
STYLES: str = '[V4+ Styles]'
FONTS: str = '[Fonts]'
GRAPHICS: str = '[Graphics]'
EVENTS: str = '[Events]'

# output order, regardless of the order sections were read in
SECTION_ORDER: Tuple[str, ...] = (SCRIPT_INFO, STYLES, FONTS, GRAPHICS, EVENTS)
SECTIONS: FrozenSet[str] = frozenset(SECTION_ORDER)

COMMAND_EVENT: str = 'Command'
COMMENT_EVENT: str = 'Comment'
DIALOGUE_EVENT: str = 'Dialogue'
MOVIE_EVENT: str = 'Movie'
PICTURE_EVENT: str = 'Picture'
SOUND_EVENT: str = 'Sound'

EVENT_TYPES: FrozenSet[str] = frozenset([
    COMMAND_EVENT, COMMENT_EVENT, DIALOGUE_EVENT, MOVIE_EVENT, PICTURE_EVENT, SOUND_EVENT,
])
# these event kinds have no duration, so their End field is ignored
NO_DURATION_EVENTS: FrozenSet[str] = frozenset([COMMAND_EVENT, SOUND_EVENT])

FONT_LINE: str = 'fontname'
FILE_LINE: str = 'filename'
MULTILINE_FIELDS: FrozenSet[str] = frozenset([FONT_LINE, FILE_LINE])
# embedded payloads are wrapped at this width; a shorter line is the last chunk
MULTILINE_CHUNK_WIDTH: int = 80

FORMAT_LINE: str = 'Format'
START_FIELD: str = 'Start'
END_FIELD: str = 'End'
TEXT_FIELD: str = 'Text'

CENTISECONDS_PER_SECOND: int = 100
CENTISECONDS_PER_MINUTE: int = 60 * CENTISECONDS_PER_SECOND
CENTISECONDS_PER_HOUR: int = 60 * CENTISECONDS_PER_MINUTE
# the hour field is a single digit
MAX_TIMESTAMP: int = 10 * CENTISECONDS_PER_HOUR

DEFAULT_ENCODING: str = 'utf-8'
DEFAULT_OUTPUT_ENCODING: str = 'same'
DEFAULT_SCALE_FACTOR: float = 1.

PROJECT_NAME: str = 'asstools'
DESCRIPTION: str = 'Split and retime Advanced SubStation Alpha subtitle scripts.'
SPLIT_DESCRIPTION: str = 'Split ASS subtitles.'
TIME_DESCRIPTION: str = 'Apply a linear transformation to ASS subtitles events (as t\' = scale*t + offset).'
SCRIPT_COMMENT_TEMPLATE: Tuple[str, ...] = ('; Script generated by {project} {version}', '; {description}')
