"""
Software specification flag classification.

Classifies the parenthesized flags following the title, in the TOSEC order:

    Title version (demo) (date)(publisher)(system)(video)(country)(language)
    (copyright status)(development status)(media type)(media label)

Every flag is recognized by its shape alone, except the publisher and the
media label which are both free text. They are told apart by position: the
publisher is the free-text flag that directly follows the date.
"""

import re
from typing import Tuple

from tosecdb.naming.record import POSITIONAL_FLAGS, RomRecord
from tosecdb.naming.vocabulary import (
    COPYRIGHT_STATUSES,
    COUNTRY_CODES,
    DEMO_FLAGS,
    DEVELOPMENT_STATUSES,
    LANGUAGE_CODES,
    MEDIA_TYPES,
    SYSTEMS,
    VIDEO_STANDARDS,
)

# 19xx / 20xx with 'x' as unknown digit, then optional month and day
DATE_PATTERN = re.compile(r'^[12][90][x0-9]{2}(?:-[x0-9]{2}(?:-[x0-9]{2})?)?$')

# Only the first code of a pair is checked against the known codes
COUNTRY_PAIR_PATTERN = re.compile(r'^([A-Z]{2})-[A-Z]{2}$')
LANGUAGE_PAIR_PATTERN = re.compile(r'^([a-z]{2})-[a-z]{2}$')
MULTI_LANGUAGE_PATTERN = re.compile(r'^(?:M[0-9]|M[0-9]-[a-z]{2}|[a-z]{2}-M[0-9])$')

_MEDIA_ID = r'[0-9A-Za-z]+'
# Strict forms only: 'Disk', 'Disk 1', 'Disk 1 of 3', 'Disk 1-2 of 3'.
# Composite labels such as 'Tape 2 of 2 Side B' or 'Disk 1 of 2 Boot' are
# not media types and end up as publisher or media label (see DESIGN.md).
MEDIA_TYPE_PATTERN = re.compile(
    r'^(?:{types})(?: {id}(?: of {id})?| {id}-{id} of {id})?$'.format(
        types='|'.join(MEDIA_TYPES),
        id=_MEDIA_ID,
    )
)

UNKNOWN = 'unknown_flags'


def is_flag(token: str) -> bool:
    """Check if a token is a complete parenthesized flag."""
    return len(token) >= 2 and token.startswith('(') and token.endswith(')')


def is_date(value: str) -> bool:
    return DATE_PATTERN.match(value) is not None


def is_country(value: str) -> bool:
    if value in COUNTRY_CODES:
        return True
    pair = COUNTRY_PAIR_PATTERN.match(value)
    return pair is not None and pair.group(1) in COUNTRY_CODES


def is_language(value: str) -> bool:
    if value in LANGUAGE_CODES or MULTI_LANGUAGE_PATTERN.match(value):
        return True
    pair = LANGUAGE_PAIR_PATTERN.match(value)
    return pair is not None and pair.group(1) in LANGUAGE_CODES


def is_media_type(value: str) -> bool:
    return MEDIA_TYPE_PATTERN.match(value) is not None


def publisher_position_open(record: RomRecord) -> bool:
    """
    Check if the next free-text flag is in the publisher position.

    That is the case when the date has been seen and no flag that comes
    after the publisher in the convention has been seen yet.
    """
    if not record.date_flag:
        return False
    return not any(getattr(record, name) for name in POSITIONAL_FLAGS)


def classify_flag(token: str, record: RomRecord) -> Tuple[str, str]:
    """
    Classify one token of the flags region.

    The record is only read, to resolve the publisher / media label
    ambiguity. Rules are tried in the convention's order and the first
    match wins.

    Args:
        token: Token from the flags region, delimiters included
        record: Flags classified so far for the same ROM name

    Returns:
        (record field name, value). Unknown tokens map to 'unknown_flags'
        with the token kept whole.
    """
    if not is_flag(token):
        return UNKNOWN, token

    value = token[1:-1]

    if value in DEMO_FLAGS:
        return 'demo_flag', value
    if is_date(value):
        return 'date_flag', value
    if value in SYSTEMS:
        return 'system_flag', value
    if value in VIDEO_STANDARDS:
        return 'video_flag', value
    if is_country(value):
        return 'country_region_flag', value
    if is_language(value):
        return 'language_flag', value
    if value in COPYRIGHT_STATUSES:
        return 'copyright_status_flag', value
    if value in DEVELOPMENT_STATUSES:
        return 'development_status_flag', value
    if is_media_type(value):
        return 'media_type_flag', value

    if publisher_position_open(record):
        return 'publisher_flag', value
    return 'media_label_flag', value
