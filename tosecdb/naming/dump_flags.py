"""
Dump flag classification.

Dump flags describe the state of the dump rather than the software, and sit
between square brackets after the software specification flags:

    [cr Group] [f1 NTSC] [h] [m] [p] [t +2] [tr fr] [o] [u] [v] [b] [a2] [!]

Each known prefix may be followed by a one or two digit counter and by a
space and free text.
"""

import re
from typing import Tuple

from tosecdb.naming.vocabulary import DUMP_FLAG_PREFIXES, KNOWN_VERIFIED_DUMP

DUMP_FLAG_PATTERN = re.compile(
    r'^\[(?P<prefix>{prefixes})[0-9]{{0,2}}(?: .*)?\]$'.format(
        prefixes='|'.join(prefix for prefix, _ in DUMP_FLAG_PREFIXES),
    ),
    re.DOTALL,
)

PREFIX_FIELDS = dict(DUMP_FLAG_PREFIXES)

MORE_INFO = 'more_info_dump_flags'
UNKNOWN = 'unknown_dump_flags'


def classify_dump_flag(token: str) -> Tuple[str, str]:
    """
    Classify one token of the dump region.

    Args:
        token: Token from the dump region, delimiters included

    Returns:
        (record field name, value). Bracketed flags lose their brackets;
        more-info and unknown tokens are kept whole.
    """
    if token == f'[{KNOWN_VERIFIED_DUMP}]':
        return 'known_verified_dump_flag', KNOWN_VERIFIED_DUMP

    match = DUMP_FLAG_PATTERN.match(token)
    if match:
        return PREFIX_FIELDS[match.group('prefix')], token[1:-1]

    if len(token) >= 2 and token.startswith('(') and token.endswith(')'):
        return MORE_INFO, token

    return UNKNOWN, token
