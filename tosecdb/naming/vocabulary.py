"""
TOSEC naming convention vocabularies.

Static lookup tables for the flags whose values come from a closed list
(TOSEC naming convention v4, 2015-03-23). Matching against these sets is
exact and case-sensitive.
"""

from typing import FrozenSet


DEMO_FLAGS: FrozenSet[str] = frozenset({
    'demo',
    'demo-kiosk',
    'demo-playable',
    'demo-rolling',
    'demo-slideshow',
})

# Hardware/system model names
SYSTEMS: FrozenSet[str] = frozenset({
    '+2', '+2a', '+3',
    '130XE',
    'A1000', 'A1200', 'A1200-A4000', 'A2000', 'A2000-A3000', 'A2024',
    'A2500-A3000UX', 'A3000', 'A4000', 'A4000T',
    'A500', 'A500+', 'A500-A1000-A2000', 'A500-A1000-A2000-CDTV',
    'A500-A1200', 'A500-A1200-A2000-A4000', 'A500-A2000', 'A500-A600-A2000',
    'A570', 'A600', 'A600HD',
    'AGA', 'AGA-CD32',
    'Aladdin Deck Enhancer',
    'CD32', 'CDTV',
    'Computrainer',
    'Doctor PC Jr.',
    'ECS', 'ECS-AGA',
    'Executive',
    'Mega ST', 'Mega-STE',
    'OCS', 'OCS-AGA',
    'ORCH80',
    'Osbourne 1',
    'PIANO90',
    'PlayChoice-10',
    'Plus4',
    'Primo-A', 'Primo-A64', 'Primo-B', 'Primo-B64', 'Pro-Primo',
    'ST', 'STE', 'STE-Falcon',
    'TT',
    'TURBO-R GT', 'TURBO-R ST',
    'VS DualSystem', 'VS UniSystem',
})

VIDEO_STANDARDS: FrozenSet[str] = frozenset({
    'CGA', 'EGA', 'HGC', 'MCGA', 'MDA',
    'NTSC', 'NTSC-PAL',
    'PAL', 'PAL-60', 'PAL-NTSC',
    'SVGA', 'VGA', 'XGA',
})

# ISO 3166-1 alpha-2 codes, plus EU for Europe
COUNTRY_CODES: FrozenSet[str] = frozenset({
    'AE', 'AL', 'AS', 'AT', 'AU', 'BA', 'BE', 'BG', 'BR', 'CA', 'CH', 'CL',
    'CN', 'CS', 'CY', 'CZ', 'DE', 'DK', 'EE', 'EG', 'ES', 'EU', 'FI', 'FR',
    'GB', 'GR', 'HK', 'HR', 'HU', 'ID', 'IE', 'IL', 'IN', 'IR', 'IS', 'IT',
    'JO', 'JP', 'KR', 'LT', 'LU', 'LV', 'MN', 'MX', 'MY', 'NL', 'NO', 'NP',
    'NZ', 'OM', 'PE', 'PH', 'PL', 'PT', 'QA', 'RO', 'RU', 'SE', 'SG', 'SI',
    'SK', 'TH', 'TR', 'TW', 'US', 'VN', 'YU', 'ZA',
})

# ISO 639-1 codes
LANGUAGE_CODES: FrozenSet[str] = frozenset({
    'ar', 'bg', 'bs', 'cs', 'cy', 'da', 'de', 'el', 'en', 'eo', 'es', 'et',
    'fa', 'fi', 'fr', 'ga', 'gu', 'he', 'hi', 'hr', 'hu', 'is', 'it', 'ja',
    'ko', 'lt', 'lv', 'ms', 'nl', 'no', 'pl', 'pt', 'ro', 'ru', 'sk', 'sl',
    'sq', 'sr', 'sv', 'th', 'tr', 'ur', 'vi', 'yi', 'zh',
})

COPYRIGHT_STATUSES: FrozenSet[str] = frozenset({
    'CW', 'CW-R',
    'FW',
    'GW', 'GW-R',
    'LW',
    'PD',
    'SW', 'SW-R',
})

DEVELOPMENT_STATUSES: FrozenSet[str] = frozenset({
    'alpha',
    'beta',
    'preview',
    'pre-release',
    'proto',
})

MEDIA_TYPES = ('Disc', 'Disk', 'File', 'Part', 'Side', 'Tape')

# Dump flag prefix -> record field
DUMP_FLAG_PREFIXES = (
    ('cr', 'cracked_dump_flag'),
    ('tr', 'translated_dump_flag'),
    ('f', 'fixed_dump_flag'),
    ('h', 'hacked_dump_flag'),
    ('m', 'modified_dump_flag'),
    ('p', 'pirated_dump_flag'),
    ('t', 'trained_dump_flag'),
    ('o', 'over_dump_flag'),
    ('u', 'under_dump_flag'),
    ('v', 'virus_dump_flag'),
    ('b', 'bad_dump_flag'),
    ('a', 'alternate_dump_flag'),
)

KNOWN_VERIFIED_DUMP = '!'
