"""
ROM name splitting.

Separates a TOSEC ROM name into its title segment, its flags region
(parenthesized flags) and its dump region (bracketed dump flags), then
cuts each region into tokens. Any string is accepted.
"""

from typing import List

from tosecdb.naming.record import NameParts


def strip_extension(name: str) -> str:
    """
    Remove the file extension (the final '.' and what follows it).

    Examples:
        - "Game (1990)(Acme).adf" -> "Game (1990)(Acme)"
        - "Game" -> "Game"
    """
    dot = name.rfind('.')
    if dot == -1:
        return name
    return name[:dot]


def tokenize_region(region: str, closer: str) -> List[str]:
    """
    Cut a region into tokens, each ending with the closing delimiter.

    Whitespace around tokens is dropped, as are empty chunks. A trailing
    chunk without a closing delimiter becomes a token of its own.

    Args:
        region: Flags or dump region text
        closer: ')' for flags, ']' for dump flags

    Returns:
        Tokens in left-to-right order
    """
    tokens = []
    for chunk in region.replace(closer, closer + '\n').split('\n'):
        chunk = chunk.strip()
        if chunk:
            tokens.append(chunk)
    return tokens


def split_name(raw: str) -> NameParts:
    """
    Split an extension-less ROM name into title, flags and dump regions.

    The title is everything before the first '('. The flags region starts
    at that '(' and stops at the first '[' after it. The dump region runs
    from the first '[' of the name to its end, so dump flags are found even
    when the name has no parenthesized flag at all.

    Args:
        raw: ROM name without extension

    Returns:
        NameParts with regions and their tokens
    """
    title, paren, after_paren = raw.partition('(')

    flags_region = ""
    if paren:
        flags_region = '(' + after_paren.split('[', 1)[0]

    bracket = raw.find('[')
    dump_region = raw[bracket:] if bracket != -1 else ""

    return NameParts(
        title=title,
        flags_region=flags_region,
        dump_region=dump_region,
        flag_tokens=tokenize_region(flags_region, ')'),
        dump_tokens=tokenize_region(dump_region, ']'),
    )
