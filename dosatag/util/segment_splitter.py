import re
from collections import namedtuple


Segment = namedtuple("Segment", ["text", "start", "end"])

# Whitespace followed by '<key>=' starts a new segment as well
_KEY_START = re.compile(r"\s+[A-Za-z_][A-Za-z0-9_]*\s*=")


def _append_segment(segments, tag, start, end):
    raw = tag[start:end]
    text = raw.strip()
    if not text:
        return
    offset = start + len(raw) - len(raw.lstrip())
    segments.append(Segment(text, offset, offset + len(text)))


def split_segments(tag):
    """ Splits tag into trimmed, non-empty segments

    Details
    -------
    1. We scan the tag left to right keeping track of parenthesis depth.
    2. On depth 0 we split on each comma, and before whitespace that is
       followed by '<key>=' (e.g. 'primaryKey=(a, b) name=t').
    3. Segments are trimmed, empty ones are dropped.

    Parameters
    ----------
    tag : str
        Raw tag string

    Returns
    -------
    list of Segment
        Segment text with start / end offsets inside of tag
    """

    segments = []
    depth = 0
    start = 0
    for i, c in enumerate(tag):
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
        elif depth != 0:
            continue
        elif c == ",":
            _append_segment(segments, tag, start, i)
            start = i + 1
        elif c.isspace() and _KEY_START.match(tag, i):
            _append_segment(segments, tag, start, i)
            start = i

    _append_segment(segments, tag, start, len(tag))
    return segments


def split_key_value(segment):
    """ Splits segment text on the first '='

    Returns
    -------
    tuple
        (key, value) both trimmed, or None if there is no '='
    """

    if "=" not in segment.text:
        return None
    key, value = segment.text.split("=", 1)
    return key.strip(), value.strip()


def is_closed_group(value):
    """ Checks if value is one parenthesized group, e.g. '((a, b), c)'

    The parenthesis opened by the first character must be closed by
    the last one, so '(a), (b)' is not a closed group.
    """

    if not value.startswith("(") or not value.endswith(")"):
        return False

    depth = 0
    for i, c in enumerate(value):
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth == 0:
                return i == len(value) - 1
    return False
