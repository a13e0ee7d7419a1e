import re

from dosatag.util.identifier import check_name


_NAME_TAG_PATTERN = re.compile(r"(?<!\w)name\s*=\s*(\S*)")


def parse_name_tag(tag, default_name):
    """ Finds 'name=<value>' anywhere in free text

    Unlike the tag parsers, surrounding text is ignored, so
    'xxx name=t1 yyy' gives 't1'. Trailing commas are not part of
    the name.

    Parameters
    ----------
    tag : str
        Text to search in
    default_name : str
        Returned as name when there is no 'name=' in text

    Returns
    -------
    tuple
        (full matched 'name=...' text, name)

    Raises
    ------
    DosaTagError
        INVALID_NAME if the found name is not a valid name
    """

    match = _NAME_TAG_PATTERN.search(tag)
    if match is None:
        return "", default_name

    name = match.group(1).rstrip(",")
    check_name(name, match.group(0))
    return match.group(0), name
