import re
from datetime import timedelta

from dosatag.exceptions import DosaTagError, ErrKind


ALLOWED_UNITS = {
    "h": timedelta(hours=1),
    "m": timedelta(minutes=1),
    "s": timedelta(seconds=1),
}

SUB_SECOND_UNITS = ("ns", "us", "µs", "μs", "ms")

_PART_PATTERN = re.compile(r"(\d+)([^\d\s.]*)")


def _invalid(value, reason):
    message = "invalid ttl tag: {0} ({1})".format(value, reason)
    return DosaTagError(message, ErrKind.INVALID_DURATION, fragment=value)


def parse_ttl(value):
    """ Parses ttl duration string into timedelta

    Details
    -------
    Accepted grammar is one or more <integer><unit> pairs, where unit
    is 'h', 'm' or 's', e.g. '90s', '80m' or '1h30m'. Result must be
    strictly positive.

    Parameters
    ----------
    value : str
        Trimmed duration string

    Returns
    -------
    timedelta
        Parsed duration

    Raises
    ------
    DosaTagError
        INVALID_DURATION if value is empty, not numeric, uses sub-second
        unit, is not positive or does not fit into timedelta.
        UNKNOWN_DURATION_UNIT if value uses any other unit, e.g. 'd'.
    """

    if not value:
        raise _invalid(value, "empty duration")

    digits = value
    negative = False
    if digits[0] in "+-":
        negative = digits[0] == "-"
        digits = digits[1:]

    if not digits:
        raise _invalid(value, "missing magnitude")

    total = timedelta(0)
    pos = 0
    while pos < len(digits):
        match = _PART_PATTERN.match(digits, pos)
        if match is None:
            raise _invalid(value, "not a number")

        amount, unit = int(match.group(1)), match.group(2)
        if unit == "":
            raise _invalid(value, "missing unit")
        if unit in SUB_SECOND_UNITS:
            raise _invalid(value, "unit {0} is shorter than a second"
                                  .format(unit))
        if unit not in ALLOWED_UNITS:
            message = "invalid ttl tag: unknown unit {0} in duration {1}" \
                      .format(unit, value)
            raise DosaTagError(message,
                               ErrKind.UNKNOWN_DURATION_UNIT,
                               fragment=unit)

        try:
            total += amount * ALLOWED_UNITS[unit]
        except OverflowError as error:
            raise _invalid(value, "duration out of range") from error
        pos = match.end()

    if negative or total <= timedelta(0):
        raise _invalid(value, "duration must be positive")
    return total
