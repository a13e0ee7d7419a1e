import re

from dosatag.exceptions import DosaTagError, ErrKind


# Grammar of values given in 'name=' tags (tables, indexes, columns)
TAG_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

# Grammar of key names inside of key expressions and 'columns' lists
KEY_TOKEN_PATTERN = re.compile(r"[^\s,()]+")


def is_valid_name(name):
    """ Checks name against the strict tag name grammar

    Parameters
    ----------
    name : str
        Candidate name

    Returns
    -------
    bool
        True if name is letters, digits and underscores only and
        does not start with a digit
    """

    return bool(name) and TAG_NAME_PATTERN.fullmatch(name) is not None


def is_valid_key_token(token):
    """ Checks token against the loose key token grammar

    Any run of characters other than whitespace, comma and parentheses
    is accepted, so 'io-$%^*' is a valid key token.
    """

    return bool(token) and KEY_TOKEN_PATTERN.fullmatch(token) is not None


def is_exported(name):
    return bool(name) and name[0].isupper()


def check_name(name, source=None):
    """ Validates name against the strict tag name grammar

    Parameters
    ----------
    name : str
        Candidate name
    source : str
        Tag or segment the name was taken from, used in the message

    Raises
    ------
    DosaTagError
        INVALID_NAME if name is not valid
    """

    if is_valid_name(name):
        return name

    message = "invalid name '{0}'".format(name)
    if source is not None:
        message += " in tag '{0}'".format(source)
    raise DosaTagError(message, ErrKind.INVALID_NAME, fragment=name)
