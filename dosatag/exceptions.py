from enum import Enum


class ErrKind(Enum):
    def __str__(self):
        return str(self.name)

    MALFORMED_SEGMENT       = 1
    INVALID_NAME            = 2
    INVALID_PRIMARY_KEY     = 3
    INVALID_DURATION        = 4
    UNKNOWN_DURATION_UNIT   = 5
    UNSUPPORTED_FIELD_TYPE  = 6
    NOT_EXPORTED            = 7
    MISSING_REQUIRED_KEY    = 8
    INVALID_DEFINITION      = 9


class DosaTagError(Exception):
    """ DosaTagError class

    Raised for every rejected tag, field or definition.

    Parameters
    ----------
    message : str
        Human readable description, always echoing the offending input
    kind : ErrKind
        Failure kind
    fragment : str
        Offending substring of the input, if known
    col : int
        1-based column inside of fragment, if known
    """

    def __init__(self, message, kind, fragment=None, col=0):
        super(DosaTagError, self).__init__(message)
        self.message = message
        self.kind = kind
        self.fragment = fragment
        self.col = col

    def __str__(self):
        return self.message
