from enum import Enum


class ColumnType(Enum):
    """ ColumnType enum class

    Storage types a field can be mapped to.
    """

    def __str__(self):
        return str(self.name)

    TUUID      = 1
    STRING     = 2
    INT32      = 3
    INT64      = 4
    DOUBLE     = 5
    BLOB       = 6
    TIMESTAMP  = 7
    BOOL       = 8
