import typing
import uuid
from datetime import datetime
from types import UnionType

from dosatag.enums.column_type import ColumnType
from dosatag.exceptions import DosaTagError, ErrKind


_PY_TO_COLUMN_TYPE = {
    uuid.UUID:  ColumnType.TUUID,
    str:        ColumnType.STRING,
    int:        ColumnType.INT64,
    float:      ColumnType.DOUBLE,
    bytes:      ColumnType.BLOB,
    bool:       ColumnType.BOOL,
    datetime:   ColumnType.TIMESTAMP,
}


def type_name(ptype):
    """ Readable name of a type descriptor, e.g. 'list[str]' """

    if typing.get_origin(ptype) is None and hasattr(ptype, "__name__"):
        return ptype.__name__
    return repr(ptype).replace("typing.", "")


def py_to_column_type(ptype):
    """ Converts Python type to storage column type

    Parameters
    ----------
    ptype : type or ColumnType
        Python type of a field; ColumnType members are passed through,
        which is how INT32 columns are declared

    Returns
    -------
    ctype: ColumnType
        Coresponding column type, or None if type is not supported
    """

    if isinstance(ptype, ColumnType):
        return ptype
    if isinstance(ptype, type):
        return _PY_TO_COLUMN_TYPE.get(ptype)
    return None


def unwrap_optional(ptype):
    """ Strips Optional[...] from type descriptor

    Returns
    -------
    tuple
        (inner type, True) for Optional[T] and T | None,
        (ptype, False) otherwise
    """

    origin = typing.get_origin(ptype)
    if origin is typing.Union or origin is UnionType:
        args = [a for a in typing.get_args(ptype) if a is not type(None)]
        if len(args) == 1 and len(typing.get_args(ptype)) == 2:
            return args[0], True
    return ptype, False


def resolve_field_type(ptype):
    """ Resolves column type of a field type descriptor

    Returns
    -------
    tuple
        (ColumnType, nullable)

    Raises
    ------
    DosaTagError
        UNSUPPORTED_FIELD_TYPE if type cannot be stored
    """

    inner, nullable = unwrap_optional(ptype)
    ctype = py_to_column_type(inner)
    if ctype is None:
        name = type_name(ptype)
        raise DosaTagError("Invalid type {0}".format(name),
                           ErrKind.UNSUPPORTED_FIELD_TYPE,
                           fragment=name)
    return ctype, nullable
