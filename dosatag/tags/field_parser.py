import logging

from dosatag.schema import ColumnDefinition
from dosatag.tags.tag_parser import TagParser
from dosatag.util.identifier import check_name
from dosatag.util.type_converter import resolve_field_type


logger = logging.getLogger(__name__)


class FieldTagParser(TagParser):
    """ FieldTagParser class

    We use this class to map one field to a column. The only tag key
    is 'name'; without it the field's own name is used.
    """

    tag_kind = "dosa field tag"

    def __init__(self, key_parser=None):
        super(FieldTagParser, self).__init__(key_parser)
        self.processors = {
            'name': self.name,
        }


    def name(self, value, segment):
        return check_name(self.scalar(value, segment), segment.text)



    def parse(self, field, tag):
        """ Parses field tag into ColumnDefinition

        Details
        -------
        Type of the field is checked first, so a field of unsupported
        type is rejected whatever its tag is.

        Parameters
        ----------
        field : FieldSpec
            Field name and type descriptor
        tag : str
            Raw tag string, may be empty

        Returns
        -------
        ColumnDefinition

        Raises
        ------
        DosaTagError
            UNSUPPORTED_FIELD_TYPE, MALFORMED_SEGMENT or INVALID_NAME
        """

        ctype, nullable = resolve_field_type(field.type)

        results = self.process(tag or "")
        name = results.get("name")
        if name is None:
            name = check_name(field.name)

        column = ColumnDefinition(name=name, type=ctype, nullable=nullable)
        logger.debug("Parsed field tag of %s: %s", field.name, column)
        return column



def parse_field_tag(field, tag):
    return FieldTagParser().parse(field, tag)
