import logging

from dosatag.enums.etl_state import ETLState
from dosatag.exceptions import DosaTagError, ErrKind
from dosatag.schema import EntityDescriptor, NO_TTL
from dosatag.tags.tag_parser import TagParser
from dosatag.util.duration import parse_ttl
from dosatag.util.identifier import check_name


logger = logging.getLogger(__name__)


class EntityTagParser(TagParser):
    """ EntityTagParser class

    We use this class to parse the tag of a record type, e.g.
    'name=t, primaryKey=((a, b), c desc), etl=on, ttl=90s'.
    """

    tag_kind = "dosa struct tag"
    key_expression_keys = ("primaryKey",)

    def __init__(self, key_parser=None):
        super(EntityTagParser, self).__init__(key_parser)
        self.processors = {
            'name':         self.name,
            'primaryKey':   self.primary_key,
            'etl':          self.etl,
            'ttl':          self.ttl,
        }


    def name(self, value, segment):
        return check_name(self.scalar(value, segment), segment.text)


    def primary_key(self, value, segment):
        return self.key_parser.parse_primary_key(value)


    def etl(self, value, segment):
        state = ETLState.from_tag_value(self.scalar(value, segment))
        if state is None:
            message = "invalid etl tag: {0}, expected 'on' or 'off'" \
                      .format(segment.text)
            raise DosaTagError(message,
                               ErrKind.MALFORMED_SEGMENT,
                               fragment=segment.text)
        return state


    def ttl(self, value, segment):
        return parse_ttl(self.scalar(value, segment))



    def parse(self, struct_name, tag):
        """ Parses entity tag into EntityDescriptor

        Parameters
        ----------
        struct_name : str
            Name of the record type the tag is attached to
        tag : str
            Raw tag string

        Returns
        -------
        EntityDescriptor

        Raises
        ------
        DosaTagError
            If tag is malformed or 'name' / 'primaryKey' is missing
        """

        try:
            results = self.process(tag)
        except DosaTagError as error:
            logger.debug("Rejected entity tag %r of %s: %s",
                         tag, struct_name, error)
            raise

        for key in ("name", "primaryKey"):
            if key not in results:
                raise self.missing(key, tag, struct_name)

        entity = EntityDescriptor(table_name=results["name"],
                                  primary_key=results["primaryKey"],
                                  etl=results.get("etl", ETLState.OFF),
                                  ttl=results.get("ttl", NO_TTL))
        logger.debug("Parsed entity tag of %s: %s", struct_name, entity)
        return entity



def parse_entity_tag(struct_name, tag):
    return EntityTagParser().parse(struct_name, tag)
