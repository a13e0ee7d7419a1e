import logging

from dosatag.exceptions import DosaTagError, ErrKind
from dosatag.schema import IndexDescriptor
from dosatag.tags.tag_parser import TagParser
from dosatag.util.identifier import check_name, is_exported


logger = logging.getLogger(__name__)


class IndexTagParser(TagParser):
    """ IndexTagParser class

    We use this class to parse the tag of a secondary index, e.g.
    'name=by_city, key=(city, age desc), columns=(email, phone)'.
    """

    tag_kind = "dosa index tag"
    key_expression_keys = ("key",)

    def __init__(self, key_parser=None):
        super(IndexTagParser, self).__init__(key_parser)
        self.processors = {
            'name':     self.name,
            'key':      self.key,
            'columns':  self.columns,
        }


    def name(self, value, segment):
        return check_name(self.scalar(value, segment), segment.text)


    def key(self, value, segment):
        return self.key_parser.parse_primary_key(value)


    def columns(self, value, segment):
        try:
            return self.key_parser.parse_columns(value)
        except DosaTagError as error:
            raise self.malformed(segment.text) from error



    def default_name(self, index_name):
        """ Validates index identifier used when there is no 'name=' tag

        Raises
        ------
        DosaTagError
            INVALID_NAME if identifier is not a valid name,
            NOT_EXPORTED if it does not start with an uppercase letter
        """

        check_name(index_name)
        if not is_exported(index_name):
            message = "index {0} is not exported, its name must start " \
                      "with an uppercase letter".format(index_name)
            raise DosaTagError(message, ErrKind.NOT_EXPORTED,
                               fragment=index_name)
        return index_name



    def parse(self, index_name, tag):
        """ Parses index tag into IndexDescriptor

        Parameters
        ----------
        index_name : str
            Declared identifier of the index, used as name when the tag
            has no 'name=' segment
        tag : str
            Raw tag string

        Returns
        -------
        IndexDescriptor

        Raises
        ------
        DosaTagError
            If tag is malformed, 'key' is missing or index_name cannot
            be used as name
        """

        try:
            results = self.process(tag)
            if "key" not in results:
                raise self.missing("key", tag, index_name)
            name = results.get("name")
            if name is None:
                name = self.default_name(index_name)
        except DosaTagError as error:
            logger.debug("Rejected index tag %r of %s: %s",
                         tag, index_name, error)
            raise

        index = IndexDescriptor(name=name,
                                key=results["key"],
                                columns=results.get("columns", ()))
        logger.debug("Parsed index tag of %s: %s", index_name, index)
        return index



def parse_index_tag(index_name, tag):
    return IndexTagParser().parse(index_name, tag)
