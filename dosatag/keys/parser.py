import logging

from textx import metamodel_from_str
from textx.exceptions import TextXSyntaxError, TextXSemanticError

from dosatag.exceptions import DosaTagError, ErrKind
from dosatag.meta_models.key_expression import KEY_EXPRESSION_META_MODEL, \
                                               COVERED_COLUMNS_META_MODEL
from dosatag.schema import PrimaryKey, ClusteringKey


logger = logging.getLogger(__name__)


class KeyExpressionParser(object):
    """ KeyExpressionParser class

    We use this class to parse primary key and index key expressions,
    e.g. '((pk1, pk2), c1 asc, c2 desc)', and covered column lists,
    e.g. '(c1, c2)'.
    """

    def __init__(self, debug=False):
        """ KeyExpressionParser constructor method

        Details
        -------
        1. Loads key expression meta-model.
        2. Loads covered columns meta-model.

        Parameters
        ----------
        debug : bool
            Passed to textX, prints parser debug output; parsed keys
            are logged as well
        """

        self.debug = debug
        self.key_meta_model = metamodel_from_str(KEY_EXPRESSION_META_MODEL,
                                                 debug=debug)
        self.columns_meta_model = metamodel_from_str(
                                    COVERED_COLUMNS_META_MODEL,
                                    debug=debug)



    def parse_primary_key(self, expression, struct_name=None):
        """ Parses key expression into PrimaryKey

        Details
        -------
        1. Single key without parentheses is the only partition key.
        2. Inside of parentheses, first element is the partition key,
           or a parenthesized list of partition keys.
        3. Every following element is a clustering key, optionally
           followed by 'asc' or 'desc' (case-insensitive).

        Parameters
        ----------
        expression : str
            Value of 'primaryKey=' or 'key=' tag
        struct_name : str
            Name of the record type, used in log output only

        Returns
        -------
        PrimaryKey

        Raises
        ------
        DosaTagError
            INVALID_PRIMARY_KEY, message contains the whole expression
        """

        try:
            model = self.key_meta_model.model_from_str(expression)
        except (TextXSyntaxError, TextXSemanticError) as error:
            logger.debug("Rejected key expression %r of %s: %s",
                         expression, struct_name, error.message)
            message = "invalid primary key: {0}".format(expression)
            raise DosaTagError(message,
                               ErrKind.INVALID_PRIMARY_KEY,
                               fragment=expression,
                               col=error.col) from error

        if model.group is None:
            return PrimaryKey(partition_keys=(model.single,))

        group = model.group
        partition_keys = group.partition.keys or [group.partition.single]
        clustering_keys = []
        for ck in group.clustering:
            direction = (ck.direction or "").lower()
            clustering_keys.append(
                ClusteringKey(ck.column, descending=direction == "desc"))

        key = PrimaryKey(partition_keys=tuple(partition_keys),
                         clustering_keys=tuple(clustering_keys))
        if self.debug:
            logger.debug("Parsed key expression %r of %s into %s",
                         expression, struct_name, key)
        return key



    def parse_columns(self, expression):
        """ Parses covered columns list, e.g. '(c1, c2, c3,)'

        Nested parentheses are not allowed inside of the list.

        Returns
        -------
        tuple of str

        Raises
        ------
        DosaTagError
            MALFORMED_SEGMENT if expression is not a column list
        """

        try:
            model = self.columns_meta_model.model_from_str(expression)
        except (TextXSyntaxError, TextXSemanticError) as error:
            message = "invalid columns: {0}".format(expression)
            raise DosaTagError(message,
                               ErrKind.MALFORMED_SEGMENT,
                               fragment=expression,
                               col=error.col) from error

        return tuple(model.columns)



_default_parser = None


def default_parser():
    global _default_parser
    if _default_parser is None:
        _default_parser = KeyExpressionParser()
    return _default_parser


def parse_primary_key(expression, struct_name=None):
    return default_parser().parse_primary_key(expression, struct_name)


def parse_columns(expression):
    return default_parser().parse_columns(expression)
