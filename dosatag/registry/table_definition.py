import logging

from dosatag.exceptions import DosaTagError, ErrKind
from dosatag.keys.parser import default_parser
from dosatag.schema import TableDefinition
from dosatag.tags.entity_parser import EntityTagParser
from dosatag.tags.field_parser import FieldTagParser
from dosatag.tags.index_parser import IndexTagParser


logger = logging.getLogger(__name__)


class TableDefinitionChecker(object):
    """ TableDefinitionChecker class

    We use this class to check that the entity, column and index
    descriptors of one record type agree with each other.
    """

    def __init__(self, definition):
        self.definition = definition



    def invalid(self, message):
        message = "invalid definition of {0}: {1}" \
                  .format(self.definition.struct_name, message)
        return DosaTagError(message,
                            ErrKind.INVALID_DEFINITION,
                            fragment=self.definition.struct_name)



    def check_columns(self):
        seen = set()
        for column in self.definition.columns:
            if column.name in seen:
                raise self.invalid("column '{0}' is declared more than once"
                                   .format(column.name))
            seen.add(column.name)



    def check_key(self, key, owner):
        """ Checks that key only uses declared columns, each once

        Parameters
        ----------
        key : PrimaryKey
            Primary key of the table, or key of an index
        owner : str
            'primary key' or 'index <name>', used in messages
        """

        names = list(key.partition_keys) + \
                [ck.name for ck in key.clustering_keys]
        for name in names:
            if self.definition.column(name) is None:
                raise self.invalid("{0} uses undeclared column '{1}'"
                                   .format(owner, name))

        if len(key.primary_key_set()) < len(names):
            repeated = next(name for i, name in enumerate(names)
                            if name in names[:i])
            raise self.invalid("{0} uses column '{1}' more than once"
                               .format(owner, repeated))



    def check_indexes(self):
        seen = set()
        for index in self.definition.indexes:
            if index.name in seen:
                raise self.invalid("index '{0}' is declared more than once"
                                   .format(index.name))
            seen.add(index.name)

            owner = "index {0}".format(index.name)
            self.check_key(index.key, owner)
            for name in index.columns:
                if self.definition.column(name) is None:
                    raise self.invalid("{0} covers undeclared column '{1}'"
                                       .format(owner, name))



    def run(self):
        self.check_columns()
        self.check_key(self.definition.entity.primary_key, "primary key")
        self.check_indexes()



def ensure_valid(definition):
    """ Raises DosaTagError (INVALID_DEFINITION) if definition is not
    consistent, see TableDefinitionChecker """

    TableDefinitionChecker(definition).run()
    return definition


def build_table_definition(struct_name, entity_tag, fields, indexes=(),
                           key_parser=None):
    """ Parses all tags of one record type into TableDefinition

    Details
    -------
    1. Parses the entity tag.
    2. Parses every field tag into a column.
    3. Parses every index tag.
    4. Checks that keys and covered columns use declared columns.

    Parameters
    ----------
    struct_name : str
        Name of the record type
    entity_tag : str
        Tag of the record type
    fields : iterable
        (FieldSpec, tag) pairs, in declaration order
    indexes : iterable
        (index identifier, tag) pairs
    key_parser : KeyExpressionParser
        Parser shared by all tag parsers, default one if not given

    Returns
    -------
    TableDefinition

    Raises
    ------
    DosaTagError
        First failure found, nothing is returned partially
    """

    key_parser = key_parser or default_parser()

    entity = EntityTagParser(key_parser).parse(struct_name, entity_tag)

    field_parser = FieldTagParser(key_parser)
    columns = [field_parser.parse(field, tag) for field, tag in fields]

    index_parser = IndexTagParser(key_parser)
    index_list = [index_parser.parse(name, tag) for name, tag in indexes]

    definition = TableDefinition(struct_name=struct_name,
                                 entity=entity,
                                 columns=columns,
                                 indexes=index_list)
    ensure_valid(definition)
    logger.debug("Built table definition of %s with %d columns "
                 "and %d indexes", struct_name, len(columns), len(index_list))
    return definition
