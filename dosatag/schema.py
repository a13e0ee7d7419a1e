from dataclasses import dataclass, field
from datetime import timedelta

from dosatag.enums.column_type import ColumnType
from dosatag.enums.etl_state import ETLState


# Never produced by parsing, parsed ttls are strictly positive
NO_TTL = timedelta(microseconds=-1)


@dataclass(frozen=True)
class ClusteringKey(object):
    """ ClusteringKey class

    Single column sorting records inside of one partition.
    """

    name: str
    descending: bool = False

    def __str__(self):
        if self.descending:
            return "{0} DESC".format(self.name)
        return self.name



@dataclass(frozen=True)
class PrimaryKey(object):
    """ PrimaryKey class

    Ordered partition keys followed by ordered clustering keys.
    Both orders are significant.
    """

    partition_keys: tuple
    clustering_keys: tuple = ()

    def __post_init__(self):
        # Lists handed in by callers are frozen as well
        object.__setattr__(self, "partition_keys", tuple(self.partition_keys))
        object.__setattr__(self, "clustering_keys",
                           tuple(self.clustering_keys))


    def partition_key_set(self):
        return frozenset(self.partition_keys)


    def clustering_key_set(self):
        return frozenset(ck.name for ck in self.clustering_keys)


    def primary_key_set(self):
        return self.partition_key_set() | self.clustering_key_set()


    def __str__(self):
        """ Renders canonical key expression, e.g. ((a, b), c DESC)

        Parsing the result again gives an equal PrimaryKey.
        """

        partition = "({0})".format(", ".join(self.partition_keys))
        parts = [partition] + [str(ck) for ck in self.clustering_keys]
        return "({0})".format(", ".join(parts))



@dataclass(frozen=True)
class ColumnDefinition(object):
    name: str
    type: ColumnType
    nullable: bool = False



@dataclass(frozen=True)
class EntityDescriptor(object):
    table_name: str
    primary_key: PrimaryKey
    etl: ETLState = ETLState.OFF
    ttl: timedelta = NO_TTL

    def has_ttl(self):
        return self.ttl != NO_TTL



@dataclass(frozen=True)
class IndexDescriptor(object):
    name: str
    key: PrimaryKey
    columns: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "columns", tuple(self.columns))



@dataclass(frozen=True)
class FieldSpec(object):
    """ FieldSpec class

    Field identifier and type descriptor, as extracted from a record
    type by the caller.
    """

    name: str
    type: object



@dataclass(frozen=True)
class TableDefinition(object):
    """ TableDefinition class

    Entity descriptor of a record type together with its columns and
    indexes. Built by dosatag.registry.table_definition.
    """

    struct_name: str
    entity: EntityDescriptor
    columns: tuple = field(default_factory=tuple)
    indexes: tuple = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "indexes", tuple(self.indexes))


    def column(self, name):
        for column in self.columns:
            if column.name == name:
                return column
        return None
