from dosatag.util.identifier import KEY_TOKEN_PATTERN


COMMON_RULES = \
r"""

// Doubled and trailing commas are skipped, so ', ,' is one separator
SEPARATOR:
    /,(\s*,)*/
;

// Any run of characters other than whitespace, comma and parentheses
KEY_TOKEN:
    /{key_token}/
;

DIRECTION:
    /([aA][sS][cC]|[dD][eE][sS][cC])(?![^\s,()])/
;
////////////////////////////////////////////////////////////////////////////////////////////////////
""".format(key_token=KEY_TOKEN_PATTERN.pattern)


KEY_EXPRESSION_META_MODEL = \
r"""

KeyExpression:
    (group=KeyGroup | single=KEY_TOKEN) SEPARATOR?
;

KeyGroup:
    '('
        SEPARATOR?
        partition=PartitionKeys
        (SEPARATOR clustering+=ClusteringKey[/,(\s*,)*/])?
        SEPARATOR?
    ')'
;

// Keys inside of one group are comma separated, 'pk1 pk2' is an error
PartitionKeys:
    ('(' SEPARATOR? keys+=KEY_TOKEN[/,(\s*,)*/] SEPARATOR? ')') |
    single=KEY_TOKEN
;

ClusteringKey:
    column=KEY_TOKEN (direction=DIRECTION)?
;
////////////////////////////////////////////////////////////////////////////////////////////////////
""" + COMMON_RULES


COVERED_COLUMNS_META_MODEL = \
r"""

CoveredColumns:
    '(' SEPARATOR? columns+=KEY_TOKEN[/,(\s*,)*/] SEPARATOR? ')'
;
////////////////////////////////////////////////////////////////////////////////////////////////////
""" + COMMON_RULES
