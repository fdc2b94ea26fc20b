"""All kinds and type tags used across subsystem boundaries.

Values are lowercase strings so they round-trip through YAML catalogs and
JSON reports unchanged.
"""

from enum import StrEnum


class StageType(StrEnum):
    """Kind of stage in a pipeline.

    Determines lane arity: sources have no inputs, targets have no outputs.
    """

    SOURCE = "source"
    PROCESSOR = "processor"
    TARGET = "target"


class FieldType(StrEnum):
    """Declared type of a stage configuration field.

    The EXPR_* types hold expression-language strings. EXPR_BOOLEAN,
    EXPR_DATE and EXPR_NUMBER must be wrapped as ``${...}``; EXPR_STRING
    and EXPR_OBJECT may mix literal text with expressions and are not
    checked.
    """

    BOOLEAN = "boolean"
    INTEGER = "integer"
    STRING = "string"
    CHARACTER = "character"
    MAP = "map"
    LIST = "list"
    EXPR_BOOLEAN = "expr_boolean"
    EXPR_DATE = "expr_date"
    EXPR_NUMBER = "expr_number"
    EXPR_STRING = "expr_string"
    EXPR_OBJECT = "expr_object"
    MODEL = "model"


class ModelKind(StrEnum):
    """Structural shape of a MODEL field.

    Values:
        VALUE_CHOOSER: One value picked from a list (string or enum member)
        MULTI_VALUED_SELECTOR: List of selected record fields
        VALUE_MAPPING: Record field to value mapping
        PREDICATE_LANE_TABLE: List of {outputLane, predicate} rows
    """

    VALUE_CHOOSER = "value_chooser"
    MULTI_VALUED_SELECTOR = "multi_valued_selector"
    VALUE_MAPPING = "value_mapping"
    PREDICATE_LANE_TABLE = "predicate_lane_table"


class IssueScope(StrEnum):
    """What an issue is attached to."""

    PIPELINE = "pipeline"
    STAGE = "stage"
    FIELD = "field"


class ValueShape(StrEnum):
    """Runtime shape of a configuration payload.

    See lanecheck.contracts.values.shape_of().
    """

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    STRING = "string"
    ENUM = "enum"
    MAP = "map"
    LIST = "list"
    OTHER = "other"
