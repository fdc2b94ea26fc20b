"""Validation issue codes and control-flow exceptions.

Every problem the validator can detect has a stable code. Codes are part of
the report contract: callers key localization and suppression on them, so a
code is never renumbered or reused once published.
"""

from enum import StrEnum

from lanecheck.contracts.enums import IssueScope


class IssueCode(StrEnum):
    """Validation error codes.

    Each member carries a ``str.format`` template (positional placeholders
    filled from the issue's arguments) and the scope it is reported at.
    """

    template: str
    scope: IssueScope

    def __new__(cls, value: str, template: str, scope: IssueScope) -> "IssueCode":
        member = str.__new__(cls, value)
        member._value_ = value
        member.template = template
        member.scope = scope
        return member

    # Pipeline level
    VALIDATION_0001 = ("VALIDATION_0001", "The pipeline is empty", IssueScope.PIPELINE)
    VALIDATION_0002 = ("VALIDATION_0002", "The pipeline has stages that cannot be ordered: {0}", IssueScope.PIPELINE)

    # Stage placement and identity
    VALIDATION_0003 = ("VALIDATION_0003", "The first stage must be a source", IssueScope.STAGE)
    VALIDATION_0004 = ("VALIDATION_0004", "Only the first stage can be a source", IssueScope.STAGE)
    VALIDATION_0005 = ("VALIDATION_0005", "Stage instance name already defined", IssueScope.STAGE)
    VALIDATION_0006 = (
        "VALIDATION_0006",
        "Stage definition does not exist, library '{0}', name '{1}', version '{2}'",
        IssueScope.STAGE,
    )

    # Field configuration
    VALIDATION_0007 = ("VALIDATION_0007", "Configuration value is required", IssueScope.FIELD)
    VALIDATION_0008 = ("VALIDATION_0008", "Configuration is not defined by the stage", IssueScope.FIELD)
    VALIDATION_0009 = ("VALIDATION_0009", "Configuration should be a '{0}'", IssueScope.FIELD)

    # Lanes
    VALIDATION_0010 = ("VALIDATION_0010", "Output lanes '{0}' already defined by stage instance '{1}'", IssueScope.STAGE)
    VALIDATION_0011 = ("VALIDATION_0011", "Instance has open lanes '{0}'", IssueScope.STAGE)
    VALIDATION_0012 = ("VALIDATION_0012", "'{0}' cannot have input lanes '{1}'", IssueScope.STAGE)
    VALIDATION_0013 = ("VALIDATION_0013", "'{0}' cannot have output lanes '{1}'", IssueScope.STAGE)
    VALIDATION_0014 = ("VALIDATION_0014", "'{0}' must have input lanes", IssueScope.STAGE)
    VALIDATION_0015 = ("VALIDATION_0015", "Stage must have '{0}' output lanes, it has '{1}'", IssueScope.STAGE)

    # Names
    VALIDATION_0016 = (
        "VALIDATION_0016",
        "Invalid instance name, names can only contain the characters '{0}'",
        IssueScope.STAGE,
    )
    VALIDATION_0017 = (
        "VALIDATION_0017",
        "Invalid input lane name '{0}', lanes can only contain the characters '{1}'",
        IssueScope.STAGE,
    )
    VALIDATION_0018 = (
        "VALIDATION_0018",
        "Invalid output lane name '{0}', lanes can only contain the characters '{1}'",
        IssueScope.STAGE,
    )

    # Predicate lane tables
    VALIDATION_0019 = ("VALIDATION_0019", "Record '{0}' must be a map", IssueScope.FIELD)
    VALIDATION_0020 = ("VALIDATION_0020", "Record '{0}' does not have the '{1}' key", IssueScope.FIELD)
    VALIDATION_0021 = ("VALIDATION_0021", "Record '{0}' has a null value for the '{1}' key", IssueScope.FIELD)
    VALIDATION_0022 = ("VALIDATION_0022", "Record '{0}' has a non-string value for the '{1}' key", IssueScope.FIELD)
    VALIDATION_0023 = ("VALIDATION_0023", "Record '{0}' has an empty value for the '{1}' key", IssueScope.FIELD)

    # Key/value lists
    VALIDATION_0024 = ("VALIDATION_0024", "Map element at index '{0}' is null", IssueScope.FIELD)
    VALIDATION_0025 = ("VALIDATION_0025", "Map element at index '{0}' must have 'key' and 'value' entries", IssueScope.FIELD)
    VALIDATION_0026 = ("VALIDATION_0026", "Map element at index '{0}' has an invalid type '{1}'", IssueScope.FIELD)

    # Expressions and characters
    VALIDATION_0029 = ("VALIDATION_0029", "Expression configuration of type '{0}' must be a string", IssueScope.FIELD)
    VALIDATION_0030 = ("VALIDATION_0030", "Expression '{0}' must be wrapped in '${{...}}'", IssueScope.FIELD)
    VALIDATION_0031 = ("VALIDATION_0031", "Character configuration has more than one character '{0}'", IssueScope.FIELD)

    VALIDATION_0032 = ("VALIDATION_0032", "Stage must have at least one output lane", IssueScope.STAGE)

    def render(self, *args: object) -> str:
        """Render the template with issue arguments."""
        return self.template.format(*args)


class ValidatorStateError(RuntimeError):
    """Raised when PipelineValidator is used out of order.

    Either validate() was called twice, or results were read before
    validate() ran. This is a programming error, never an input problem.
    """

    pass
