# src/lanecheck/validation/stages.py
"""Per-stage validation against catalog definitions.

For each stage instance in final order:
1. Instance name must be unique
2. The stage definition must resolve (nothing else is checked without it)
3. Only the first stage is a source
4. Instance and lane names match VALID_NAME
5. Lane arity matches the stage type
6. Active required fields are configured
7. Configured values have the shape their field type declares

Type checks are table-driven: _VALUE_CHECKS maps each FieldType to a
checker returning whether the value may be previewed.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeAlias

from lanecheck.contracts import (
    FieldDefinition,
    FieldType,
    IssueCode,
    IssueCollector,
    StageDefinition,
    StageInstance,
    StageType,
    ValueShape,
    shape_of,
)
from lanecheck.contracts.values import fits_int64, trigger_form, type_name
from lanecheck.core.naming import VALID_NAME, is_valid_name
from lanecheck.plugins.catalog import StageCatalog
from lanecheck.validation.models import validate_model

ValueCheck: TypeAlias = Callable[[StageInstance, FieldDefinition, Any, IssueCollector], bool]


def validate_stages(stages: Sequence[StageInstance], catalog: StageCatalog, issues: IssueCollector) -> bool:
    """Validate every stage instance against its definition.

    Returns:
        True if no preview-blocking issue was recorded
    """
    preview = True
    seen_names: set[str] = set()

    for index, stage in enumerate(stages):
        if stage.instance_name in seen_names:
            issues.stage(stage.instance_name, IssueCode.VALIDATION_0005)
            preview = False
        seen_names.add(stage.instance_name)

        definition = catalog.resolve(stage.library, stage.stage_name, stage.stage_version)
        if definition is None:
            issues.stage(
                stage.instance_name,
                IssueCode.VALIDATION_0006,
                stage.library,
                stage.stage_name,
                stage.stage_version,
            )
            preview = False
            continue

        preview &= _check_placement(index, stage, definition, issues)
        preview &= _check_names(stage, issues)
        preview &= _check_arity(stage, definition, issues)
        preview &= _check_required_fields(stage, definition, issues)
        preview &= _check_field_values(stage, definition, issues)

    return preview


def is_field_active(stage: StageInstance, definition: FieldDefinition) -> bool:
    """Whether a field applies given the stage's current configuration.

    Unconditional fields are always active. A conditional field is active
    only while its dependency holds one of the trigger values; an absent or
    null dependency leaves it inactive.
    """
    if not definition.is_conditional:
        return True
    assert definition.dependency is not None  # guaranteed by is_conditional
    current = stage.config_value(definition.dependency.depends_on)
    if current is None:
        return False
    return trigger_form(current) in definition.dependency.triggered_by


def _check_placement(index: int, stage: StageInstance, definition: StageDefinition, issues: IssueCollector) -> bool:
    if index == 0 and definition.type != StageType.SOURCE:
        issues.stage(stage.instance_name, IssueCode.VALIDATION_0003)
        return False
    if index > 0 and definition.type == StageType.SOURCE:
        issues.stage(stage.instance_name, IssueCode.VALIDATION_0004)
        return False
    return True


def _check_names(stage: StageInstance, issues: IssueCollector) -> bool:
    ok = True
    if not stage.system_generated and not is_valid_name(stage.instance_name):
        issues.stage(stage.instance_name, IssueCode.VALIDATION_0016, VALID_NAME)
        ok = False
    for lane in stage.input_lanes:
        if not is_valid_name(lane):
            issues.stage(stage.instance_name, IssueCode.VALIDATION_0017, lane, VALID_NAME)
            ok = False
    for lane in stage.output_lanes:
        if not is_valid_name(lane):
            issues.stage(stage.instance_name, IssueCode.VALIDATION_0018, lane, VALID_NAME)
            ok = False
    return ok


def _check_arity(stage: StageInstance, definition: StageDefinition, issues: IssueCollector) -> bool:
    ok = True
    kind = definition.type.name

    if definition.type == StageType.SOURCE and stage.input_lanes:
        issues.stage(stage.instance_name, IssueCode.VALIDATION_0012, kind, list(stage.input_lanes))
        ok = False
    if definition.type in (StageType.PROCESSOR, StageType.TARGET) and not stage.input_lanes:
        issues.stage(stage.instance_name, IssueCode.VALIDATION_0014, kind)
        ok = False

    if definition.type == StageType.TARGET:
        if stage.output_lanes:
            issues.stage(stage.instance_name, IssueCode.VALIDATION_0013, kind, list(stage.output_lanes))
            ok = False
    elif definition.variable_output_streams:
        if not stage.output_lanes:
            issues.stage(stage.instance_name, IssueCode.VALIDATION_0032)
            ok = False
    elif definition.output_streams != len(stage.output_lanes):
        issues.stage(stage.instance_name, IssueCode.VALIDATION_0015, definition.output_streams, len(stage.output_lanes))
        ok = False

    return ok


def _check_required_fields(stage: StageInstance, definition: StageDefinition, issues: IssueCollector) -> bool:
    ok = True
    for field_def in definition.fields:
        if not field_def.required:
            continue
        if stage.config_value(field_def.name) is not None:
            continue
        if is_field_active(stage, field_def):
            issues.field(stage.instance_name, field_def.group, field_def.name, IssueCode.VALIDATION_0007)
            ok = False
    return ok


def _check_field_values(stage: StageInstance, definition: StageDefinition, issues: IssueCollector) -> bool:
    ok = True
    for configured in stage.configuration:
        field_def = definition.field_definition(configured.name)
        if field_def is None:
            # Unknown fields are reported but don't block preview
            issues.field(stage.instance_name, "", configured.name, IssueCode.VALIDATION_0008)
            continue
        if configured.value is None or not is_field_active(stage, field_def):
            continue
        check = _VALUE_CHECKS[field_def.type]
        ok &= check(stage, field_def, configured.value, issues)
    return ok


# === Value checks, one per FieldType ===


def _wrong_type(stage: StageInstance, field_def: FieldDefinition, issues: IssueCollector) -> bool:
    issues.field(stage.instance_name, field_def.group, field_def.name, IssueCode.VALIDATION_0009, field_def.type.name)
    return False


def _exact_shape(expected: ValueShape) -> ValueCheck:
    def check(stage: StageInstance, field_def: FieldDefinition, value: Any, issues: IssueCollector) -> bool:
        if shape_of(value) != expected:
            return _wrong_type(stage, field_def, issues)
        return True

    return check


def _check_integer(stage: StageInstance, field_def: FieldDefinition, value: Any, issues: IssueCollector) -> bool:
    if shape_of(value) != ValueShape.INTEGER or not fits_int64(value):
        return _wrong_type(stage, field_def, issues)
    return True


def _check_character(stage: StageInstance, field_def: FieldDefinition, value: Any, issues: IssueCollector) -> bool:
    if shape_of(value) != ValueShape.STRING:
        return _wrong_type(stage, field_def, issues)
    if len(value) > 1:
        # Warning only: recorded, preview still allowed
        issues.field(stage.instance_name, field_def.group, field_def.name, IssueCode.VALIDATION_0031, value)
    return True


def _check_map(stage: StageInstance, field_def: FieldDefinition, value: Any, issues: IssueCollector) -> bool:
    shape = shape_of(value)
    if shape == ValueShape.MAP:
        return True
    if shape != ValueShape.LIST:
        return _wrong_type(stage, field_def, issues)

    # List form: [{key: ..., value: ...}, ...]
    ok = True
    for index, element in enumerate(value):
        if element is None:
            issues.field(stage.instance_name, field_def.group, field_def.name, IssueCode.VALIDATION_0024, index)
            ok = False
        elif isinstance(element, Mapping):
            if "key" not in element or "value" not in element:
                issues.field(stage.instance_name, field_def.group, field_def.name, IssueCode.VALIDATION_0025, index)
                ok = False
        else:
            issues.field(
                stage.instance_name,
                field_def.group,
                field_def.name,
                IssueCode.VALIDATION_0026,
                index,
                type_name(element),
            )
            ok = False
    return ok


def _check_wrapped_expression(stage: StageInstance, field_def: FieldDefinition, value: Any, issues: IssueCollector) -> bool:
    ok = True
    if shape_of(value) != ValueShape.STRING:
        issues.field(stage.instance_name, field_def.group, field_def.name, IssueCode.VALIDATION_0029, field_def.type.name)
        ok = False
    if not (isinstance(value, str) and value.startswith("${") and value.endswith("}")):
        issues.field(stage.instance_name, field_def.group, field_def.name, IssueCode.VALIDATION_0030, value)
        ok = False
    return ok


def _no_check(stage: StageInstance, field_def: FieldDefinition, value: Any, issues: IssueCollector) -> bool:
    return True


def _check_model(stage: StageInstance, field_def: FieldDefinition, value: Any, issues: IssueCollector) -> bool:
    return validate_model(stage.instance_name, field_def, value, issues)


_VALUE_CHECKS: dict[FieldType, ValueCheck] = {
    FieldType.BOOLEAN: _exact_shape(ValueShape.BOOLEAN),
    FieldType.INTEGER: _check_integer,
    FieldType.STRING: _exact_shape(ValueShape.STRING),
    FieldType.CHARACTER: _check_character,
    FieldType.MAP: _check_map,
    FieldType.LIST: _exact_shape(ValueShape.LIST),
    FieldType.EXPR_BOOLEAN: _check_wrapped_expression,
    FieldType.EXPR_DATE: _check_wrapped_expression,
    FieldType.EXPR_NUMBER: _check_wrapped_expression,
    FieldType.EXPR_STRING: _no_check,
    FieldType.EXPR_OBJECT: _no_check,
    FieldType.MODEL: _check_model,
}
