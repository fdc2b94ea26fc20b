# src/lanecheck/core/config.py
"""
Configuration schema and loading for lanecheck.

Three kinds of files are loaded here:
- pipeline files (the pipeline to validate), parsed with PyYAML and
  validated with Pydantic, then converted to a PipelineDescription
- catalog files (stage definitions), converted to StageDefinitions
- tool settings (logging), loaded with Dynaconf so LANECHECK_* environment
  variables override the file

Settings are frozen (immutable) after construction. Field values in
pipeline files are kept verbatim: type checking them is the validator's
job, so no coercion happens at load time.
"""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from lanecheck.contracts import (
    FieldDefinition,
    FieldDependency,
    FieldType,
    FieldValue,
    ModelKind,
    PipelineDescription,
    StageDefinition,
    StageInstance,
    StageType,
)
from lanecheck.contracts.values import trigger_form


def _version_string(v: Any) -> Any:
    # YAML reads an unquoted `version: 1.10` as the float 1.1, so the
    # written text is already lost by the time it reaches here
    if isinstance(v, float):
        raise ValueError(f"version must be a quoted string, got the number {v!r}; write it in quotes, e.g. \"1.10\"")
    if isinstance(v, int) and not isinstance(v, bool):
        return str(v)
    return v


def _lowercase_enum(v: Any) -> Any:
    if isinstance(v, str):
        return v.lower()
    return v


class FieldValueSettings(BaseModel):
    """One configured field of a stage instance."""

    model_config = {"frozen": True}

    name: str = Field(description="Field name as declared by the stage definition")
    value: Any = Field(default=None, description="Field payload, kept exactly as parsed")


class StageSettings(BaseModel):
    """Stage instance entry of a pipeline file.

    Example YAML:
        - instance_name: read_orders
          library: basic
          stage_name: file_source
          stage_version: "1"
          output_lanes: [orders]
          configuration:
            path: /data/orders.csv
            delimiter: ","
    """

    model_config = {"frozen": True}

    instance_name: str = Field(description="Unique name of the instance within the pipeline")
    library: str = Field(description="Library of the stage definition")
    stage_name: str = Field(description="Name of the stage definition")
    stage_version: str = Field(description="Version of the stage definition")
    system_generated: bool = Field(
        default=False,
        description="Instance name was generated by tooling (skips name pattern check)",
    )
    input_lanes: list[str] = Field(default_factory=list, description="Lanes consumed")
    output_lanes: list[str] = Field(default_factory=list, description="Lanes produced")
    configuration: list[FieldValueSettings] = Field(
        default_factory=list,
        description="Field values, as a list of {name, value} or a name->value mapping",
    )

    @field_validator("stage_version", mode="before")
    @classmethod
    def coerce_version(cls, v: Any) -> Any:
        return _version_string(v)

    @field_validator("configuration", mode="before")
    @classmethod
    def accept_mapping_form(cls, v: Any) -> Any:
        """Allow `configuration: {name: value}` as shorthand for the list form."""
        if isinstance(v, dict):
            return [{"name": name, "value": value} for name, value in v.items()]
        return v

    def to_instance(self) -> StageInstance:
        return StageInstance(
            instance_name=self.instance_name,
            library=self.library,
            stage_name=self.stage_name,
            stage_version=self.stage_version,
            input_lanes=tuple(self.input_lanes),
            output_lanes=tuple(self.output_lanes),
            configuration=tuple(FieldValue(c.name, c.value) for c in self.configuration),
            system_generated=self.system_generated,
        )


class PipelineSettings(BaseModel):
    """Top-level pipeline file."""

    model_config = {"frozen": True}

    name: str = Field(default="pipeline", description="Pipeline name used in logs and reports")
    stages: list[StageSettings] = Field(default_factory=list, description="Stage instances in authored order")

    def to_description(self) -> PipelineDescription:
        """Build a fresh PipelineDescription (each call returns an independent copy)."""
        return PipelineDescription(stages=[stage.to_instance() for stage in self.stages], name=self.name)


class FieldDefinitionSettings(BaseModel):
    """Field schema entry of a catalog file."""

    model_config = {"frozen": True}

    name: str
    type: FieldType
    group: str = ""
    required: bool = False
    depends_on: str | None = Field(default=None, description="Field whose value activates this one")
    triggered_by: list[str] = Field(default_factory=list, description="Values of depends_on that activate this field")
    model: ModelKind | None = Field(default=None, description="Model kind, required when type is 'model'")

    @field_validator("type", "model", mode="before")
    @classmethod
    def lowercase_enums(cls, v: Any) -> Any:
        return _lowercase_enum(v)

    @field_validator("triggered_by", mode="before")
    @classmethod
    def stringify_triggers(cls, v: Any) -> Any:
        """Triggers are compared as strings; YAML `true` becomes "true"."""
        if isinstance(v, list):
            return [trigger_form(item) for item in v]
        return v

    @model_validator(mode="after")
    def validate_model_kind(self) -> "FieldDefinitionSettings":
        if self.type == FieldType.MODEL and self.model is None:
            raise ValueError(f"field '{self.name}' has type 'model' but no model kind")
        if self.type != FieldType.MODEL and self.model is not None:
            raise ValueError(f"field '{self.name}' declares model kind but type is '{self.type.value}'")
        return self

    def to_definition(self) -> FieldDefinition:
        dependency = None
        if self.depends_on:
            dependency = FieldDependency(self.depends_on, frozenset(self.triggered_by))
        return FieldDefinition(
            name=self.name,
            type=self.type,
            group=self.group,
            required=self.required,
            dependency=dependency,
            model=self.model,
        )


class StageDefinitionSettings(BaseModel):
    """Stage definition entry of a catalog file."""

    model_config = {"frozen": True}

    library: str
    name: str
    version: str
    type: StageType
    output_streams: int = Field(default=1, ge=0, description="Fixed number of output lanes")
    variable_output_streams: bool = Field(default=False, description="Instance decides its output lane count")
    fields: list[FieldDefinitionSettings] = Field(default_factory=list)

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v: Any) -> Any:
        return _version_string(v)

    @field_validator("type", mode="before")
    @classmethod
    def lowercase_type(cls, v: Any) -> Any:
        return _lowercase_enum(v)

    @field_validator("fields")
    @classmethod
    def validate_unique_fields(cls, v: list[FieldDefinitionSettings]) -> list[FieldDefinitionSettings]:
        names = [f.name for f in v]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate field name(s): {duplicates}")
        return v

    def to_definition(self) -> StageDefinition:
        return StageDefinition(
            library=self.library,
            name=self.name,
            version=self.version,
            type=self.type,
            output_streams=self.output_streams,
            variable_output_streams=self.variable_output_streams,
            fields=tuple(f.to_definition() for f in self.fields),
        )


class CatalogSettings(BaseModel):
    """Top-level catalog file."""

    model_config = {"frozen": True}

    stages: list[StageDefinitionSettings] = Field(default_factory=list)

    def to_definitions(self) -> list[StageDefinition]:
        return [stage.to_definition() for stage in self.stages]


class LanecheckSettings(BaseModel):
    """Tool settings (not part of any pipeline)."""

    model_config = {"frozen": True}

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="WARNING")
    json_logs: bool = Field(default=False, description="Emit logs as JSON lines")

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v


def _read_yaml_mapping(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path.name} must contain a YAML mapping at top level, got {type(data).__name__}")
    return data


def load_pipeline(path: Path) -> PipelineSettings:
    """Load and validate a pipeline file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the file is not valid YAML
        pydantic.ValidationError: If the file doesn't match the schema
    """
    return PipelineSettings(**_read_yaml_mapping(path))


def load_catalog(path: Path) -> CatalogSettings:
    """Load and validate a stage catalog file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the file is not valid YAML
        pydantic.ValidationError: If the file doesn't match the schema
    """
    return CatalogSettings(**_read_yaml_mapping(path))


def load_settings(config_path: Path | None = None) -> LanecheckSettings:
    """Load tool settings with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (LANECHECK_*) - highest priority
    2. Settings file, if given
    3. Defaults from the Pydantic schema - lowest priority

    Raises:
        FileNotFoundError: If config_path is given but doesn't exist
        ValidationError: If settings fail Pydantic validation
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="LANECHECK",
        settings_files=[str(config_path)] if config_path is not None else [],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    # Dynaconf returns uppercase keys; filter its internal settings
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    known = set(LanecheckSettings.model_fields)
    raw_config = {
        k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys and k.lower() in known
    }
    return LanecheckSettings(**raw_config)
