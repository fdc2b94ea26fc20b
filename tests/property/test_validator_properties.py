# tests/property/test_validator_properties.py
"""Property tests for ordering and validation determinism."""

import copy

from hypothesis import given

from lanecheck.contracts import IssueCode, IssueCollector, PipelineDescription
from lanecheck.validation import PipelineValidator, sort_stages, validate_pipeline
from tests.helpers.builders import make_catalog, source, target
from tests.strategies.pipelines import acyclic_pipelines, any_names, arbitrary_pipelines, shuffled_linear_pipelines
from tests.strategies.settings import DETERMINISM_SETTINGS, STANDARD_SETTINGS


class TestOrderingProperties:
    @given(case=shuffled_linear_pipelines())
    @STANDARD_SETTINGS
    def test_linear_chain_valid_in_any_authored_order(self, case: tuple[PipelineDescription, list[str]]) -> None:
        pipeline, chain = case

        report = validate_pipeline(make_catalog(), pipeline)

        assert report.valid is True
        assert report.can_preview is True
        assert list(report.stage_order) == chain

    @given(pipeline=acyclic_pipelines())
    @STANDARD_SETTINGS
    def test_sorted_inputs_produced_upstream(self, pipeline: PipelineDescription) -> None:
        authored = sorted(pipeline.instance_names)

        assert sort_stages(pipeline, IssueCollector()) is True

        produced: set[str] = set()
        for stage in pipeline.stages:
            assert produced.issuperset(stage.input_lanes)
            produced.update(stage.output_lanes)
        assert sorted(pipeline.instance_names) == authored

    @given(pipeline=arbitrary_pipelines())
    @STANDARD_SETTINGS
    def test_sort_never_drops_stages(self, pipeline: PipelineDescription) -> None:
        before = sorted(pipeline.instance_names)

        sort_stages(pipeline, IssueCollector())

        assert sorted(pipeline.instance_names) == before


class TestValidationProperties:
    @given(pipeline=arbitrary_pipelines())
    @DETERMINISM_SETTINGS
    def test_independent_copies_validate_identically(self, pipeline: PipelineDescription) -> None:
        first = validate_pipeline(make_catalog(), copy.deepcopy(pipeline), name="p")
        second = validate_pipeline(make_catalog(), copy.deepcopy(pipeline), name="p")

        assert first.to_dict() == second.to_dict()

    @given(pipeline=arbitrary_pipelines())
    @STANDARD_SETTINGS
    def test_valid_implies_previewable(self, pipeline: PipelineDescription) -> None:
        validator = PipelineValidator(make_catalog(), "p", pipeline)

        valid = validator.validate()

        assert valid == (validator.issues.issue_count == 0)
        if valid:
            assert validator.can_preview is True

    @given(pipeline=arbitrary_pipelines())
    @STANDARD_SETTINGS
    def test_open_lanes_unique(self, pipeline: PipelineDescription) -> None:
        report = validate_pipeline(make_catalog(), pipeline, name="p")

        assert len(set(report.open_lanes)) == len(report.open_lanes)

    @given(name=any_names)
    @STANDARD_SETTINGS
    def test_instance_name_rule(self, name: str) -> None:
        pipeline = PipelineDescription(stages=[source(name, outputs=["a"]), target("sink", inputs=["a"])])

        report = validate_pipeline(make_catalog(), pipeline, name="p")

        name_issues = [i for i in report.issues.for_instance(name) if i.code == IssueCode.VALIDATION_0016]
        valid_chars = bool(name) and all(c.isascii() and (c.isalnum() or c == "_") for c in name)
        assert bool(name_issues) == (not valid_chars)
