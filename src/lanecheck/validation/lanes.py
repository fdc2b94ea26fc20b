# src/lanecheck/validation/lanes.py
"""Lane connectivity: shared output lanes and open lanes."""

from __future__ import annotations

from collections.abc import Sequence

from lanecheck.contracts import IssueCode, IssueCollector, StageInstance


def check_lanes(stages: Sequence[StageInstance], issues: IssueCollector) -> tuple[bool, list[str]]:
    """Check lane wiring across stages in their final order.

    A lane may be produced by only one stage: each later stage sharing
    output lanes with an earlier one gets VALIDATION_0010. Output lanes that
    no later stage consumes are open; each stage with open lanes gets one
    VALIDATION_0011. Open lanes are reported but do not block preview.

    Returns:
        (can_preview, open lanes in first-seen order without duplicates)
    """
    preview = True
    open_lanes: list[str] = []

    for i, stage in enumerate(stages):
        open_outputs = list(dict.fromkeys(stage.output_lanes))
        for downstream in stages[i + 1 :]:
            shared = [lane for lane in dict.fromkeys(stage.output_lanes) if lane in downstream.output_lanes]
            if shared:
                issues.stage(downstream.instance_name, IssueCode.VALIDATION_0010, shared, stage.instance_name)
                preview = False
            consumed = set(downstream.input_lanes)
            open_outputs = [lane for lane in open_outputs if lane not in consumed]

        if open_outputs:
            issues.stage(stage.instance_name, IssueCode.VALIDATION_0011, open_outputs)
            for lane in open_outputs:
                if lane not in open_lanes:
                    open_lanes.append(lane)

    return preview, open_lanes
