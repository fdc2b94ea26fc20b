# src/lanecheck/validation/sorter.py
"""Order stage instances so every input lane is produced upstream.

Stages are placed by repeated passes over the unplaced instances in
authored order. An instance is placed once all of its input lanes have been
produced by already-placed instances; outputs become visible immediately,
so a chain authored in order is placed in a single pass.

When a pass places nothing, the remaining instances either form a cycle or
read lanes nobody produces. They are reported in one issue and appended in
authored order, so later passes still see every stage.
"""

from __future__ import annotations

import networkx as nx

from lanecheck.contracts import IssueCode, IssueCollector, PipelineDescription, StageInstance
from lanecheck.core.logging import get_logger

logger = get_logger(__name__)


def sort_stages(pipeline: PipelineDescription, issues: IssueCollector) -> bool:
    """Sort the pipeline's stages in place.

    Args:
        pipeline: Pipeline whose ``stages`` list is replaced
        issues: Collector receiving VALIDATION_0002 on failure

    Returns:
        True if every stage could be ordered
    """
    remaining = list(pipeline.stages)
    ordered: list[StageInstance] = []
    produced: set[str] = set()
    ok = True

    while remaining:
        placed_before = len(ordered)
        unplaced: list[StageInstance] = []
        for stage in remaining:
            if produced.issuperset(stage.input_lanes):
                produced.update(stage.output_lanes)
                ordered.append(stage)
            else:
                unplaced.append(stage)
        remaining = unplaced

        if len(ordered) == placed_before:
            names = [stage.instance_name for stage in remaining]
            issues.pipeline(IssueCode.VALIDATION_0002, names)
            _log_unresolved(remaining, produced)
            ok = False
            break

    ordered.extend(remaining)
    pipeline.stages = ordered
    return ok


def _log_unresolved(remaining: list[StageInstance], produced: set[str]) -> None:
    """Explain why the remaining stages could not be ordered.

    Separates lanes no stage produces from lanes caught in a cycle among
    the remaining stages. Diagnostic only; the issue is already recorded.
    """
    producers: dict[str, list[str]] = {}
    for stage in remaining:
        for lane in stage.output_lanes:
            producers.setdefault(lane, []).append(stage.instance_name)

    undefined = sorted(
        {lane for stage in remaining for lane in stage.input_lanes if lane not in produced and lane not in producers}
    )

    graph: nx.DiGraph[str] = nx.DiGraph()
    for stage in remaining:
        graph.add_node(stage.instance_name)
        for lane in stage.input_lanes:
            for producer in producers.get(lane, []):
                graph.add_edge(producer, stage.instance_name, lane=lane)

    cycle: list[str] = []
    try:
        cycle = [edge[0] for edge in nx.find_cycle(graph)]
    except nx.NetworkXNoCycle:
        pass

    logger.debug(
        "Stages cannot be ordered",
        stages=[stage.instance_name for stage in remaining],
        undefined_lanes=undefined,
        cycle=cycle,
    )
