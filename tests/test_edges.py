# tests/test_edges.py
"""Tests for edge text parsing and graph definition files."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from ccviz.config import GenerationMode, GraphConfig
from ccviz.graph.edges import (
    GraphSpec,
    build_store,
    clamp_node_count,
    load_graph_spec,
    parse_edge_text,
    spec_from_mapping,
)
from ccviz.utils.error_tracker import ErrorTracker


def test_parse_valid_lines() -> None:
    assert parse_edge_text("1 2\n2 3\n\n  4   5  \n", 5) == [(1, 2), (2, 3), (4, 5)]


def test_parse_rejects_and_records_bad_lines() -> None:
    tracker = ErrorTracker(context="test")
    text = "1 2\n3 3\n0 1\n1 9\nfoo bar\n1 2 3\n2 1"

    edges = parse_edge_text(text, 6, tracker)

    assert edges == [(1, 2), (2, 1)]
    assert tracker.count("self_loop") == 1
    assert tracker.count("out_of_range") == 2
    assert tracker.count("malformed") == 2
    assert tracker.count() == 5


def test_parse_without_tracker_just_skips() -> None:
    assert parse_edge_text("1 1\nx", 3) == []


@pytest.mark.parametrize("requested, expected", [(1, 6), (6, 6), (9, 9), (12, 12), (40, 12)])
def test_clamp_node_count(requested: int, expected: int) -> None:
    assert clamp_node_count(requested, GraphConfig()) == expected


def test_spec_from_mapping_manual() -> None:
    spec = spec_from_mapping(
        {"nodes": 6, "edges": [[1, 2], [2, 3]], "edges_text": "4 5\n5 5", "seed": 3}
    )
    assert spec.mode is GenerationMode.MANUAL
    assert spec.edges == ((1, 2), (2, 3), (4, 5))
    assert spec.seed == 3
    assert not spec.random


def test_spec_from_mapping_defaults_to_random() -> None:
    spec = spec_from_mapping({"nodes": 7}, config=GraphConfig(seed=5))
    assert spec.random
    assert spec.edges == ()
    assert spec.seed == 5


def test_spec_from_mapping_random_mode_records_ignored_edges() -> None:
    tracker = ErrorTracker(context="test")
    spec = spec_from_mapping(
        {"nodes": 6, "mode": "random", "edges": [[1, 2]]}, tracker=tracker
    )
    assert spec.random
    assert spec.edges == ()
    assert tracker.count("ignored_edges") == 1


def test_load_graph_spec_yaml(tmp_path: Path) -> None:
    path = tmp_path / "graph.yaml"
    path.write_text(yaml.safe_dump({"nodes": 8, "mode": "manual", "edges": [[1, 2], [7, 8]]}))
    spec = load_graph_spec(path)
    assert spec == GraphSpec(nodes=8, mode=GenerationMode.MANUAL, edges=((1, 2), (7, 8)))


def test_load_graph_spec_json(tmp_path: Path) -> None:
    path = tmp_path / "graph.json"
    path.write_text(json.dumps({"nodes": 6, "mode": "random", "seed": 1}))
    spec = load_graph_spec(path)
    assert spec.random and spec.seed == 1


def test_load_graph_spec_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_graph_spec(tmp_path / "nope.yaml")


def test_load_graph_spec_requires_mapping(tmp_path: Path) -> None:
    path = tmp_path / "graph.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_graph_spec(path)


def test_build_store_manual(test_settings) -> None:
    spec = GraphSpec(nodes=6, mode=GenerationMode.MANUAL, edges=((1, 2), (2, 1), (3, 4)))
    store = build_store(spec, test_settings)
    assert store.n == 6
    assert [edge.as_tuple() for edge in store.edges] == [(1, 2), (3, 4)]


def test_build_store_random_is_seeded(test_settings) -> None:
    spec = GraphSpec(nodes=9, seed=21)
    first = build_store(spec, test_settings)
    second = build_store(spec, test_settings)
    assert first.edges == second.edges
    assert [v.position for v in first.vertices] == [v.position for v in second.vertices]
