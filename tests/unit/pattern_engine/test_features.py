# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for feature extraction and cosine similarity."""

from __future__ import annotations

import pytest

from omnilearning.enums import EnumFeatureKind
from omnilearning.models import ModelPattern
from omnilearning.pattern_engine import (
    build_prediction,
    compute_similarity,
    extract_features,
    find_similar_patterns,
)
from omnilearning.pattern_engine.features import canonical_data_key

pytestmark = pytest.mark.unit


def _pattern(pattern_id: str, data: dict) -> ModelPattern:
    return ModelPattern(id=pattern_id, type="metric", data=data, prediction=build_prediction(0))


# =============================================================================
# Feature Extraction
# =============================================================================


class TestExtractFeatures:
    def test_kinds_and_weights(self) -> None:
        features = extract_features(
            {"clicks": 3, "component": "button", "flag": True, "nested": {"a": 1}}, now_ms=42
        )

        by_name = {f.name: f for f in features}
        assert set(by_name) == {"clicks", "component", "timestamp"}
        assert by_name["clicks"].kind is EnumFeatureKind.NUMERIC
        assert by_name["clicks"].weight == 1.0
        assert by_name["component"].kind is EnumFeatureKind.CATEGORICAL
        assert by_name["component"].weight == 0.8
        assert by_name["timestamp"].kind is EnumFeatureKind.TEMPORAL
        assert by_name["timestamp"].value == 42.0
        assert by_name["timestamp"].weight == 0.9

    def test_empty_data_has_only_temporal_feature(self) -> None:
        features = extract_features(None, now_ms=1)

        assert [f.name for f in features] == ["timestamp"]

    def test_non_finite_numbers_are_skipped(self) -> None:
        features = extract_features({"x": float("nan")}, now_ms=1)

        assert [f.name for f in features] == ["timestamp"]

    def test_timestamp_key_does_not_duplicate_temporal_feature(self) -> None:
        features = extract_features({"timestamp": 5, "x": 1}, now_ms=42)

        assert [f.name for f in features] == ["x", "timestamp"]
        assert features[-1].kind is EnumFeatureKind.TEMPORAL
        assert features[-1].value == 42.0


# =============================================================================
# Similarity
# =============================================================================


class TestComputeSimilarity:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ({"x": 1, "y": 0}, {"x": 2, "y": 0}, 1.0),
            ({"x": 1}, {"y": 1}, 0.0),
            ({"x": 1}, {"x": -1}, -1.0),
            ({"x": "2"}, {"x": 2}, 1.0),
            ({"x": True}, {"x": 1}, 1.0),
            ({"x": "abc"}, {"x": 1}, 0.0),
            ({}, {"x": 1}, 0.0),
            (None, None, 0.0),
        ],
    )
    def test_cosine(self, a: dict | None, b: dict | None, expected: float) -> None:
        assert compute_similarity(a, b) == pytest.approx(expected)

    def test_result_is_symmetric_and_bounded(self) -> None:
        a = {"x": 3, "y": 4, "z": "1.5"}
        b = {"x": 1, "y": 7}

        score = compute_similarity(a, b)

        assert score == pytest.approx(compute_similarity(b, a))
        assert -1.0 <= score <= 1.0


class TestFindSimilarPatterns:
    def test_threshold_is_exclusive_and_results_sorted(self) -> None:
        candidates = [
            _pattern("p_parallel", {"x": 2, "y": 2}),
            _pattern("p_close", {"x": 1, "y": 0.8}),
            _pattern("p_orthogonal", {"x": 1, "y": -1}),
        ]

        matches = find_similar_patterns({"x": 1, "y": 1}, candidates, threshold=0.8)

        assert [m.pattern_id for m in matches] == ["p_parallel", "p_close"]
        assert matches[0].score >= matches[1].score

    def test_limit_caps_results(self) -> None:
        candidates = [_pattern(f"p_{i}", {"x": i + 1}) for i in range(8)]

        matches = find_similar_patterns({"x": 1}, candidates, threshold=0.5, limit=5)

        assert len(matches) == 5


# =============================================================================
# Prediction Stub and Identity
# =============================================================================


class TestPredictionAndIdentity:
    @pytest.mark.parametrize(
        ("similar", "expected"), [(0, 0.5), (1, 0.56), (5, 0.8), (12, 0.8)]
    )
    def test_prediction_confidence_is_deterministic(self, similar: int, expected: float) -> None:
        prediction = build_prediction(similar)

        assert prediction.confidence == pytest.approx(expected)
        assert prediction.timeframe_ms == 86_400_000

    def test_data_key_ignores_key_order(self) -> None:
        assert canonical_data_key("t", {"a": 1, "b": 2}) == canonical_data_key("t", {"b": 2, "a": 1})
        assert canonical_data_key("t", {"a": 1}) != canonical_data_key("u", {"a": 1})
