# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Feature extraction and similarity for pattern recognition.

Pure functions: no I/O, no engine state. The engine passes in the data and
the candidate patterns.

Feature extraction:
    - numeric fields (int, float; bools excluded) -> weight 1.0, numeric
    - string fields -> weight 0.8, categorical
    - always one temporal ``timestamp`` feature (epoch ms) -> weight 0.9

Similarity:
    Cosine similarity over the union of keys of two data mappings. Values are
    coerced to numbers: numbers as-is, bools as 0/1, numeric strings parsed,
    everything else 0. Two all-zero vectors have similarity 0.0.

Usage:
    >>> compute_similarity({"x": 1, "y": 0}, {"x": 2, "y": 0})
    1.0
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterable, Mapping
from typing import Any

from omnilearning.enums import EnumFeatureKind
from omnilearning.models import (
    ModelPattern,
    ModelPatternFeature,
    ModelPatternPrediction,
    ModelPatternSimilarity,
)
from omnilearning.pattern_engine.presets import (
    CATEGORICAL_FEATURE_WEIGHT,
    MAX_SIMILAR_PATTERNS,
    NUMERIC_FEATURE_WEIGHT,
    PREDICTION_BASE_CONFIDENCE,
    PREDICTION_FACTORS,
    PREDICTION_SIMILARITY_BONUS,
    TEMPORAL_FEATURE_NAME,
    TEMPORAL_FEATURE_WEIGHT,
)
from omnilearning.utils.ids import epoch_ms


def extract_features(
    data: Mapping[str, Any] | None, *, now_ms: int | None = None
) -> list[ModelPatternFeature]:
    """Extract weighted features from pattern data.

    Args:
        data: Pattern data. Nested values and non-scalar fields are skipped,
            as is a ``timestamp`` key.
        now_ms: Value of the temporal feature; defaults to the current time.

    Returns:
        Numeric and categorical features in key order, followed by the
        temporal feature.
    """
    features: list[ModelPatternFeature] = []
    for key, value in (data or {}).items():
        # The temporal feature owns the name
        if key == TEMPORAL_FEATURE_NAME or isinstance(value, bool):
            continue
        if isinstance(value, int | float) and math.isfinite(value):
            features.append(
                ModelPatternFeature(
                    name=key,
                    value=float(value),
                    weight=NUMERIC_FEATURE_WEIGHT,
                    kind=EnumFeatureKind.NUMERIC,
                )
            )
        elif isinstance(value, str):
            features.append(
                ModelPatternFeature(
                    name=key,
                    value=value,
                    weight=CATEGORICAL_FEATURE_WEIGHT,
                    kind=EnumFeatureKind.CATEGORICAL,
                )
            )
    features.append(
        ModelPatternFeature(
            name=TEMPORAL_FEATURE_NAME,
            value=float(now_ms if now_ms is not None else epoch_ms()),
            weight=TEMPORAL_FEATURE_WEIGHT,
            kind=EnumFeatureKind.TEMPORAL,
        )
    )
    return features


def _to_number(value: Any) -> float:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, int | float):
        return float(value) if math.isfinite(value) else 0.0
    if isinstance(value, str):
        try:
            parsed = float(value)
        except ValueError:
            return 0.0
        return parsed if math.isfinite(parsed) else 0.0
    return 0.0


def compute_similarity(
    data_a: Mapping[str, Any] | None, data_b: Mapping[str, Any] | None
) -> float:
    """Cosine similarity of two data mappings, in [-1.0, 1.0].

    Returns 0.0 when either vector has zero magnitude.
    """
    a = data_a or {}
    b = data_b or {}
    dot = 0.0
    mag_a = 0.0
    mag_b = 0.0
    for key in a.keys() | b.keys():
        va = _to_number(a.get(key))
        vb = _to_number(b.get(key))
        dot += va * vb
        mag_a += va * va
        mag_b += vb * vb
    if mag_a == 0.0 or mag_b == 0.0:
        return 0.0
    # Rounding can push a parallel pair a hair past 1.0
    return max(-1.0, min(1.0, dot / (math.sqrt(mag_a) * math.sqrt(mag_b))))


def find_similar_patterns(
    data: Mapping[str, Any] | None,
    candidates: Iterable[ModelPattern],
    *,
    threshold: float,
    limit: int = MAX_SIMILAR_PATTERNS,
) -> list[ModelPatternSimilarity]:
    """Most similar candidates strictly above ``threshold``, best first.

    Args:
        data: Data of the pattern being learned.
        candidates: Existing patterns of the same type.
        threshold: Minimum similarity (exclusive).
        limit: Maximum number of results.
    """
    matches = [
        ModelPatternSimilarity(pattern_id=p.id, score=score)
        for p in candidates
        if (score := compute_similarity(data, p.data)) > threshold
    ]
    matches.sort(key=lambda m: m.score, reverse=True)
    return matches[:limit]


def build_prediction(similar_count: int) -> ModelPatternPrediction:
    """Deterministic prediction stub for a new pattern.

    Confidence grows linearly with the number of similar same-type patterns
    and saturates at MAX_SIMILAR_PATTERNS.
    """
    support = min(1.0, similar_count / MAX_SIMILAR_PATTERNS)
    return ModelPatternPrediction(
        confidence=PREDICTION_BASE_CONFIDENCE + PREDICTION_SIMILARITY_BONUS * support,
        factors=list(PREDICTION_FACTORS),
    )


def canonical_data_key(pattern_type: str, data: Mapping[str, Any] | None) -> str:
    """Identity of a ``(type, data)`` observation.

    Key order does not matter; values that are not JSON-serializable are
    compared by their ``str`` form.
    """
    encoded = json.dumps(data or {}, sort_keys=True, separators=(",", ":"), default=str)
    return f"{pattern_type}\x1f{encoded}"


__all__ = [
    "build_prediction",
    "canonical_data_key",
    "compute_similarity",
    "extract_features",
    "find_similar_patterns",
]
