# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pattern models for the pattern recognition engine.

A pattern is a confidence-scored, feature-described recurring observation of
a given type. Patterns are created on the first observation of a
``(type, data)`` combination and updated in place on repeats; they are never
hard-deleted.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from omnilearning.enums import EnumFeatureKind
from omnilearning.utils.ids import utc_now

# 24 hours, the horizon every prediction stub refers to
DEFAULT_PREDICTION_TIMEFRAME_MS: int = 24 * 60 * 60 * 1000


class ModelPatternFeature(BaseModel):
    """A single named feature extracted from pattern data."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    value: float | str
    weight: float = Field(ge=0.0, le=1.0)
    kind: EnumFeatureKind


class ModelPatternSimilarity(BaseModel):
    """Similarity between a new pattern and an existing same-type pattern."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    pattern_id: str
    score: float = Field(ge=-1.0, le=1.0)
    method: str = "cosine"


class ModelPatternPrediction(BaseModel):
    """Prediction stub attached to patterns."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    confidence: float = Field(ge=0.0, le=1.0)
    timeframe_ms: int = Field(default=DEFAULT_PREDICTION_TIMEFRAME_MS, ge=0)
    factors: list[str] = Field(default_factory=list)


class ModelPatternValidation(BaseModel):
    """Validation metrics for a pattern; zeroed until a validation run fills them."""

    accuracy: float = 0.0
    precision: float = 0.0
    recall: float = 0.0
    f1_score: float = 0.0
    test_cases: int = 0


class ModelPattern(BaseModel):
    """A learned pattern.

    Mutable: repeats and feedback update confidence, occurrences and
    last_seen in place. ``validate_assignment`` keeps confidence inside
    [0.0, 1.0] even on direct assignment.

    Attributes:
        id: Unique pattern identifier.
        type: Caller-defined pattern type (e.g. "user_interaction").
        data: Observed attributes.
        confidence: Trust in the pattern, always in [0.0, 1.0].
        occurrences: Number of observations, starts at 1.
        last_seen: UTC time of the latest observation.
        sources: Producers that reported the pattern.
        features: Extracted or caller-supplied features.
        similarity: Up to five most similar same-type patterns at creation.
        prediction: Prediction stub.
        validation: Validation metrics.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    id: str
    type: str = Field(min_length=1)
    data: dict[str, Any] = Field(default_factory=dict)
    confidence: float = Field(default=0.5, ge=0.0, le=1.0)
    occurrences: int = Field(default=1, ge=1)
    last_seen: datetime = Field(default_factory=utc_now)
    sources: list[str] = Field(default_factory=list)
    features: list[ModelPatternFeature] = Field(default_factory=list)
    similarity: list[ModelPatternSimilarity] = Field(default_factory=list)
    prediction: ModelPatternPrediction
    validation: ModelPatternValidation = Field(default_factory=ModelPatternValidation)


__all__ = [
    "DEFAULT_PREDICTION_TIMEFRAME_MS",
    "ModelPattern",
    "ModelPatternFeature",
    "ModelPatternPrediction",
    "ModelPatternSimilarity",
    "ModelPatternValidation",
]
