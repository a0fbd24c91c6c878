# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Runtime settings for the learning services, loaded from environment.

Environment variables:
    OMNILEARNING_FEEDBACK_INTERVAL_SECONDS: float (default 30)
    OMNILEARNING_METRICS_INTERVAL_SECONDS: float (default 60)
    OMNILEARNING_KNOWLEDGE_SHARING_INTERVAL_SECONDS: float (default 120)
    OMNILEARNING_MODEL_REFRESH_INTERVAL_SECONDS: float (default 300)
    OMNILEARNING_EVENT_HISTORY_SIZE: int (default 1000)
    OMNILEARNING_SIMILARITY_THRESHOLD: float (default 0.8)
    OMNILEARNING_MAX_SIMILAR_PATTERNS: int (default 5)
    OMNILEARNING_SHARING_PROTOCOL: "push" | "request-response" (default push)
    OMNILEARNING_LOG_LEVEL: DEBUG | INFO | WARNING | ERROR | CRITICAL
    OMNILEARNING_START_BACKGROUND_TASKS: bool (default true)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from omnilearning.enums import EnumLogLevel, EnumSharingProtocolType
from omnilearning.event_bus import DEFAULT_MAX_HISTORY
from omnilearning.models import ModelRecognitionThresholds
from omnilearning.pattern_engine.presets import MAX_SIMILAR_PATTERNS


class LearningRuntimeSettings(BaseSettings):
    """Pydantic Settings for the learning runtime."""

    model_config = SettingsConfigDict(
        env_prefix="OMNILEARNING_",
        extra="ignore",
    )

    feedback_interval_seconds: float = Field(
        default=30.0, gt=0.0, description="Feedback processing period"
    )
    metrics_interval_seconds: float = Field(
        default=60.0, gt=0.0, description="Learning metrics rollup period"
    )
    knowledge_sharing_interval_seconds: float = Field(
        default=120.0, gt=0.0, description="Public knowledge sharing period"
    )
    model_refresh_interval_seconds: float = Field(
        default=300.0, gt=0.0, description="Forecast model accuracy refresh period"
    )
    event_history_size: int = Field(
        default=DEFAULT_MAX_HISTORY, ge=1, description="Bus history capacity"
    )
    similarity_threshold: float = Field(
        default=0.8,
        ge=0.0,
        le=1.0,
        description="Minimum cosine similarity for a pattern's similarity list",
    )
    max_similar_patterns: int = Field(default=MAX_SIMILAR_PATTERNS, ge=0)
    sharing_protocol: EnumSharingProtocolType = EnumSharingProtocolType.PUSH
    log_level: EnumLogLevel = EnumLogLevel.INFO
    start_background_tasks: bool = Field(
        default=True,
        description="Start the periodic tasks on LearningContext.start()",
    )

    def to_thresholds(self) -> ModelRecognitionThresholds:
        """Recognition thresholds carrying the configured similarity threshold."""
        return ModelRecognitionThresholds(similarity=self.similarity_threshold)


__all__ = ["LearningRuntimeSettings"]
