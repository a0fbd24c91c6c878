# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Registry of forecast model descriptors.

Descriptors carry an accuracy figure that drives forecast confidence. Each
forecast records its backtest accuracy against the model it used; the
periodic refresh blends those observations into the model's accuracy::

    accuracy = clamp(0.8 * accuracy + 0.2 * mean(recent backtests), 0, 1)

Nothing is trained.
"""

from __future__ import annotations

import logging
import statistics
from collections.abc import Iterable

from omnilearning.enums import EnumModelStatus, EnumModelType
from omnilearning.exceptions import UnknownModelError
from omnilearning.models import ModelPredictiveModel
from omnilearning.predictive.presets import REFRESH_RETAIN_WEIGHT, default_models

logger = logging.getLogger(__name__)


class ModelRegistry:
    """Model descriptors by id plus the backtest accuracies awaiting refresh."""

    def __init__(self, models: Iterable[ModelPredictiveModel] | None = None) -> None:
        self._models: dict[str, ModelPredictiveModel] = {
            m.id: m for m in (default_models() if models is None else models)
        }
        self._recent_accuracy: dict[str, list[float]] = {}
        self._is_refreshing = False

    def __len__(self) -> int:
        return len(self._models)

    def list_models(self) -> list[ModelPredictiveModel]:
        return list(self._models.values())

    def get(self, model_id: str) -> ModelPredictiveModel | None:
        return self._models.get(model_id)

    def register(self, model: ModelPredictiveModel) -> None:
        """Add or replace a descriptor."""
        self._models[model.id] = model

    def set_status(self, model_id: str, status: EnumModelStatus) -> bool:
        model = self._models.get(model_id)
        if model is None:
            return False
        model.status = status
        return True

    def select(self, model_type: EnumModelType | str) -> ModelPredictiveModel:
        """Most accurate active model of ``model_type``.

        Raises:
            UnknownModelError: If the type is not a known model type or no
                active model of that type is registered.
        """
        try:
            wanted = EnumModelType(model_type)
        except ValueError as e:
            raise UnknownModelError(str(model_type)) from e
        candidates = [
            m
            for m in self._models.values()
            if m.type == wanted and m.status == EnumModelStatus.ACTIVE
        ]
        if not candidates:
            raise UnknownModelError(wanted.value)
        return max(candidates, key=lambda m: m.accuracy)

    def record_accuracy(self, model_id: str, accuracy: float) -> None:
        """Queue a backtest accuracy for the next refresh."""
        self._recent_accuracy.setdefault(model_id, []).append(accuracy)

    def pending_observations(self, model_id: str) -> list[float]:
        return list(self._recent_accuracy.get(model_id, ()))

    def refresh(self) -> int:
        """Blend queued backtest accuracies into model accuracy.

        Returns:
            Number of models whose accuracy was refreshed.
        """
        if self._is_refreshing:
            return 0
        self._is_refreshing = True
        refreshed = 0
        try:
            for model_id, observations in self._recent_accuracy.items():
                model = self._models.get(model_id)
                if model is None or not observations:
                    continue
                blended = (
                    REFRESH_RETAIN_WEIGHT * model.accuracy
                    + (1.0 - REFRESH_RETAIN_WEIGHT) * statistics.fmean(observations)
                )
                previous = model.accuracy
                model.accuracy = max(0.0, min(1.0, blended))
                refreshed += 1
                logger.debug(
                    f"Model accuracy refreshed | model_id={model_id} | "
                    f"previous={previous:.4f} | accuracy={model.accuracy:.4f} | "
                    f"observations={len(observations)}"
                )
            self._recent_accuracy.clear()
        finally:
            self._is_refreshing = False
        return refreshed


__all__ = ["ModelRegistry"]
