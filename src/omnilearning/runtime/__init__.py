# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Runtime wiring: settings, periodic tasks and the learning context."""

from omnilearning.runtime.context import LearningContext
from omnilearning.runtime.scheduler import PeriodicTask, TaskCallback
from omnilearning.runtime.settings import LearningRuntimeSettings

__all__ = ["LearningContext", "LearningRuntimeSettings", "PeriodicTask", "TaskCallback"]
