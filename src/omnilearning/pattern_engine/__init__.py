# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pattern & Feedback Engine.

Modules:
    engine: PatternEngine, the bus-facing service
    features: feature extraction and cosine similarity (pure)
    rule_conditions: predicate language for feedback rules (pure)
    feedback_processor: pending -> processing -> completed | failed rule engine
    knowledge_sharing: knowledge node store and periodic sharing
    metrics: learning metrics rollup (pure)
    presets: default rules, protocols and weights
"""

from omnilearning.pattern_engine.engine import PatternEngine
from omnilearning.pattern_engine.feedback_processor import (
    FeedbackProcessor,
    derive_action,
    select_rule,
)
from omnilearning.pattern_engine.features import (
    build_prediction,
    compute_similarity,
    extract_features,
    find_similar_patterns,
)
from omnilearning.pattern_engine.knowledge_sharing import KnowledgeSharing
from omnilearning.pattern_engine.metrics import compute_learning_metrics
from omnilearning.pattern_engine.rule_conditions import (
    compile_condition,
    evaluate_condition,
)

__all__ = [
    "FeedbackProcessor",
    "KnowledgeSharing",
    "PatternEngine",
    "build_prediction",
    "compile_condition",
    "compute_learning_metrics",
    "compute_similarity",
    "derive_action",
    "evaluate_condition",
    "extract_features",
    "find_similar_patterns",
    "select_rule",
]
