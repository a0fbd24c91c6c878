# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Knowledge sharing and learning algorithm enums."""

from enum import Enum


class EnumSharingProtocolType(str, Enum):
    """Transport style used to share a knowledge node."""

    PUSH = "push"
    REQUEST_RESPONSE = "request-response"


class EnumAccessLevel(str, Enum):
    """Access granted to consumers of a shared knowledge node."""

    READ = "read"
    WRITE = "write"
    ADMIN = "admin"


class EnumFeatureKind(str, Enum):
    """Kind of a pattern feature."""

    NUMERIC = "numeric"
    CATEGORICAL = "categorical"
    TEMPORAL = "temporal"


class EnumAlgorithmType(str, Enum):
    """Family of a registered learning algorithm."""

    SUPERVISED = "supervised"
    UNSUPERVISED = "unsupervised"
    REINFORCEMENT = "reinforcement"
    DEEP = "deep"
    ENSEMBLE = "ensemble"


__all__ = [
    "EnumAccessLevel",
    "EnumAlgorithmType",
    "EnumFeatureKind",
    "EnumSharingProtocolType",
]
