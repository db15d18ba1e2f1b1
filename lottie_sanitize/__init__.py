"""Repair null keyframe tangents in Lottie animation JSON."""

from .config import AppConfig, load_config
from .normalize import DEFAULT_TARGET_KEYS, DROP, ZERO, count_null_targets, get_policy, normalize
from .toast import notify

__all__ = [
    "AppConfig",
    "DEFAULT_TARGET_KEYS",
    "DROP",
    "ZERO",
    "count_null_targets",
    "get_policy",
    "load_config",
    "normalize",
    "notify",
]
