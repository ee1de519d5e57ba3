"""Confidence discounting for small statistical samples."""

from .penalty import (
    BASIC_PENALTY_FIELDS,
    SITUATIONAL_PENALTY_FIELDS,
    ConfidenceInfo,
    ConfidenceLevel,
    apply_confidence_penalty,
    basic_penalty,
    confidence_info,
    confidence_level,
    situational_penalty,
    summarize_confidence,
)

__all__ = [
    "BASIC_PENALTY_FIELDS",
    "SITUATIONAL_PENALTY_FIELDS",
    "ConfidenceInfo",
    "ConfidenceLevel",
    "apply_confidence_penalty",
    "basic_penalty",
    "confidence_info",
    "confidence_level",
    "situational_penalty",
    "summarize_confidence",
]
