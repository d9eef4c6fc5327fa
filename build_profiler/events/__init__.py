"""Event classification."""

from .classifier import Classification, EventClassifier, type_name_of

__all__ = ["Classification", "EventClassifier", "type_name_of"]
