"""Change classification, sensitivity resolution and attribute diffing."""

from .classifier import classify_actions
from .generator import FieldDiffGenerator
from .sensitivity import SensitivityResolver, contains_sensitive

__all__ = [
    "FieldDiffGenerator",
    "SensitivityResolver",
    "classify_actions",
    "contains_sensitive",
]
