"""Normalization of raw plan documents into resource change records."""

from .resource_normalizer import ResourceNormalizer

__all__ = ["ResourceNormalizer"]
