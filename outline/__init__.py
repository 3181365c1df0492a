"""Outline package - Node classification and numbered outline extraction."""

from .classifier import classify_node, is_hierarchy_node
from .extractor import (
    OutlineExtractor,
    extract_outline,
    new_counters,
    format_number,
    flatten_outline,
    find_outline_item,
    recompute_numbers,
    allowed_child_types,
)

__all__ = [
    'classify_node',
    'is_hierarchy_node',
    'OutlineExtractor',
    'extract_outline',
    'new_counters',
    'format_number',
    'flatten_outline',
    'find_outline_item',
    'recompute_numbers',
    'allowed_child_types',
]
