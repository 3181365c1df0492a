"""Course package - Canonical course document building and traversal."""

from .transformer import (
    CourseTransformer,
    build_course_metadata,
    load_document_tree,
    transform,
    transform_course,
)
from .numbering import CourseEntry, iter_course_entries, heading_text

__all__ = [
    'CourseTransformer',
    'build_course_metadata',
    'load_document_tree',
    'transform',
    'transform_course',
    'CourseEntry',
    'iter_course_entries',
    'heading_text',
]
