"""Core package - Domain models and constants."""

from .models import (
    NodeKind,
    OutlineType,
    DocumentNode,
    NodeConfig,
    OutlineItem,
    Question,
    Exercise,
    Paragraph,
    Chapter,
    Section,
    Author,
    CourseDocument,
)

__all__ = [
    'NodeKind',
    'OutlineType',
    'DocumentNode',
    'NodeConfig',
    'OutlineItem',
    'Question',
    'Exercise',
    'Paragraph',
    'Chapter',
    'Section',
    'Author',
    'CourseDocument',
]
