"""
Course Document Transformation Component.

Turns an extracted outline plus the course metadata record into the
canonical CourseDocument consumed by the exporters.
"""
import json
import logging
from typing import Any, Dict, List, Optional

from core.constants import COURSE_COUNTERS, DEFAULT_COURSE_METADATA
from core.models import (
    Author,
    Chapter,
    CourseDocument,
    Exercise,
    OutlineItem,
    OutlineType,
    Paragraph,
    Section,
)
from outline.extractor import extract_outline
from utils.text_utils import extract_plain_text

logger = logging.getLogger(__name__)

_PARAGRAPH_TYPES = (OutlineType.PARAGRAPH, OutlineType.NOTION, OutlineType.EXERCISE)


class CourseTransformer:
    """
    Builds a CourseDocument from outline items.

    Sections are read from the top-level list and from the children of
    any top-level course item. Chapters go to Section.chapters and
    paragraph-like items placed directly under a section go to
    Section.paragraphs.
    """

    def transform(self, outline: List[OutlineItem], source_meta: Optional[Dict] = None) -> CourseDocument:
        """
        Transform outline and metadata into a course document.

        Args:
            outline: Top-level outline items
            source_meta: Course metadata record (may be empty)

        Returns:
            CourseDocument; missing metadata is replaced by defaults
        """
        meta = source_meta if isinstance(source_meta, dict) else {}
        sections = [self.build_section(item) for item in self._section_items(outline or [])]

        course = build_course_metadata(meta)
        course.sections = sections
        return course

    @staticmethod
    def _section_items(outline: List[OutlineItem]) -> List[OutlineItem]:
        items = []
        for item in outline:
            if item.type == OutlineType.SECTION:
                items.append(item)
            elif item.type == OutlineType.COURSE:
                items.extend(child for child in item.children if child.type == OutlineType.SECTION)
            else:
                logger.debug("Ignoring top-level %s '%s' outside any section", item.type.value, item.title)
        return items

    def build_section(self, item: OutlineItem) -> Section:
        section = Section(title=item.title)
        for child in item.children:
            if child.type == OutlineType.CHAPTER:
                section.chapters.append(self.build_chapter(child))
            elif child.type in _PARAGRAPH_TYPES:
                section.paragraphs.append(self.build_paragraph(child))
        return section

    def build_chapter(self, item: OutlineItem) -> Chapter:
        chapter = Chapter(title=item.title)
        for child in item.children:
            if child.type in _PARAGRAPH_TYPES:
                chapter.paragraphs.append(self.build_paragraph(child))
        return chapter

    def build_paragraph(self, item: OutlineItem) -> Paragraph:
        """
        Build a paragraph from a paragraph, notion or exercise item.

        Content holds all nested text, including the bodies of nested
        notions and exercises.

        Notions carry their own title as sole notion. Exercises get an
        empty question list; extracting questions is left to a later pass.
        """
        paragraph = Paragraph(
            title=item.title,
            content=extract_plain_text(item.content),
        )

        if item.type == OutlineType.NOTION:
            paragraph.notions = [item.title]
        elif item.type == OutlineType.EXERCISE:
            paragraph.exercise = Exercise(questions=[])
        else:
            for child in item.children:
                if child.type == OutlineType.NOTION:
                    paragraph.notions.append(child.title)
                elif child.type == OutlineType.EXERCISE and paragraph.exercise is None:
                    paragraph.exercise = Exercise(questions=[])

        return paragraph


def build_course_metadata(meta: Dict) -> CourseDocument:
    """
    Copy course metadata, applying per-field defaults.

    Args:
        meta: Metadata record from the content-management layer

    Returns:
        CourseDocument without sections
    """
    defaults = DEFAULT_COURSE_METADATA

    counters = {name: _as_int(meta.get(name)) for name in COURSE_COUNTERS}

    objectives = meta.get('learningObjectives', meta.get('learning_objectives'))
    if not isinstance(objectives, list):
        objectives = []

    return CourseDocument(
        id=meta.get('id') or defaults['id'],
        title=_as_text(meta.get('title')) or defaults['title'],
        category=_as_text(meta.get('category')) or defaults['category'],
        image=meta.get('coverImage') or meta.get('image') or defaults['image'],
        author=_build_author(meta.get('author')),
        introduction=(
            _as_text(meta.get('description'))
            or _as_text(meta.get('introduction'))
            or defaults['introduction']
        ),
        conclusion=_as_text(meta.get('conclusion')) or defaults['conclusion'],
        learning_objectives=[str(o) for o in objectives if o],
        **counters
    )


def _build_author(raw: Any) -> Author:
    defaults = DEFAULT_COURSE_METADATA
    if isinstance(raw, str) and raw.strip():
        return Author(name=raw.strip(), image=defaults['author_image'],
                      designation=defaults['author_designation'])
    if not isinstance(raw, dict):
        raw = {}

    name = _as_text(raw.get('name'))
    if not name and raw.get('firstName'):
        name = f"{raw.get('firstName')} {raw.get('lastName') or ''}".strip()

    return Author(
        name=name or defaults['author_name'],
        image=raw.get('image') or raw.get('photoUrl') or defaults['author_image'],
        designation=_as_text(raw.get('designation')) or defaults['author_designation'],
    )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _as_int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def load_document_tree(content: Any) -> Optional[Dict]:
    """
    Normalise stored course content to the editor's root 'doc' node.

    Handles JSON strings and the doubly nested {'content': {'type': 'doc'}}
    shape returned by some API versions.

    Args:
        content: Stored content (dict, list or JSON string)

    Returns:
        Root node dict, or None when content cannot be decoded
    """
    if isinstance(content, str):
        try:
            content = json.loads(content)
        except ValueError:
            logger.warning("Course content is not valid JSON, ignoring it")
            return None

    if isinstance(content, list):
        return {'type': 'doc', 'content': content}
    if not isinstance(content, dict):
        return None

    inner = content.get('content')
    if isinstance(inner, dict) and inner.get('type') == 'doc':
        return inner
    return content


def transform(outline: List[OutlineItem], source_meta: Optional[Dict] = None) -> CourseDocument:
    """Transform outline and metadata into a CourseDocument."""
    return CourseTransformer().transform(outline, source_meta)


def transform_course(api_course: Dict) -> CourseDocument:
    """
    Build a CourseDocument straight from an API course record.

    Args:
        api_course: Record with metadata fields and the editor 'content'

    Returns:
        CourseDocument
    """
    if not isinstance(api_course, dict):
        api_course = {}
    tree = load_document_tree(api_course.get('content'))
    outline = extract_outline(tree) if tree else []
    return transform(outline, api_course)
