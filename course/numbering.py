"""
Document-order traversal of a CourseDocument.

Both exporters walk the course through iter_course_entries so that the
table of contents, the body and the flowing export share one order and
one numbering scheme: sections 'n', chapters 'n.m', chapter paragraphs
'n.m.p' and paragraphs placed directly in a section 'n.p'.
"""
from dataclasses import dataclass
from typing import Iterator, Optional

from config.settings import ExportLabels
from core.models import Chapter, CourseDocument, OutlineType, Paragraph, Section


@dataclass
class CourseEntry:
    """One numbered section, chapter or paragraph in document order."""
    type: OutlineType
    number: str
    title: str
    level: int
    section: Section
    chapter: Optional[Chapter] = None
    paragraph: Optional[Paragraph] = None


def iter_course_entries(course: CourseDocument) -> Iterator[CourseEntry]:
    """
    Yield every section, chapter and paragraph of a course in order.

    Chapters come before the section's flat paragraphs.
    """
    for s_idx, section in enumerate(course.sections, 1):
        s_num = str(s_idx)
        yield CourseEntry(OutlineType.SECTION, s_num, section.title, 1, section)

        for c_idx, chapter in enumerate(section.chapters, 1):
            c_num = f"{s_num}.{c_idx}"
            yield CourseEntry(OutlineType.CHAPTER, c_num, chapter.title, 2, section, chapter)

            for p_idx, paragraph in enumerate(chapter.paragraphs, 1):
                yield CourseEntry(
                    OutlineType.PARAGRAPH, f"{c_num}.{p_idx}", paragraph.title, 3,
                    section, chapter, paragraph
                )

        for p_idx, paragraph in enumerate(section.paragraphs, 1):
            yield CourseEntry(
                OutlineType.PARAGRAPH, f"{s_num}.{p_idx}", paragraph.title, 3,
                section, None, paragraph
            )


def heading_text(entry: CourseEntry, labels: ExportLabels, toc: bool = False) -> str:
    """
    Format the heading of an entry.

    Args:
        entry: Course entry
        labels: Label set ('Partie', 'Chapitre', ...)
        toc: Table-of-contents form ('1.1.1: Title' instead of '1.1.1 Title')

    Returns:
        Heading text such as 'Partie 1: Introduction'
    """
    if entry.type == OutlineType.PARAGRAPH:
        separator = ': ' if toc else ' '
        return f"{entry.number}{separator}{entry.title}"
    label = labels.type_label(entry.type.value)
    return f"{label} {entry.number}: {entry.title}"
