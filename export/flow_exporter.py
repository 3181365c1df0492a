"""
Flow-Text Exporter

Serialises a CourseDocument to a single Word-compatible HTML document
(no pagination). Traversal order, numbering and the conclusion fallback
are shared with the PDF renderer.
"""
import logging
from html import escape
from typing import List, Optional

from config.settings import ExportLabels, settings
from core.constants import MIME_TYPES
from core.models import CourseDocument, OutlineType, Paragraph
from course.numbering import heading_text, iter_course_entries
from export.artifacts import ExportArtifact, write_artifact
from utils.text_utils import safe_filename

logger = logging.getLogger(__name__)

_HEADING_TAGS = {
    OutlineType.SECTION: 'h2',
    OutlineType.CHAPTER: 'h3',
    OutlineType.PARAGRAPH: 'h4',
}

_STYLE = """
    body { font-family: 'Arial', sans-serif; }
    h1 { color: #5B21B6; text-align: center; }
    h2 { color: #7C3AED; border-bottom: 2px solid #DDD; padding-bottom: 5px; margin-top: 30px; }
    h3 { color: #10B981; margin-top: 20px; }
    h4 { color: #2563EB; }
    p { line-height: 1.6; margin-bottom: 10px; text-align: justify; }
    .meta { font-style: italic; color: #666; margin-bottom: 30px; border-bottom: 1px solid #EEE; padding-bottom: 10px; }
    .notion { background-color: #F3F4F6; padding: 10px; border-left: 4px solid #DBEAFE; margin: 10px 0; }
    .exercise { padding: 10px; border-left: 4px solid #C7D2FE; margin: 10px 0; }
    .conclusion { margin-top: 50px; border-top: 2px solid #5B21B6; padding-top: 20px; }
"""


def export_flow(course: CourseDocument, labels: Optional[ExportLabels] = None) -> str:
    """
    Serialise a course to Word-compatible HTML.

    Args:
        course: Course document (not modified)
        labels: Label set (default from settings)

    Returns:
        HTML markup string
    """
    labels = labels or settings.labels
    parts: List[str] = [
        "<html xmlns:o='urn:schemas-microsoft-com:office:office' "
        "xmlns:w='urn:schemas-microsoft-com:office:word' "
        "xmlns='http://www.w3.org/TR/REC-html40'>",
        "<head>",
        "<meta charset='utf-8'>",
        f"<title>{escape(course.title)}</title>",
        f"<style>{_STYLE}</style>",
        "</head>",
        "<body>",
        f"<h1>{escape(course.title)}</h1>",
        "<div class=\"meta\">",
        f"<p>{escape(labels.category_meta.format(category=course.category))}</p>",
        f"<p>{escape(labels.author_meta.format(name=course.author.name))}</p>",
        "</div>",
    ]

    if course.introduction:
        parts.append(
            f"<p><strong>{escape(labels.introduction)}</strong> {escape(course.introduction)}</p>"
        )

    for entry in iter_course_entries(course):
        tag = _HEADING_TAGS[entry.type]
        parts.append(f"<{tag}>{escape(heading_text(entry, labels))}</{tag}>")
        if entry.paragraph is not None:
            parts.extend(_paragraph_markup(entry.paragraph, labels))

    conclusion = course.conclusion or labels.conclusion_fallback
    parts.append("<div class=\"conclusion\">")
    parts.append(f"<h2>{escape(labels.conclusion)}</h2>")
    parts.extend(_text_markup(conclusion))
    if course.learning_objectives:
        parts.append(f"<h4>{escape(labels.learning_objectives)}</h4>")
        parts.append("<ul>")
        parts.extend(f"<li>{escape(o)}</li>" for o in course.learning_objectives)
        parts.append("</ul>")
    parts.append("</div>")

    parts.append("</body>")
    parts.append("</html>")
    return "\n".join(parts)


def _paragraph_markup(paragraph: Paragraph, labels: ExportLabels) -> List[str]:
    parts = _text_markup(paragraph.content)

    if paragraph.notions:
        notions = ', '.join(escape(n) for n in paragraph.notions)
        parts.append(
            f"<div class=\"notion\"><strong>{escape(labels.key_notions)}</strong> {notions}</div>"
        )

    if paragraph.exercise is not None and paragraph.exercise.questions:
        parts.append(f"<div class=\"exercise\"><strong>{escape(labels.exercise_heading)}</strong>")
        parts.append("<ol>")
        parts.extend(f"<li>{escape(q.text)}</li>" for q in paragraph.exercise.questions)
        parts.append("</ol>")
        parts.append("</div>")

    return parts


def _text_markup(text: str) -> List[str]:
    """One <p> per non-empty line."""
    return [f"<p>{escape(line.strip())}</p>" for line in text.splitlines() if line.strip()]


def export_flow_artifact(course: CourseDocument) -> Optional[ExportArtifact]:
    """Build the .doc artifact of a course. None on failure."""
    try:
        markup = export_flow(course)
    except Exception:
        logger.exception("Word export failed for course '%s'", getattr(course, 'title', ''))
        return None

    return ExportArtifact(
        filename=safe_filename(course.title, 'doc'),
        mime_type=MIME_TYPES['doc'],
        data=markup.encode('utf-8'),
    )


def download_course_doc(course: CourseDocument, output_dir: Optional[str] = None) -> bool:
    """
    Export a course and write '<title>.doc' to output_dir.

    Returns:
        True on success, False otherwise
    """
    artifact = export_flow_artifact(course)
    if artifact is None:
        return False
    return write_artifact(artifact, output_dir or settings.output_dir)
