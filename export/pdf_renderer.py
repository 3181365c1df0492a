"""
Paginated PDF Renderer

Lays a CourseDocument out on fixed-size pages with PyMuPDF:

1. cover page (frame, optional image, title, category, author, date)
2. table of contents, numbered like the outline
3. body, each section starting on a fresh page
4. conclusion and learning objectives on a fresh page
5. footer pass stamping 'Page i sur N', short title and date

Layout is strictly sequential; the footer pass runs last because the
page count is only known once the body has been laid out.
"""
import logging
from datetime import datetime
from typing import Dict, Optional

import fitz  # PyMuPDF

from config.settings import ExportLabels, settings
from core.constants import BULLET_GAP, BULLET_RADIUS, COLORS, MIME_TYPES
from core.models import CourseDocument, OutlineType, Paragraph
from course.numbering import CourseEntry, heading_text, iter_course_entries
from export.artifacts import ExportArtifact, write_artifact
from export.layout import PageGeometry, RenderContext
from export.styles import STYLES, TextStyle
from utils.image_utils import load_image_for_pdf
from utils.text_utils import safe_filename, truncate

logger = logging.getLogger(__name__)

# Left indent of table-of-contents entries per level
TOC_INDENT = {1: 0, 2: 15, 3: 30}
# Space left after table-of-contents entries per level
TOC_GAP = {1: 10, 2: 8, 3: 5}


class PdfRenderer:
    """Renders a CourseDocument to a paginated PDF."""

    def __init__(
        self,
        labels: Optional[ExportLabels] = None,
        page_format: Optional[str] = None,
        margin: Optional[float] = None,
        date_format: Optional[str] = None,
        styles: Optional[Dict[str, TextStyle]] = None,
    ):
        self.labels = labels or settings.labels
        self.page_format = page_format or settings.page_format
        self.margin = settings.margin if margin is None else margin
        self.date_format = date_format or settings.date_format
        self.footer_offset = settings.footer_offset
        self.footer_title_length = settings.footer_title_length
        self.styles = styles or STYLES

    def render(
        self,
        course: CourseDocument,
        orientation: str = 'portrait',
        generated_at: Optional[datetime] = None
    ) -> Optional[ExportArtifact]:
        """
        Render a course to PDF bytes.

        Args:
            course: Course document (not modified)
            orientation: 'portrait'/'p' or 'landscape'/'l'
            generated_at: Date stamped on the document (default: now)

        Returns:
            ExportArtifact, or None if generation failed
        """
        try:
            ctx = self.build(course, orientation, generated_at)
            try:
                data = ctx.doc.tobytes(garbage=3, deflate=True)
                page_count = ctx.page_count
            finally:
                ctx.doc.close()
        except Exception:
            logger.exception("PDF generation failed for course '%s'", getattr(course, 'title', ''))
            return None

        return ExportArtifact(
            filename=safe_filename(course.title, 'pdf'),
            mime_type=MIME_TYPES['pdf'],
            data=data,
            page_count=page_count,
        )

    def build(
        self,
        course: CourseDocument,
        orientation: str = 'portrait',
        generated_at: Optional[datetime] = None
    ) -> RenderContext:
        """
        Lay the course out and return the render context.

        The caller owns ctx.doc and must close it.

        Raises:
            ValueError: If orientation or page format is invalid
        """
        geometry = PageGeometry.from_format(self.page_format, orientation, self.margin)
        date_text = (generated_at or datetime.now()).strftime(self.date_format)

        ctx = RenderContext(geometry)
        try:
            self._draw_cover(ctx, course, date_text)
            self._draw_toc(ctx, course)
            self._draw_body(ctx, course)
            self._draw_conclusion(ctx, course)
            self._stamp_footers(ctx, course, date_text)
        except Exception:
            ctx.doc.close()
            raise

        logger.info("Rendered course '%s' on %d pages", course.title, ctx.page_count)
        return ctx

    # -- Cover ----------------------------------------------------------------

    def _draw_cover(self, ctx: RenderContext, course: CourseDocument, date_text: str) -> None:
        geo = ctx.geometry
        page = ctx.new_page()
        center_x = geo.width / 2

        page.draw_rect(
            fitz.Rect(20, 20, geo.width - 20, geo.height - 20),
            color=_rgb(COLORS['primary']),
            width=10,
            radius=0.02,
        )

        image_bottom = None
        if course.image:
            image_bottom = self._draw_cover_image(ctx, course.image)

        style = self.styles['cover_title']
        title_top = image_bottom + 70 if image_bottom is not None else geo.height / 3

        # Leave room for rule, category, author and date below the title
        max_lines = max(1, int((geo.bottom - 110 - title_top) // style.line_height))
        lines = ctx.wrap(course.title, style, geo.width - 100) or [self.labels.untitled]
        if len(lines) > max_lines:
            lines = lines[:max_lines]
            lines[-1] = lines[-1].rstrip() + '...'

        for i, line in enumerate(lines):
            ctx.place_text(line, style, center_x, title_top + i * style.line_height, align='center')
        title_height = len(lines) * style.line_height

        rule_y = title_top + title_height + 15
        ctx.draw_rule(center_x - 120, center_x + 120, rule_y, COLORS['primary'], width=2)

        category_style = self.styles['cover_category']
        ctx.place_text(course.category, category_style, center_x, rule_y + 20, align='center')

        if course.author and course.author.name:
            author_text = self.labels.author_line.format(name=course.author.name)
            ctx.place_text(author_text, self.styles['cover_author'], center_x, rule_y + 55,
                           align='center')

        date_style = self.styles['cover_date']
        ctx.place_text(date_text, date_style, center_x, geo.bottom - date_style.font_size,
                       align='center')

    def _draw_cover_image(self, ctx: RenderContext, image) -> Optional[float]:
        """Embed the cover image; returns its bottom edge or None if skipped."""
        geo = ctx.geometry
        img_height = min(200.0, geo.height * 0.25)
        rect = fitz.Rect(50, 80, geo.width - 50, 80 + img_height)
        try:
            data, _ = load_image_for_pdf(image)
            ctx.page.insert_image(rect, stream=data, keep_proportion=True)
            ctx.page.draw_rect(rect, color=_rgb(COLORS['primary']), width=0.5)
        except Exception as e:
            logger.warning("Cover image not loaded, skipping it: %s", e)
            return None
        return rect.y1

    # -- Table of contents ----------------------------------------------------

    def _draw_toc(self, ctx: RenderContext, course: CourseDocument) -> None:
        geo = ctx.geometry
        ctx.new_page()

        title_style = self.styles['toc_title']
        ctx.draw_line(self.labels.toc_title, title_style, geo.width / 2, align='center')
        ctx.cursor.y = geo.margin + 40

        for entry in iter_course_entries(course):
            style = self.styles[f"toc_{entry.type.value}"]
            indent = TOC_INDENT[entry.level]
            max_width = geo.content_width - indent - 60
            lines = ctx.wrap(heading_text(entry, self.labels, toc=True), style, max_width)

            if ctx.cursor.y > geo.height - 2 * geo.margin:
                ctx.new_page()
            ctx.draw_block(lines, style, geo.margin + indent, atomic=True)
            ctx.advance(TOC_GAP[entry.level])

    # -- Body -----------------------------------------------------------------

    def _draw_body(self, ctx: RenderContext, course: CourseDocument) -> None:
        geo = ctx.geometry
        for entry in iter_course_entries(course):
            if entry.type == OutlineType.SECTION:
                ctx.new_page()
                style = self.styles['section']
                ctx.draw_paragraph(heading_text(entry, self.labels), style, geo.margin,
                                   geo.content_width)
                ctx.advance(20)
                ctx.ensure_space(2)
                ctx.draw_rule(geo.margin, geo.width - geo.margin, ctx.cursor.y,
                              style.color, width=2)
                ctx.advance(30)
            elif entry.type == OutlineType.CHAPTER:
                ctx.draw_paragraph(heading_text(entry, self.labels), self.styles['chapter'],
                                   geo.margin, geo.content_width, atomic=True)
                ctx.advance(15)
            else:
                self._draw_paragraph(ctx, entry)

    def _draw_paragraph(self, ctx: RenderContext, entry: CourseEntry) -> None:
        geo = ctx.geometry
        paragraph: Paragraph = entry.paragraph

        ctx.draw_paragraph(heading_text(entry, self.labels), self.styles['paragraph'],
                           geo.margin, geo.content_width, atomic=True)
        ctx.advance(10)

        if paragraph.content:
            ctx.draw_paragraph(paragraph.content, self.styles['body'], geo.margin,
                               geo.content_width)
            ctx.advance(15)

        if paragraph.notions:
            ctx.draw_line(self.labels.key_notions, self.styles['notion_label'], geo.margin)
            ctx.advance(10)
            self._draw_bullets(ctx, paragraph.notions, self.styles['notion'], gap=10)

        if paragraph.exercise is not None and paragraph.exercise.questions:
            ctx.draw_line(self.labels.exercise_heading, self.styles['notion_label'], geo.margin)
            ctx.advance(10)
            questions = [f"{i}. {q.text}" for i, q in enumerate(paragraph.exercise.questions, 1)]
            self._draw_bullets(ctx, questions, self.styles['notion'], gap=10, dot=False)

        ctx.advance(10)

    def _draw_bullets(self, ctx: RenderContext, items, style: TextStyle, gap: float,
                      dot: bool = True) -> None:
        geo = ctx.geometry
        x = geo.margin + 10
        text_x = x + BULLET_GAP if dot else x
        max_width = geo.content_width - 40 - (text_x - x)
        for item in items:
            lines = ctx.wrap(item, style, max_width)
            drawn = ctx.draw_block(lines, style, text_x, atomic=True)
            if dot and drawn:
                # Dot sits at mid x-height of the item's first line
                first = ctx.drawn[-drawn]
                ctx.draw_dot(first.page_index, x + BULLET_RADIUS,
                             first.top + style.font_size * 0.65, BULLET_RADIUS, style.color)
            ctx.advance(gap)

    # -- Conclusion -----------------------------------------------------------

    def _draw_conclusion(self, ctx: RenderContext, course: CourseDocument) -> None:
        geo = ctx.geometry
        top = geo.margin * 2
        ctx.new_page(y=top)
        ctx.draw_rule(geo.margin, geo.width - geo.margin, top - 10, COLORS['primary'])

        heading_style = self.styles['conclusion_heading']
        ctx.draw_line(self.labels.conclusion, heading_style, geo.margin)
        underline_y = top + heading_style.font_size + 6
        ctx.draw_rule(geo.margin, geo.margin + ctx.measure(self.labels.conclusion, heading_style),
                      underline_y, COLORS['primary'])
        ctx.cursor.y = top + 60

        conclusion = course.conclusion or self.labels.conclusion_fallback
        ctx.draw_paragraph(conclusion, self.styles['conclusion_body'], geo.margin,
                           geo.content_width)
        ctx.advance(25)

        if course.learning_objectives:
            ctx.draw_line(self.labels.learning_objectives, self.styles['objectives_heading'],
                          geo.margin)
            ctx.advance(10)
            self._draw_bullets(ctx, course.learning_objectives, self.styles['objective'], gap=5)

    # -- Footers --------------------------------------------------------------

    def _stamp_footers(self, ctx: RenderContext, course: CourseDocument, date_text: str) -> None:
        geo = ctx.geometry
        style = self.styles['footer']
        total = ctx.page_count
        short_title = truncate(course.title, self.footer_title_length, '...') or self.labels.untitled
        top = geo.height - self.footer_offset - style.font_size

        for index in range(total):
            ctx.cursor.page_index = index
            page_text = self.labels.page_footer.format(page=index + 1, total=total)
            ctx.place_text(page_text, style, geo.width - geo.margin, top, align='right')
            ctx.place_text(short_title, style, geo.margin, top)
            ctx.place_text(date_text, style, geo.width / 2, top, align='center')


def _rgb(color):
    return tuple(c / 255 for c in color)


def render_course_pdf(
    course: CourseDocument,
    orientation: str = 'portrait',
    generated_at: Optional[datetime] = None
) -> Optional[ExportArtifact]:
    """Render a course to PDF with default settings. None on failure."""
    return PdfRenderer().render(course, orientation, generated_at)


def download_course_pdf(
    course: CourseDocument,
    orientation: str = 'portrait',
    output_dir: Optional[str] = None
) -> bool:
    """
    Render a course and write '<title>.pdf' to output_dir.

    Returns:
        True on success, False if rendering or writing failed
    """
    artifact = render_course_pdf(course, orientation)
    if artifact is None:
        return False
    return write_artifact(artifact, output_dir or settings.output_dir)
