"""
Configuration management using Pydantic Settings.

Environment variables (prefix COURSE_EXPORT_):
- COURSE_EXPORT_PAGE_FORMAT: Page format name (a4, letter, a5)
- COURSE_EXPORT_MARGIN: Page margin in points
- COURSE_EXPORT_DEFAULT_ORIENTATION: portrait or landscape
- COURSE_EXPORT_DATE_FORMAT: strftime format of the generation date
- COURSE_EXPORT_OUTPUT_DIR: Directory where artifacts are written
- COURSE_EXPORT_LOG_LEVEL: Logging level used by the CLI
- COURSE_EXPORT_LABELS__<NAME>: Override one of the rendered labels
"""
from typing import Dict

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExportLabels(BaseModel):
    """Locale-specific labels used in numbering and rendered documents."""

    course: str = "Cours"
    section: str = "Partie"
    chapter: str = "Chapitre"
    paragraph: str = "Paragraphe"
    notion: str = "Notion"
    exercise: str = "Exercice"

    toc_title: str = "TABLE DES MATIÈRES"
    key_notions: str = "Notions clés :"
    exercise_heading: str = "Exercice :"
    introduction: str = "Introduction :"
    conclusion: str = "Conclusion"
    conclusion_fallback: str = "Merci d'avoir suivi ce cours."
    learning_objectives: str = "Objectifs d'apprentissage :"
    author_line: str = "Par {name}"
    category_meta: str = "Catégorie : {category}"
    author_meta: str = "Auteur : {name}"
    page_footer: str = "Page {page} sur {total}"
    untitled: str = "Sans titre"

    def type_label(self, outline_type: str) -> str:
        """Label of an outline type ('section' -> 'Partie')."""
        return self.type_labels().get(outline_type, "")

    def type_labels(self) -> Dict[str, str]:
        return {
            'course': self.course,
            'section': self.section,
            'chapter': self.chapter,
            'paragraph': self.paragraph,
            'notion': self.notion,
            'exercise': self.exercise,
        }


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="COURSE_EXPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Page layout
    page_format: str = Field(default="a4")
    margin: float = Field(default=40.0)
    footer_offset: float = Field(default=15.0)
    default_orientation: str = Field(default="portrait")

    # Text limits
    max_title_length: int = Field(default=100)
    footer_title_length: int = Field(default=30)

    # Output
    date_format: str = Field(default="%d/%m/%Y")
    output_dir: str = Field(default=".")
    log_level: str = Field(default="INFO")

    labels: ExportLabels = Field(default_factory=ExportLabels)


# Global settings instance
settings = Settings()
