"""
Core domain models for course structuring and export.

These are pure data structures without business logic: the editor's node
tree as read by the outline extractor, the outline itself, and the canonical
course document consumed by the exporters.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from config.settings import ExportLabels, settings
from core.constants import NODE_TYPE_MAP


class NodeKind(Enum):
    """Closed set of editor node kinds; anything unknown is OTHER."""
    HEADING = "heading"
    SECTION = "section"
    CHAPTER = "chapter"
    PARAGRAPH = "paragraph"
    NOTION = "notion"
    EXERCISE = "exercise"
    TEXT = "text"
    HARD_BREAK = "hardBreak"
    OTHER = "other"


class OutlineType(Enum):
    """Outline item types, ordered by their fixed level."""
    COURSE = "course"
    SECTION = "section"
    CHAPTER = "chapter"
    PARAGRAPH = "paragraph"
    NOTION = "notion"
    EXERCISE = "exercise"


_KIND_BY_TYPE = {
    'heading': NodeKind.HEADING,
    'text': NodeKind.TEXT,
    'hardBreak': NodeKind.HARD_BREAK,
}
for _node_type, (_outline_type, _level) in NODE_TYPE_MAP.items():
    if _node_type != 'heading':
        _KIND_BY_TYPE[_node_type] = NodeKind(_outline_type)


@dataclass
class DocumentNode:
    """A node of the editor document tree. Read-only input."""
    type: str
    attrs: Dict[str, Any] = field(default_factory=dict)
    content: List['DocumentNode'] = field(default_factory=list)
    text: str = ""

    @property
    def kind(self) -> NodeKind:
        return _KIND_BY_TYPE.get(self.type, NodeKind.OTHER)

    @classmethod
    def from_dict(cls, data: Any) -> Optional['DocumentNode']:
        """
        Decode a raw editor node, tolerating any malformed field.

        Args:
            data: Raw node as produced by the editor's JSON export

        Returns:
            DocumentNode, or None when data is not a mapping
        """
        if isinstance(data, DocumentNode):
            return data
        if not isinstance(data, dict):
            return None

        node_type = data.get('type')
        attrs = data.get('attrs')
        raw_content = data.get('content')
        text = data.get('text')

        content = []
        if isinstance(raw_content, list):
            for child in raw_content:
                node = cls.from_dict(child)
                if node is not None:
                    content.append(node)

        return cls(
            type=node_type if isinstance(node_type, str) else "",
            attrs=dict(attrs) if isinstance(attrs, dict) else {},
            content=content,
            text=text if isinstance(text, str) else "",
        )

    def to_dict(self) -> Dict:
        """Convert back to the editor's JSON shape."""
        result: Dict[str, Any] = {'type': self.type}
        if self.attrs:
            result['attrs'] = dict(self.attrs)
        if self.content:
            result['content'] = [child.to_dict() for child in self.content]
        if self.text:
            result['text'] = self.text
        return result


@dataclass
class NodeConfig:
    """Classification of a hierarchy node."""
    outline_type: OutlineType
    level: int


@dataclass
class OutlineItem:
    """One numbered, titled entry of the extracted outline."""
    id: str
    title: str
    type: OutlineType
    level: int
    number: str
    children: List['OutlineItem'] = field(default_factory=list)
    content: List[DocumentNode] = field(default_factory=list)

    def display_title(self, labels: Optional[ExportLabels] = None) -> str:
        """Title prefixed with its type label and number, e.g. 'Partie 1: Intro'."""
        labels = labels or settings.labels
        label = labels.type_label(self.type.value)
        prefix = f"{label} {self.number}".strip()
        if self.title and self.title != prefix:
            return f"{prefix}: {self.title}"
        return prefix

    def to_dict(self) -> Dict:
        """Convert to dictionary format for JSON output."""
        return {
            'id': self.id,
            'title': self.title,
            'type': self.type.value,
            'level': self.level,
            'number': self.number,
            'children': [child.to_dict() for child in self.children],
        }


@dataclass
class Question:
    """An exercise question."""
    text: str
    answer: str = ""
    points: float = 0.0

    def to_dict(self) -> Dict:
        return {'text': self.text, 'answer': self.answer, 'points': self.points}


@dataclass
class Exercise:
    """Exercise payload of a paragraph. Questions are filled by a later pass."""
    questions: List[Question] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {'questions': [q.to_dict() for q in self.questions]}


@dataclass
class Paragraph:
    """A paragraph with its text content and key notions."""
    title: str
    content: str = ""
    notions: List[str] = field(default_factory=list)
    exercise: Optional[Exercise] = None

    def to_dict(self) -> Dict:
        result = {
            'title': self.title,
            'content': self.content,
            'notions': list(self.notions),
        }
        if self.exercise is not None:
            result['exercise'] = self.exercise.to_dict()
        return result


@dataclass
class Chapter:
    """A chapter of a section."""
    title: str
    paragraphs: List[Paragraph] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'title': self.title,
            'paragraphs': [p.to_dict() for p in self.paragraphs],
        }


@dataclass
class Section:
    """A course section holding chapters and/or flat paragraphs."""
    title: str
    chapters: List[Chapter] = field(default_factory=list)
    paragraphs: List[Paragraph] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'title': self.title,
            'chapters': [c.to_dict() for c in self.chapters],
            'paragraphs': [p.to_dict() for p in self.paragraphs],
        }


@dataclass
class Author:
    """Course author information."""
    name: str
    image: Optional[str] = None
    designation: str = ""

    def to_dict(self) -> Dict:
        return {
            'name': self.name,
            'image': self.image,
            'designation': self.designation,
        }


@dataclass
class CourseDocument:
    """Canonical, renderer-agnostic course document."""
    id: Any
    title: str
    category: str
    author: Author
    image: Optional[str] = None
    introduction: str = ""
    conclusion: str = ""
    learning_objectives: List[str] = field(default_factory=list)
    sections: List[Section] = field(default_factory=list)
    views: int = 0
    likes: int = 0
    downloads: int = 0

    def to_dict(self) -> Dict:
        """Convert to dictionary format for JSON output."""
        return {
            'id': self.id,
            'title': self.title,
            'category': self.category,
            'image': self.image,
            'views': self.views,
            'likes': self.likes,
            'downloads': self.downloads,
            'author': self.author.to_dict(),
            'introduction': self.introduction,
            'conclusion': self.conclusion,
            'learningObjectives': list(self.learning_objectives),
            'sections': [s.to_dict() for s in self.sections],
        }
