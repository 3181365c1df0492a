"""
Unit tests for core.models module.
"""
import pytest
from config.settings import ExportLabels
from core.models import (
    Author,
    CourseDocument,
    DocumentNode,
    Exercise,
    NodeKind,
    OutlineItem,
    OutlineType,
    Paragraph,
    Section,
)


class TestDocumentNode:
    """Tests for DocumentNode decoding."""

    def test_from_dict_nested(self):
        """Test decoding a node with nested content."""
        node = DocumentNode.from_dict({
            'type': 'section',
            'attrs': {'title': 'Intro'},
            'content': [{'type': 'paragraph', 'content': [{'type': 'text', 'text': 'Hello'}]}],
        })

        assert node.type == 'section'
        assert node.attrs == {'title': 'Intro'}
        assert node.content[0].type == 'paragraph'
        assert node.content[0].content[0].text == 'Hello'

    def test_from_dict_non_mapping(self):
        """Test non-dict input is rejected without raising."""
        assert DocumentNode.from_dict(None) is None
        assert DocumentNode.from_dict("section") is None
        assert DocumentNode.from_dict(42) is None

    def test_from_dict_malformed_fields(self):
        """Test malformed fields fall back to empty values."""
        node = DocumentNode.from_dict({
            'type': 7,
            'attrs': 'nope',
            'content': 'not a list',
            'text': ['x'],
        })

        assert node.type == ""
        assert node.attrs == {}
        assert node.content == []
        assert node.text == ""
        assert node.kind == NodeKind.OTHER

    def test_from_dict_drops_invalid_children(self):
        """Test invalid children are skipped."""
        node = DocumentNode.from_dict({'type': 'doc', 'content': [None, 1, {'type': 'text', 'text': 'a'}]})

        assert len(node.content) == 1
        assert node.content[0].kind == NodeKind.TEXT

    def test_kind_mapping(self):
        """Test editor types map to node kinds."""
        assert DocumentNode(type='heading').kind == NodeKind.HEADING
        assert DocumentNode(type='section').kind == NodeKind.SECTION
        assert DocumentNode(type='chapitre').kind == NodeKind.CHAPTER
        assert DocumentNode(type='paragraphe').kind == NodeKind.PARAGRAPH
        assert DocumentNode(type='notion').kind == NodeKind.NOTION
        assert DocumentNode(type='exercice').kind == NodeKind.EXERCISE
        assert DocumentNode(type='hardBreak').kind == NodeKind.HARD_BREAK

    def test_builtin_paragraph_is_not_domain_node(self):
        """Test the editor's text paragraph is not a course paragraph."""
        assert DocumentNode(type='paragraph').kind == NodeKind.OTHER

    def test_to_dict_round_shape(self):
        """Test converting back to editor JSON."""
        data = {'type': 'notion', 'attrs': {'id': 'n1'}, 'content': [{'type': 'text', 'text': 'x'}]}

        assert DocumentNode.from_dict(data).to_dict() == data


class TestOutlineItem:
    """Tests for OutlineItem dataclass."""

    def test_default_children_independent(self):
        """Test children default to independent lists."""
        a = OutlineItem(id='a', title='A', type=OutlineType.SECTION, level=1, number='1')
        b = OutlineItem(id='b', title='B', type=OutlineType.SECTION, level=1, number='2')

        a.children.append(b)

        assert len(b.children) == 0

    def test_display_title(self):
        """Test type label and number prefix."""
        item = OutlineItem(id='s', title='Intro', type=OutlineType.SECTION, level=1, number='1')

        assert item.display_title() == 'Partie 1: Intro'

    def test_display_title_fallback_title(self):
        """Test fallback titles are not repeated."""
        item = OutlineItem(id='c', title='Chapitre 1.2', type=OutlineType.CHAPTER, level=2, number='1.2')

        assert item.display_title() == 'Chapitre 1.2'

    def test_display_title_custom_labels(self):
        """Test labels are injectable."""
        labels = ExportLabels(section='Part')
        item = OutlineItem(id='s', title='Intro', type=OutlineType.SECTION, level=1, number='3')

        assert item.display_title(labels) == 'Part 3: Intro'

    def test_to_dict(self):
        """Test converting to dictionary."""
        child = OutlineItem(id='c', title='C', type=OutlineType.CHAPTER, level=2, number='1.1')
        item = OutlineItem(id='s', title='S', type=OutlineType.SECTION, level=1, number='1',
                           children=[child])

        result = item.to_dict()

        assert result['type'] == 'section'
        assert result['children'][0]['number'] == '1.1'
        assert 'content' not in result


class TestCourseDocument:
    """Tests for the course document model."""

    def test_defaults(self):
        """Test optional fields have defaults."""
        course = CourseDocument(id=1, title='T', category='C', author=Author(name='A'))

        assert course.sections == []
        assert course.learning_objectives == []
        assert course.views == 0
        assert course.image is None

    def test_to_dict(self):
        """Test dictionary conversion uses API field names."""
        course = CourseDocument(
            id=1, title='T', category='C', author=Author(name='A'),
            learning_objectives=['x'],
            sections=[Section(title='S', paragraphs=[
                Paragraph(title='P', exercise=Exercise()),
            ])],
        )

        result = course.to_dict()

        assert result['learningObjectives'] == ['x']
        assert result['author']['name'] == 'A'
        assert result['sections'][0]['paragraphs'][0]['exercise'] == {'questions': []}

    def test_paragraph_without_exercise(self):
        """Test exercise key is omitted when absent."""
        assert 'exercise' not in Paragraph(title='P').to_dict()

    def test_structural_equality(self):
        """Test dataclass equality is structural."""
        a = Section(title='S', paragraphs=[Paragraph(title='P', notions=['n'])])
        b = Section(title='S', paragraphs=[Paragraph(title='P', notions=['n'])])

        assert a == b
