"""
Unit tests for outline.classifier module.
"""
import pytest
from core.models import DocumentNode, OutlineType
from outline.classifier import classify_node, is_hierarchy_node


class TestClassifyNode:
    """Tests for classify_node function."""

    @pytest.mark.parametrize('node_type,outline_type,level', [
        ('section', OutlineType.SECTION, 1),
        ('chapitre', OutlineType.CHAPTER, 2),
        ('chapter', OutlineType.CHAPTER, 2),
        ('paragraphe', OutlineType.PARAGRAPH, 3),
        ('notion', OutlineType.NOTION, 4),
        ('exercice', OutlineType.EXERCISE, 5),
        ('exercise', OutlineType.EXERCISE, 5),
    ])
    def test_domain_nodes(self, node_type, outline_type, level):
        """Test each domain node maps to its fixed type and level."""
        config = classify_node(DocumentNode(type=node_type))

        assert config.outline_type == outline_type
        assert config.level == level

    def test_rank_one_heading(self):
        """Test rank-1 heading is the course title."""
        config = classify_node(DocumentNode(type='heading', attrs={'level': 1}))

        assert config.outline_type == OutlineType.COURSE
        assert config.level == 0

    @pytest.mark.parametrize('attrs', [{'level': 2}, {'level': 6}, {}, {'level': 'x'}, {'level': None}])
    def test_other_headings_transparent(self, attrs):
        """Test headings other than rank 1 are ignored."""
        assert classify_node(DocumentNode(type='heading', attrs=attrs)) is None

    @pytest.mark.parametrize('node_type', ['paragraph', 'text', 'hardBreak', 'bulletList', '', 'Section'])
    def test_transparent_nodes(self, node_type):
        """Test inline, built-in and unknown nodes are transparent."""
        assert classify_node(DocumentNode(type=node_type)) is None


class TestIsHierarchyNode:
    """Tests for is_hierarchy_node function."""

    def test_true_for_section(self):
        assert is_hierarchy_node(DocumentNode(type='section'))

    def test_false_for_text(self):
        assert not is_hierarchy_node(DocumentNode(type='text', text='x'))
