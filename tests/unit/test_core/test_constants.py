"""
Unit tests for core.constants module.
"""
from core.constants import (
    ALLOWED_CHILD_TYPES,
    DEFAULT_COURSE_METADATA,
    MAX_OUTLINE_LEVEL,
    NODE_TYPE_MAP,
    ORIENTATIONS,
    OUTLINE_LEVELS,
    PAGE_FORMATS,
)


class TestConstants:
    """Tests for constant tables."""

    def test_node_levels_match_outline_levels(self):
        """Test every node type uses its outline type's fixed level."""
        for node_type, (outline_type, level) in NODE_TYPE_MAP.items():
            assert OUTLINE_LEVELS[outline_type] == level, node_type

    def test_max_level(self):
        assert MAX_OUTLINE_LEVEL == max(OUTLINE_LEVELS.values())

    def test_allowed_children_are_deeper(self):
        for parent, children in ALLOWED_CHILD_TYPES.items():
            for child in children:
                assert OUTLINE_LEVELS[child] > OUTLINE_LEVELS[parent]

    def test_builtin_paragraph_not_mapped(self):
        assert 'paragraph' not in NODE_TYPE_MAP

    def test_portrait_formats(self):
        for width, height in PAGE_FORMATS.values():
            assert width < height

    def test_orientations(self):
        assert set(ORIENTATIONS.values()) == {'portrait', 'landscape'}

    def test_default_metadata(self):
        assert DEFAULT_COURSE_METADATA['title'] == 'Titre non disponible'
        assert DEFAULT_COURSE_METADATA['author_name'] == 'Auteur inconnu'
