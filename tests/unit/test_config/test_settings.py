"""
Unit tests for config.settings module.
"""
from config.settings import ExportLabels, Settings


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv('COURSE_EXPORT_MARGIN', raising=False)

        settings = Settings(_env_file=None)

        assert settings.page_format == 'a4'
        assert settings.margin == 40.0
        assert settings.default_orientation == 'portrait'
        assert settings.max_title_length == 100
        assert settings.labels.section == 'Partie'

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv('COURSE_EXPORT_MARGIN', '25')
        monkeypatch.setenv('COURSE_EXPORT_PAGE_FORMAT', 'letter')

        settings = Settings(_env_file=None)

        assert settings.margin == 25.0
        assert settings.page_format == 'letter'

    def test_nested_label_override(self, monkeypatch):
        monkeypatch.setenv('COURSE_EXPORT_LABELS__SECTION', 'Part')

        settings = Settings(_env_file=None)

        assert settings.labels.section == 'Part'
        assert settings.labels.chapter == 'Chapitre'


class TestExportLabels:
    """Tests for ExportLabels model."""

    def test_type_label(self):
        labels = ExportLabels()

        assert labels.type_label('section') == 'Partie'
        assert labels.type_label('chapter') == 'Chapitre'
        assert labels.type_label('unknown') == ''

    def test_type_labels_follow_overrides(self):
        assert ExportLabels(notion='Concept').type_labels()['notion'] == 'Concept'
