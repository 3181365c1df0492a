"""
Pytest configuration and global fixtures.
"""
import base64
import sys
from io import BytesIO
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.models import Author, Chapter, CourseDocument, Exercise, Paragraph, Question, Section


def text(value):
    return {'type': 'text', 'text': value}


def para(value):
    """Editor's built-in text paragraph."""
    return {'type': 'paragraph', 'content': [text(value)]}


def node(node_type, *content, **attrs):
    result = {'type': node_type, 'content': list(content)}
    if attrs:
        result['attrs'] = attrs
    return result


@pytest.fixture
def nodes():
    """Builders for editor JSON nodes."""
    return SimpleNamespace(text=text, para=para, node=node)


@pytest.fixture
def editor_doc():
    """
    Course heading followed by two sections: the first with one chapter
    holding one paragraph, the second with one paragraph and no chapter.
    """
    return {
        'type': 'doc',
        'content': [
            node('heading', text('Introduction à Python'), level=1),
            node(
                'section',
                node(
                    'chapitre',
                    node(
                        'paragraphe',
                        para('Variables et types'),
                        para('Une variable associe un nom à une valeur.'),
                        node('notion', para('Typage dynamique'), title='Typage dynamique'),
                    ),
                    title='Les bases',
                ),
                title='Premiers pas',
            ),
            node(
                'section',
                node('paragraphe', para('Boucles'), para('for et while répètent un bloc.')),
                title='Contrôle de flux',
            ),
        ],
    }


@pytest.fixture
def nested_record():
    """Course record whose paragraph holds a notion and an exercise with bodies."""
    return {
        'title': 'Algorithmique',
        'content': {
            'type': 'doc',
            'content': [
                node(
                    'section',
                    node(
                        'paragraphe',
                        para('Intro du paragraphe.'),
                        node('notion', para('Récursivité'),
                             para('Une fonction qui s appelle elle-même.')),
                        node('exercice', para('Exo'),
                             para('Écrire la factorielle de n.')),
                    ),
                    title='Fonctions',
                ),
            ],
        },
    }


@pytest.fixture
def course_meta():
    return {
        'id': 42,
        'title': 'Introduction à Python',
        'category': 'Programmation',
        'author': {'firstName': 'Ada', 'lastName': 'Lovelace'},
        'description': 'Un cours pour débuter.',
        'views': 10,
        'likes': '3',
    }


@pytest.fixture
def sample_course():
    """Small course document with chapters, flat paragraphs and objectives."""
    return CourseDocument(
        id=1,
        title='Mon cours de test',
        category='Formation',
        author=Author(name='Jane Doe', designation='Enseignant'),
        introduction='Introduction du cours.',
        conclusion='',
        learning_objectives=['Comprendre les bases', 'Écrire un programme'],
        sections=[
            Section(
                title='Premiers pas',
                chapters=[
                    Chapter(
                        title='Les bases',
                        paragraphs=[
                            Paragraph(
                                title='Variables',
                                content='Une variable associe un nom à une valeur.',
                                notions=['Typage dynamique'],
                            ),
                            Paragraph(
                                title='Exercice 1',
                                content='',
                                exercise=Exercise(questions=[Question(text='Que vaut 1 + 1 ?')]),
                            ),
                        ],
                    ),
                ],
            ),
            Section(
                title='Contrôle de flux',
                paragraphs=[Paragraph(title='Boucles', content='for et while.')],
            ),
        ],
    )


@pytest.fixture
def sample_base64_image():
    """Provide base64 encoded sample image."""
    from PIL import Image

    img = Image.new('RGB', (100, 60), color='blue')
    buf = BytesIO()
    img.save(buf, format='PNG')
    return base64.b64encode(buf.getvalue()).decode()


@pytest.fixture
def sample_image_path(tmp_path):
    """Create a sample test image."""
    from PIL import Image

    img_path = tmp_path / "cover.png"
    Image.new('RGB', (800, 600), color='white').save(img_path)
    return str(img_path)
