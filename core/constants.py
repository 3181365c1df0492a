"""
Constants and configuration values for course structuring and export.
"""

# Editor node type -> (outline type, level). Only rank-1 headings count.
NODE_TYPE_MAP = {
    'heading': ('course', 0),
    'section': ('section', 1),
    'chapitre': ('chapter', 2),
    'chapter': ('chapter', 2),
    'paragraphe': ('paragraph', 3),
    'notion': ('notion', 4),
    'exercice': ('exercise', 5),
    'exercise': ('exercise', 5),
}

# Heading rank treated as the course title
COURSE_HEADING_RANK = 1

# Fixed level of each outline type
OUTLINE_LEVELS = {
    'course': 0,
    'section': 1,
    'chapter': 2,
    'paragraph': 3,
    'notion': 4,
    'exercise': 5,
}

MAX_OUTLINE_LEVEL = 5

# Which outline types may be nested under a given type
ALLOWED_CHILD_TYPES = {
    'course': ['section'],
    'section': ['chapter'],
    'chapter': ['paragraph'],
    'paragraph': ['notion', 'exercise'],
    'notion': [],
    'exercise': [],
}

# Fallback values for missing course metadata
DEFAULT_COURSE_METADATA = {
    'id': 0,
    'title': 'Titre non disponible',
    'category': 'Formation',
    'image': None,
    'author_name': 'Auteur inconnu',
    'author_image': None,
    'author_designation': 'Enseignant',
    'introduction': '',
    'conclusion': '',
}

# Engagement counters copied from the source record
COURSE_COUNTERS = ('views', 'likes', 'downloads')

# Page formats in points (width, height) for portrait orientation
PAGE_FORMATS = {
    'a4': (595.28, 841.89),
    'letter': (612.0, 792.0),
    'a5': (419.53, 595.28),
}

ORIENTATIONS = {
    'portrait': 'portrait',
    'p': 'portrait',
    'landscape': 'landscape',
    'l': 'landscape',
}

# Font sizes in points
FONT_SIZES = {
    'title': 22,
    'subtitle': 20,
    'section': 18,
    'chapter': 16,
    'paragraph': 14,
    'normal': 12,
    'small': 10,
}

# RGB colours (0-255)
COLORS = {
    'primary': (100, 50, 200),
    'section': (100, 50, 200),
    'chapter': (0, 130, 80),
    'paragraph': (230, 180, 0),
    'notion': (50, 50, 150),
    'dark': (50, 50, 50),
    'light': (150, 150, 150),
    'black': (0, 0, 0),
}

# Line-height multipliers: deeper headings use smaller multipliers
BODY_LINE_SPACING = 1.3
HEADING_LINE_SPACING = {
    'section': 1.6,
    'chapter': 1.5,
    'paragraph': 1.4,
}
TOC_LINE_SPACING = {
    'section': 1.8,
    'chapter': 1.6,
    'paragraph': 1.4,
}

# Bullet dot radius and its gap to the item text, in points
BULLET_RADIUS = 1.8
BULLET_GAP = 8

# Base-14 font names understood by PyMuPDF
FONT_REGULAR = 'helv'
FONT_BOLD = 'hebo'

MIME_TYPES = {
    'pdf': 'application/pdf',
    'doc': 'application/msword',
}
