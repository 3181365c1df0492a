"""Utilities package - Helper functions for text and image processing."""

from .image_utils import (
    read_image_source,
    decode_base64,
    load_image_for_pdf,
)

from .text_utils import (
    extract_first_text,
    extract_plain_text,
    truncate,
    split_text_to_size,
    safe_filename,
)

__all__ = [
    # Image utils
    'read_image_source',
    'decode_base64',
    'load_image_for_pdf',

    # Text utils
    'extract_first_text',
    'extract_plain_text',
    'truncate',
    'split_text_to_size',
    'safe_filename',
]
