"""
Image utilities for course export.

Handles decoding of cover images referenced by course metadata.
"""
import base64
import binascii
import os
from io import BytesIO
from typing import Tuple, Union

from PIL import Image, ImageOps


ImageSource = Union[str, bytes]


def read_image_source(source: ImageSource) -> bytes:
    """
    Read raw image bytes from a path, a data URI or a base64 string.

    Args:
        source: File path, 'data:image/...;base64,' URI, base64 string or bytes

    Returns:
        Raw (still encoded) image bytes

    Raises:
        ValueError: If the source cannot be resolved to bytes
    """
    if isinstance(source, bytes):
        return source
    if not isinstance(source, str) or not source:
        raise ValueError("Empty image reference")

    if source.startswith('data:'):
        _, _, payload = source.partition(',')
        return decode_base64(payload)

    if os.path.isfile(source):
        with open(source, 'rb') as f:
            return f.read()

    return decode_base64(source)


def decode_base64(b64_string: str) -> bytes:
    """Decode a base64 string, raising ValueError on malformed input."""
    try:
        return base64.b64decode(b64_string, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Not a readable image reference: {b64_string[:40]!r}") from e


def load_image_for_pdf(source: ImageSource, max_size: int = 2048) -> Tuple[bytes, Tuple[int, int]]:
    """
    Decode an image and re-encode it as PNG for embedding.

    Args:
        source: Image reference accepted by read_image_source
        max_size: Maximum dimension (width or height) before resizing

    Returns:
        Tuple of (PNG bytes, (width, height))

    Raises:
        ValueError: If the reference is unreadable
        PIL.UnidentifiedImageError: If the bytes are not an image
    """
    img = Image.open(BytesIO(read_image_source(source)))

    # Fix EXIF orientation
    img = ImageOps.exif_transpose(img)

    # Convert to RGB
    if img.mode in ('RGBA', 'LA', 'P', 'CMYK'):
        img = img.convert('RGB')

    # Resize if needed
    if max(img.size) > max_size:
        img.thumbnail((max_size, max_size), Image.Resampling.LANCZOS)

    buf = BytesIO()
    img.save(buf, format='PNG')
    return buf.getvalue(), img.size
