"""
Text utilities for course structuring and export.

Handles text extraction from editor nodes, wrapping and truncation.
"""
import re
from typing import Callable, Iterable, List

from core.models import DocumentNode, NodeKind


def extract_first_text(nodes: Iterable[DocumentNode]) -> str:
    """
    Find the first non-empty run of text, depth first.

    Args:
        nodes: Editor nodes to scan

    Returns:
        First line of the first text leaf found, or empty string
    """
    for node in nodes:
        if node.kind == NodeKind.TEXT and node.text.strip():
            return node.text.strip().splitlines()[0].strip()
        if node.content:
            text = extract_first_text(node.content)
            if text:
                return text
    return ""


def extract_plain_text(nodes: Iterable[DocumentNode]) -> str:
    """
    Flatten editor nodes to plain text.

    Inline text runs are concatenated, block nodes are separated by
    newlines and hard breaks become newlines.

    Args:
        nodes: Editor nodes to flatten

    Returns:
        Plain text with collapsed blank lines
    """
    blocks: List[str] = []
    _collect_blocks(list(nodes), blocks)
    text = "\n".join(block.strip() for block in blocks if block.strip())
    return re.sub(r'\n{3,}', '\n\n', text).strip()


def _collect_blocks(nodes, blocks: List[str]) -> None:
    inline: List[str] = []
    for node in nodes:
        if node.kind == NodeKind.TEXT:
            inline.append(node.text)
        elif node.kind == NodeKind.HARD_BREAK:
            inline.append("\n")
        elif node.content:
            if inline:
                blocks.append("".join(inline))
                inline = []
            _collect_blocks(node.content, blocks)
    if inline:
        blocks.append("".join(inline))


def truncate(text: str, max_length: int, suffix: str = "") -> str:
    """
    Cut text to max_length characters, appending suffix when cut.

    Args:
        text: Text to truncate
        max_length: Maximum number of characters kept from text
        suffix: Appended only when text was longer than max_length

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length] + suffix


def split_text_to_size(
    text: str,
    max_width: float,
    measure: Callable[[str], float]
) -> List[str]:
    """
    Word-wrap text so that every line measures at most max_width.

    Explicit newlines start a new line. Words wider than max_width are
    broken between characters.

    Args:
        text: Text to wrap
        max_width: Available width in points
        measure: Function returning the rendered width of a string

    Returns:
        Wrapped lines; empty list for blank text
    """
    if not text or not text.strip():
        return []

    lines: List[str] = []
    for raw_line in text.split('\n'):
        words = raw_line.split()
        if not words:
            lines.append("")
            continue

        current = ""
        for word in words:
            candidate = f"{current} {word}" if current else word
            if measure(candidate) <= max_width:
                current = candidate
                continue
            if current:
                lines.append(current)
                current = ""
            # Word alone does not fit: break it
            while measure(word) > max_width and len(word) > 1:
                cut = _fit_prefix(word, max_width, measure)
                lines.append(word[:cut])
                word = word[cut:]
            current = word
        if current:
            lines.append(current)

    # Drop trailing blank lines
    while lines and not lines[-1]:
        lines.pop()
    return lines


def _fit_prefix(word: str, max_width: float, measure: Callable[[str], float]) -> int:
    """Longest prefix length of word that fits, at least one character."""
    cut = 1
    while cut < len(word) and measure(word[:cut + 1]) <= max_width:
        cut += 1
    return cut


def safe_filename(title: str, extension: str, fallback: str = "cours") -> str:
    """
    Build a download filename from a document title.

    Whitespace becomes underscores and non-word characters are removed.

    Args:
        title: Document title
        extension: File extension without the dot
        fallback: Base name used when nothing is left of the title

    Returns:
        Filename such as 'Mon_cours.pdf'
    """
    base = re.sub(r'\s+', '_', title or "")
    base = re.sub(r'[^\w-]', '', base)
    return f"{base or fallback}.{extension}"
