"""
Outline Extraction Component.

Walks the editor document tree and builds the numbered outline
(table of contents) of the course.

Numbering is purely positional: each hierarchy node increments the
counter of its level and resets every deeper counter, so chapter numbers
restart in each section. Non-hierarchy nodes are transparent and their
hierarchy descendants are spliced in place.
"""
import copy
import logging
from typing import Any, List, Optional, Sequence

from config.settings import ExportLabels, settings
from core.constants import ALLOWED_CHILD_TYPES, MAX_OUTLINE_LEVEL
from core.models import DocumentNode, OutlineItem, OutlineType
from outline.classifier import classify_node
from utils.text_utils import extract_first_text, truncate

logger = logging.getLogger(__name__)


def new_counters() -> List[int]:
    """Fresh counters buffer, one slot per outline level."""
    return [0] * (MAX_OUTLINE_LEVEL + 1)


def format_number(counters: Sequence[int], level: int) -> str:
    """
    Build the visible number of an item from the counters path.

    Level 0 (course) contributes no number; unused intermediate levels
    (e.g. a paragraph placed directly in a section) are skipped.

    Args:
        counters: Counters buffer
        level: Level of the item being numbered

    Returns:
        Number such as '1', '1.2' or '1.2.3'
    """
    return '.'.join(str(c) for c in counters[1:level + 1] if c > 0)


def extract_outline(
    tree: Any,
    labels: Optional[ExportLabels] = None,
    max_title_length: Optional[int] = None
) -> List[OutlineItem]:
    """
    Extract the outline of an editor document.

    Args:
        tree: Root node (dict or DocumentNode) or its content list
        labels: Labels used for fallback titles
        max_title_length: Maximum title length (default from settings)

    Returns:
        Top-level outline items; empty list for empty or malformed trees
    """
    nodes = _root_nodes(tree)
    if not nodes:
        return []

    return OutlineExtractor(labels, max_title_length).extract_items(
        nodes, new_counters()
    )


def _root_nodes(tree: Any) -> List[DocumentNode]:
    if isinstance(tree, (list, tuple)):
        raw_nodes = tree
    elif isinstance(tree, DocumentNode):
        return list(tree.content)
    elif isinstance(tree, dict):
        raw_nodes = tree.get('content')
        if not isinstance(raw_nodes, list):
            return []
    else:
        return []

    nodes = []
    for raw in raw_nodes:
        node = DocumentNode.from_dict(raw)
        if node is not None:
            nodes.append(node)
    return nodes


class OutlineExtractor:
    """
    Builds OutlineItem trees from editor nodes.

    The counters buffer is owned by the caller and threaded explicitly
    through every recursive call.
    """

    def __init__(
        self,
        labels: Optional[ExportLabels] = None,
        max_title_length: Optional[int] = None
    ):
        self.labels = labels or settings.labels
        self.max_title_length = max_title_length or settings.max_title_length

    def extract_items(
        self,
        nodes: Sequence[DocumentNode],
        counters: List[int]
    ) -> List[OutlineItem]:
        """
        Extract outline items from a list of sibling nodes.

        Args:
            nodes: Sibling editor nodes, left to right
            counters: Counters buffer, mutated in place

        Returns:
            Items found among nodes, in document order
        """
        items: List[OutlineItem] = []

        for node in nodes:
            config = classify_node(node)
            if config is None:
                # Transparent node: hoist its hierarchy descendants
                if node.content:
                    items.extend(self.extract_items(node.content, counters))
                continue

            node_level = config.level
            counters[node_level] += 1
            for i in range(node_level + 1, len(counters)):
                counters[i] = 0

            number = format_number(counters, node_level)
            item = OutlineItem(
                id=self._item_id(node, config.outline_type, counters, node_level),
                title=self._item_title(node, config.outline_type, number),
                type=config.outline_type,
                level=node_level,
                number=number,
                content=list(node.content),
            )

            found = self.extract_items(node.content, counters)
            items.append(item)
            items.extend(_nest(item, found))

        return items

    def _item_title(self, node: DocumentNode, outline_type: OutlineType, number: str) -> str:
        stored = node.attrs.get('title')
        stored = stored.strip() if isinstance(stored, str) else ''
        if stored and stored not in (node.type, outline_type.value):
            title = stored
        else:
            title = extract_first_text(node.content)

        if not title:
            title = f"{self.labels.type_label(outline_type.value)} {number}".strip()

        return truncate(title, self.max_title_length)

    @staticmethod
    def _item_id(node: DocumentNode, outline_type: OutlineType, counters: Sequence[int], level: int) -> str:
        stored = node.attrs.get('id')
        if stored not in (None, ''):
            return str(stored)
        path = '-'.join(str(c) for c in counters[:level + 1])
        return f"{outline_type.value}-{path}"


def _nest(parent: OutlineItem, found: List[OutlineItem]) -> List[OutlineItem]:
    """
    Attach found items to parent, returning those that must sit beside it.

    An item whose level is not deeper than its parent's is hoisted next
    to the parent; deeper items following it are attached to it instead.
    """
    hoisted: List[OutlineItem] = []
    for child in found:
        owner = hoisted[-1] if hoisted else parent
        if child.level > owner.level:
            owner.children.append(child)
        else:
            hoisted.append(child)
    if hoisted:
        logger.debug(
            "Hoisted %d outline item(s) out of %s '%s'",
            len(hoisted), parent.type.value, parent.title
        )
    return hoisted


def flatten_outline(items: List[OutlineItem]) -> List[OutlineItem]:
    """Flatten outline tree in pre-order."""
    flattened: List[OutlineItem] = []

    def _flatten(nodes: List[OutlineItem]):
        for item in nodes:
            flattened.append(item)
            if item.children:
                _flatten(item.children)

    _flatten(items)
    return flattened


def find_outline_item(items: List[OutlineItem], item_id: str) -> Optional[OutlineItem]:
    """Find outline item by id, depth first."""
    for item in items:
        if item.id == item_id:
            return item
        if item.children:
            found = find_outline_item(item.children, item_id)
            if found is not None:
                return found
    return None


def recompute_numbers(items: List[OutlineItem]) -> List[OutlineItem]:
    """
    Renumber an outline by sibling position only.

    Used after items were moved or inserted in an existing outline.
    The input is left untouched.

    Args:
        items: Outline tree

    Returns:
        Deep copy with numbers '1', '1.1', ... rebuilt from positions
    """
    renumbered = copy.deepcopy(items)

    def _process(nodes: List[OutlineItem], parent_number: str = ''):
        for index, node in enumerate(nodes, 1):
            node.number = f"{parent_number}.{index}" if parent_number else str(index)
            if node.children:
                _process(node.children, node.number)

    _process(renumbered)
    return renumbered


def allowed_child_types(outline_type: OutlineType) -> List[OutlineType]:
    """Outline types that may be added under an item of the given type."""
    return [OutlineType(t) for t in ALLOWED_CHILD_TYPES.get(outline_type.value, [])]
