"""
Node Classifier

Decides whether an editor node contributes to the course outline and,
if so, at which type and level.
"""
from typing import Optional

from core.constants import COURSE_HEADING_RANK, NODE_TYPE_MAP
from core.models import DocumentNode, NodeConfig, NodeKind, OutlineType


def classify_node(node: DocumentNode) -> Optional[NodeConfig]:
    """
    Classify an editor node.

    Only rank-1 headings count (as the course title); lower ranks and
    every unknown type are transparent.

    Args:
        node: Decoded editor node

    Returns:
        NodeConfig for hierarchy nodes, None otherwise
    """
    kind = node.kind
    if kind in (NodeKind.TEXT, NodeKind.HARD_BREAK, NodeKind.OTHER):
        return None

    if kind == NodeKind.HEADING and _heading_rank(node) != COURSE_HEADING_RANK:
        return None

    outline_type, level = NODE_TYPE_MAP[node.type]
    return NodeConfig(outline_type=OutlineType(outline_type), level=level)


def _heading_rank(node: DocumentNode) -> Optional[int]:
    try:
        return int(node.attrs.get('level'))
    except (TypeError, ValueError):
        return None


def is_hierarchy_node(node: DocumentNode) -> bool:
    """Check if node contributes to the outline."""
    return classify_node(node) is not None
