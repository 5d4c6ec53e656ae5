"""Typed lookups on BGG collection XML nodes.

Every accessor takes a node (possibly ``None``) and a field path and returns a
typed value, falling back to a default. Missing elements, missing attributes
and garbage text are all handled here so the normalizer never has to.
"""

import xml.etree.ElementTree as ET
from typing import Optional

from bgg_wrapped.utils.convert import to_flag, to_float, to_int


def find_node(node: Optional[ET.Element], path: str) -> Optional[ET.Element]:
    """First descendant matching ``path`` (tag or ElementPath), or None."""
    if node is None:
        return None
    if "/" in path:
        return node.find(path)
    return node.find(f".//{path}")


def node_value(node: Optional[ET.Element]) -> Optional[str]:
    # BGG xmlapi2 stores most scalars in a ``value`` attribute; the proxy export
    # keeps some of them as element text.
    if node is None:
        return None
    value = node.attrib.get("value")
    if value is not None:
        return value
    # own text only: a rating element may wrap averageweight etc.
    text = (node.text or "").strip()
    return text or None


def field_text(node: Optional[ET.Element], path: str) -> Optional[str]:
    return node_value(find_node(node, path))


def field_str(node: Optional[ET.Element], path: str, default: str = "") -> str:
    value = field_text(node, path)
    if value is None:
        return default
    value = value.strip()
    return value or default


def field_int(node: Optional[ET.Element], path: str, default: int = 0) -> int:
    return to_int(field_text(node, path), default)


def field_float(node: Optional[ET.Element], path: str, default: float = 0.0) -> float:
    return to_float(field_text(node, path), default)


def attr_int(node: Optional[ET.Element], name: str, default: int = 0) -> int:
    if node is None:
        return default
    return to_int(node.attrib.get(name), default)


def attr_flag(node: Optional[ET.Element], name: str) -> bool:
    if node is None:
        return False
    return to_flag(node.attrib.get(name))


def stat_text(stats: Optional[ET.Element], name: str) -> Optional[str]:
    """Statistic from a nested element, else an attribute of ``stats`` itself."""
    if stats is None:
        return None
    value = field_text(stats, name)
    if value is not None:
        return value
    return stats.attrib.get(name)


def stat_int(stats: Optional[ET.Element], name: str, default: int = 0) -> int:
    return to_int(stat_text(stats, name), default)


def stat_float(stats: Optional[ET.Element], name: str, default: float = 0.0) -> float:
    return to_float(stat_text(stats, name), default)
