"""
Document Tree

Minimal node abstraction over the parsed export, independent of the XML
library, plus the lookup helpers used by the extractor.
"""
from dataclasses import dataclass, field
from typing import Iterator, List, Optional
import xml.etree.ElementTree as ET

from .exceptions import ParseError


@dataclass
class Node:
    """
    One element of the export.

    Attributes:
        tag: Element name
        text: Text directly inside the element, before its first child
        children: Child elements in document order
        tail: Text following the element, up to its next sibling
    """
    tag: str
    text: str = ""
    children: List["Node"] = field(default_factory=list)
    tail: str = ""

    def iter(self) -> Iterator["Node"]:
        """Pre-order walk starting at this node."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def descendants(self) -> Iterator["Node"]:
        """Pre-order walk of everything below this node."""
        walk = self.iter()
        next(walk)
        yield from walk

    def text_content(self) -> str:
        """All text inside the element, like DOM textContent."""
        parts = []
        # Each entry is a node to open, or a tail string to emit after its subtree
        stack = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
                continue
            parts.append(item.text)
            for child in reversed(item.children):
                stack.append(child.tail)
                stack.append(child)
        return "".join(parts)


def find_descendants(node: Node, tag: str) -> List[Node]:
    """Every descendant with the given tag, in document order."""
    return [d for d in node.descendants() if d.tag == tag]


def find_first_descendant(node: Node, tag: str) -> Optional[Node]:
    for d in node.descendants():
        if d.tag == tag:
            return d
    return None


def find_first_descendant_text(node: Node, tag: str) -> str:
    """Text of the first descendant with the given tag, or "" when there is none."""
    found = find_first_descendant(node, tag)
    return found.text_content() if found is not None else ""


def _from_element(root: ET.Element) -> Node:
    """Copies an ElementTree element into Nodes, without recursion so nesting depth is unbounded."""
    top = Node(tag=root.tag, text=root.text or "", tail=root.tail or "")
    stack = [(root, top)]
    while stack:
        element, node = stack.pop()
        for child in element:
            child_node = Node(tag=child.tag, text=child.text or "", tail=child.tail or "")
            node.children.append(child_node)
            stack.append((child, child_node))
    return top


def parse_document(text: str, filename: str = None) -> Node:
    """
    Parses sanitized export text into a Node tree.

    Raises:
        ParseError: When the text is not well-formed XML.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ParseError(str(e), filename=filename) from e
    return _from_element(root)
