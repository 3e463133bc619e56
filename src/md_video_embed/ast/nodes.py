#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md_video_embed/ast/nodes.py
"""Document tree nodes.

This module defines the node hierarchy that carries a parsed markdown document
between the parser, the video-embed pipeline and the HTML renderer. Only the
CommonMark core is represented; anything the parser does not understand is
dropped before it reaches the tree.

Node Hierarchy
--------------
Block-level nodes:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, ThematicBreak, HTMLBlock

Inline nodes:
    - Text, Emphasis, Strong, Strikethrough, Code
    - Link, Image, LineBreak, HTMLInline

Every node supports the visitor pattern through ``accept``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Optional


@dataclass
class SourceLocation:
    """Where a node came from in the source document.

    Parameters
    ----------
    format : str
        Source format (e.g. 'markdown')
    line : int or None, default = None
        Line number in the source text
    metadata : dict, default = empty dict
        Additional location information

    """

    format: str
    line: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)


class Node(ABC):
    """Base class for all document nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node
    source_location : SourceLocation or None, default = None
        Information about where this node came from in the source

    """

    metadata: dict[str, Any]
    source_location: Optional[SourceLocation]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Dispatch to the matching ``visit_*`` method of ``visitor``."""
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root node holding the block-level children of a document.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in document order
    metadata : dict, default = empty dict
        Document-level metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)

    def prepend_nodes(self, nodes: list[Node]) -> Document:
        """Return a new document with ``nodes`` placed before the existing children.

        The relative order of ``nodes`` is kept, so the first node ends up
        topmost. The receiver is not modified.

        Parameters
        ----------
        nodes : list of Node
            Block-level nodes to insert at the top of the document

        Returns
        -------
        Document
            New document sharing the original children

        """
        if not nodes:
            return self
        return replace(self, children=list(nodes) + list(self.children), metadata=self.metadata.copy())


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6)
    content : list of Node, default = empty list
        Inline nodes representing heading text

    """

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph of inline content."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_paragraph(self)


@dataclass
class CodeBlock(Node):
    """Fenced or indented code block.

    The parser keeps the complete info string of a fenced block in
    ``metadata["info_string"]`` and the text after the first word in
    ``metadata["info_attrs"]``; ``language`` holds the first word only.

    Parameters
    ----------
    content : str
        Literal block body (not parsed as markdown)
    language : str or None, default = None
        First word of the info string
    fence_char : str, default = '`'
        Character used for fencing (` or ~)
    fence_length : int, default = 3
        Number of fence characters
    metadata : dict, default = empty dict
        Code block metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    language: Optional[str] = None
    fence_char: str = "`"
    fence_length: int = 3
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    @property
    def info_string(self) -> str:
        """Full info string of the fence, or an empty string."""
        info = self.metadata.get("info_string")
        if info:
            return str(info)
        return self.language or ""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_code_block(self)


@dataclass
class BlockQuote(Node):
    """Block quote containing block-level children."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_block_quote(self)


@dataclass
class List(Node):
    """Ordered or unordered list.

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    tight : bool, default = True
        Whether list is tight (no blank lines between items)

    """

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    tight: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """Single list item containing block content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_item(self)


@dataclass
class ThematicBreak(Node):
    """Horizontal rule."""

    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_thematic_break(self)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block.

    Content is kept as-is. Whether it reaches the output unchanged is decided
    by the renderer's ``html_passthrough_mode``.

    Parameters
    ----------
    content : str
        Raw HTML content
    metadata : dict, default = empty dict
        HTML block metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_html_block(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_text(self)


@dataclass
class Emphasis(Node):
    """Emphasized (italic) inline content."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strong (bold) inline content."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_strong(self)


@dataclass
class Strikethrough(Node):
    """Struck-through inline content (GFM extension)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_strikethrough(self)


@dataclass
class Code(Node):
    """Inline code span."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_code(self)


@dataclass
class Link(Node):
    """Hyperlink.

    Parameters
    ----------
    url : str
        Link target
    content : list of Node, default = empty list
        Inline nodes forming the link text
    title : str or None, default = None
        Optional link title

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Inline image."""

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_image(self)


@dataclass
class LineBreak(Node):
    """Hard or soft line break.

    Parameters
    ----------
    soft : bool, default = False
        True for a soft break (rendered as whitespace)

    """

    soft: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_line_break(self)


@dataclass
class HTMLInline(Node):
    """Raw inline HTML."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_html_inline(self)


_CHILDREN_NODES = (Document, BlockQuote, ListItem)
_CONTENT_NODES = (Heading, Paragraph, Emphasis, Strong, Strikethrough, Link)


def get_node_children(node: Node) -> list[Node]:
    """Get the child nodes of ``node``.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        Child nodes (empty list for leaf nodes)

    """
    if isinstance(node, _CHILDREN_NODES):
        return list(node.children)

    if isinstance(node, _CONTENT_NODES):
        return list(node.content)

    if isinstance(node, List):
        return list(node.items)

    return []


def replace_node_children(node: Node, new_children: list[Node]) -> Node:
    """Create a copy of ``node`` with ``new_children`` in place of its children.

    Leaf nodes are returned unchanged.
    """
    if isinstance(node, _CHILDREN_NODES):
        return replace(node, children=new_children)

    if isinstance(node, _CONTENT_NODES):
        return replace(node, content=new_children)

    if isinstance(node, List):
        return replace(node, items=new_children)  # type: ignore[arg-type]

    return node
