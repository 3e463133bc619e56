#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md_video_embed/ast/visitors.py
"""Visitor base class for walking the document tree.

Every node calls back into the visitor through ``accept``, which invokes the
``visit_*`` method named after the node type. :class:`NodeVisitor` provides
all of those methods; each one forwards to :meth:`NodeVisitor.generic_visit`
unless a subclass overrides it. A subclass therefore only implements the node
types it cares about.

"""

from __future__ import annotations

from typing import Any

from md_video_embed.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
)


class NodeVisitor:
    """Base class for document visitors.

    Examples
    --------
    Count the video blocks in a document:

        >>> class VideoBlockCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def generic_visit(self, node):
        ...         for child in get_node_children(node):
        ...             child.accept(self)
        ...
        ...     def visit_code_block(self, node):
        ...         if node.info_string.startswith("video-embed "):
        ...             self.count += 1

    """

    def generic_visit(self, node: Node) -> Any:
        """Handle a node without a dedicated ``visit_*`` override.

        Parameters
        ----------
        node : Node
            The node being visited

        Returns
        -------
        Any
            None unless a subclass decides otherwise

        """
        return None

    # Block-level nodes

    def visit_document(self, node: Document) -> Any:
        return self.generic_visit(node)

    def visit_heading(self, node: Heading) -> Any:
        return self.generic_visit(node)

    def visit_paragraph(self, node: Paragraph) -> Any:
        return self.generic_visit(node)

    def visit_code_block(self, node: CodeBlock) -> Any:
        return self.generic_visit(node)

    def visit_block_quote(self, node: BlockQuote) -> Any:
        return self.generic_visit(node)

    def visit_list(self, node: List) -> Any:
        return self.generic_visit(node)

    def visit_list_item(self, node: ListItem) -> Any:
        return self.generic_visit(node)

    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        return self.generic_visit(node)

    def visit_html_block(self, node: HTMLBlock) -> Any:
        return self.generic_visit(node)

    # Inline nodes

    def visit_text(self, node: Text) -> Any:
        return self.generic_visit(node)

    def visit_emphasis(self, node: Emphasis) -> Any:
        return self.generic_visit(node)

    def visit_strong(self, node: Strong) -> Any:
        return self.generic_visit(node)

    def visit_strikethrough(self, node: Strikethrough) -> Any:
        return self.generic_visit(node)

    def visit_code(self, node: Code) -> Any:
        return self.generic_visit(node)

    def visit_link(self, node: Link) -> Any:
        return self.generic_visit(node)

    def visit_image(self, node: Image) -> Any:
        return self.generic_visit(node)

    def visit_line_break(self, node: LineBreak) -> Any:
        return self.generic_visit(node)

    def visit_html_inline(self, node: HTMLInline) -> Any:
        return self.generic_visit(node)
