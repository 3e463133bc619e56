#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md_video_embed/ast/__init__.py
"""Document tree used by the parser, the embed pipeline and the HTML renderer."""

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
    SourceLocation,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
    get_node_children,
    replace_node_children,
)
from md_video_embed.ast.transforms import NodeTransformer
from md_video_embed.ast.visitors import NodeVisitor

__all__ = [
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeTransformer",
    "NodeVisitor",
    "Paragraph",
    "SourceLocation",
    "Strikethrough",
    "Strong",
    "Text",
    "ThematicBreak",
    "get_node_children",
    "replace_node_children",
]
