#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md_video_embed/ast/transforms.py
"""Copy-on-write rewriting of the document tree.

:class:`NodeTransformer` walks a document and builds a new one. A ``visit_*``
override returns the node to put in place of the visited one, or None to drop
it; every other node is copied along with its metadata, so the input tree is
left untouched. The video-embed pipeline uses this to swap code blocks for
HTML blocks.

Examples
--------
Drop every thematic break:

    >>> class DropBreaks(NodeTransformer):
    ...     def visit_thematic_break(self, node):
    ...         return None
    >>> new_doc = DropBreaks().transform(doc)

"""

from __future__ import annotations

from dataclasses import replace

from md_video_embed.ast.nodes import Node, get_node_children, replace_node_children
from md_video_embed.ast.visitors import NodeVisitor


class NodeTransformer(NodeVisitor):
    """Rebuild a tree, letting subclasses replace or remove nodes."""

    def transform(self, node: Node) -> Node | None:
        """Transform ``node`` and, unless overridden, everything below it.

        Parameters
        ----------
        node : Node
            Root of the subtree to transform

        Returns
        -------
        Node or None
            The replacement node, or None when the node was removed

        """
        return node.accept(self)

    def generic_visit(self, node: Node) -> Node:
        """Copy ``node`` with its own metadata dict and transformed children."""
        copied = replace(node, metadata=node.metadata.copy())  # type: ignore[type-var]
        children = get_node_children(node)
        if not children:
            return copied
        return replace_node_children(copied, self._transform_children(children))

    def _transform_children(self, children: list[Node]) -> list[Node]:
        kept = []
        for child in children:
            transformed = self.transform(child)
            if transformed is not None:
                kept.append(transformed)
        return kept

