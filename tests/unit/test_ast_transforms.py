#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for AST nodes and tree transformation utilities."""

import pytest

from md_video_embed.ast import (
    CodeBlock,
    Document,
    Heading,
    HTMLBlock,
    List,
    ListItem,
    NodeTransformer,
    NodeVisitor,
    Paragraph,
    Text,
    get_node_children,
)


def sample_document() -> Document:
    return Document(
        children=[
            Heading(level=1, content=[Text(content="Title")]),
            CodeBlock(content="print(1)", language="python"),
            List(ordered=False, items=[ListItem(children=[CodeBlock(content="nested")])]),
        ]
    )


class DropCodeTransformer(NodeTransformer):
    def visit_code_block(self, node):
        return None


class CodeToHtmlTransformer(NodeTransformer):
    def visit_code_block(self, node):
        return HTMLBlock(content=f"<pre>{node.content}</pre>", metadata=node.metadata.copy())


@pytest.mark.unit
class TestNodes:
    """Test node helpers."""

    def test_heading_level_validated(self) -> None:
        """Test heading levels outside 1-6 are rejected."""
        with pytest.raises(ValueError):
            Heading(level=7)

    def test_prepend_nodes(self) -> None:
        """Test prepending keeps order and leaves the original intact."""
        body = Paragraph(content=[Text(content="x")])
        doc = Document(children=[body], metadata={"k": "v"})
        first, second = HTMLBlock(content="1"), HTMLBlock(content="2")

        result = doc.prepend_nodes([first, second])

        assert result.children == [first, second, body]
        assert result.metadata == {"k": "v"}
        assert doc.children == [body]

    def test_prepend_nothing(self) -> None:
        """Test prepending an empty list returns the same document."""
        doc = Document()

        assert doc.prepend_nodes([]) is doc

    def test_get_node_children(self) -> None:
        """Test children are found for each container kind."""
        doc = sample_document()

        assert len(get_node_children(doc)) == 3
        assert get_node_children(doc.children[0]) == [Text(content="Title")]
        assert len(get_node_children(doc.children[2])) == 1
        assert get_node_children(doc.children[1]) == []


@pytest.mark.unit
class TestNodeTransformer:
    """Test NodeTransformer behaviour."""

    def test_identity_copy(self) -> None:
        """Test the base transformer returns an equal but distinct tree."""
        doc = sample_document()

        result = NodeTransformer().transform(doc)

        assert result == doc
        assert result is not doc
        assert result.children[1] is not doc.children[1]

    def test_remove_nodes(self) -> None:
        """Test returning None drops the node everywhere in the tree."""
        result = DropCodeTransformer().transform(sample_document())

        assert len(result.children) == 2
        assert result.children[1].items[0].children == []

    def test_replace_nodes(self) -> None:
        """Test replacement nodes take the original's place."""
        doc = sample_document()

        result = CodeToHtmlTransformer().transform(doc)

        assert isinstance(result.children[1], HTMLBlock)
        assert isinstance(result.children[2].items[0].children[0], HTMLBlock)
        assert isinstance(doc.children[1], CodeBlock)


@pytest.mark.unit
class TestNodeVisitor:
    """Test NodeVisitor defaults."""

    def test_unhandled_nodes_reach_generic_visit(self) -> None:
        """Test visit methods without an override forward to generic_visit."""
        visited = []

        class Recorder(NodeVisitor):
            def generic_visit(self, node):
                visited.append(type(node).__name__)
                for child in get_node_children(node):
                    child.accept(self)

            def visit_code_block(self, node):
                visited.append("code:" + node.content)

        sample_document().accept(Recorder())

        assert visited == ["Document", "Heading", "Text", "code:print(1)", "List", "ListItem", "code:nested"]

    def test_default_returns_none(self) -> None:
        """Test the base visitor does nothing on its own."""
        assert sample_document().accept(NodeVisitor()) is None
