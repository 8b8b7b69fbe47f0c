"""
Minimal markdown document tree.

The time log only needs headings, lists and the text of their items, so the
token stream of markdown-it-py is folded into a small tree of `Node` values
tagged with a `NodeKind`.
"""
import enum
import typing
from dataclasses import dataclass, field

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode


class DocumentError(ValueError):
    pass


class NodeKind(enum.Enum):
    DOCUMENT = 'document'
    HEADING = 'heading'
    LIST = 'list'
    LIST_ITEM = 'list_item'
    PARAGRAPH = 'paragraph'
    OTHER = 'other'


_KINDS = {
    'root': NodeKind.DOCUMENT,
    'heading': NodeKind.HEADING,
    'bullet_list': NodeKind.LIST,
    'ordered_list': NodeKind.LIST,
    'list_item': NodeKind.LIST_ITEM,
    'paragraph': NodeKind.PARAGRAPH,
}

_BREAKS = ('softbreak', 'hardbreak')
_LITERALS = ('text', 'code_inline', 'html_inline')


@dataclass
class Node:
    kind: NodeKind
    text: str = ''
    children: typing.List['Node'] = field(default_factory=list)

    @property
    def first_line(self) -> str:
        return self.text.split('\n', 1)[0]


class MarkdownReader:

    def __init__(self, preset: str = 'commonmark'):
        self._markdown = MarkdownIt(preset)

    def read(self, text: str) -> Node:
        if not isinstance(text, str):
            raise DocumentError(f'markdown document must be text, got {type(text).__name__}')
        tokens = self._markdown.parse(text)
        return self._convert(SyntaxTreeNode(tokens))

    def _convert(self, node: SyntaxTreeNode) -> Node:
        kind = _KINDS.get(node.type, NodeKind.OTHER)
        if kind in (NodeKind.HEADING, NodeKind.PARAGRAPH):
            return Node(kind, text=''.join(render_inline(child) for child in node.children))
        return Node(kind, children=[self._convert(child) for child in node.children])


def render_inline(node: SyntaxTreeNode) -> str:
    """Plain text of an inline node, markup dropped."""
    if node.type in _LITERALS:
        return node.content
    if node.type in _BREAKS:
        return '\n'
    return ''.join(render_inline(child) for child in node.children)
