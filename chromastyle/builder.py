"""
Output-tree composer
====================

Styled output is a tree of immutable nodes: text leaves, foreground,
background and full-style switches, empty nodes and groups. Flattening walks
the tree depth first and yields control codes in order; rendering maps each
code to its message and concatenates. Nothing is merged across siblings: a
``ForegroundNode`` after a ``StyleNode`` emits its own sequence on top of it.

>>> from chromastyle.styles import Foreground
>>> render(with_foreground(Foreground.BOLD), "hi")
'\\x1b[1mhi'
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union

from .ansi import ControlCode, Literal, SetGraphicsRendition, render_codes
from .render import OutputTarget, write_output
from .styles import Background, Foreground, Style


@dataclass(frozen=True)
class TextNode:
    text: str

    def control_codes(self) -> List[ControlCode]:
        return [Literal(self.text)]


@dataclass(frozen=True)
class ForegroundNode:
    foreground: Tuple[Foreground, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "foreground", tuple(self.foreground))

    def control_codes(self) -> List[ControlCode]:
        return [SetGraphicsRendition(fg.sgr for fg in self.foreground)]


@dataclass(frozen=True)
class BackgroundNode:
    background: Optional[Background] = None

    def control_codes(self) -> List[ControlCode]:
        sgr = self.background.sgr if self.background is not None else None
        if sgr is None:
            return []
        return [SetGraphicsRendition([sgr])]


@dataclass(frozen=True)
class StyleNode:
    style: Style

    def __post_init__(self) -> None:
        # detach from the caller's (mutable) style
        object.__setattr__(self, "style", self.style.copy())

    def control_codes(self) -> List[ControlCode]:
        return [self.style.control_code]


@dataclass(frozen=True)
class EmptyNode:

    def control_codes(self) -> List[ControlCode]:
        return []


@dataclass(frozen=True)
class GroupNode:
    children: Tuple["StyledOutput", ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))

    def control_codes(self) -> List[ControlCode]:
        return [code for child in self.children for code in child.control_codes()]


StyledOutput = Union[TextNode, ForegroundNode, BackgroundNode, StyleNode, EmptyNode, GroupNode]
NODE_TYPES = (TextNode, ForegroundNode, BackgroundNode, StyleNode, EmptyNode, GroupNode)


def to_node(item: Any) -> StyledOutput:
    """
    Convert one builder item to a node.

    ``str`` becomes text, a ``Foreground`` or a list of them a foreground
    switch, ``Background`` and ``Style`` their own nodes, ``None`` an empty
    node. Other lists become groups of their converted items.
    """
    if isinstance(item, NODE_TYPES):
        return item
    if item is None:
        return EmptyNode()
    if isinstance(item, str):
        return TextNode(item)
    if isinstance(item, Foreground):
        return ForegroundNode((item,))
    if isinstance(item, Background):
        return BackgroundNode(item)
    if isinstance(item, Style):
        return StyleNode(item)
    if isinstance(item, (list, tuple)):
        if all(isinstance(element, Foreground) for element in item):
            return ForegroundNode(tuple(item))
        return GroupNode(tuple(to_node(element) for element in item))
    raise TypeError(f"Cannot build styled output from {type(item).__name__}")


def styled_output(*items: Any) -> StyledOutput:
    """Build a node from any number of builder items."""
    if not items:
        return EmptyNode()
    if len(items) == 1:
        return to_node(items[0])
    return GroupNode(tuple(to_node(item) for item in items))


# Convenience constructors
def text(value: str) -> TextNode:
    return TextNode(value)


def with_foreground(*foregrounds: Foreground) -> ForegroundNode:
    return ForegroundNode(foregrounds)


def with_background(background: Optional[Background]) -> BackgroundNode:
    return BackgroundNode(background)


def with_style(style: Style) -> StyleNode:
    return StyleNode(style)


def group(*items: Any) -> GroupNode:
    return GroupNode(tuple(to_node(item) for item in items))


def flatten(node: StyledOutput) -> List[ControlCode]:
    """Depth-first, order-preserving list of the tree's control codes."""
    return node.control_codes()


def render(*items: Any) -> str:
    """Render builder items (or a single node) to a string."""
    return render_codes(flatten(styled_output(*items)))


def print_styled(*items: Any, file: Optional[OutputTarget] = None) -> None:
    """Write the rendered items followed by a newline, to stdout by default."""
    write_output(render(*items) + "\n", file)


def write_styled(file: OutputTarget, *items: Any) -> None:
    """Write the rendered items to ``file`` (a stream or a path) as is."""
    write_output(render(*items), file)
