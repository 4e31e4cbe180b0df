"""
HTML tag factories used by the view helpers.

Usage:
    from htform.markup import select, option

    select(
        option("Red", value="r", selected=True),
        option("Blue", value="b"),
        name="colour",
    ).__html__()

Attributes are either a dict (rendered with `render_attributes`) or a
`SafeHTML` string produced by an injected AttributeRenderer.
"""

from __future__ import annotations

from collections.abc import Mapping
from html import escape
from typing import Any

from .core import SafeHTML, render_attributes


class Tag:
    """Lazy HTML element that renders when __html__ is called."""

    __slots__ = ("tag", "children", "attrs", "void")

    def __init__(
        self,
        tag: str,
        children: tuple[Any, ...],
        attrs: Mapping[str, Any] | SafeHTML,
        void: bool = False,
    ):
        self.tag = tag
        self.children = children
        self.attrs = attrs
        self.void = void

    def __html__(self) -> str:
        if isinstance(self.attrs, SafeHTML):
            attr_str = self.attrs.content
        else:
            attr_str = render_attributes(self.attrs)
        space = " " if attr_str else ""

        if self.void:
            return f"<{self.tag}{space}{attr_str}>"

        inner = _render_children(self.children)
        return f"<{self.tag}{space}{attr_str}>{inner}</{self.tag}>"

    def __str__(self) -> str:
        return self.__html__()

    def __repr__(self) -> str:
        return f"Tag({self.tag!r}, children={len(self.children)})"


def _render_children(children: tuple[Any, ...]) -> str:
    """Render a tuple of children to string."""
    parts = []
    for child in children:
        if child is None:
            continue

        # SafeHTML passes through
        if isinstance(child, SafeHTML):
            parts.append(child.content)
        # Tags render recursively
        elif isinstance(child, Tag):
            parts.append(child.__html__())
        # Strings get escaped
        elif isinstance(child, str):
            parts.append(escape(child))
        # Objects with __html__
        elif hasattr(child, "__html__"):
            parts.append(child.__html__())
        # Iterables flatten (but not strings)
        elif hasattr(child, "__iter__") and not isinstance(child, (str, bytes)):
            for item in child:
                parts.append(_render_children((item,)))
        # Everything else: str + escape
        else:
            parts.append(escape(str(child)))

    return "".join(parts)


def _make_tag(tag: str, void: bool = False):
    """Factory for creating tag functions."""

    def factory(*children, attrs: SafeHTML | None = None, **kwargs) -> Tag:
        return Tag(tag, children, attrs if attrs is not None else kwargs, void)

    factory.__name__ = tag
    factory.__doc__ = f"Create a <{tag}> element."
    return factory


input_ = _make_tag("input", void=True)
select = _make_tag("select")
option = _make_tag("option")
optgroup = _make_tag("optgroup")
b = _make_tag("b")


class Fragment:
    """Multiple children without a wrapper element."""

    __slots__ = ("children",)

    def __init__(self, *children):
        self.children = children

    def __html__(self) -> str:
        return _render_children(self.children)

    def __str__(self) -> str:
        return self.__html__()


def fragment(*children) -> Fragment:
    """Render multiple children without a wrapper element."""
    return Fragment(*children)
