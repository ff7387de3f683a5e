"""A small HTML tree builder and a minimal parser for self-closing tags."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field


def _render_attributes(attributes: dict[str, str]) -> str:
    return "".join(f' {key}="{value}"' for key, value in sorted(attributes.items()))


@dataclass
class HTML:
    """An HTML element with attributes, inner text and keyed child elements.

    Attributes and children are serialised in lexicographic key order.
    """

    tag_name: str = ""
    text: str = ""
    attributes: dict[str, str] = field(default_factory=dict, init=False)
    children: dict[str, HTML] = field(default_factory=dict, init=False)

    def set_attribute(self, key: str, value: str) -> None:
        self.attributes[key] = value

    def has_attribute(self, key: str) -> bool:
        return key in self.attributes

    def get_attribute(self, key: str) -> str:
        """Return the attribute's value, or an empty string if it is unset."""
        return self.attributes.get(key, "")

    def remove_attribute(self, key: str) -> None:
        self.attributes.pop(key, None)

    def clear_attributes(self) -> None:
        self.attributes.clear()

    def __getitem__(self, key: str) -> HTML:
        """Return the child under ``key``, creating an empty one if missing."""
        return self.children.setdefault(key, HTML())

    def child(self, key: str) -> HTML:
        """Return the child under ``key`` without creating it.

        A missing child yields a fresh empty element that is not attached.
        """
        found = self.children.get(key)
        return found if found is not None else HTML()

    def has_child(self, key: str) -> bool:
        return key in self.children

    def __contains__(self, key: object) -> bool:
        return key in self.children

    def add_child(self, key: str, child: HTML) -> None:
        """Store a copy of ``child`` under ``key``, replacing any existing one."""
        self.children[key] = copy.deepcopy(child)

    def remove_child(self, key: str) -> None:
        self.children.pop(key, None)

    def clear_children(self) -> None:
        self.children.clear()

    def to_string(self) -> str:
        inner = self.text + "".join(
            child.to_string() for _, child in sorted(self.children.items())
        )
        if not self.tag_name:
            return inner
        return (
            f"<{self.tag_name}{_render_attributes(self.attributes)}>"
            f"{inner}</{self.tag_name}>"
        )

    def __str__(self) -> str:
        return self.to_string()


@dataclass
class HTMLVoidTag:
    """An element without content or closing tag, such as ``<br>``."""

    tag_name: str = ""
    attributes: dict[str, str] = field(default_factory=dict, init=False)

    def set_attribute(self, key: str, value: str) -> None:
        self.attributes[key] = value

    def get_attribute(self, key: str) -> str:
        return self.attributes.get(key, "")

    def to_string(self) -> str:
        return f"<{self.tag_name}{_render_attributes(self.attributes)}>"

    def __str__(self) -> str:
        return self.to_string()


@dataclass
class HTMLContainerTag:
    """An element whose content is a sequence of pre-rendered strings."""

    tag_name: str = ""
    attributes: dict[str, str] = field(default_factory=dict, init=False)
    children: list[str] = field(default_factory=list, init=False)

    def set_attribute(self, key: str, value: str) -> None:
        self.attributes[key] = value

    def add_child(self, child: str) -> None:
        self.children.append(child)

    def to_string(self) -> str:
        return (
            f"<{self.tag_name}{_render_attributes(self.attributes)}>"
            f"{''.join(self.children)}</{self.tag_name}>"
        )

    def __str__(self) -> str:
        return self.to_string()


class HTMLParser:
    """Collects self-closing tags (``<... />``) from an HTML string.

    The text between the most recent ``<`` and ``/>`` is split on spaces:
    everything up to and including the first space is the tag key, and
    ``key=value`` pairs follow. Values are kept verbatim, quotes included,
    and the text after the last space is stored under the last key seen.
    """

    def __init__(self, html: str) -> None:
        self.void_tags: dict[str, HTMLVoidTag] = {}
        self.container_tags: dict[str, HTMLContainerTag] = {}
        self.tag_names: list[str] = []
        self.is_void_tag: dict[str, bool] = {}

        start: int | None = None
        for index, ch in enumerate(html):
            if ch == "<":
                start = index
            if start is None:
                continue
            if ch == "/" and html[index + 1 : index + 2] == ">":
                self._add_void_tag(html[start + 1 : index])

    def _add_void_tag(self, tag_content: str) -> None:
        void_tag = HTMLVoidTag()
        content = ""
        tag_name = ""
        key = ""
        state = 0
        for ch in tag_content:
            content += ch
            if ch == " " and state == 0:
                tag_name = content
                state = 1
                content = ""
            elif ch == "=" and state == 1:
                key = content[:-1]
                state = 2
                content = ""
            elif ch == " " and state == 2:
                void_tag.set_attribute(key, content[:-1])
                state = 1
                content = ""
        void_tag.set_attribute(key, content)
        self.tag_names.append(tag_name)
        self.is_void_tag[tag_name] = True
        self.void_tags[tag_name] = void_tag

    def get_void_tag(self, tag_name: str) -> HTMLVoidTag:
        """Return a copy of the void tag stored under ``tag_name``."""
        return copy.deepcopy(self.void_tags.setdefault(tag_name, HTMLVoidTag()))

    def get_container_tag(self, tag_name: str) -> HTMLContainerTag:
        """Return a copy of the container tag stored under ``tag_name``."""
        return copy.deepcopy(
            self.container_tags.setdefault(tag_name, HTMLContainerTag())
        )