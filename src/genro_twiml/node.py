# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""MarkupNode - the generic tree unit behind every TwiML element."""

from __future__ import annotations


class MarkupNode:
    """A node in a markup tree.

    Each node has:
    - name: The element tag, fixed at creation
    - text: Optional text content
    - attributes: Ordered list of (name, value) string pairs
    - children: Ordered list of child MarkupNode instances

    The node is a plain data holder: it never validates content. Which
    attributes, text and children are legal is decided by the builder
    that owns it.

    Example:
        >>> node = MarkupNode('Say')
        >>> node.push_attribute('voice', 'alice')
        >>> node.set_text('Hello')
        >>> node.attributes
        [('voice', 'alice')]
    """

    __slots__ = ('_name', 'text', 'attributes', 'children')

    def __init__(self, name: str) -> None:
        """Initialize an empty MarkupNode.

        Args:
            name: The element tag. Must be a non-empty string.
        """
        if not name:
            raise ValueError("MarkupNode name must be a non-empty string")
        self._name = name
        self.text: str | None = None
        self.attributes: list[tuple[str, str]] = []
        self.children: list[MarkupNode] = []

    @property
    def name(self) -> str:
        """The element tag."""
        return self._name

    def __repr__(self) -> str:
        return (
            f"MarkupNode({self._name!r}, text={self.text!r}, "
            f"attributes={len(self.attributes)}, children={len(self.children)})"
        )

    @property
    def is_empty(self) -> bool:
        """True if the node has neither text nor children."""
        return self.text is None and not self.children

    def push_attribute(self, name: str, value: str) -> None:
        """Append an attribute pair, keeping insertion order."""
        self.attributes.append((name, value))

    def append_child(self, child: MarkupNode) -> None:
        """Append a child node, keeping insertion order."""
        self.children.append(child)

    def set_text(self, text: str | None) -> None:
        """Replace the node text."""
        self.text = text

    def get_attr(self, name: str, default: str | None = None) -> str | None:
        """Get the value of the first attribute with the given name.

        Args:
            name: Attribute name.
            default: Value returned when the attribute is not set.
        """
        for key, value in self.attributes:
            if key == name:
                return value
        return default

    def copy(self) -> MarkupNode:
        """Return a shallow copy.

        The copy gets its own attribute and children lists; the child
        nodes themselves are shared.
        """
        node = MarkupNode(self._name)
        node.text = self.text
        node.attributes = list(self.attributes)
        node.children = list(self.children)
        return node
