# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TwimlElement - base class of every TwiML element builder."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, ClassVar

from .exceptions import (
    DuplicateAttributeError,
    IllegalChildError,
    InvalidAttributeError,
    StructuralError,
    TooManyChildrenError,
)
from .grammar import (
    NO_TEXT,
    REQUIRED_TEXT,
    Attribute,
    element_for_method,
    is_attribute_method,
    unrepresentable_character,
)
from .node import MarkupNode

if TYPE_CHECKING:
    from .config import RenderOptions


class TwimlElement:
    """Builder wrapping one MarkupNode of a TwiML element.

    Subclasses declare their grammar with the @element decorator and
    Attribute fields (see grammar.py). A builder is a value: every mutator
    returns a new builder and leaves the receiver untouched, so a partially
    built element can be reused without aliasing.

    Attributes are set by calling the field, or as constructor keywords:

        >>> Say('Hello').voice('alice').language('en-US')
        >>> Say('Hello', voice='alice', language='en-US')

    Children are added through methods named after the lower-cased child
    tag. They accept a builder, or the arguments to construct one:

        >>> Response().say(Say('Hello')).hangup()
        >>> Response().say('Hello', voice='alice')

    A child method the element does not allow raises IllegalChildError:

        >>> Response().number('+15551234567')  # Number belongs in Dial
        Traceback (most recent call last):
        ...
        IllegalChildError: 'Number' is not a valid child of 'Response'. ...
    """

    tag: ClassVar[str] = ''
    text_mode: ClassVar[str] = NO_TEXT
    _valid_children: ClassVar[frozenset[str]] = frozenset()
    _child_cardinality: ClassVar[dict[str, tuple[int, int | None]]] = {}
    _attributes: ClassVar[dict[str, Attribute]] = {}

    __slots__ = ('_node',)

    def __init__(self, text: str | None = None, **attributes: Any) -> None:
        """Create the element.

        Args:
            text: Text payload. Required, optional or forbidden depending on
                the element.
            **attributes: Attribute values keyed by setter name, applied in
                keyword order.

        Raises:
            StructuralError: If the text does not match the element's text mode.
            InvalidAttributeError: If an attribute is unknown or has a bad value.
        """
        if not self.tag:
            raise TypeError(
                f"'{type(self).__name__}' is not a declared element, use @element"
            )

        node = MarkupNode(self.tag)
        if text is not None:
            if self.text_mode == NO_TEXT:
                raise StructuralError(f"'{self.tag}' does not accept text")
            if not isinstance(text, str):
                raise StructuralError(
                    f"Text of '{self.tag}' must be a string, "
                    f"got {type(text).__name__}"
                )
            char = unrepresentable_character(text)
            if char is not None:
                raise StructuralError(f"Text of '{self.tag}' cannot contain {char!r}")
            node.set_text(text)
        elif self.text_mode == REQUIRED_TEXT:
            raise StructuralError(f"'{self.tag}' requires text")

        for key, value in attributes.items():
            self._push_attribute(node, self._lookup_attribute(key), value)

        self._node = node

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        parts = [] if self._node.text is None else [repr(self._node.text)]
        parts.extend(f"{k}={v!r}" for k, v in self._node.attributes)
        if self._node.children:
            parts.append(f"children={len(self._node.children)}")
        return f"{type(self).__name__}({', '.join(parts)})"

    def __str__(self) -> str:
        return self.to_xml()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TwimlElement):
            return NotImplemented
        return _node_key(self._node) == _node_key(other._node)

    __hash__ = None  # type: ignore[assignment]

    def __getattr__(self, name: str) -> Any:
        """Resolve child methods by name.

        Args:
            name: Lower-cased tag of a child element (e.g. 'say', 'dial').

        Raises:
            IllegalChildError: If ``name`` is a known element not allowed here.
            InvalidAttributeError: If ``name`` is an attribute of another element.
            AttributeError: Otherwise.
        """
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )

        child_cls = element_for_method(name)
        if child_cls is not None:
            if child_cls.tag not in self._valid_children:
                raise IllegalChildError(self._illegal_child_message(child_cls.tag))
            return self._make_child_method(name, child_cls)

        if is_attribute_method(name):
            raise InvalidAttributeError(
                f"'{name}' is not a valid attribute of '{self.tag}'"
            )

        raise AttributeError(f"'{type(self).__name__}' has no element '{name}'")

    def __dir__(self) -> list[str]:
        names = set(super().__dir__())
        names.update(tag.lower() for tag in self._valid_children)
        return sorted(names)

    # ==================== Properties ====================

    @property
    def node(self) -> MarkupNode:
        """The wrapped node. Treat it as read-only."""
        return self._node

    @property
    def text(self) -> str | None:
        """The text payload, if any."""
        return self._node.text

    @property
    def attributes(self) -> dict[str, str]:
        """Rendered attribute values in insertion order."""
        return dict(self._node.attributes)

    @property
    def children(self) -> tuple[MarkupNode, ...]:
        """Child nodes in insertion order."""
        return tuple(self._node.children)

    # ==================== Building ====================

    def append(self, child: TwimlElement) -> TwimlElement:
        """Return a new builder with ``child`` appended.

        Raises:
            IllegalChildError: If the child kind is not legal for this element.
            StructuralError: If this element carries text.
            TooManyChildrenError: If the child kind exceeds its maximum count.
        """
        if not isinstance(child, TwimlElement):
            raise IllegalChildError(
                f"Children of '{self.tag}' must be TwiML elements, "
                f"got {type(child).__name__}"
            )
        if child.tag not in self._valid_children:
            raise IllegalChildError(self._illegal_child_message(child.tag))
        if self._node.text is not None:
            raise StructuralError(
                f"'{self.tag}' has text and cannot also have children"
            )

        _, max_count = self._child_cardinality[child.tag]
        if max_count is not None:
            count = sum(1 for n in self._node.children if n.name == child.tag)
            if count >= max_count:
                raise TooManyChildrenError(
                    f"'{self.tag}' allows at most {max_count} '{child.tag}', "
                    f"but has {count + 1}"
                )

        node = self._node.copy()
        node.append_child(child._node)
        return self._evolve(node)

    def set(self, **attributes: Any) -> TwimlElement:
        """Return a new builder with several attributes set, in keyword order.

        Example:
            >>> Gather().set(action='/menu', num_digits=1)
        """
        node = self._node.copy()
        for key, value in attributes.items():
            self._push_attribute(node, self._lookup_attribute(key), value)
        return self._evolve(node)

    def to_xml(self, options: RenderOptions | None = None) -> str:
        """Render this element as a complete XML document."""
        from .serializer import render

        return render(self, options)

    # ==================== Internals ====================

    def _evolve(self, node: MarkupNode) -> TwimlElement:
        clone = object.__new__(type(self))
        clone._node = node
        return clone

    def _with_attribute(self, attribute: Attribute, value: Any) -> TwimlElement:
        node = self._node.copy()
        self._push_attribute(node, attribute, value)
        return self._evolve(node)

    def _push_attribute(
        self, node: MarkupNode, attribute: Attribute, value: Any
    ) -> None:
        if node.get_attr(attribute.name) is not None:
            raise DuplicateAttributeError(
                f"Attribute '{attribute.name}' is already set on '{self.tag}'"
            )
        node.push_attribute(attribute.name, attribute.format(value, self.tag))

    def _lookup_attribute(self, key: str) -> Attribute:
        attribute = self._attributes.get(key)
        if attribute is None:
            raise InvalidAttributeError(
                f"'{key}' is not a valid attribute of '{self.tag}'"
            )
        return attribute

    def _illegal_child_message(self, child_tag: str) -> str:
        if self._valid_children:
            return (
                f"'{child_tag}' is not a valid child of '{self.tag}'. "
                f"Valid children: {', '.join(sorted(self._valid_children))}"
            )
        return (
            f"'{child_tag}' is not a valid child of '{self.tag}'. "
            f"'{self.tag}' cannot have children"
        )

    def _make_child_method(
        self, name: str, child_cls: type[TwimlElement]
    ) -> Callable[..., TwimlElement]:
        """Create the child method for a legal child kind."""

        def child_method(child: Any = None, /, **attributes: Any) -> TwimlElement:
            if isinstance(child, TwimlElement):
                if not isinstance(child, child_cls):
                    raise IllegalChildError(
                        f"'{self.tag}.{name}()' expects a '{child_cls.tag}' "
                        f"element, got '{child.tag}'"
                    )
                if attributes:
                    child = child.set(**attributes)
            else:
                child = child_cls(child, **attributes)
            return self.append(child)

        child_method.__name__ = name
        child_method.__qualname__ = f"{type(self).__name__}.{name}"
        child_method.__doc__ = f"Append a '{child_cls.tag}' child."
        return child_method


def _node_key(node: MarkupNode) -> tuple:
    return (
        node.name,
        node.text,
        tuple(node.attributes),
        tuple(_node_key(child) for child in node.children),
    )
