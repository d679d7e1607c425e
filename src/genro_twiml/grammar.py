# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Grammar system for TwiML elements.

An element class declares its grammar in two places:

- the ``@element`` class decorator: XML tag, legal children (with optional
  cardinality) and whether the element carries text;
- ``Attribute`` fields in the class body: the legal attributes, each with
  a Python method name, an XML name and a value kind.

Example:
    >>> @element(children=('Say', 'Play', 'Pause'))
    ... class Gather(TwimlElement):
    ...     action = Attribute()
    ...     num_digits = Attribute('numDigits', int)

Every decorated class is recorded in a module-level registry, so builders
can resolve child methods (``response.say(...)``) by name.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from .exceptions import InvalidAttributeError

if TYPE_CHECKING:
    from .builder import TwimlElement


NO_TEXT = 'none'
OPTIONAL_TEXT = 'optional'
REQUIRED_TEXT = 'required'

TEXT_MODES = frozenset((NO_TEXT, OPTIONAL_TEXT, REQUIRED_TEXT))

# Pattern for tag with optional cardinality: tag, tag[n], tag[n:], tag[:m], tag[n:m]
_TAG_PATTERN = re.compile(r'^([a-zA-Z_][a-zA-Z0-9_]*)\s*(?:\[(\d*):?(\d*)\])?$')

# Characters no XML version can carry, not even as character references
_UNREPRESENTABLE = re.compile(r'[\x00\ud800-\udfff\ufffe\uffff]')

# tag -> element class
_elements: dict[str, type[TwimlElement]] = {}
# child method name ('say') -> tag ('Say')
_child_methods: dict[str, str] = {}
# every attribute method name declared by any element
_attribute_methods: set[str] = set()


def unrepresentable_character(value: str) -> str | None:
    """Return the first character of ``value`` that XML cannot carry, if any."""
    match = _UNREPRESENTABLE.search(value)
    return None if match is None else match.group()


def _parse_tag_spec(spec: str) -> tuple[str, int, int | None]:
    """Parse a tag specification with optional cardinality.

    Args:
        spec: Tag spec like 'Say', 'Sip[1]', 'Media[:10]', 'Body[0:1]'

    Returns:
        Tuple of (tag_name, min_count, max_count)

    Raises:
        ValueError: If spec format is invalid.

    Examples:
        >>> _parse_tag_spec('Say')
        ('Say', 0, None)
        >>> _parse_tag_spec('Sip[1]')
        ('Sip', 1, 1)
        >>> _parse_tag_spec('Number[1:]')
        ('Number', 1, None)
        >>> _parse_tag_spec('Media[:10]')
        ('Media', 0, 10)
    """
    match = _TAG_PATTERN.match(spec.strip())
    if not match:
        raise ValueError(f"Invalid tag specification: '{spec}'")

    tag = match.group(1)
    min_str = match.group(2)
    max_str = match.group(3)

    # No brackets: unlimited (0..∞)
    if min_str is None and max_str is None:
        return tag, 0, None

    if ':' not in spec:
        # tag[n] - exactly n
        if not min_str:
            raise ValueError(f"Invalid tag specification: '{spec}' (empty brackets)")
        n = int(min_str)
        return tag, n, n

    min_count = int(min_str) if min_str else 0
    max_count = int(max_str) if max_str else None

    if max_count is not None and max_count < min_count:
        raise ValueError(f"Invalid tag specification: '{spec}' (max < min)")

    return tag, min_count, max_count


class Attribute:
    """A typed attribute field of an element.

    Declared in the class body of an element builder. The Python name of the
    field is the setter name; ``name`` is the XML attribute name and
    defaults to the Python name.

    Accessed on a builder instance, the field returns a setter bound to that
    builder. The setter returns a new builder with the attribute appended.

    Value kinds:
        - str: a plain string (not an Enum member), rendered verbatim.
        - int: non-negative integer, or a string of decimal digits.
        - bool: rendered as the literal words 'true' / 'false'.
        - Enum subclass: a member or one of its literal values.
    """

    __slots__ = ('name', 'kind', 'method_name')

    def __init__(self, name: str | None = None, kind: type = str) -> None:
        self.name = name
        self.kind = kind
        self.method_name: str | None = None

    def __set_name__(self, owner: type, method_name: str) -> None:
        self.method_name = method_name
        if self.name is None:
            self.name = method_name

    def __repr__(self) -> str:
        return f"Attribute({self.name!r}, {getattr(self.kind, '__name__', self.kind)})"

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        attribute = self

        def setter(value: Any) -> TwimlElement:
            return instance._with_attribute(attribute, value)

        setter.__name__ = self.method_name or self.name
        setter.__qualname__ = f"{type(instance).__name__}.{setter.__name__}"
        setter.__doc__ = f"Set the '{self.name}' attribute."
        return setter

    def format(self, value: Any, tag: str) -> str:
        """Convert a value to its rendered string form.

        Args:
            value: The value passed to the setter.
            tag: The owning element tag, used in error messages.

        Raises:
            InvalidAttributeError: If the value does not fit the kind.
        """
        kind = self.kind

        if kind is bool:
            if not isinstance(value, bool):
                raise self._invalid(value, tag, 'a bool')
            return 'true' if value else 'false'

        if kind is int:
            if isinstance(value, bool):
                raise self._invalid(value, tag, 'a non-negative integer')
            if isinstance(value, str):
                if not (value.isascii() and value.isdigit()):
                    raise self._invalid(value, tag, 'a non-negative integer')
                return value
            if not isinstance(value, int) or value < 0:
                raise self._invalid(value, tag, 'a non-negative integer')
            return str(value)

        if isinstance(kind, type) and issubclass(kind, Enum):
            if isinstance(value, kind):
                return value.value
            try:
                return kind(value).value
            except ValueError:
                allowed = ', '.join(repr(m.value) for m in kind)
                raise self._invalid(value, tag, f"one of {allowed}") from None

        if not isinstance(value, str) or isinstance(value, Enum):
            raise self._invalid(value, tag, 'a string')
        char = unrepresentable_character(value)
        if char is not None:
            raise InvalidAttributeError(
                f"Attribute '{self.name}' of '{tag}' cannot contain {char!r}"
            )
        return value

    def _invalid(self, value: Any, tag: str, expected: str) -> InvalidAttributeError:
        return InvalidAttributeError(
            f"Attribute '{self.name}' of '{tag}' expects {expected}, got {value!r}"
        )


def element(
    tag: str | None = None,
    children: tuple[str, ...] = (),
    text: str = NO_TEXT,
) -> Callable[[type], type]:
    """Class decorator declaring the grammar of an element builder.

    The decorated class is registered, so its lower-cased tag becomes a child
    method name on every parent that allows it.

    Args:
        tag: XML tag. If None, the class name is used.
        children: Tuple of valid child tag specs. Each can be:
            - 'Tag' - allowed, no cardinality constraint (0..∞)
            - 'Tag[n]' - exactly n required
            - 'Tag[n:]' - at least n required
            - 'Tag[:m]' - at most m allowed
            - 'Tag[n:m]' - between n and m (inclusive)
            Empty tuple means no children allowed.
        text: One of NO_TEXT, OPTIONAL_TEXT, REQUIRED_TEXT.

    Example:
        >>> @element(children=('Body[:1]', 'Media[:10]'))
        ... class Message(TwimlElement):
        ...     to = Attribute()
        ...     from_ = Attribute('from')
    """
    if text not in TEXT_MODES:
        raise ValueError(f"Invalid text mode: '{text}'")

    parsed: dict[str, tuple[int, int | None]] = {}
    for spec in children:
        child_tag, min_c, max_c = _parse_tag_spec(spec)
        parsed[child_tag] = (min_c, max_c)

    def decorator(cls: type) -> type:
        cls.tag = tag or cls.__name__
        cls.text_mode = text
        cls._valid_children = frozenset(parsed)
        cls._child_cardinality = parsed

        attributes: dict[str, Attribute] = {}
        for klass in reversed(cls.__mro__):
            for value in vars(klass).values():
                if isinstance(value, Attribute):
                    attributes[value.method_name] = value
        cls._attributes = attributes

        _register(cls)
        return cls

    return decorator


def _register(cls: type[TwimlElement]) -> None:
    _elements[cls.tag] = cls
    _child_methods[cls.tag.lower()] = cls.tag
    _attribute_methods.update(cls._attributes)


def get_element(tag: str) -> type[TwimlElement] | None:
    """Get the element class registered for a tag."""
    return _elements.get(tag)


def element_for_method(name: str) -> type[TwimlElement] | None:
    """Get the element class whose child method is ``name`` ('say' -> Say)."""
    tag = _child_methods.get(name)
    if tag is None:
        return None
    return _elements.get(tag)


def is_attribute_method(name: str) -> bool:
    """True if some registered element declares an attribute named ``name``."""
    return name in _attribute_methods


def registered_tags() -> list[str]:
    """Get all registered element tags."""
    return list(_elements.keys())
