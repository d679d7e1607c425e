# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Serializer - turn a TwiML tree into an XML document.

The output is a pure function of the tree: a fixed declaration followed by
exactly one root element, written depth-first with attributes and children
in insertion order. Elements with neither text nor children use the
self-closing form. No whitespace is inserted unless RenderOptions.indent
is set.

Example:
    >>> render(Response().say('Welcome').redirect('/next'))
    '<?xml version="1.1" encoding="UTF-8"?><Response><Say>Welcome</Say><Redirect>/next</Redirect></Response>'
"""

from __future__ import annotations

import logging
import re
from typing import Any
from xml.sax.saxutils import escape as _sax_escape

from .builder import TwimlElement
from .config import RenderOptions
from .exceptions import MissingChildError, StructuralError, TooManyChildrenError
from .grammar import NO_TEXT, REQUIRED_TEXT, get_element, unrepresentable_character
from .node import MarkupNode

logger = logging.getLogger(__name__)

CONTENT_TYPE = 'text/xml'

_ENTITIES = {'"': '&quot;', "'": '&apos;'}
# Characters a parser would normalise away if written literally
_TEXT_ENTITIES = {**_ENTITIES, '\r': '&#13;', '\u2028': '&#x2028;'}
_ATTRIBUTE_ENTITIES = {**_TEXT_ENTITIES, '\t': '&#9;', '\n': '&#10;'}

# XML 1.1 restricted characters, written as character references
_RESTRICTED = re.compile(r'[\x01-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]')
# Control characters XML 1.0 does not allow in any form
_XML10_FORBIDDEN = re.compile(r'[\x01-\x08\x0b\x0c\x0e-\x1f]')


def escape(value: str, attribute: bool = False, xml_version: str = '1.1') -> str:
    """Escape a string for use in text or a double-quoted attribute.

    ``& < > " '`` become entities. Restricted control characters become
    character references, and so does whitespace the parser would otherwise
    normalise: ``\\r`` and U+2028 in text, plus ``\\t \\n`` in attribute
    values.

    Raises:
        StructuralError: If the value holds a character XML cannot carry:
            NUL, a lone surrogate, U+FFFE or U+FFFF, or under XML 1.0 a
            control character other than tab, newline and carriage return.
    """
    char = unrepresentable_character(value)
    if char is None and xml_version == '1.0':
        match = _XML10_FORBIDDEN.search(value)
        if match:
            char = match.group()
    if char is not None:
        raise StructuralError(f"Cannot represent {char!r} in XML {xml_version}")

    escaped = _sax_escape(value, _ATTRIBUTE_ENTITIES if attribute else _TEXT_ENTITIES)
    return _RESTRICTED.sub(_character_reference, escaped)


def _character_reference(match: re.Match[str]) -> str:
    return f'&#x{ord(match.group()):X};'


def render(root: Any, options: RenderOptions | None = None) -> str:
    """Render a tree as a single XML document.

    Args:
        root: A TwimlElement, a MarkupNode, or a sequence holding exactly one
            of them.
        options: Rendering options. Defaults to the wire format.

    Returns:
        The XML document as a string.

    Raises:
        StructuralError: If there is not exactly one root, or (in strict mode)
            a node breaks its element declaration.
    """
    if options is None:
        options = RenderOptions()

    node = _resolve_root(root)
    if options.strict:
        _check_node(node)

    out: list[str] = []
    if options.xml_declaration:
        out.append(
            f'<?xml version="{options.xml_version}" encoding="{options.encoding}"?>'
        )
    _write(node, out, options, 0)

    document = ''.join(out)
    if options.indent is not None:
        document = document.lstrip('\n')

    logger.debug("Rendered <%s> document (%d characters)", node.name, len(document))
    return document


def render_bytes(root: Any, options: RenderOptions | None = None) -> bytes:
    """Render a tree and encode it, ready to be sent as a ``text/xml`` body."""
    if options is None:
        options = RenderOptions()
    return render(root, options).encode(options.encoding)


def _resolve_root(root: Any) -> MarkupNode:
    if root is None:
        raise StructuralError("Cannot render a document without a root element")

    if isinstance(root, (list, tuple)):
        if len(root) != 1:
            raise StructuralError(
                f"A document must have exactly one root element, got {len(root)}"
            )
        root = root[0]

    if isinstance(root, TwimlElement):
        return root.node
    if isinstance(root, MarkupNode):
        return root
    raise StructuralError(f"Cannot render {type(root).__name__} as a document root")


def _write(
    node: MarkupNode, out: list[str], options: RenderOptions, depth: int
) -> None:
    """Write a node and its subtree in pre-order."""
    indent = options.indent
    version = options.xml_version
    pad = '' if indent is None else '\n' + indent * depth

    out.append(f"{pad}<{node.name}")
    for name, value in node.attributes:
        value = escape(value, attribute=True, xml_version=version)
        out.append(f' {name}="{value}"')

    if node.is_empty:
        out.append('/>')
        return

    out.append('>')
    if node.text is not None:
        out.append(escape(node.text, xml_version=version))
    for child in node.children:
        _write(child, out, options, depth + 1)
    if node.children:
        out.append(pad)
    out.append(f"</{node.name}>")


def _check_node(node: MarkupNode) -> None:
    """Recursively check a node against its element declaration."""
    tag = node.name
    cls = get_element(tag)
    if cls is None:
        raise StructuralError(f"Unknown element '{tag}'")

    if node.text is not None:
        if cls.text_mode == NO_TEXT:
            raise StructuralError(f"'{tag}' does not accept text")
        if node.children:
            raise StructuralError(f"'{tag}' has both text and children")
    elif cls.text_mode == REQUIRED_TEXT:
        raise StructuralError(f"'{tag}' requires text")

    legal = {attribute.name for attribute in cls._attributes.values()}
    seen: set[str] = set()
    for name, _ in node.attributes:
        if name not in legal:
            raise StructuralError(f"Attribute '{name}' is not allowed on '{tag}'")
        if name in seen:
            raise StructuralError(f"Attribute '{name}' appears twice on '{tag}'")
        seen.add(name)

    child_counts: dict[str, int] = {}
    for child in node.children:
        if child.name not in cls._valid_children:
            raise StructuralError(f"'{child.name}' is not a valid child of '{tag}'")
        child_counts[child.name] = child_counts.get(child.name, 0) + 1
        _check_node(child)

    for child_tag, (min_count, max_count) in cls._child_cardinality.items():
        actual = child_counts.get(child_tag, 0)
        if actual < min_count:
            raise MissingChildError(
                f"'{tag}' requires at least {min_count} '{child_tag}', "
                f"but has {actual}"
            )
        if max_count is not None and actual > max_count:
            raise TooManyChildrenError(
                f"'{tag}' allows at most {max_count} '{child_tag}', "
                f"but has {actual}"
            )
