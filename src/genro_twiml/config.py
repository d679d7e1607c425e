# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Rendering configuration."""

from __future__ import annotations

import codecs
from dataclasses import dataclass


@dataclass(frozen=True)
class RenderOptions:
    """Options controlling how a tree is serialized.

    The defaults produce the wire format: an XML 1.1 declaration, UTF-8,
    everything on one line, and every node checked against its element
    declaration.

    Attributes:
        xml_version: Version written in the XML declaration.
        encoding: Encoding name written in the declaration and used by
            render_bytes().
        xml_declaration: Emit the ``<?xml ...?>`` declaration.
        indent: If set, put each element on its own line, indented by this
            string per level. Debugging aid only.
        strict: Check each node against its element declaration before
            rendering. With strict off, any tree of MarkupNode renders.
    """

    xml_version: str = '1.1'
    encoding: str = 'UTF-8'
    xml_declaration: bool = True
    indent: str | None = None
    strict: bool = True

    def __post_init__(self) -> None:
        """Validate render options."""
        if self.xml_version not in ('1.0', '1.1'):
            raise ValueError(f"xml_version must be '1.0' or '1.1', not {self.xml_version!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {self.encoding!r}") from None
        if self.indent is not None and self.indent.strip(' \t'):
            raise ValueError("indent must contain only spaces or tabs")

    @classmethod
    def debug(cls, indent: str = '  ') -> RenderOptions:
        """Options for a human-readable, indented layout."""
        return cls(indent=indent)
