# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TwiML builder exceptions."""

from __future__ import annotations


class TwimlError(Exception):
    """Base exception for TwiML builder errors."""

    pass


class StructuralError(TwimlError):
    """Raised when a tree cannot be rendered as a single well-formed document.

    Covers a missing or multiple root, text placed on an element that
    forbids it, and text mixed with children.
    """

    pass


class MissingChildError(StructuralError):
    """Raised when a required child tag is missing."""

    pass


class TooManyChildrenError(StructuralError):
    """Raised when a child tag exceeds its maximum allowed count."""

    pass


class IllegalChildError(TwimlError):
    """Raised when a child element is attached to a parent that forbids it."""

    pass


class InvalidAttributeError(TwimlError):
    """Raised when an attribute is not legal for an element or has a bad value."""

    pass


class DuplicateAttributeError(InvalidAttributeError):
    """Raised when the same attribute is set twice on one element."""

    pass
