# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Messaging verbs."""

from __future__ import annotations

from ..builder import TwimlElement
from ..grammar import NO_TEXT, REQUIRED_TEXT, Attribute, element
from .enums import Method


@element(text=REQUIRED_TEXT)
class Body(TwimlElement):
    __slots__ = ()


@element(text=REQUIRED_TEXT)
class Media(TwimlElement):
    """Media attachment. The text is the media URL."""

    __slots__ = ()


@element(children=('Body[:1]', 'Media[:10]'), text=NO_TEXT)
class Message(TwimlElement):
    """Send a message; content goes in Body and Media children.

    Example:
        >>> Message(to='+15551234567', from_='+15559876543').body('See you at 2pm')
    """

    __slots__ = ()

    to = Attribute()
    from_ = Attribute('from')
    action = Attribute()
    method = Attribute(kind=Method)
    status_callback = Attribute('statusCallback')


@element(text=REQUIRED_TEXT)
class Sms(TwimlElement):
    """Legacy text message verb; the text is the message."""

    __slots__ = ()

    to = Attribute()
    from_ = Attribute('from')
    action = Attribute()
    method = Attribute(kind=Method)
    status_callback = Attribute('statusCallback')
