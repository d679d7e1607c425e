# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-TwiML - Fluent builders for TwiML call and message flows.

A lightweight, zero-dependency library that builds TwiML documents from
typed element builders and renders them as single-line XML.

Example:
    >>> from genro_twiml import Response, Say
    >>> str(Response().say(Say('Welcome')).redirect('/next'))
    '<?xml version="1.1" encoding="UTF-8"?><Response><Say>Welcome</Say><Redirect>/next</Redirect></Response>'
"""

__version__ = "0.1.0"

from .builder import TwimlElement
from .config import RenderOptions
from .elements import (
    Body,
    Client,
    Conference,
    ConferenceRecord,
    Connect,
    Dial,
    DialRecord,
    Enqueue,
    Gather,
    GatherInput,
    Hangup,
    Leave,
    Media,
    Message,
    Method,
    Number,
    Pause,
    Pay,
    Play,
    Prompt,
    Queue,
    Record,
    Redirect,
    Refer,
    Reject,
    RejectReason,
    Response,
    Room,
    Say,
    Sip,
    Sms,
    Stream,
    StreamTrack,
    Trim,
)
from .exceptions import (
    DuplicateAttributeError,
    IllegalChildError,
    InvalidAttributeError,
    MissingChildError,
    StructuralError,
    TooManyChildrenError,
    TwimlError,
)
from .grammar import (
    NO_TEXT,
    OPTIONAL_TEXT,
    REQUIRED_TEXT,
    Attribute,
    element,
    get_element,
)
from .node import MarkupNode
from .serializer import CONTENT_TYPE, escape, render, render_bytes

__all__ = [
    # Core classes
    "MarkupNode",
    "TwimlElement",
    "RenderOptions",
    # Grammar
    "Attribute",
    "element",
    "get_element",
    "NO_TEXT",
    "OPTIONAL_TEXT",
    "REQUIRED_TEXT",
    # Serializer
    "render",
    "render_bytes",
    "escape",
    "CONTENT_TYPE",
    # Elements
    "Response",
    "Say",
    "Play",
    "Pause",
    "Gather",
    "Redirect",
    "Hangup",
    "Reject",
    "Record",
    "Enqueue",
    "Leave",
    "Dial",
    "Number",
    "Client",
    "Conference",
    "Sip",
    "Queue",
    "Refer",
    "Message",
    "Body",
    "Media",
    "Sms",
    "Connect",
    "Stream",
    "Room",
    "Pay",
    "Prompt",
    # Enumerations
    "Method",
    "GatherInput",
    "DialRecord",
    "ConferenceRecord",
    "Trim",
    "RejectReason",
    "StreamTrack",
    # Exceptions
    "TwimlError",
    "StructuralError",
    "MissingChildError",
    "TooManyChildrenError",
    "IllegalChildError",
    "InvalidAttributeError",
    "DuplicateAttributeError",
]
