# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TwiML element builders."""

from .connect import Connect, Pay, Prompt, Room, Stream
from .dial import Client, Conference, Dial, Number, Queue, Refer, Sip
from .enums import (
    ConferenceRecord,
    DialRecord,
    GatherInput,
    Method,
    RejectReason,
    StreamTrack,
    Trim,
)
from .messaging import Body, Media, Message, Sms
from .response import Response
from .voice import (
    Enqueue,
    Gather,
    Hangup,
    Leave,
    Pause,
    Play,
    Record,
    Redirect,
    Reject,
    Say,
)

__all__ = [
    'Response',
    # Voice verbs
    'Say',
    'Play',
    'Pause',
    'Gather',
    'Redirect',
    'Hangup',
    'Reject',
    'Record',
    'Enqueue',
    'Leave',
    # Dial and nouns
    'Dial',
    'Number',
    'Client',
    'Conference',
    'Sip',
    'Queue',
    'Refer',
    # Messaging
    'Message',
    'Body',
    'Media',
    'Sms',
    # Connect and Pay
    'Connect',
    'Stream',
    'Room',
    'Pay',
    'Prompt',
    # Enumerations
    'Method',
    'GatherInput',
    'DialRecord',
    'ConferenceRecord',
    'Trim',
    'RejectReason',
    'StreamTrack',
]
