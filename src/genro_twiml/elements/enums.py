# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Enumerated attribute values.

Each member's value is the literal token written in the document.
"""

from __future__ import annotations

from enum import Enum


class Method(str, Enum):
    """HTTP method used for callbacks."""

    GET = 'GET'
    POST = 'POST'


class GatherInput(str, Enum):
    """Input kinds accepted by Gather."""

    DTMF = 'dtmf'
    SPEECH = 'speech'
    DTMF_SPEECH = 'dtmf speech'


class DialRecord(str, Enum):
    """Recording modes of Dial."""

    DO_NOT_RECORD = 'do-not-record'
    RECORD_FROM_ANSWER = 'record-from-answer'
    RECORD_FROM_RINGING = 'record-from-ringing'
    RECORD_FROM_ANSWER_DUAL = 'record-from-answer-dual'
    RECORD_FROM_RINGING_DUAL = 'record-from-ringing-dual'


class ConferenceRecord(str, Enum):
    """Recording modes of Conference."""

    DO_NOT_RECORD = 'do-not-record'
    RECORD_FROM_START = 'record-from-start'


class Trim(str, Enum):
    TRIM_SILENCE = 'trim-silence'
    DO_NOT_TRIM = 'do-not-trim'


class RejectReason(str, Enum):
    REJECTED = 'rejected'
    BUSY = 'busy'


class StreamTrack(str, Enum):
    """Audio tracks forked by Stream."""

    INBOUND_TRACK = 'inbound_track'
    OUTBOUND_TRACK = 'outbound_track'
    BOTH_TRACKS = 'both_tracks'
