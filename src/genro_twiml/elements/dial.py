# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Dial and its destination nouns, plus Refer.

A Dial either carries a bare destination number as text, or nests one or
more destination nouns, never both:

    >>> Dial('+15551234567')
    >>> Dial().timeout(20).number(Number('+18005551234')).client('sales')
"""

from __future__ import annotations

from ..builder import TwimlElement
from ..grammar import NO_TEXT, OPTIONAL_TEXT, REQUIRED_TEXT, Attribute, element
from .enums import ConferenceRecord, DialRecord, Method


@element(text=REQUIRED_TEXT)
class Number(TwimlElement):
    """Phone number destination."""

    __slots__ = ()

    send_digits = Attribute('sendDigits')
    url = Attribute()
    method = Attribute(kind=Method)
    status_callback = Attribute('statusCallback')
    status_callback_method = Attribute('statusCallbackMethod', Method)


@element(text=REQUIRED_TEXT)
class Client(TwimlElement):
    """Client identity destination."""

    __slots__ = ()

    url = Attribute()
    method = Attribute(kind=Method)
    status_callback = Attribute('statusCallback')
    status_callback_method = Attribute('statusCallbackMethod', Method)


@element(text=REQUIRED_TEXT)
class Conference(TwimlElement):
    """Conference room destination. The text is the room name."""

    __slots__ = ()

    muted = Attribute(kind=bool)
    beep = Attribute(kind=bool)
    start_conference_on_enter = Attribute('startConferenceOnEnter', bool)
    end_conference_on_exit = Attribute('endConferenceOnExit', bool)
    max_participants = Attribute('maxParticipants', int)
    record = Attribute(kind=ConferenceRecord)
    wait_url = Attribute('waitUrl')
    status_callback = Attribute('statusCallback')


@element(text=REQUIRED_TEXT)
class Sip(TwimlElement):
    """SIP endpoint. The text is the SIP URI."""

    __slots__ = ()

    username = Attribute()
    password = Attribute()
    url = Attribute()
    method = Attribute(kind=Method)


@element(text=REQUIRED_TEXT)
class Queue(TwimlElement):
    __slots__ = ()

    url = Attribute()
    method = Attribute(kind=Method)


@element(children=('Number', 'Client', 'Conference', 'Sip', 'Queue'), text=OPTIONAL_TEXT)
class Dial(TwimlElement):
    """Connect the caller to another party."""

    __slots__ = ()

    action = Attribute()
    method = Attribute(kind=Method)
    timeout = Attribute(kind=int)
    caller_id = Attribute('callerId')
    record = Attribute(kind=DialRecord)
    hangup_on_star = Attribute('hangupOnStar', bool)
    time_limit = Attribute('timeLimit', int)
    answer_on_bridge = Attribute('answerOnBridge', bool)


@element(children=('Sip[1]',), text=NO_TEXT)
class Refer(TwimlElement):
    """Transfer a SIP call to the single nested Sip target."""

    __slots__ = ()

    action = Attribute()
    method = Attribute(kind=Method)
