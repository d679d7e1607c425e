# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Voice verbs: prompts, input gathering, recording and call control.

Example:
    >>> menu = (
    ...     Gather()
    ...     .action('/menu')
    ...     .num_digits(1)
    ...     .say(Say('For sales, press 1.').voice('alice'))
    ... )
"""

from __future__ import annotations

from ..builder import TwimlElement
from ..grammar import NO_TEXT, REQUIRED_TEXT, Attribute, element
from .enums import GatherInput, Method, RejectReason, Trim


@element(text=REQUIRED_TEXT)
class Say(TwimlElement):
    """Text-to-speech prompt. The text is what gets spoken."""

    __slots__ = ()

    voice = Attribute()
    language = Attribute()
    loop = Attribute(kind=int)
    pitch = Attribute()
    rate = Attribute()


@element(text=REQUIRED_TEXT)
class Play(TwimlElement):
    """Play an audio file. The text is the file URL."""

    __slots__ = ()

    loop = Attribute(kind=int)
    digits = Attribute()


@element(text=NO_TEXT)
class Pause(TwimlElement):
    """Silent pause; ``length`` is in seconds."""

    __slots__ = ()

    length = Attribute(kind=int)


@element(children=('Say', 'Play', 'Pause'), text=NO_TEXT)
class Gather(TwimlElement):
    """Collect digits or speech from the caller.

    Nested Say, Play and Pause prompts are played while waiting for input.
    """

    __slots__ = ()

    action = Attribute()
    method = Attribute(kind=Method)
    num_digits = Attribute('numDigits', int)
    timeout = Attribute(kind=int)
    input = Attribute(kind=GatherInput)
    language = Attribute()
    finish_on_key = Attribute('finishOnKey')
    hints = Attribute()
    speech_timeout = Attribute('speechTimeout')
    action_on_empty_result = Attribute('actionOnEmptyResult', bool)


@element(text=REQUIRED_TEXT)
class Redirect(TwimlElement):
    """Transfer control to the document at the URL given as text."""

    __slots__ = ()

    method = Attribute(kind=Method)


@element(text=NO_TEXT)
class Hangup(TwimlElement):
    __slots__ = ()


@element(text=NO_TEXT)
class Reject(TwimlElement):
    __slots__ = ()

    reason = Attribute(kind=RejectReason)


@element(text=NO_TEXT)
class Record(TwimlElement):
    """Record the caller's voice."""

    __slots__ = ()

    action = Attribute()
    method = Attribute(kind=Method)
    timeout = Attribute(kind=int)
    finish_on_key = Attribute('finishOnKey')
    max_length = Attribute('maxLength', int)
    play_beep = Attribute('playBeep', bool)
    trim = Attribute(kind=Trim)
    recording_status_callback = Attribute('recordingStatusCallback')
    recording_status_callback_method = Attribute('recordingStatusCallbackMethod', Method)
    transcribe = Attribute(kind=bool)
    transcribe_callback = Attribute('transcribeCallback')


@element(text=REQUIRED_TEXT)
class Enqueue(TwimlElement):
    """Place the caller in the queue named by the text."""

    __slots__ = ()

    action = Attribute()
    method = Attribute(kind=Method)
    wait_url = Attribute('waitUrl')
    wait_url_method = Attribute('waitUrlMethod', Method)


@element(text=NO_TEXT)
class Leave(TwimlElement):
    __slots__ = ()
