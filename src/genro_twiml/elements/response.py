# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Response - the document root."""

from __future__ import annotations

from ..builder import TwimlElement
from ..grammar import NO_TEXT, element


@element(
    children=(
        'Say', 'Play', 'Pause', 'Gather', 'Redirect', 'Hangup', 'Reject',
        'Record', 'Dial', 'Sms', 'Message', 'Enqueue', 'Leave', 'Connect',
        'Pay', 'Refer',
    ),
    text=NO_TEXT,
)
class Response(TwimlElement):
    """Root of every TwiML document.

    Verbs are executed in document order, so the order of the child method
    calls is the order of the call flow.

    Example:
        >>> response = (
        ...     Response()
        ...     .say(Say('Welcome to our service').voice('alice'))
        ...     .redirect('/next-step')
        ... )
        >>> response.to_xml()
        '<?xml version="1.1" encoding="UTF-8"?><Response><Say voice="alice">...'
    """

    __slots__ = ()
