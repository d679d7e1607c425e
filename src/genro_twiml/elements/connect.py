# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Connect, Pay and their nouns."""

from __future__ import annotations

from ..builder import TwimlElement
from ..grammar import NO_TEXT, REQUIRED_TEXT, Attribute, element
from .enums import Method, StreamTrack


@element(text=NO_TEXT)
class Stream(TwimlElement):
    """Fork the call audio to a websocket at ``url``."""

    __slots__ = ()

    url = Attribute()
    name = Attribute()
    track = Attribute(kind=StreamTrack)
    status_callback = Attribute('statusCallback')


@element(text=REQUIRED_TEXT)
class Room(TwimlElement):
    """Video room. The text is the room name."""

    __slots__ = ()

    participant_identity = Attribute('participantIdentity')


@element(children=('Stream[:1]', 'Room[:1]'), text=NO_TEXT)
class Connect(TwimlElement):
    __slots__ = ()

    action = Attribute()
    method = Attribute(kind=Method)


@element(children=('Say', 'Play', 'Pause'), text=NO_TEXT)
class Prompt(TwimlElement):
    """Customized prompt played during a Pay flow."""

    __slots__ = ()

    for_ = Attribute('for')
    attempt = Attribute()
    card_type = Attribute('cardType')
    error_type = Attribute('errorType')


@element(children=('Prompt',), text=NO_TEXT)
class Pay(TwimlElement):
    """Collect payment details over the call.

    Example:
        >>> Pay(charge_amount='10.00', currency='usd').prompt(
        ...     Prompt(for_='payment-card-number').say('Enter your card number')
        ... )
    """

    __slots__ = ()

    input = Attribute()
    action = Attribute()
    status_callback = Attribute('statusCallback')
    timeout = Attribute(kind=int)
    max_attempts = Attribute('maxAttempts', int)
    payment_connector = Attribute('paymentConnector')
    charge_amount = Attribute('chargeAmount')
    currency = Attribute()
    description = Attribute()
    token_type = Attribute('tokenType')
    valid_card_types = Attribute('validCardTypes')
    security_code = Attribute('securityCode', bool)
    postal_code = Attribute('postalCode', bool)
