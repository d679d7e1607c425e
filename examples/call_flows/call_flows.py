# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Call flows - Example TwiML documents built with genro_twiml.

A didactic tour of the builders: each function returns a Response for a
typical IVR or messaging scenario. Run the module to print them all.
"""

from __future__ import annotations

from genro_twiml import (
    Body,
    Client,
    Conference,
    Dial,
    Gather,
    Message,
    Number,
    Pause,
    Play,
    Record,
    Redirect,
    RenderOptions,
    Response,
    Say,
)


def simple_response() -> Response:
    """Greet the caller and move on."""
    return (
        Response()
        .say(Say('Welcome to our service').voice('alice').language('en-US'))
        .redirect(Redirect('/next-step'))
    )


def speech_recognition() -> Response:
    """Ask the caller what they want and listen for speech."""
    return (
        Response()
        .say(Say("Please tell us what you'd like to do today"))
        .gather(
            Gather()
            .action('/process-speech')
            .method('POST')
            .input('speech')
            .language('en-US')
            .hints('support, sales, billing')
            .say(Say('You can say support, sales, or billing'))
        )
        .redirect(Redirect('/fallback'))
    )


def dtmf_menu() -> Response:
    """Classic press-a-key menu."""
    return (
        Response()
        .say(Say('Welcome to ACME Company').voice('alice'))
        .gather(
            Gather()
            .action('/menu-selection')
            .method('POST')
            .num_digits('1')
            .timeout(10)
            .say(
                Say('For sales, press 1. For support, press 2. For billing, press 3.')
                .voice('alice')
                .loop(3)
            )
        )
        .redirect(Redirect('/timeout'))
    )


def conference_call() -> Response:
    return (
        Response()
        .say(Say('You are about to join the conference.'))
        .dial(
            Dial().conference(
                Conference('Room123')
                .muted(False)
                .start_conference_on_enter(True)
                .end_conference_on_exit(False)
                .max_participants(10)
                .beep(True)
                .record('record-from-start')
            )
        )
    )


def voicemail() -> Response:
    """Record a message after the tone."""
    return (
        Response()
        .say(Say('Please leave a message after the tone. Press any key to finish.'))
        .record(
            Record()
            .action('/handle-recording')
            .method('POST')
            .max_length(30)
            .finish_on_key('*#')
            .play_beep(True)
            .transcribe(True)
            .transcribe_callback('/transcription-callback')
        )
        .say(Say('Thank you for your message.'))
    )


def multiple_destinations() -> Response:
    """Ring a phone number and a client at once."""
    return (
        Response()
        .say(Say('Connecting you to sales.'))
        .dial(
            Dial()
            .timeout(20)
            .caller_id('+15551234567')
            .action('/handle-dial-status')
            .method('POST')
            .record('record-from-answer')
            .number(Number('+18005551234').send_digits('1234#').url('/number-status'))
            .client(Client('sales_department').status_callback('/client-status'))
        )
    )


def sms_message() -> Response:
    return Response().message(
        Message()
        .to('+15551234567')
        .from_('+15559876543')
        .action('/message-status')
        .method('POST')
        .body(Body('Your appointment is confirmed for tomorrow at 2pm.'))
    )


def audio_with_gather() -> Response:
    """Play a greeting, then prompt for a selection."""
    return (
        Response()
        .play(Play('https://api.example.com/sounds/greeting.mp3'))
        .gather(
            Gather()
            .action('/process-selection')
            .method('POST')
            .timeout(10)
            .num_digits('1')
            .say(Say('Press a number to continue'))
            .play(Play('https://api.example.com/sounds/options.mp3'))
            .pause(Pause().length(1))
        )
    )


EXAMPLES = [
    ('Simple Response', simple_response),
    ('Speech Recognition', speech_recognition),
    ('DTMF Menu', dtmf_menu),
    ('Conference Call', conference_call),
    ('Recording', voicemail),
    ('Connecting to Multiple Destinations', multiple_destinations),
    ('SMS Message', sms_message),
    ('Playing Audio with Gather', audio_with_gather),
]


def main(pretty: bool = False) -> None:
    options = RenderOptions.debug() if pretty else None
    for n, (title, build) in enumerate(EXAMPLES, start=1):
        print(f"Example {n}: {title}")
        print(build().to_xml(options))
        print()


if __name__ == '__main__':
    main()
