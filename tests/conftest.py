"""
Shared pytest fixtures.
"""
import datetime as dt
from unittest.mock import patch

import pytest
import pytz

from components.progress_bar import ProgressBar, ProgressOptions
from errors import TransportError
from messengers import Messenger

START = dt.datetime(2024, 1, 1, 12, 0, 0, tzinfo=pytz.utc)


class FakeMessenger(Messenger):
    """Messenger that records every call instead of talking to a platform."""

    def __init__(self, channel_id='C123', fail=False):
        self.channel_id = channel_id
        self.fail = fail
        self.sent = []
        self.edited = []
        self._next_id = 1

    def send(self, channel, content, as_user=False):
        if self.fail:
            raise TransportError('channel_not_found', code='channel_not_found')
        self.sent.append((channel, content, as_user))
        return self.channel_id, self._new_id()

    def edit(self, channel, message_id, content):
        if self.fail:
            raise TransportError('message_not_found', code='message_not_found')
        self.edited.append((channel, message_id, content))
        return message_id

    def _new_id(self):
        message_id = f'm{self._next_id}'
        self._next_id += 1
        return message_id


class Clock:
    """Controls the time seen by the progress bar."""

    def __init__(self, now=START):
        self.now = now

    def advance(self, **kwargs):
        self.now += dt.timedelta(**kwargs)

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    clock_ = Clock()
    with patch('components.progress_bar.utc_now', clock_):
        yield clock_


@pytest.fixture
def messenger():
    return FakeMessenger()


@pytest.fixture
def progress_bar(messenger, clock):
    return ProgressBar(messenger, 'general', start=clock.now)


@pytest.fixture
def make_progress_bar(messenger, clock):
    def _make(**options):
        return ProgressBar(messenger, 'general', ProgressOptions(**options), start=clock.now)

    return _make
