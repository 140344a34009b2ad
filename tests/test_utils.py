import datetime as dt

import pytest
import pytz

from utils import env
from utils.datetime import round_timedelta, utc_now
from utils.formatting import bold, code, format_duration


class TestFormatDuration:
    @pytest.mark.parametrize(
        'duration, expected',
        [
            (dt.timedelta(0), '0 seconds'),
            (dt.timedelta(milliseconds=250), '0.25 seconds'),
            (dt.timedelta(seconds=1), '1 second'),
            (dt.timedelta(seconds=42), '42 seconds'),
            (dt.timedelta(minutes=1), '1 minute'),
            (dt.timedelta(minutes=2, seconds=5, milliseconds=500), '2 minutes, 5.5 seconds'),
            (dt.timedelta(hours=1, seconds=3), '1 hour, 3 seconds'),
            (dt.timedelta(weeks=2, days=1), '2 weeks, 1 day'),
            (dt.timedelta(seconds=-5), '0 seconds'),
        ],
    )
    def test_format(self, duration, expected):
        assert format_duration(duration) == expected


class TestRoundTimedelta:
    def test_round_down(self):
        delta = dt.timedelta(seconds=1, milliseconds=499)
        assert round_timedelta(delta, dt.timedelta(seconds=1)) == dt.timedelta(seconds=1)

    def test_half_rounds_up(self):
        delta = dt.timedelta(seconds=1, milliseconds=500)
        assert round_timedelta(delta, dt.timedelta(seconds=1)) == dt.timedelta(seconds=2)

    def test_negative(self):
        delta = dt.timedelta(seconds=-1, milliseconds=-500)
        assert round_timedelta(delta, dt.timedelta(seconds=1)) == dt.timedelta(seconds=-2)

    def test_milliseconds(self):
        delta = dt.timedelta(microseconds=1_234_567)
        assert round_timedelta(delta, dt.timedelta(milliseconds=1)) == dt.timedelta(
            milliseconds=1235
        )


def test_utc_now_is_timezone_aware():
    assert utc_now().tzinfo == pytz.utc


def test_markdown_helpers():
    assert bold('done') == '**done**'
    assert bold('done', marker='*') == '*done*'
    assert code('bar') == '`bar`'


class TestEnv:
    def test_get_default(self, monkeypatch):
        monkeypatch.delenv('PROGRESS_TEST_VALUE', raising=False)
        assert env.get('PROGRESS_TEST_VALUE', 'fallback') == 'fallback'

    def test_get_cast(self, monkeypatch):
        monkeypatch.setenv('PROGRESS_TEST_VALUE', '0.5')
        assert env.get('PROGRESS_TEST_VALUE', cast=float) == 0.5

    def test_get_invalid_cast(self, monkeypatch):
        monkeypatch.setenv('PROGRESS_TEST_VALUE', 'fast')
        with pytest.raises(EnvironmentError, match='invalid value'):
            env.get('PROGRESS_TEST_VALUE', cast=float)

    def test_require_missing(self, monkeypatch):
        monkeypatch.delenv('PROGRESS_TEST_VALUE', raising=False)
        with pytest.raises(EnvironmentError, match='is required'):
            env.require('PROGRESS_TEST_VALUE')
