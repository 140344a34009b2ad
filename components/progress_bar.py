from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass, field
from typing import Optional

from errors import InvalidPosition, MaxPositionExceeded, TemplateError
from messengers import Messenger, build_messenger
from utils.datetime import round_timedelta, utc_now
from utils.formatting import bold, code, format_duration

logger = logging.getLogger(__name__)

DEFAULT_TASK = 'Unknown Task'
DEFAULT_TEMPLATE = '{task}\n' + code('{bar}') + ' {percentage}%\n{estimate}'
UNKNOWN_REMAINING = 'unknown'


@dataclass(frozen=True)
class ProgressOptions:
    fill: str = '⬛'
    empty: str = '⬜'
    # 10 looks good on phone clients and gives one glyph per 10%
    width: int = 10
    total_units: int = 100
    template: str = DEFAULT_TEMPLATE
    task: str = DEFAULT_TASK
    # Passed through to the messenger when the first message is posted
    as_user: bool = False
    show_estimate: bool = True

    def __post_init__(self):
        if self.width <= 0:
            raise ValueError(f'width should be positive, but is {self.width}')
        if self.total_units <= 0:
            raise ValueError(f'total_units should be positive, but is {self.total_units}')

    @classmethod
    def default(cls, task=DEFAULT_TASK):
        return cls(task=task)


@dataclass
class ProgressBar:
    """
    Progress bar shown in a single chat message that is edited in place.

    The first call to `update()` posts the message, later calls edit it. An
    update is only sent when the percentage goes up, so `update()` can be
    called on every iteration of the task's loop.

    The remaining time estimate is based on `start`, which is set when the bar
    is created. If the task starts noticeably later, overwrite `start` (a
    timezone aware datetime) before the first update.
    """

    messenger: Messenger
    channel: str
    options: Optional[ProgressOptions] = None
    start: dt.datetime = field(default_factory=utc_now)
    message_id: Optional[str] = field(default=None, init=False)
    last_percentage: int = field(default=-1, init=False)

    def __post_init__(self):
        if self.options is None:
            self.options = ProgressOptions.default()

    @property
    def total_units(self) -> int:
        return self.options.total_units

    def update(self, position: int) -> None:
        """Post or edit the progress bar message for the given position."""
        if position < 0:
            raise InvalidPosition(position)
        if position > self.options.total_units:
            raise MaxPositionExceeded(position, self.options.total_units)

        # Integer math, floats truncate e.g. 29 / 100 * 100 to 28
        percentage = position * 100 // self.options.total_units
        if percentage <= self.last_percentage:
            # Nothing changed since the last message
            return

        content = self.render_message(percentage)

        if self.message_id is None:
            channel, message_id = self.messenger.send(
                self.channel, content, as_user=self.options.as_user
            )
            logger.debug('Posted progress bar %s in channel %s (%d%%)', message_id, channel, percentage)
            self.channel = channel
        else:
            message_id = self.messenger.edit(self.channel, self.message_id, content)
            logger.debug('Edited progress bar %s in channel %s (%d%%)', message_id, self.channel, percentage)

        # The first post counts as progress too, so repeated calls at the same
        # percentage don't edit the message right after it was created.
        self.message_id = message_id
        self.last_percentage = percentage

    def draw_bar(self, percentage: int) -> str:
        """
        Draw the bar for a percentage between 0 and 100.

        Each fill glyph stands for `width` percent, so a width of 10 fills one
        glyph per 10%. The bar is never padded below zero empty glyphs.
        """
        options = self.options
        if percentage == 0:
            return options.empty * options.width

        bar = options.fill * (percentage // options.width)
        bar += options.empty * max(0, options.width - len(bar))
        return bar

    def render_message(self, percentage: int) -> str:
        """Render the message template for a percentage."""
        elapsed = utc_now() - self.start
        remaining = self.estimate_remaining(percentage, elapsed=elapsed)
        complete = percentage == 100
        elapsed = format_duration(round_timedelta(elapsed, dt.timedelta(milliseconds=1)))
        remaining = format_duration(remaining) if remaining is not None else UNKNOWN_REMAINING

        data = {
            'task': self.options.task,
            'bar': self.draw_bar(percentage),
            'percentage': percentage,
            'remaining': remaining,
            'complete': complete,
            'elapsed': elapsed,
            'show_estimate': self.options.show_estimate,
            'estimate': _estimate_line(
                self.options.show_estimate, complete, elapsed, remaining, self.messenger.bold_marker
            ),
        }

        try:
            content = self.options.template.format_map(data)
        except KeyError as exc:
            raise TemplateError(f'Unknown template field {exc}') from exc
        except (AttributeError, IndexError, TypeError, ValueError) as exc:
            raise TemplateError(f'Invalid template: {exc}') from exc
        return content.rstrip()

    def estimate_remaining(
        self, percentage: int, elapsed: Optional[dt.timedelta] = None
    ) -> Optional[dt.timedelta]:
        """
        Estimate the time left assuming the rest of the task runs at the same
        pace as what's done so far. Returns `None` at 0%, since there is
        nothing to extrapolate from.
        """
        if percentage <= 0:
            return None
        if elapsed is None:
            elapsed = utc_now() - self.start

        estimated_total = elapsed * 100 / percentage
        return round_timedelta(estimated_total - elapsed, dt.timedelta(seconds=1))


def _estimate_line(show_estimate, complete, elapsed, remaining, bold_marker):
    if not show_estimate:
        return ''
    if complete:
        return f'Completed in {bold(elapsed, marker=bold_marker)}'
    return f'{remaining} remaining...'


def new(token, channel, options=None, platform='discord') -> ProgressBar:
    """
    Create a progress bar posting to `channel` on the given platform
    (`discord`, `slack` or `webhook`, in which case `token` is the webhook URL).
    """
    return ProgressBar(build_messenger(platform, token), channel, options=options)
