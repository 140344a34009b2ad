import logging
import time

import config
from components.progress_bar import ProgressOptions, new
from errors import ProgressError

logger = logging.getLogger(__name__)


def main():
    config.setup_logging()

    progress_bar = new(
        config.PROGRESS_TOKEN,
        config.PROGRESS_CHANNEL,
        options=ProgressOptions.default(config.PROGRESS_TASK),
        platform=config.PROGRESS_PLATFORM,
    )
    logger.info(
        'Running "%s" on %s channel %s',
        config.PROGRESS_TASK,
        config.PROGRESS_PLATFORM,
        config.PROGRESS_CHANNEL,
    )

    for position in range(progress_bar.total_units + 1):
        time.sleep(config.PROGRESS_STEP_SECONDS)
        try:
            progress_bar.update(position)
        except ProgressError:
            logger.exception('Error updating progress bar')

    logger.info('Done, message %s', progress_bar.message_id)


if __name__ == '__main__':
    main()
