import logging.config

from utils import env

# Logging
LOG_LEVEL = env.get('LOG_LEVEL', 'INFO')

# Chat platform: discord, slack or webhook (PROGRESS_TOKEN is then the webhook URL)
PROGRESS_PLATFORM = env.get('PROGRESS_PLATFORM', 'discord')
PROGRESS_TOKEN = env.require('PROGRESS_TOKEN')
PROGRESS_CHANNEL = env.require('PROGRESS_CHANNEL')

# Demo task
PROGRESS_TASK = env.get('PROGRESS_TASK', 'Demo Task')
PROGRESS_STEP_SECONDS = env.get('PROGRESS_STEP_SECONDS', 0.1, cast=float)


def setup_logging():
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'standard': {'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'},
            },
            'handlers': {
                'console': {
                    'level': LOG_LEVEL,
                    'formatter': 'standard',
                    'class': 'logging.StreamHandler',
                },
            },
            'loggers': {
                '': {
                    'handlers': ['console'],
                    'level': 'DEBUG',
                    'propagate': True,
                },
                'discord': {'level': 'WARNING'},
                'urllib3': {'level': 'WARNING'},
            },
        }
    )
