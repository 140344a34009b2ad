from .base import HttpMessenger, Messenger
from .discord_bot import DiscordMessenger
from .discord_webhook import DiscordWebhookMessenger
from .slack import SlackMessenger

PLATFORMS = {
    'discord': DiscordMessenger,
    'slack': SlackMessenger,
    'webhook': DiscordWebhookMessenger,
}


def build_messenger(platform, token):
    """Create the messenger for a platform. For webhooks the token is the webhook URL."""
    try:
        messenger_class = PLATFORMS[platform]
    except KeyError:
        raise ValueError(f'Unknown platform {platform!r}, expected one of {", ".join(PLATFORMS)}')
    return messenger_class(token)
