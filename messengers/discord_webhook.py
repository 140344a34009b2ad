import logging
from typing import Tuple

import discord
import requests

from errors import TransportError
from messengers.base import Messenger

logger = logging.getLogger(__name__)


class DiscordWebhookMessenger(Messenger):
    """
    Posts progress bars through a Discord webhook.

    A webhook always posts to its own channel, so the channel given to `send`
    is ignored and the webhook's channel id is returned instead. Webhook
    messages have no user to post as, so `as_user` has no effect either.
    """

    def __init__(self, url, session=None):
        kwargs = {'session': session} if session is not None else {}
        self.webhook = discord.SyncWebhook.from_url(url, **kwargs)

    def send(self, channel: str, content: str, as_user: bool = False) -> Tuple[str, str]:
        logger.debug('Sending webhook message %s', self.webhook.id)
        try:
            message = self.webhook.send(content, wait=True)
        except discord.HTTPException as exc:
            raise TransportError(f'Webhook message failed: {exc}', code=exc.status) from exc
        except requests.RequestException as exc:
            raise TransportError(f'Webhook message failed: {exc}') from exc
        return str(message.channel.id), str(message.id)

    def edit(self, channel: str, message_id: str, content: str) -> str:
        logger.debug('Editing webhook message %s', message_id)
        try:
            message = self.webhook.edit_message(int(message_id), content=content)
        except discord.HTTPException as exc:
            raise TransportError(f'Webhook edit failed: {exc}', code=exc.status) from exc
        except requests.RequestException as exc:
            raise TransportError(f'Webhook edit failed: {exc}') from exc
        return str(message.id)
