import logging
from abc import ABC, abstractmethod
from typing import Tuple

import requests

from errors import TransportError

logger = logging.getLogger(__name__)


class Messenger(ABC):
    """Abstract class for the chat platforms a progress bar can be shown on."""

    # Markdown used to bold text in messages
    bold_marker = '**'

    @abstractmethod
    def send(self, channel: str, content: str, as_user: bool = False) -> Tuple[str, str]:
        """
        Post a new message and return the `(channel, message_id)` needed to
        edit it later. The returned channel may differ from the given one
        (e.g. a channel name resolved to its id).
        """

    @abstractmethod
    def edit(self, channel: str, message_id: str, content: str) -> str:
        """
        Replace the content of a message and return its id, which some
        platforms reissue on edit.
        """


class HttpMessenger(Messenger, ABC):
    """Abstract class for messengers talking to a JSON HTTP API."""

    base_url: str

    def __init__(self, token, timeout=10, session=None):
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()

    def auth_headers(self) -> dict:
        return {}

    def _send_request(self, endpoint, method='GET', params=None, json_=None):
        # Build URL
        if endpoint[0] != '/':
            endpoint = f'/{endpoint}'
        url = f'{self.base_url}{endpoint}'

        logger.debug('Sending request %s %s | JSON: %s', method, url, json_)

        try:
            res = self.session.request(
                method,
                url,
                params=params,
                json=json_,
                headers=self.auth_headers(),
                timeout=self.timeout,
            )
            res.raise_for_status()
            data = res.json()
        except requests.HTTPError as exc:
            raise TransportError(
                f'{method} {url} failed: {exc}',
                code=exc.response.status_code if exc.response is not None else None,
            ) from exc
        except requests.RequestException as exc:
            raise TransportError(f'{method} {url} failed: {exc}') from exc
        return data
