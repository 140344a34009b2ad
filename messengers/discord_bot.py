from typing import Tuple

from messengers.base import HttpMessenger

API_URL = 'https://discord.com/api/v10'


class DiscordMessenger(HttpMessenger):
    """
    Posts progress bars as a Discord bot through the REST API.

    Bots always post as themselves, so `as_user` has no effect.
    """

    base_url = API_URL

    def auth_headers(self) -> dict:
        return {'Authorization': f'Bot {self.token}'}

    def send(self, channel: str, content: str, as_user: bool = False) -> Tuple[str, str]:
        data = self._send_request(
            f'/channels/{channel}/messages', method='POST', json_={'content': content}
        )
        return data['channel_id'], data['id']

    def edit(self, channel: str, message_id: str, content: str) -> str:
        data = self._send_request(
            f'/channels/{channel}/messages/{message_id}',
            method='PATCH',
            json_={'content': content},
        )
        return data['id']
