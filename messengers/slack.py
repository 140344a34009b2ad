from typing import Tuple

from errors import TransportError
from messengers.base import HttpMessenger

API_URL = 'https://slack.com/api'


class SlackMessenger(HttpMessenger):
    """
    Posts progress bars through the Slack Web API.

    Slack identifies messages by their timestamp (`ts`), which is what's
    returned as the message id. With `as_user` the message is posted as the
    token's user, which also shows "edited" next to it once it's updated.
    Slack's mrkdwn bolds with single asterisks.
    """

    base_url = API_URL
    bold_marker = '*'

    def auth_headers(self) -> dict:
        return {'Authorization': f'Bearer {self.token}'}

    def send(self, channel: str, content: str, as_user: bool = False) -> Tuple[str, str]:
        data = self._call(
            'chat.postMessage', {'channel': channel, 'text': content, 'as_user': as_user}
        )
        return data['channel'], data['ts']

    def edit(self, channel: str, message_id: str, content: str) -> str:
        data = self._call('chat.update', {'channel': channel, 'ts': message_id, 'text': content})
        return data['ts']

    def _call(self, api_method, json_):
        data = self._send_request(api_method, method='POST', json_=json_)
        # Slack answers errors with a 200 and `ok: false`
        if not data.get('ok'):
            error = data.get('error', 'unknown_error')
            raise TransportError(f'Slack API {api_method} failed: {error}', code=error)
        return data
