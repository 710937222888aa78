import logging
from typing import Optional

import requests

from ..core.notifications import ConsoleNotifier, format_notification

log = logging.getLogger(__name__)


class DiscordNotifier(ConsoleNotifier):
    def __init__(self, webhook_url: Optional[str], timeout: float = 8.0):
        self.url = webhook_url
        self.timeout = timeout

    def __call__(self, identifier: str, balance: float) -> None:
        message = format_notification(identifier, balance)
        print(message)
        self.send(message)

    def send(self, message: str) -> None:
        if not self.url:
            log.debug("[DISCORD] Webhook not set. Skipping post.")
            return
        try:
            resp = requests.post(self.url, json={"content": message}, timeout=self.timeout)
        except requests.RequestException as e:
            # already committed, errors stop here
            log.warning("[DISCORD] failed to post notification: %s", e)
            return
        if resp.status_code >= 300:
            print(f"[DISCORD] Error {resp.status_code}: {resp.text}")
