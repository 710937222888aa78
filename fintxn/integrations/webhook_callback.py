import logging
from dataclasses import asdict
from typing import Optional

import requests

from ..core.types import PendingTransaction

log = logging.getLogger(__name__)


class WebhookCallback:
    """
    Post-transaction callback delivered as an HTTP POST.

    - Sends the pending transaction as JSON to `url`.
    - Returns True on a 2xx response, False otherwise.
    - Always returns a bool (never raises out).

    With no URL set the callback is only simulated and succeeds, so the
    example runs without a real receiver.
    """

    def __init__(self, url: Optional[str] = None, timeout: float = 10.0):
        self.url = url
        self.timeout = timeout

    def __call__(self, pending: PendingTransaction) -> bool:
        return self.send(pending)

    def send(self, pending: PendingTransaction) -> bool:
        if not self.url:
            log.info("[CALLBACK] Webhook not set. Simulated callback for %s", pending.identifier)
            return True

        try:
            resp = requests.post(
                self.url,
                json={"event": "transaction", **asdict(pending)},
                timeout=self.timeout,
                headers={"User-Agent": "fintxn/0.1"},
            )
        except requests.RequestException as e:
            log.warning("[CALLBACK] failed to reach %s: %s", self.url, e)
            return False

        if resp.status_code >= 300:
            log.warning("[CALLBACK] Error %s: %s", resp.status_code, resp.text)
            return False
        return True
