# fintxn/core/client.py
from __future__ import annotations

from typing import Optional

from .entity import Callback, FinancialEntity, Notifier
from .fees import FeeCalculator


class Client(FinancialEntity):
    """
    An individual client. Same behaviour as any FinancialEntity; the
    personal ID is kept under its own name for client-specific use.
    """

    def __init__(
        self,
        personal_id: str,
        fee_policy: FeeCalculator,
        callback: Optional[Callback] = None,
        notifier: Optional[Notifier] = None,
    ) -> None:
        super().__init__(personal_id, fee_policy, callback=callback, notifier=notifier)
        self._personal_id = personal_id

    @property
    def personal_id(self) -> str:
        return self._personal_id
