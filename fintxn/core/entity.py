# fintxn/core/entity.py
from __future__ import annotations

import logging
from typing import Callable, Optional

from .fees import FeeCalculator
from .notifications import ConsoleNotifier
from .types import PendingTransaction, TransactionResult

log = logging.getLogger(__name__)

Callback = Callable[[PendingTransaction], bool]
Notifier = Callable[[str, float], None]

NOT_COMPLETED_MSG = "Callback failed. Transaction not completed."


class FinancialEntity:
    """
    A balance-holding party (company or client).

    - identifier: tax ID (individual or company form), never validated
    - balance: starts at 0.0 and only changes through a committed transaction
    - fee_policy: FeeCalculator applied to every transaction

    The callback and notifier are injected capabilities:
      - callback(pending) -> bool gates whether a transaction commits
      - notifier(identifier, balance) runs once after every commit

    Subclasses may still override send_callback() / notify() to specialise
    the channels per entity kind.
    """

    def __init__(
        self,
        identifier: str,
        fee_policy: FeeCalculator,
        callback: Optional[Callback] = None,
        notifier: Optional[Notifier] = None,
    ) -> None:
        self._identifier = identifier
        self._fee_policy = fee_policy
        self._balance = 0.0
        self.callback = callback

        self.notifier = notifier if notifier is not None else ConsoleNotifier()

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def fee_policy(self) -> FeeCalculator:
        return self._fee_policy

    @property
    def balance(self) -> float:
        return self._balance

    def get_balance(self) -> float:
        return self._balance

    # ------------------------------------------------------------------ #
    # TRANSACTION
    # ------------------------------------------------------------------ #

    def perform_transaction(self, amount: float) -> TransactionResult:
        """
        Apply a transaction of `amount` minus the system fee.

        The new balance is computed first, then the callback is sent. Only a
        successful callback commits the balance and triggers the notification.
        A failed callback discards the computed balance (no retry) and is
        reported, never raised.
        """
        fee = self._fee_policy.compute_fee(amount)
        proposed = self._balance + amount - fee

        pending = PendingTransaction(
            identifier=self._identifier,
            amount=amount,
            fee=fee,
            previous_balance=self._balance,
            proposed_balance=proposed,
        )

        if self.send_callback(pending):
            self._balance = proposed
            try:
                self.notify()
            except Exception as e:
                # balance stays committed
                log.error("[NOTIFY] Error notifying %s: %s", self._identifier, e)
            log.info(
                "[TXN] %s committed amount=%.2f fee=%.2f (%s) balance=%.2f",
                self._identifier, amount, fee, self._fee_policy.name, self._balance,
            )
            return TransactionResult(
                committed=True,
                reason="OK",
                amount=amount,
                fee=fee,
                balance=self._balance,
            )

        print(NOT_COMPLETED_MSG)
        log.warning("[TXN] %s rejected amount=%.2f (callback failed)", self._identifier, amount)
        return TransactionResult(
            committed=False,
            reason=NOT_COMPLETED_MSG,
            amount=amount,
            fee=fee,
            balance=self._balance,
        )

    # ------------------------------------------------------------------ #
    # HOOKS
    # ------------------------------------------------------------------ #

    def notify(self) -> None:
        self.notifier(self._identifier, self._balance)

    def send_callback(self, pending: PendingTransaction) -> bool:
        """
        Send the post-transaction callback and report success.

        This is the only place a callback error is turned into a boolean:
        anything raised by the transport becomes False.
        """
        if self.callback is None:
            log.info("[CALLBACK] No callback set for %s. Simulating success.", self._identifier)
            return True

        try:
            target = getattr(self.callback, "url", None) or getattr(
                self.callback, "__name__", self.callback.__class__.__name__
            )
            log.info("[CALLBACK] Sending callback for %s to %s", self._identifier, target)
            return bool(self.callback(pending))
        except Exception as e:
            log.error("[CALLBACK] Error sending callback: %s", e)
            return False

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(identifier={self._identifier!r}, "
            f"balance={self._balance}, fee_policy={self._fee_policy!r})"
        )
