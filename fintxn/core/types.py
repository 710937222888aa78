# fintxn/core/types.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PendingTransaction:
    """
    A transaction whose new balance has been computed but not committed yet.
    Handed to the callback so a transport has something to report.
    """
    identifier: str
    amount: float
    fee: float
    previous_balance: float
    proposed_balance: float


@dataclass(frozen=True)
class TransactionResult:
    committed: bool
    reason: str
    amount: float
    fee: float
    balance: float   # balance after the call (unchanged when rejected)
