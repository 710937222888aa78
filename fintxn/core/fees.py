# fintxn/core/fees.py
from __future__ import annotations


class FeeCalculator:
    """
    Base class for all system fee policies.

    Every policy must implement:
      - compute_fee(amount) -> float

    Policies are stateless and must accept any finite amount, including
    zero and negative values. No validation happens here.
    """

    name = "base-fee"

    def compute_fee(self, amount: float) -> float:
        raise NotImplementedError("compute_fee() must be implemented by subclasses")


class WithdrawalFee(FeeCalculator):
    """Withdrawal fee: a flat percentage of the transaction amount."""

    name = "withdrawal-fee"

    def __init__(self, rate: float = 0.03):
        self.rate = rate

    def compute_fee(self, amount: float) -> float:
        # plain product, no rounding
        return amount * self.rate

    def __repr__(self) -> str:
        return f"WithdrawalFee(rate={self.rate})"
