# fintxn/utils/config.py
import os
from dataclasses import dataclass


@dataclass
class FeeConfig:
    withdrawal_rate: float


@dataclass
class CallbackConfig:
    url: str | None
    timeout_sec: float


@dataclass
class DiscordConfig:
    webhook_url: str | None


@dataclass
class AppConfig:
    fees: FeeConfig
    callback: CallbackConfig
    discord: DiscordConfig
    log_level: str


def load_config() -> AppConfig:
    fees = FeeConfig(
        withdrawal_rate=float(os.getenv("WITHDRAWAL_FEE_RATE", "0.03")),  # 3%
    )

    callback = CallbackConfig(
        url=os.getenv("CALLBACK_URL") or None,  # unset -> simulated callback
        timeout_sec=float(os.getenv("CALLBACK_TIMEOUT_SEC", "10")),
    )

    discord = DiscordConfig(
        webhook_url=os.getenv("DISCORD_WEBHOOK") or None
    )

    cfg = AppConfig(
        fees=fees,
        callback=callback,
        discord=discord,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
    return cfg
