import logging

from fintxn.utils.config import load_config
from fintxn.core.fees import WithdrawalFee
from fintxn.core.entity import FinancialEntity
from fintxn.core.client import Client
from fintxn.integrations.webhook_callback import WebhookCallback
from fintxn.integrations.notifier import DiscordNotifier

COMPANY_ID = "123456789"
CLIENT_ID = "987654321"
EXAMPLE_AMOUNT = 1800.0


def run_example(cfg):
    """Build one company and one client, run a single client transaction."""

    # ───────────────────────────────────────────────────────────
    # Wiring
    # ───────────────────────────────────────────────────────────
    fee = WithdrawalFee(rate=cfg.fees.withdrawal_rate)
    callback = WebhookCallback(cfg.callback.url, timeout=cfg.callback.timeout_sec)
    notifier = DiscordNotifier(cfg.discord.webhook_url)

    # The company is built but never transacts in this example
    company = FinancialEntity(COMPANY_ID, fee, callback=callback, notifier=notifier)
    client = Client(CLIENT_ID, fee, callback=callback, notifier=notifier)

    # ───────────────────────────────────────────────────────────
    # One transaction
    # ───────────────────────────────────────────────────────────
    result = client.perform_transaction(EXAMPLE_AMOUNT)

    if result.committed:
        print(
            f"[TXN] client={client.personal_id} amount={result.amount:.2f} "
            f"fee={result.fee:.2f} balance={result.balance:.2f}"
        )
    else:
        print(f"[TXN] client={client.personal_id} not completed: {result.reason}")
    print(f"[TXN] company={company.identifier} balance={company.balance:.2f}")

    return result


def main():
    cfg = load_config()
    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("[BOOT] fintxn example started")
    run_example(cfg)


if __name__ == "__main__":
    main()
