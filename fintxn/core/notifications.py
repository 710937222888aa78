# fintxn/core/notifications.py


def format_notification(identifier: str, balance: float) -> str:
    return (
        f"[NOTIFY] {identifier}: transaction completed successfully. "
        f"Current balance: {balance}"
    )


class ConsoleNotifier:
    """Default notification channel: one line on stdout per committed transaction."""

    def __call__(self, identifier: str, balance: float) -> None:
        print(format_notification(identifier, balance))
