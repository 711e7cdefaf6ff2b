"""Runtime settings read from the environment.

Each getter reads its variable on every call.
"""

import os
from enum import Enum


class StoreBackend(Enum):
    REPOSITORY = "repository"
    MEMORY = "memory"


class NotifierBackend(Enum):
    EMAIL = "email"
    RECORDING = "recording"


class NotificationFailurePolicy(Enum):
    """What the coordinator does when a notification cannot be delivered.

    LOG keeps the successful result and logs a warning. RAISE surfaces
    ``NotificationFailed``. Neither undoes the saved record.
    """

    LOG = "log"
    RAISE = "raise"


def _choice(variable: str, enum_cls: type[Enum], default: Enum) -> Enum:
    raw = os.getenv(variable, default.value).strip().lower()
    try:
        return enum_cls(raw)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"{variable} must be one of: {allowed} (got {raw!r})") from None


def get_store_backend() -> StoreBackend:
    return _choice("ORDERFLOW_STORE", StoreBackend, StoreBackend.REPOSITORY)


def get_notifier_backend() -> NotifierBackend:
    return _choice("ORDERFLOW_NOTIFIER", NotifierBackend, NotifierBackend.EMAIL)


def get_notification_failure_policy() -> NotificationFailurePolicy:
    return _choice(
        "ORDERFLOW_NOTIFICATION_FAILURE",
        NotificationFailurePolicy,
        NotificationFailurePolicy.LOG,
    )


def get_currency() -> str:
    return os.getenv("ORDERFLOW_CURRENCY", "USD").upper()


def get_currency_places() -> int:
    raw = os.getenv("ORDERFLOW_CURRENCY_PLACES", "2")
    try:
        places = int(raw)
    except ValueError:
        raise ValueError(f"ORDERFLOW_CURRENCY_PLACES must be an integer (got {raw!r})") from None
    if places < 0:
        raise ValueError(f"ORDERFLOW_CURRENCY_PLACES must not be negative (got {places})")
    return places


def get_smtp_port() -> int:
    raw = os.getenv("ORDERFLOW_SMTP_PORT", "25")
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"ORDERFLOW_SMTP_PORT must be an integer (got {raw!r})") from None
    if not 0 < port < 65536:
        raise ValueError(f"ORDERFLOW_SMTP_PORT must be between 1 and 65535 (got {port})")
    return port


def get_smtp_settings() -> dict:
    """SMTP relay and envelope addresses for the email notifier."""
    return {
        "host": os.getenv("ORDERFLOW_SMTP_HOST", "localhost"),
        "port": get_smtp_port(),
        "sender": os.getenv("ORDERFLOW_EMAIL_SENDER", "orders@localhost"),
        "recipient": os.getenv("ORDERFLOW_EMAIL_RECIPIENT", "customer@localhost"),
    }
