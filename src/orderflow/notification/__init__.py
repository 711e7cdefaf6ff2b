"""Notification sender factory.

Builds the sender selected by ``ORDERFLOW_NOTIFIER``:
- EmailNotificationSender (default) sends through the configured SMTP relay
- RecordingNotificationSender keeps notifications in memory
"""

from orderflow.config import NotifierBackend, get_notifier_backend, get_smtp_settings
from orderflow.notification.email_sender import EmailNotificationSender
from orderflow.notification.fake_sender import RecordingNotificationSender
from orderflow.notification.port import NotificationSender


def create_notifier(backend: NotifierBackend | None = None) -> NotificationSender:
    """Return a new sender for ``backend``, or for the configured backend."""
    backend = backend or get_notifier_backend()
    if backend is NotifierBackend.EMAIL:
        return EmailNotificationSender(**get_smtp_settings())
    if backend is NotifierBackend.RECORDING:
        return RecordingNotificationSender()
    raise ValueError(f"Unknown notifier backend: {backend}")
