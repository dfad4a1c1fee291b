"""Best-effort delivery of notifications from application services."""

import logging

from techcare_identity.infrastructure.email import Notifier

logger = logging.getLogger(__name__)


async def notify_best_effort(
    notifier: Notifier,
    recipient: str,
    subject: str,
    body: str,
) -> bool:
    """Send a notification, logging instead of raising on failure.

    Returns True if the notifier accepted the message.
    """
    try:
        await notifier.send(recipient, subject, body)
    except Exception as e:
        logger.warning("Notification failed for %s (%s): %s", recipient, subject, e)
        return False
    return True
