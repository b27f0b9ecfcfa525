"""
Best-effort audit trail writes.

Audit durability must never gate the webhook response, so failures here are
logged and swallowed.
"""
import logging
from contextlib import contextmanager

from leads.models import WebhookLog, WebhookError
from leads.services.fields import as_text, get_nested_value

logger = logging.getLogger(__name__)

LEAD_NAME_PLACEHOLDER = 'Nome não disponível'


@contextmanager
def best_effort(action: str):
    """Run a side effect whose failure is logged but never re-raised."""
    try:
        yield
    except Exception as e:
        logger.error(f"Failed to {action}: {e}", exc_info=True)


def log_webhook(user_id: str, payload) -> None:
    """Record a parsed inbound payload."""
    with best_effort('write webhook log'):
        WebhookLog.objects.create(
            user_id=user_id,
            lead_name=as_text(get_nested_value(payload, 'full_name', LEAD_NAME_PLACEHOLDER)),
            payload=payload,
        )


def log_webhook_error(user_id: str, error: str, raw_body: str = '') -> None:
    """Record a processing failure along with the raw request text."""
    with best_effort('write webhook error'):
        WebhookError.objects.create(
            user_id=user_id or '',
            error=error,
            payload=raw_body,
        )
