"""
Status updates for previously ingested leads.
"""
import logging

from django.db import transaction

from leads.models import Lead

logger = logging.getLogger(__name__)

STATUS_TRANSLATIONS = {
    'won': Lead.Status.WON,
    'lost': Lead.Status.LOST,
    'abandoned': Lead.Status.ABANDONED,
    'open': Lead.Status.OPEN,
}


def translate_status(raw_status) -> Lead.Status:
    """Map the CRM's status vocabulary onto Lead.Status; unknown values are Open."""
    key = str(raw_status).lower() if raw_status is not None else ''
    return STATUS_TRANSLATIONS.get(key, Lead.Status.OPEN)


def update_lead_status(contact_id: str, raw_status: str, user_id: str) -> int:
    """
    Update the status of every lead of ``user_id`` matching ``contact_id``.

    All matching rows are updated in a single statement inside a transaction,
    so either every match changes or none does. Concurrent events for the same
    contact are last-write-wins.

    Args:
        contact_id: External CRM contact identifier
        raw_status: Status as sent by the CRM (e.g. "won")
        user_id: Owner of the leads

    Returns:
        Number of leads updated; 0 when nothing matched or input is incomplete
    """
    if not contact_id or not raw_status:
        return 0

    status = translate_status(raw_status)
    with transaction.atomic():
        updated = Lead.objects.filter(
            contact_id=contact_id,
            user_id=user_id,
        ).update(status=status)

    if updated:
        logger.info(
            f"Updated status of {updated} lead(s) for contact {contact_id} "
            f"to {status.label}"
        )
    else:
        logger.info(f"Contact {contact_id} not found for status update, treating as new lead")
    return updated
