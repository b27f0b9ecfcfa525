"""
Links from a lead back to its contact page in the CRM.
"""
from typing import Optional

from django.conf import settings


def build_contact_url(domain: str, contact_id: str, location_id: Optional[str] = None) -> Optional[str]:
    """
    Build the CRM contact-detail URL for a lead.

    Args:
        domain: The user's white-label CRM domain, with or without scheme
        contact_id: External CRM contact identifier
        location_id: CRM location; defaults to settings.CRM_LOCATION_ID

    Returns:
        The URL, or None if any part is missing
    """
    location_id = location_id if location_id is not None else settings.CRM_LOCATION_ID
    if not domain or not contact_id or not location_id:
        return None
    base = domain if domain.startswith('http') else f'https://{domain}'
    return f"{base.rstrip('/')}/v2/location/{location_id}/contacts/detail/{contact_id}"
