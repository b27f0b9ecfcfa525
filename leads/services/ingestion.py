"""
Lead ingestion pipeline.

Decides whether an inbound event is a status update for known leads or a new
lead, and for new leads classifies attribution, resolves the ad campaign and
persists the assembled record.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.utils import timezone

from leads.models import Lead
from leads.services import audit
from leads.services.attribution import NOT_AVAILABLE, Attribution, classify_attribution
from leads.services.credentials import get_user_access_token
from leads.services.fields import as_text, first_present, get_nested_value
from leads.services.meta_graph import CampaignInfo, resolve_campaign
from leads.services.status_updates import translate_status, update_lead_status

logger = logging.getLogger(__name__)

ORGANIC_CAMPAIGN = 'Orgânico'
PHONE_PLACEHOLDER = 'Telefone não disponível'

CONTACT_ID_PATHS = ('contact.id', 'contact_id')
CTWA_CLICK_ID_PATHS = (
    'contact.lastAttributionSource.ctwa_clid',
    'customData.Click-To-Whatsapp Click ID',
)


class MissingCredentialError(Exception):
    """Raised when the target user has no stored Graph API access token."""
    pass


@dataclass
class IngestionResult:
    message: str
    lead: Optional[Lead] = None
    updated_count: int = 0


def _creative_fields(payload, is_organic: bool) -> dict:
    """Ad creative fields; organic leads always get the placeholders."""
    if is_organic:
        return {
            'media_type': NOT_AVAILABLE,
            'ad_link': '#',
            'ad_thumbnail': '',
            'ad_video': '',
            'ad_title': NOT_AVAILABLE,
            'ad_description': NOT_AVAILABLE,
            'ctwa_click_id': NOT_AVAILABLE,
        }

    def custom(name, default):
        return as_text(get_nested_value(payload, f'customData.{name}', default))

    return {
        'media_type': custom('Medya Type Of Ad / Post', NOT_AVAILABLE),
        'ad_link': custom('Ad / Post URL', '#'),
        'ad_thumbnail': custom('Thumbnail Url Of Ad / Post', ''),
        'ad_video': custom('Video Url Of Ad / Post', ''),
        'ad_title': custom('Head Line Of Ad / Post', NOT_AVAILABLE),
        'ad_description': custom('Body Of Ad / Post', NOT_AVAILABLE),
        'ctwa_click_id': as_text(first_present(payload, CTWA_CLICK_ID_PATHS, NOT_AVAILABLE)),
    }


def build_lead_fields(payload, user_id: str, contact_id: str, raw_status: str,
                      attribution: Attribution, campaign_info: CampaignInfo) -> dict:
    """
    Assemble the Lead columns from the payload and the enrichment results.

    Returns:
        Keyword arguments for Lead.objects.create
    """
    workflow_name = as_text(get_nested_value(payload, 'workflow.name', 'N/A'))
    workflow_id = as_text(get_nested_value(payload, 'workflow.id', 'N/A'))

    fields = {
        'user_id': user_id,
        'contact_id': contact_id,
        'date_created': as_text(get_nested_value(payload, 'date_created', timezone.now().isoformat())),
        'lead_name': as_text(get_nested_value(payload, 'full_name', audit.LEAD_NAME_PLACEHOLDER)),
        'lead_phone': as_text(get_nested_value(payload, 'phone', PHONE_PLACEHOLDER)),
        'origin': attribution.origin,
        'medium': attribution.medium,
        'source': settings.LEAD_SOURCE_LABEL,
        'campaign': ORGANIC_CAMPAIGN if attribution.is_organic else campaign_info.name,
        'ad_id': attribution.ad_id,
        'workflow': f'{workflow_name} ({workflow_id})',
        'raw_payload': payload,
        'meta_api_response': campaign_info.api_responses,
        'meta_api_request_url': campaign_info.request_urls_json(),
        'status': translate_status(raw_status) if raw_status else Lead.Status.OPEN,
    }
    fields.update(_creative_fields(payload, attribution.is_organic))
    return fields


def create_lead(payload, user_id: str, contact_id: str, raw_status: str,
                access_token: str) -> Lead:
    """Classify, enrich and persist a new lead."""
    attribution = classify_attribution(payload)

    if attribution.is_organic:
        campaign_info = CampaignInfo(name=ORGANIC_CAMPAIGN)
    else:
        campaign_info = resolve_campaign(attribution.ad_id, access_token)

    lead = Lead.objects.create(
        **build_lead_fields(payload, user_id, contact_id, raw_status, attribution, campaign_info)
    )
    logger.info(
        f"Lead {lead.id} stored for user {user_id}: origin={lead.origin!r}, "
        f"campaign={lead.campaign!r}"
    )
    return lead


def process_webhook(user_id: str, payload) -> IngestionResult:
    """
    Process one parsed webhook payload for ``user_id``.

    Workflow:
    1. Record the raw payload (best effort)
    2. Load the user's access token
    3. If the event carries a contact id and status matching stored leads,
       update their status and stop
    4. Otherwise create a new lead

    Raises:
        MissingCredentialError: If the user has no stored access token
    """
    audit.log_webhook(user_id, payload)

    access_token = get_user_access_token(user_id)
    if not access_token:
        raise MissingCredentialError(f"No access token configured for user {user_id}")

    contact_id = as_text(first_present(payload, CONTACT_ID_PATHS, ''))
    raw_status = as_text(get_nested_value(payload, 'customData.Status', ''))

    if contact_id and raw_status:
        updated = update_lead_status(contact_id, raw_status, user_id)
        if updated:
            return IngestionResult(
                message=f'Status updated for contact {contact_id}',
                updated_count=updated,
            )

    lead = create_lead(payload, user_id, contact_id, raw_status, access_token)
    return IngestionResult(message='Lead received and stored successfully', lead=lead)
