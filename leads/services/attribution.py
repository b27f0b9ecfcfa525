"""
Attribution classification for inbound leads.

The platform exposes attribution under two or three nested shapes depending on
the integration version; each field is read from the first shape present.
"""
import logging
from dataclasses import dataclass

from leads.services.fields import as_text, first_present, get_nested_value

logger = logging.getLogger(__name__)

ORIGIN_BIO_INSTA = 'Bio Insta'
ORIGIN_SITE = 'Site'
ORIGIN_PAID = 'Mídia Paga'
ORGANIC_ORIGINS = (ORIGIN_BIO_INSTA, ORIGIN_SITE)

NOT_AVAILABLE = 'Não disponível'

ATTRIBUTION_ROOTS = (
    'contact.lastAttributionSource',
    'contact.attributionSource',
    'attributionSource',
)

AD_ID_PATHS = (
    'contact.lastAttributionSource.adId',
    'customData.Ad / Post Id',
)


@dataclass
class Attribution:
    origin: str
    medium: str
    is_organic: bool
    ad_id: str


def attribution_field(payload, field: str, default=NOT_AVAILABLE) -> str:
    """Read ``field`` from the first attribution block that carries it."""
    paths = [f'{root}.{field}' for root in ATTRIBUTION_ROOTS]
    return as_text(first_present(payload, paths, default))


def classify_origin(payload, medium: str) -> str:
    """
    Derive the lead origin. First match wins:

    1. customData "Contact Source" is "Bio Insta"
    2. source, contact_source or medium mentions "widget" -> "Site"
    3. session source "paid social" -> "Mídia Paga", else the raw session source
    """
    if get_nested_value(payload, 'customData.Contact Source') == ORIGIN_BIO_INSTA:
        return ORIGIN_BIO_INSTA

    candidates = (
        as_text(get_nested_value(payload, 'source')),
        as_text(get_nested_value(payload, 'contact_source')),
        medium,
    )
    if any('widget' in value.lower() for value in candidates):
        return ORIGIN_SITE

    session_source = attribution_field(payload, 'sessionSource')
    if session_source.lower() == 'paid social':
        return ORIGIN_PAID
    return session_source


def classify_attribution(payload) -> Attribution:
    """
    Classify where a lead came from.

    Args:
        payload: Raw webhook payload

    Returns:
        Attribution with origin, medium, organic flag and the ad id to resolve
        (empty for organic leads)
    """
    medium = attribution_field(payload, 'medium')
    origin = classify_origin(payload, medium)
    is_organic = origin in ORGANIC_ORIGINS

    ad_id = '' if is_organic else as_text(first_present(payload, AD_ID_PATHS, ''))

    logger.debug(
        f"Attribution: origin={origin!r}, medium={medium!r}, "
        f"organic={is_organic}, ad_id={ad_id!r}"
    )
    return Attribution(origin=origin, medium=medium, is_organic=is_organic, ad_id=ad_id)
