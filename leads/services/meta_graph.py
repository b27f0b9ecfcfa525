"""
Meta Graph API client resolving an ad id to its campaign name.

Resolution is a chain of dependent lookups (ad -> ad set -> campaign -> name).
Every request URL and raw response is kept for diagnostics, and the chain stops
at the first failure. Failures are returned, never raised.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

import httpx
from django.conf import settings

logger = logging.getLogger(__name__)

NO_AD_ID = 'Não disponível (sem Ad ID)'
MISSING_TOKEN = 'Erro de configuração do servidor'
API_FAILURE = 'Não disponível (falha na API)'

TOKEN_MASK = 'REDACTED'


@dataclass
class CampaignInfo:
    name: str
    api_responses: List[Any] = field(default_factory=list)
    request_urls: List[str] = field(default_factory=list)

    def request_urls_json(self) -> str:
        return json.dumps(self.request_urls, indent=2)


@dataclass(frozen=True)
class GraphStep:
    """One hop of the chain: fetch ``field_name`` for the node id from the previous hop."""
    field_name: str


CAMPAIGN_CHAIN = (
    GraphStep('adset_id'),
    GraphStep('campaign_id'),
    GraphStep('name'),
)


def build_graph_url(node_id: str, field_name: str, access_token: str) -> httpx.URL:
    base = settings.META_GRAPH_API_URL.rstrip('/')
    version = settings.META_GRAPH_API_VERSION
    return httpx.URL(
        f'{base}/{version}/{node_id}',
        params={'fields': field_name, 'access_token': access_token},
    )


def _mask_token(url: httpx.URL) -> str:
    return str(url.copy_set_param('access_token', TOKEN_MASK))


def _response_body(response: httpx.Response) -> Any:
    """Return the parsed JSON body, or the raw text if it isn't JSON."""
    try:
        return response.json()
    except ValueError:
        return {'raw': response.text}


def _run_step(step_no: int, step: GraphStep, node_id: str, access_token: str,
              info: CampaignInfo) -> Optional[str]:
    """
    Execute a single hop, recording URL and response before judging them.

    Returns:
        The extracted field value, or None if this hop failed
    """
    # Fallback text for ids that cannot form a valid URL
    logged_url = (
        f"{settings.META_GRAPH_API_URL.rstrip('/')}/{settings.META_GRAPH_API_VERSION}/"
        f"{node_id}?fields={step.field_name}&access_token={TOKEN_MASK}"
    )
    info.request_urls.append(logged_url)
    logger.info(f"Graph step {step_no}: fetching {step.field_name} for node {node_id!r}")

    try:
        url = build_graph_url(node_id, step.field_name, access_token)
        logged_url = _mask_token(url)
        info.request_urls[-1] = logged_url
        response = httpx.get(url, timeout=settings.META_GRAPH_TIMEOUT)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error(f"Graph step {step_no} request failed: {e}")
        info.api_responses.append({
            'step': step_no,
            'url': logged_url,
            'error': 'Falha na requisição.',
            'details': str(e),
        })
        return None

    body = _response_body(response)
    info.api_responses.append({'step': step_no, 'url': logged_url, 'response': body})

    if not 200 <= response.status_code < 300:
        logger.error(f"Graph step {step_no} returned {response.status_code}: {body}")
        return None

    value = body.get(step.field_name) if isinstance(body, dict) else None
    if not value:
        logger.error(f"Graph step {step_no} response missing '{step.field_name}': {body}")
        return None
    return str(value)


def resolve_campaign(ad_id: str, access_token: str) -> CampaignInfo:
    """
    Resolve the campaign name for an ad.

    Args:
        ad_id: Ad identifier from the lead's attribution
        access_token: The user's Graph API access token

    Returns:
        CampaignInfo with the campaign name (or a sentinel name on failure)
        plus the request URLs and responses of every hop attempted
    """
    if not ad_id:
        return CampaignInfo(name=NO_AD_ID, api_responses=[{'error': 'Ad ID não fornecido.'}])
    if not access_token:
        logger.error("Graph access token is not configured for this user")
        return CampaignInfo(
            name=MISSING_TOKEN,
            api_responses=[{'error': 'Access token não está configurado para este usuário.'}],
        )

    info = CampaignInfo(name=API_FAILURE)
    node_id = ad_id
    for step_no, step in enumerate(CAMPAIGN_CHAIN, start=1):
        node_id = _run_step(step_no, step, node_id, access_token, info)
        if node_id is None:
            return info

    info.name = node_id
    logger.info(f"Resolved ad {ad_id} to campaign {info.name!r}")
    return info
