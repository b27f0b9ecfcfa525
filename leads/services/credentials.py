"""
Read-only access to per-user credentials stored by the settings UI.
"""
import logging
from typing import Optional

from leads.models import UserCredential

logger = logging.getLogger(__name__)


def get_user_credential(user_id: str) -> Optional[UserCredential]:
    if not user_id:
        return None
    return UserCredential.objects.filter(user_id=user_id).first()


def get_user_access_token(user_id: str) -> Optional[str]:
    """
    Return the user's Graph API access token, or None if the user has no
    stored credential or the token is blank.
    """
    credential = get_user_credential(user_id)
    if credential is None:
        logger.debug(f"No credential stored for user {user_id}")
        return None
    return credential.meta_access_token or None
