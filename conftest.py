import os
import sys
import pytest

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'lead_tracker.settings')
os.environ.setdefault('USE_SQLITE_FOR_TESTS', 'true')


@pytest.fixture
def webhook_settings(settings):
    """Pin Graph API and webhook configuration."""
    settings.META_GRAPH_API_URL = 'https://graph.facebook.com'
    settings.META_GRAPH_API_VERSION = 'v20.0'
    settings.WEBHOOK_VERIFY_TOKEN = 'test-verify-token'
    settings.CRM_LOCATION_ID = 'LOC123'
    return settings


@pytest.fixture
def user_credential(db):
    """A user with a stored Graph API access token."""
    from leads.models import UserCredential
    return UserCredential.objects.create(
        user_id='user-1',
        meta_access_token='EAAB-test-token',
        whitelabel_domain='app.crm.example.com',
    )


@pytest.fixture
def paid_lead_payload():
    """Return a paid-social lead payload as sent by the automation tool."""
    return {
        'full_name': 'Maria Souza',
        'phone': '+5511988887777',
        'date_created': '2025-05-10T12:30:00.000Z',
        'contact_id': 'c-42',
        'source': 'facebook',
        'contact': {
            'id': 'c-42',
            'lastAttributionSource': {
                'sessionSource': 'Paid Social',
                'medium': 'facebook',
                'adId': '120200000000001',
                'ctwa_clid': 'ctwa-xyz',
            },
        },
        'customData': {
            'Medya Type Of Ad / Post': 'VIDEO',
            'Ad / Post URL': 'https://fb.me/ad/1',
            'Thumbnail Url Of Ad / Post': 'https://cdn.example.com/thumb.jpg',
            'Video Url Of Ad / Post': 'https://cdn.example.com/video.mp4',
            'Head Line Of Ad / Post': 'Promoção de inverno',
            'Body Of Ad / Post': 'Garanta já o seu desconto',
        },
        'workflow': {'id': 'wf-1', 'name': 'Leads Meta'},
    }


@pytest.fixture
def bio_insta_payload():
    """Return an organic lead payload coming from the Instagram bio link."""
    return {
        'full_name': 'João Lima',
        'phone': '+5521977776666',
        'contact': {
            'id': 'c-7',
            'lastAttributionSource': {
                'sessionSource': 'Paid Social',
                'medium': 'instagram',
                'adId': '120200000000099',
            },
        },
        'customData': {
            'Contact Source': 'Bio Insta',
            'Ad / Post URL': 'https://fb.me/ad/99',
            'Head Line Of Ad / Post': 'Should be ignored',
        },
    }
