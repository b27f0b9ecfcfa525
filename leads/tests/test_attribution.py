"""
Unit tests for attribution classification.
"""
from leads.services.attribution import (
    NOT_AVAILABLE,
    ORIGIN_BIO_INSTA,
    ORIGIN_PAID,
    ORIGIN_SITE,
    classify_attribution,
)


class TestOriginPrecedence:
    """Tests for the ordered origin rules."""

    def test_bio_insta_custom_field(self, bio_insta_payload):
        result = classify_attribution(bio_insta_payload)
        assert result.origin == ORIGIN_BIO_INSTA
        assert result.is_organic is True

    def test_bio_insta_wins_over_widget(self):
        payload = {'customData': {'Contact Source': 'Bio Insta'}, 'source': 'chat widget'}
        assert classify_attribution(payload).origin == ORIGIN_BIO_INSTA

    def test_bio_insta_requires_exact_match(self):
        payload = {'customData': {'Contact Source': 'bio insta'}}
        assert classify_attribution(payload).origin == NOT_AVAILABLE

    def test_widget_in_source(self):
        payload = {'source': 'Chat Widget'}
        result = classify_attribution(payload)
        assert result.origin == ORIGIN_SITE
        assert result.is_organic is True

    def test_widget_in_contact_source(self):
        payload = {'contact_source': 'widget-chat'}
        assert classify_attribution(payload).origin == ORIGIN_SITE

    def test_widget_in_medium(self):
        payload = {'attributionSource': {'medium': 'WIDGET', 'sessionSource': 'Paid Social'}}
        assert classify_attribution(payload).origin == ORIGIN_SITE

    def test_paid_social_case_insensitive(self):
        payload = {'contact': {'attributionSource': {'sessionSource': 'PAID SOCIAL'}}}
        result = classify_attribution(payload)
        assert result.origin == ORIGIN_PAID
        assert result.is_organic is False

    def test_raw_session_source_passthrough(self):
        payload = {'attributionSource': {'sessionSource': 'Direct traffic'}}
        assert classify_attribution(payload).origin == 'Direct traffic'

    def test_no_attribution_at_all(self):
        result = classify_attribution({})
        assert result.origin == NOT_AVAILABLE
        assert result.medium == NOT_AVAILABLE
        assert result.is_organic is False
        assert result.ad_id == ''


class TestAttributionFallbackChain:
    """Attribution blocks are read in order: last, current, top-level."""

    def test_last_attribution_source_preferred(self):
        payload = {
            'contact': {
                'lastAttributionSource': {'sessionSource': 'Paid Social', 'medium': 'facebook'},
                'attributionSource': {'sessionSource': 'Organic', 'medium': 'instagram'},
            },
            'attributionSource': {'sessionSource': 'Other', 'medium': 'other'},
        }
        result = classify_attribution(payload)
        assert result.origin == ORIGIN_PAID
        assert result.medium == 'facebook'

    def test_contact_attribution_source_second(self):
        payload = {
            'contact': {'attributionSource': {'sessionSource': 'Organic', 'medium': 'instagram'}},
            'attributionSource': {'sessionSource': 'Other', 'medium': 'other'},
        }
        result = classify_attribution(payload)
        assert result.origin == 'Organic'
        assert result.medium == 'instagram'

    def test_top_level_attribution_source_last(self):
        payload = {'attributionSource': {'sessionSource': 'Other', 'medium': 'email'}}
        result = classify_attribution(payload)
        assert result.origin == 'Other'
        assert result.medium == 'email'

    def test_medium_resolved_independently_of_session_source(self):
        payload = {
            'contact': {'lastAttributionSource': {'sessionSource': 'Paid Social'}},
            'attributionSource': {'medium': 'facebook'},
        }
        assert classify_attribution(payload).medium == 'facebook'


class TestAdId:
    """Tests for ad id selection."""

    def test_ad_id_from_last_attribution(self, paid_lead_payload):
        assert classify_attribution(paid_lead_payload).ad_id == '120200000000001'

    def test_ad_id_from_custom_field(self):
        payload = {
            'contact': {'lastAttributionSource': {'sessionSource': 'Paid Social'}},
            'customData': {'Ad / Post Id': '555'},
        }
        assert classify_attribution(payload).ad_id == '555'

    def test_numeric_ad_id_is_text(self):
        payload = {'contact': {'lastAttributionSource': {'adId': 120200000000001}}}
        assert classify_attribution(payload).ad_id == '120200000000001'

    def test_organic_lead_has_no_ad_id(self, bio_insta_payload):
        assert classify_attribution(bio_insta_payload).ad_id == ''

    def test_site_lead_has_no_ad_id(self):
        payload = {
            'contact_source': 'widget',
            'customData': {'Ad / Post Id': '555'},
        }
        assert classify_attribution(payload).ad_id == ''
