"""
Tests for lead status translation and batch updates.
"""
import pytest
from unittest.mock import patch
from hypothesis import given, settings
import hypothesis.strategies as st

from leads.models import Lead
from leads.services.status_updates import translate_status, update_lead_status


def make_lead(**overrides):
    fields = {
        'user_id': 'user-1',
        'contact_id': 'c1',
        'date_created': '2025-05-10T12:30:00Z',
        'lead_name': 'Ana',
        'lead_phone': '+551199999999',
        'origin': 'Mídia Paga',
        'medium': 'facebook',
        'source': 'Instagram/Facebook',
        'campaign': 'Black Friday',
    }
    fields.update(overrides)
    return Lead.objects.create(**fields)


class TestTranslateStatus:
    """Tests for the fixed translation table."""

    def test_known_values(self):
        assert translate_status('won') == Lead.Status.WON
        assert translate_status('lost') == Lead.Status.LOST
        assert translate_status('abandoned') == Lead.Status.ABANDONED
        assert translate_status('open') == Lead.Status.OPEN

    def test_case_insensitive(self):
        assert translate_status('Won') == Lead.Status.WON
        assert translate_status('LOST') == Lead.Status.LOST

    def test_unknown_defaults_to_open(self):
        assert translate_status('pending') == Lead.Status.OPEN
        assert translate_status('') == Lead.Status.OPEN
        assert translate_status(None) == Lead.Status.OPEN

    def test_surrounding_whitespace_is_not_trimmed(self):
        assert translate_status('won ') == Lead.Status.OPEN
        assert translate_status(' lost') == Lead.Status.OPEN

    def test_stored_values_are_dashboard_labels(self):
        assert Lead.Status.WON == 'Ganho'
        assert Lead.Status.WON.label == 'Won'

    @settings(max_examples=100)
    @given(chars=st.lists(st.booleans(), min_size=3, max_size=3))
    def test_won_any_casing(self, chars):
        raw = ''.join(c.upper() if upper else c for c, upper in zip('won', chars))
        assert translate_status(raw) == Lead.Status.WON

    @settings(max_examples=100)
    @given(raw=st.text().filter(lambda s: s.lower() not in {'won', 'lost', 'abandoned', 'open'}))
    def test_unrecognized_always_open(self, raw):
        assert translate_status(raw) == Lead.Status.OPEN


@pytest.mark.django_db
class TestUpdateLeadStatus:
    """Tests for update_lead_status."""

    def test_updates_all_matching_leads(self):
        first = make_lead()
        second = make_lead()

        updated = update_lead_status('c1', 'Won', 'user-1')

        assert updated == 2
        first.refresh_from_db()
        second.refresh_from_db()
        assert first.status == Lead.Status.WON
        assert second.status == Lead.Status.WON

    def test_scoped_to_user(self):
        other = make_lead(user_id='user-2')

        updated = update_lead_status('c1', 'lost', 'user-1')

        assert updated == 0
        other.refresh_from_db()
        assert other.status == Lead.Status.OPEN

    def test_scoped_to_contact(self):
        other = make_lead(contact_id='c2')

        assert update_lead_status('c1', 'lost', 'user-1') == 0
        other.refresh_from_db()
        assert other.status == Lead.Status.OPEN

    def test_no_match_returns_zero(self):
        assert update_lead_status('unknown', 'won', 'user-1') == 0

    def test_incomplete_input_is_ignored(self):
        lead = make_lead()

        assert update_lead_status('', 'won', 'user-1') == 0
        assert update_lead_status('c1', '', 'user-1') == 0
        lead.refresh_from_db()
        assert lead.status == Lead.Status.OPEN

    def test_repeated_event_is_idempotent(self):
        lead = make_lead()

        update_lead_status('c1', 'abandoned', 'user-1')
        update_lead_status('c1', 'abandoned', 'user-1')

        lead.refresh_from_db()
        assert lead.status == Lead.Status.ABANDONED
        assert Lead.objects.count() == 1

    def test_unknown_status_reopens_lead(self):
        lead = make_lead(status=Lead.Status.WON)

        update_lead_status('c1', 'pending', 'user-1')

        lead.refresh_from_db()
        assert lead.status == Lead.Status.OPEN

    @patch('leads.services.status_updates.Lead')
    def test_update_error_propagates(self, mock_lead_model):
        mock_lead_model.Status = Lead.Status
        mock_lead_model.objects.filter.return_value.update.side_effect = Exception('Database error')

        with pytest.raises(Exception, match='Database error'):
            update_lead_status('c1', 'won', 'user-1')
