"""
Data models for Lead Tracker.
"""
from django.db import models


class Lead(models.Model):
    """
    A prospective customer derived from an inbound marketing webhook.

    Created once per new-lead event; afterwards only ``status`` changes, driven
    by status-update events carrying the same ``contact_id`` and ``user_id``.
    """

    class Status(models.TextChoices):
        # Stored values are the labels the dashboard renders.
        OPEN = 'Aberto', 'Open'
        WON = 'Ganho', 'Won'
        LOST = 'Perdido', 'Lost'
        ABANDONED = 'Abandonado', 'Abandoned'

    user_id = models.CharField(max_length=128, db_index=True)
    contact_id = models.TextField(blank=True, default='', db_index=True)
    date_created = models.TextField()
    lead_name = models.TextField()
    lead_phone = models.TextField()
    origin = models.TextField()
    medium = models.TextField()
    source = models.CharField(max_length=100)
    campaign = models.TextField()
    ad_id = models.TextField(blank=True, default='')
    media_type = models.TextField(blank=True, default='')
    ad_link = models.TextField(blank=True, default='')
    ad_thumbnail = models.TextField(blank=True, default='')
    ad_video = models.TextField(blank=True, default='')
    ad_title = models.TextField(blank=True, default='')
    ad_description = models.TextField(blank=True, default='')
    ctwa_click_id = models.TextField(blank=True, default='')
    workflow = models.TextField(blank=True, default='')
    raw_payload = models.JSONField(null=True, blank=True)
    meta_api_response = models.JSONField(default=list, blank=True)
    meta_api_request_url = models.TextField(blank=True, default='')
    received_at = models.DateTimeField(auto_now_add=True, db_index=True)
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.OPEN,
        db_index=True
    )

    class Meta:
        ordering = ['-received_at']
        indexes = [
            models.Index(fields=['user_id', 'contact_id'], name='leads_lead_user_contact_idx'),
        ]

    def __str__(self):
        return f"Lead {self.id} ({self.lead_name}) - {self.status}"

    @property
    def is_organic(self) -> bool:
        return self.origin in ('Bio Insta', 'Site')


class WebhookLog(models.Model):
    """
    Raw inbound payload, written for every parsed webhook request.
    Append-only audit trail.
    """

    user_id = models.CharField(max_length=128, db_index=True)
    lead_name = models.TextField(blank=True, default='')
    payload = models.JSONField(null=True, blank=True)
    received_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ['-received_at']

    def __str__(self):
        return f"WebhookLog {self.id} for user {self.user_id}"


class WebhookError(models.Model):
    """
    Processing failure for an inbound webhook request.

    ``payload`` holds the raw request text because JSON parsing may be the
    step that failed.
    """

    user_id = models.CharField(max_length=128, blank=True, default='', db_index=True)
    error = models.TextField()
    payload = models.TextField(blank=True, default='')
    received_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ['-received_at']

    def __str__(self):
        return f"WebhookError {self.id} for user {self.user_id}"


class UserCredential(models.Model):
    """
    Per-user settings managed by the settings UI. Read-only for ingestion.
    """

    user_id = models.CharField(max_length=128, primary_key=True)
    meta_access_token = models.TextField(blank=True, default='')
    whitelabel_domain = models.CharField(max_length=255, blank=True, default='')
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Credentials for user {self.user_id}"
