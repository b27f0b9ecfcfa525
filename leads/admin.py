"""
Django admin configuration for leads app.
"""
from django.contrib import admin
from django.utils.html import format_html

from leads.models import Lead, WebhookLog, WebhookError, UserCredential
from leads.services.crm import build_contact_url


class ReadOnlyAdmin(admin.ModelAdmin):
    """Audit data is written by the webhook only."""

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Lead)
class LeadAdmin(ReadOnlyAdmin):
    """Admin interface for Lead model."""

    list_display = ('id', 'lead_name', 'lead_phone', 'status', 'origin', 'campaign', 'user_id', 'received_at', 'crm_link')
    list_filter = ('status', 'origin', 'received_at')
    search_fields = ('lead_name', 'lead_phone', 'contact_id', 'user_id', 'ad_id', 'campaign')
    readonly_fields = ('id', 'user_id', 'contact_id', 'received_at', 'date_created', 'raw_payload',
                       'meta_api_response', 'meta_api_request_url', 'crm_link')

    fieldsets = (
        ('Lead', {
            'fields': ('id', 'user_id', 'contact_id', 'lead_name', 'lead_phone', 'status', 'crm_link')
        }),
        ('Attribution', {
            'fields': ('origin', 'medium', 'source', 'campaign', 'workflow')
        }),
        ('Ad Creative', {
            'fields': ('ad_id', 'media_type', 'ad_link', 'ad_thumbnail', 'ad_video', 'ad_title',
                       'ad_description', 'ctwa_click_id'),
            'classes': ('collapse',)
        }),
        ('Timestamps', {
            'fields': ('date_created', 'received_at')
        }),
        ('Diagnostics', {
            'fields': ('raw_payload', 'meta_api_request_url', 'meta_api_response'),
            'classes': ('collapse',)
        }),
    )

    @admin.display(description='CRM')
    def crm_link(self, obj):
        credential = UserCredential.objects.filter(user_id=obj.user_id).first()
        url = build_contact_url(credential.whitelabel_domain if credential else '', obj.contact_id)
        if not url:
            return '-'
        return format_html('<a href="{}" target="_blank">{}</a>', url, obj.contact_id)


@admin.register(WebhookLog)
class WebhookLogAdmin(ReadOnlyAdmin):
    """Admin interface for WebhookLog model."""

    list_display = ('id', 'user_id', 'lead_name', 'received_at')
    list_filter = ('received_at',)
    search_fields = ('user_id', 'lead_name')
    readonly_fields = ('user_id', 'lead_name', 'payload', 'received_at')


@admin.register(WebhookError)
class WebhookErrorAdmin(ReadOnlyAdmin):
    """Admin interface for WebhookError model."""

    list_display = ('id', 'user_id', 'error', 'received_at')
    list_filter = ('received_at',)
    search_fields = ('user_id', 'error')
    readonly_fields = ('user_id', 'error', 'payload', 'received_at')


@admin.register(UserCredential)
class UserCredentialAdmin(admin.ModelAdmin):
    """Credentials are managed by the settings UI; the token is never displayed."""

    list_display = ('user_id', 'whitelabel_domain', 'has_token', 'updated_at')
    search_fields = ('user_id',)
    exclude = ('meta_access_token',)
    readonly_fields = ('user_id', 'whitelabel_domain', 'updated_at')

    @admin.display(boolean=True, description='Token')
    def has_token(self, obj):
        return bool(obj.meta_access_token)

    def has_add_permission(self, request):
        return False
