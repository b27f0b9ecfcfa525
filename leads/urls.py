"""
URL configuration for leads app.
"""
from django.urls import path, re_path
from leads.views import LeadWebhookView

urlpatterns = [
    path('', LeadWebhookView.as_view(), name='lead-webhook-missing-user'),
    re_path(r'^(?P<user_id>[^/]+)/?$', LeadWebhookView.as_view(), name='lead-webhook'),
]
