"""
API views for Lead Tracker.
"""
import logging
import uuid
from django.conf import settings
from django.http import HttpResponse
from rest_framework.exceptions import ParseError
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from django.views.decorators.csrf import csrf_exempt
from django.utils.decorators import method_decorator

from leads.parsers import AnyContentTypeJSONParser
from leads.services.audit import log_webhook_error
from leads.services.ingestion import MissingCredentialError, process_webhook

logger = logging.getLogger(__name__)


@method_decorator(csrf_exempt, name='dispatch')
class LeadWebhookView(APIView):
    """
    Per-user webhook endpoint for the CRM automation tool.

    POST /webhook/<user_id>
    - Accepts an arbitrary JSON payload, regardless of Content-Type
    - Logs the raw payload
    - Updates the status of known leads, or stores a new enriched lead

    GET /webhook/<user_id>
    - Platform subscription verification handshake
    """

    authentication_classes = []
    parser_classes = [AnyContentTypeJSONParser]

    def post(self, request, user_id=None):
        """
        Handle an inbound webhook event.

        Returns:
            200 OK: Lead stored or status updated
            400 Bad Request: Missing user id, malformed JSON or processing error
            403 Forbidden: User has no stored access token
        """
        # Generate correlation ID for request tracing
        correlation_id = str(uuid.uuid4())

        if not user_id:
            logger.warning(f"Webhook without user id, correlation_id={correlation_id}")
            return Response(
                {
                    'message': 'User ID is missing',
                    'correlation_id': correlation_id
                },
                status=status.HTTP_400_BAD_REQUEST
            )

        # Read the raw body before DRF parses it so it can be logged on failure
        raw_body = request.body.decode('utf-8', errors='replace')

        try:
            if not raw_body.strip():
                raise ParseError('Empty request body')
            payload = request.data

            result = process_webhook(user_id, payload)

            logger.info(
                f"Webhook for user {user_id} processed: {result.message}, "
                f"correlation_id={correlation_id}"
            )
            return Response(
                {
                    'message': result.message,
                    'correlation_id': correlation_id
                },
                status=status.HTTP_200_OK
            )

        except MissingCredentialError as e:
            logger.warning(f"{e}, correlation_id={correlation_id}")
            return Response(
                {
                    'message': 'User configuration not found or incomplete.',
                    'correlation_id': correlation_id
                },
                status=status.HTTP_403_FORBIDDEN
            )
        except ParseError as e:
            logger.warning(
                f"Malformed JSON payload for user {user_id}: {e}, "
                f"correlation_id={correlation_id}"
            )
            return self._error_response(user_id, str(e.detail), raw_body, correlation_id)
        except Exception as e:
            logger.error(
                f"Error processing webhook for user {user_id}: {e}, "
                f"correlation_id={correlation_id}",
                exc_info=True
            )
            return self._error_response(user_id, str(e), raw_body, correlation_id)

    def get(self, request, user_id=None):
        """
        Answer the platform's subscription handshake.

        Echoes hub.challenge when hub.mode is "subscribe" and hub.verify_token
        matches WEBHOOK_VERIFY_TOKEN.
        """
        if not user_id:
            return Response({'message': 'User ID is missing'}, status=status.HTTP_400_BAD_REQUEST)

        mode = request.query_params.get('hub.mode')
        token = request.query_params.get('hub.verify_token')
        challenge = request.query_params.get('hub.challenge', '')
        expected = settings.WEBHOOK_VERIFY_TOKEN

        if mode == 'subscribe' and expected and token == expected:
            logger.info(f"Webhook verification successful for user {user_id}")
            return HttpResponse(challenge, content_type='text/plain', status=status.HTTP_200_OK)

        logger.error(f"Webhook verification failed for user {user_id}")
        return HttpResponse('Forbidden', content_type='text/plain', status=status.HTTP_403_FORBIDDEN)

    def _error_response(self, user_id, error, raw_body, correlation_id):
        log_webhook_error(user_id, error, raw_body)
        return Response(
            {
                'message': 'Error processing webhook',
                'error': error,
                'correlation_id': correlation_id
            },
            status=status.HTTP_400_BAD_REQUEST
        )
