"""
Request parsers for the webhook endpoint.
"""
from rest_framework.parsers import JSONParser


class AnyContentTypeJSONParser(JSONParser):
    """
    Parse the body as JSON whatever Content-Type the sender declares.

    Automation tools often post JSON as text/plain or without a header.
    """
    media_type = '*/*'
