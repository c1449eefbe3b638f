import logging

from rest_framework import status
from rest_framework.exceptions import ParseError, UnsupportedMediaType, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)

INVALID_INPUT = {"message": "Invalid input"}
INTERNAL_ERROR = {"message": "Internal server error"}


def portfolio_exception_handler(exc, context):
    """
    Collapse API errors into the two generic client-facing messages.

    Bad request bodies become a 400 without field detail, and anything DRF
    does not already handle (store failures included) becomes a 500.
    """
    view = context.get('view')
    view_name = type(view).__name__ if view is not None else 'unknown view'

    if isinstance(exc, (ValidationError, ParseError, UnsupportedMediaType)):
        logger.warning("Rejected input in %s: %s", view_name, exc.detail)
        return Response(INVALID_INPUT, status=status.HTTP_400_BAD_REQUEST)

    response = exception_handler(exc, context)
    if response is not None:
        return response

    logger.exception("Unhandled error in %s", view_name)
    set_rollback()
    return Response(INTERNAL_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
