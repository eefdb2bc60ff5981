# users/exceptions.py
import logging

from django.core.exceptions import PermissionDenied
from django.db import IntegrityError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import set_rollback
from rest_framework_simplejwt.exceptions import InvalidToken

logger = logging.getLogger(__name__)


class ValidationError(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid input.'
    default_code = 'invalid'


class ConflictError(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'User already registered.'
    default_code = 'conflict'


class AuthError(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid credentials.'
    default_code = 'invalid_credentials'


class UploadError(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Failed to upload profile image to Cloudinary.'
    default_code = 'upload_failed'


def first_message(detail):
    """Flatten a DRF error detail (str, list or dict) into its first message."""
    if isinstance(detail, dict):
        if 'detail' in detail:
            return first_message(detail['detail'])
        for value in detail.values():
            return first_message(value)
        return ''
    if isinstance(detail, (list, tuple)):
        return first_message(detail[0]) if detail else ''
    return str(detail)


def error_response(message, status_code):
    return Response({"success": False, "message": message}, status=status_code)


def api_exception_handler(exc, context):
    """Render every error raised by a view as ``{success: false, message}``."""
    if isinstance(exc, Http404):
        return error_response("Resource not found.", status.HTTP_404_NOT_FOUND)
    if isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    if isinstance(exc, IntegrityError):
        set_rollback()
        logger.warning(f"Integrity error: {str(exc)}")
        return error_response("Duplicate entry.", status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, InvalidToken):
        message = "Json Web Token is invalid, Try again!"
    elif isinstance(exc, exceptions.NotAuthenticated):
        message = "User not authenticated."
    elif isinstance(exc, exceptions.APIException):
        message = first_message(exc.detail)
    else:
        set_rollback()
        view = context.get('view')
        logger.error(f"Unhandled error in {view.__class__.__name__}: {str(exc)}", exc_info=exc)
        return error_response("Internal Server Error.", status.HTTP_500_INTERNAL_SERVER_ERROR)

    response = error_response(message, exc.status_code)
    if getattr(exc, 'auth_header', None):
        response['WWW-Authenticate'] = exc.auth_header
    if getattr(exc, 'wait', None):
        response['Retry-After'] = '%d' % exc.wait
    set_rollback()
    return response
