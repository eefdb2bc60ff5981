# users/tokens.py
from datetime import timedelta

from django.conf import settings
from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import AccessToken

from users.serializers import UserSerializer


def send_token(user, message, status_code):
    """Issue an access token for ``user`` as both an HttpOnly cookie and a body field."""
    token = str(AccessToken.for_user(user))
    response = Response({
        "success": True,
        "message": message,
        "token": token,
        "user": UserSerializer(user).data,
    }, status=status_code)
    response.set_cookie(
        settings.AUTH_COOKIE_NAME,
        token,
        expires=timezone.now() + timedelta(days=settings.COOKIE_EXPIRE_DAYS),
        httponly=True,
        secure=settings.AUTH_COOKIE_SECURE,
        samesite='Lax',
    )
    return response


def clear_token(message):
    response = Response({"success": True, "message": message}, status=status.HTTP_200_OK)
    response.set_cookie(
        settings.AUTH_COOKIE_NAME,
        "",
        expires=timezone.now(),
        httponly=True,
        secure=settings.AUTH_COOKIE_SECURE,
        samesite='Lax',
    )
    return response
