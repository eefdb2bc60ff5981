# users/services.py
import logging

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader
from django.conf import settings
from django.db import transaction, IntegrityError

from users.exceptions import AuthError, ConflictError, UploadError
from users.models import User, PaymentProfile

logger = logging.getLogger(__name__)


def upload_profile_image(image):
    """Push an uploaded image to Cloudinary and return ``(public_id, secure_url)``."""
    source = image.temporary_file_path() if hasattr(image, 'temporary_file_path') else image
    try:
        response = cloudinary.uploader.upload(
            source,
            folder=settings.CLOUDINARY_USERS_FOLDER,
            resource_type="image"
        )
    except cloudinary.exceptions.Error as e:
        logger.error(f"Cloudinary error: {str(e)}")
        raise UploadError() from e

    if not response or response.get('error'):
        logger.error(f"Cloudinary error: {(response or {}).get('error', 'Unknown Cloudinary error.')}")
        raise UploadError()
    return response['public_id'], response['secure_url']


def discard_profile_image(public_id):
    try:
        cloudinary.uploader.destroy(public_id, resource_type="image")
    except cloudinary.exceptions.Error as e:
        logger.error(f"Could not remove orphaned image {public_id}: {str(e)}")


def register_user(registration):
    """
    Create a user from the output of ``RegisterSerializer``.

    The email lookup only gives an early answer; the unique constraints on the
    table decide, so a concurrent duplicate insert still ends as ConflictError.
    """
    if User.objects.filter(email=registration['email']).exists():
        raise ConflictError("User already registered.")
    if User.objects.filter(username=registration['username']).exists():
        raise ConflictError("Username already taken.")

    public_id = url = None
    if registration.get('profile_image'):
        public_id, url = upload_profile_image(registration['profile_image'])

    try:
        with transaction.atomic():
            user = User(
                username=registration['username'],
                email=registration['email'],
                phone=registration['phone'],
                address=registration['address'],
                role=registration['role'],
                profile_image_public_id=public_id,
                profile_image_url=url,
            )
            user.set_password(registration['password'])
            user.save()
            if 'payment_profile' in registration:
                PaymentProfile.objects.create(user=user, **registration['payment_profile'])
    except IntegrityError as e:
        logger.warning(f"Duplicate registration for {registration['email']}: {str(e)}")
        if public_id:
            discard_profile_image(public_id)
        raise ConflictError("User already registered.") from e

    logger.info(f"Registered {user.role} {user.email}")
    return user


def authenticate_user(email, password):
    """Return the user owning ``email`` when ``password`` matches; AuthError otherwise."""
    user = User.objects.with_password().select_related('payment_profile').filter(email=email).first()
    if user is None or not user.check_password(password):
        logger.info(f"Failed login attempt for {email}")
        raise AuthError("Invalid credentials.")
    return user


def leaderboard():
    return (
        User.objects.filter(money_spent__gt=0)
        .select_related('payment_profile')
        .order_by('-money_spent', 'id')
    )
