# users/models.py
from django.contrib.auth.models import AbstractUser
from django.contrib.auth.models import UserManager as DjangoUserManager
from django.db import models


class Role(models.TextChoices):
    AUCTIONEER = 'Auctioneer', 'Auctioneer'
    BIDDER = 'Bidder', 'Bidder'
    SUPER_ADMIN = 'Super Admin', 'Super Admin'


class UserManager(DjangoUserManager):
    """Default reads leave the password hash out; ask for it with ``with_password()``."""

    def get_queryset(self):
        return super().get_queryset().defer('password')

    def with_password(self):
        return super().get_queryset()


class User(AbstractUser):
    username = models.CharField(max_length=40, unique=True)
    email = models.EmailField(unique=True)
    phone = models.CharField(max_length=20)
    address = models.CharField(max_length=255)
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.BIDDER)
    profile_image_public_id = models.CharField(max_length=255, blank=True, null=True)
    profile_image_url = models.URLField(max_length=500, blank=True, null=True)
    money_spent = models.PositiveIntegerField(default=0)
    auctions_won = models.PositiveIntegerField(default=0)
    unpaid_commission = models.PositiveIntegerField(default=0)

    objects = UserManager()

    def __str__(self):
        return self.email

    @property
    def is_auctioneer(self):
        return self.role == Role.AUCTIONEER

    class Meta:
        indexes = [
            models.Index(fields=['money_spent'], name='users_money_spent_idx'),
        ]


class PaymentProfile(models.Model):
    """Payout details every Auctioneer must register with."""
    user = models.OneToOneField(User, related_name='payment_profile', on_delete=models.CASCADE)
    bank_account_number = models.CharField(max_length=40)
    bank_account_name = models.CharField(max_length=150)
    bank_name = models.CharField(max_length=150)
    ifsc_code = models.CharField(max_length=20)
    paypal_email = models.EmailField()

    def __str__(self):
        return f"{self.user.email} ({self.bank_name})"
