from django.db import IntegrityError
from django.test import TestCase

from users.models import User, Role
from users.serializers import UserSerializer
from users.tests.factories import make_user, make_auctioneer


class UserModelTests(TestCase):
    def test_password_is_deferred_by_default(self):
        make_user()
        user = User.objects.get(email='bidder@example.com')
        self.assertIn('password', user.get_deferred_fields())

    def test_with_password_selects_hash(self):
        make_user()
        user = User.objects.with_password().get(email='bidder@example.com')
        self.assertNotIn('password', user.get_deferred_fields())
        self.assertTrue(user.check_password('password123'))

    def test_defaults(self):
        user = make_user()
        self.assertEqual(user.money_spent, 0)
        self.assertEqual(user.auctions_won, 0)
        self.assertEqual(user.unpaid_commission, 0)
        self.assertFalse(user.is_auctioneer)

    def test_email_is_unique(self):
        make_user(email='dup@example.com', username='one')
        with self.assertRaises(IntegrityError):
            make_user(email='dup@example.com', username='two')

    def test_username_is_unique(self):
        make_user(email='one@example.com', username='dup')
        with self.assertRaises(IntegrityError):
            make_user(email='two@example.com', username='dup')


class UserSerializerTests(TestCase):
    def test_bidder_representation(self):
        data = UserSerializer(make_user()).data
        self.assertNotIn('password', data)
        self.assertIsNone(data['paymentMethods'])
        self.assertIsNone(data['profileImage'])
        self.assertEqual(data['role'], Role.BIDDER)

    def test_auctioneer_representation(self):
        user = make_auctioneer()
        self.assertTrue(user.is_auctioneer)
        data = UserSerializer(User.objects.get(pk=user.pk)).data
        self.assertEqual(data['paymentMethods']['bankTransfer']['bankName'], 'State Bank')
        self.assertEqual(data['paymentMethods']['paypal'], {"paypalEmail": 'seller@paypal.example.com'})
