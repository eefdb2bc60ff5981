from rest_framework import serializers
from users.exceptions import ValidationError
from users.models import User, PaymentProfile, Role

ALLOWED_IMAGE_TYPES = ['image/png', 'image/jpeg', 'image/webp']


class UserSerializer(serializers.ModelSerializer):
    userName = serializers.CharField(source='username', read_only=True)
    profileImage = serializers.SerializerMethodField()
    paymentMethods = serializers.SerializerMethodField()
    moneySpent = serializers.IntegerField(source='money_spent', read_only=True)
    auctionsWon = serializers.IntegerField(source='auctions_won', read_only=True)
    unpaidCommission = serializers.IntegerField(source='unpaid_commission', read_only=True)
    createdAt = serializers.DateTimeField(source='date_joined', read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'userName', 'email', 'phone', 'address', 'role', 'profileImage',
            'paymentMethods', 'moneySpent', 'auctionsWon', 'unpaidCommission', 'createdAt',
        ]

    def get_profileImage(self, obj):
        if not obj.profile_image_url:
            return None
        return {"public_id": obj.profile_image_public_id, "url": obj.profile_image_url}

    def get_paymentMethods(self, obj):
        try:
            profile = obj.payment_profile
        except PaymentProfile.DoesNotExist:
            return None
        return {
            "bankTransfer": {
                "bankAccountNumber": profile.bank_account_number,
                "bankAccountName": profile.bank_account_name,
                "bankName": profile.bank_name,
            },
            "IFSC": {"IFSCCodeNumber": profile.ifsc_code},
            "paypal": {"paypalEmail": profile.paypal_email},
        }


def _optional_text():
    return serializers.CharField(required=False, allow_blank=True, allow_null=True)


class RegisterSerializer(serializers.Serializer):
    """
    Checks a registration form in a fixed order and reduces it to the fields
    a User needs. Auctioneers additionally carry a ``payment_profile`` dict;
    nobody else does.
    """
    REQUIRED_FIELDS = ['userName', 'email', 'phone', 'password', 'address', 'role']
    BANK_FIELDS = ['bankAccountName', 'bankAccountNumber', 'bankName']

    userName = _optional_text()
    email = _optional_text()
    password = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    phone = _optional_text()
    address = _optional_text()
    role = _optional_text()
    bankAccountNumber = _optional_text()
    bankAccountName = _optional_text()
    bankName = _optional_text()
    paypalEmail = _optional_text()
    IFSC = _optional_text()
    profileImage = serializers.FileField(required=False, allow_null=True)

    def validate(self, data):
        if not all(data.get(field) for field in self.REQUIRED_FIELDS):
            raise ValidationError("Please fill full form.")

        role = data['role']
        if role == Role.AUCTIONEER:
            if not all(data.get(field) for field in self.BANK_FIELDS):
                raise ValidationError("Please provide your full bank details.")
            if not data.get('paypalEmail'):
                raise ValidationError("Please provide your PayPal email.")
            if not data.get('IFSC'):
                raise ValidationError("Please provide your valid IFSC Code.")

        if role not in Role.values:
            raise ValidationError("Please select a valid role.")
        if not 3 <= len(data['userName']) <= 40:
            raise ValidationError("Username must contain between 3 and 40 characters.")
        if not 8 <= len(data['password']) <= 32:
            raise ValidationError("Password must contain between 8 and 32 characters.")

        image = data.get('profileImage')
        if image and image.content_type not in ALLOWED_IMAGE_TYPES:
            raise ValidationError("File format not supported.")

        registration = {
            'username': data['userName'],
            'email': data['email'],
            'password': data['password'],
            'phone': data['phone'],
            'address': data['address'],
            'role': role,
            'profile_image': image,
        }
        if role == Role.AUCTIONEER:
            registration['payment_profile'] = {
                'bank_account_number': data['bankAccountNumber'],
                'bank_account_name': data['bankAccountName'],
                'bank_name': data['bankName'],
                'ifsc_code': data['IFSC'],
                'paypal_email': data['paypalEmail'],
            }
        return registration


class LoginSerializer(serializers.Serializer):
    email = _optional_text()
    password = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)

    def validate(self, data):
        if not data.get('email') or not data.get('password'):
            raise ValidationError("Please fill full form.")
        return data
