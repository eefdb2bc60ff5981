from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from users import services
from users.serializers import RegisterSerializer, LoginSerializer, UserSerializer
from users.tokens import send_token, clear_token
import logging

logger = logging.getLogger(__name__)


class RegisterView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = services.register_user(serializer.validated_data)
        return send_token(user, "User Registered.", status.HTTP_201_CREATED)


class LoginView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = services.authenticate_user(
            serializer.validated_data['email'],
            serializer.validated_data['password'],
        )
        logger.debug(f"Login for user {user.id}")
        return send_token(user, "Login successfully.", status.HTTP_200_OK)


class LogoutView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        return clear_token("Logout Successfully.")


class UserProfileView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        serializer = UserSerializer(request.user)
        return Response({"success": True, "user": serializer.data}, status=status.HTTP_200_OK)


class LeaderboardView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        serializer = UserSerializer(services.leaderboard(), many=True)
        return Response({"success": True, "leaderboard": serializer.data}, status=status.HTTP_200_OK)
