import logging

from django.contrib.auth import authenticate
from django.db import DatabaseError
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import LoginFailureSerializer
from .serializers import LoginSerializer
from .serializers import LoginSuccessSerializer

logger = logging.getLogger(__name__)


class LoginView(APIView):
    """Check a username/password pair and report the user's dashboard role.

    No session or token is issued; the frontend keeps the role and name.
    """

    # JSON endpoint for the SPA; SessionAuthentication would demand CSRF.
    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Authentication"],
        request=LoginSerializer,
        responses={
            200: LoginSuccessSerializer,
            401: LoginFailureSerializer,
            500: LoginFailureSerializer,
        },
    )
    def post(self, request, *args, **kwargs):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return self._invalid_credentials()
        username = serializer.validated_data["username"]
        try:
            user = authenticate(
                request,
                username=username,
                password=serializer.validated_data["password"],
            )
        except DatabaseError as exc:
            logger.exception("Login lookup failed for %s", username)
            return Response(
                {"success": False, "error": str(exc)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        if user is None:
            logger.info("Rejected login for %s", username)
            return self._invalid_credentials()
        logger.info("User %s logged in as %s", user.username, user.role)
        return Response({"success": True, "role": user.role, "name": user.username})

    def _invalid_credentials(self):
        return Response(
            {"success": False, "message": "Invalid credentials"},
            status=status.HTTP_401_UNAUTHORIZED,
        )
