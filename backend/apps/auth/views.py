from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework_simplejwt.views import TokenRefreshView
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer, envelope
from apps.api.utils import success_response
from apps.common import get_logger
from .container import build_auth_service
from .serializers import LoginRequestSerializer, LoginResponseSerializer

logger = get_logger(__name__).bind(component="auth", layer="view")


@extend_schema(tags=["Auth"])
class LoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    service = build_auth_service()
    log = logger.bind(view="LoginView")

    @extend_schema(
        summary="Login",
        request=LoginRequestSerializer,
        responses={
            200: envelope(LoginResponseSerializer),
            400: OpenApiResponse(response=ErrorResponseSerializer),
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = LoginRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        self.log.debug("Processing login request", username=data["username"])
        result = self.service.authenticate(data["username"], data["password"])
        return success_response(LoginResponseSerializer(result).data, "Login successful")


@extend_schema(tags=["Auth"])
class AdminLoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    service = build_auth_service()
    log = logger.bind(view="AdminLoginView")

    @extend_schema(
        summary="Admin login",
        request=LoginRequestSerializer,
        responses={
            200: envelope(LoginResponseSerializer, name="AdminLogin"),
            401: OpenApiResponse(response=ErrorResponseSerializer),
            403: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = LoginRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        self.log.debug("Processing admin login request", username=data["username"])
        result = self.service.admin_login(data["username"], data["password"])
        return success_response(LoginResponseSerializer(result).data, "Admin login successful")


@extend_schema(tags=["Auth"], summary="Refresh JWT")
class RefreshView(TokenRefreshView):
    permission_classes = [AllowAny]
