"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from booking.handlers.errors import problem
from booking.handlers.serializers import (
    AuthenticationResponseSerializer,
    CreateMenuRequestSerializer,
    LoginRequestSerializer,
    MenuSerializer,
    RegisterRequestSerializer,
)
from booking.services.menus import GetMenuQuery
from booking.services.validation import RequestHandler


class HandlerView(APIView):
    """Base view for endpoints backed by one injected handler."""

    handler: RequestHandler | None = None


class RegisterView(HandlerView):
    """Handler for POST /auth/register"""

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        serializer = RegisterRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.handler.handle(serializer.to_command())
        if result.is_error:
            return problem(result.errors)
        return Response(AuthenticationResponseSerializer(result.value).data)


class LoginView(HandlerView):
    """Handler for POST /auth/login"""

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        serializer = LoginRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.handler.handle(serializer.to_query())
        if result.is_error:
            return problem(result.errors)
        return Response(AuthenticationResponseSerializer(result.value).data)


class MenuListView(HandlerView):
    """Handler for POST /hosts/{host_id}/menus"""

    def post(self, request: Request, host_id: str) -> Response:
        serializer = CreateMenuRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.handler.handle(serializer.to_command(host_id))
        if result.is_error:
            return problem(result.errors)
        return Response(MenuSerializer(result.value).data, status=status.HTTP_201_CREATED)


class MenuDetailView(HandlerView):
    """Handler for GET /hosts/{host_id}/menus/{menu_id}"""

    def get(self, request: Request, host_id: str, menu_id: str) -> Response:
        result = self.handler.handle(GetMenuQuery(host_id=host_id, menu_id=menu_id))
        if result.is_error:
            return problem(result.errors)
        return Response(MenuSerializer(result.value).data)


class DinnerListView(APIView):
    """Handler for GET /dinners

    Dinners are not stored yet, so the list is intentionally always empty.
    """

    def get(self, request: Request) -> Response:
        return Response([])
