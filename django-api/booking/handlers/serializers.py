"""Serializers for parsing requests and rendering domain models.

Request serializers only check shape and trim text; missing fields fall
back to blanks so the validators run by the services report them.
"""

from rest_framework import serializers

from booking.services.authentication import LoginQuery, RegisterCommand
from booking.services.menus import CreateMenuCommand, MenuItemCommand, MenuSectionCommand


def _text(**kwargs) -> serializers.CharField:
    return serializers.CharField(allow_blank=True, default="", **kwargs)


class RegisterRequestSerializer(serializers.Serializer):
    first_name = _text()
    last_name = _text()
    email = _text()
    password = _text(trim_whitespace=False)

    def to_command(self) -> RegisterCommand:
        return RegisterCommand(**self.validated_data)


class LoginRequestSerializer(serializers.Serializer):
    email = _text()
    password = _text(trim_whitespace=False)

    def to_query(self) -> LoginQuery:
        return LoginQuery(**self.validated_data)


class MenuItemRequestSerializer(serializers.Serializer):
    name = _text()
    description = _text()


class MenuSectionRequestSerializer(serializers.Serializer):
    name = _text()
    description = _text()
    items = MenuItemRequestSerializer(many=True, default=list)


class CreateMenuRequestSerializer(serializers.Serializer):
    name = _text()
    description = _text()
    sections = MenuSectionRequestSerializer(many=True, default=list)

    def to_command(self, host_id: str) -> CreateMenuCommand:
        data = self.validated_data
        return CreateMenuCommand(
            name=data["name"],
            description=data["description"],
            host_id=host_id,
            sections=[
                MenuSectionCommand(
                    name=section["name"],
                    description=section["description"],
                    items=[MenuItemCommand(**item) for item in section["items"]],
                )
                for section in data["sections"]
            ],
        )


class AuthenticationResponseSerializer(serializers.Serializer):
    """Serializer for AuthenticationResult."""

    id = serializers.UUIDField(source="user.id.value")
    first_name = serializers.CharField(source="user.first_name")
    last_name = serializers.CharField(source="user.last_name")
    email = serializers.CharField(source="user.email")
    token = serializers.CharField()


class MenuItemSerializer(serializers.Serializer):
    """Serializer for MenuItem entities."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()


class MenuSectionSerializer(serializers.Serializer):
    """Serializer for MenuSection entities."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    items = MenuItemSerializer(many=True)


class MenuSerializer(serializers.Serializer):
    """Serializer for the Menu aggregate. An unrated menu has a null rating."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    average_rating = serializers.FloatField(source="average_rating.reported", allow_null=True)
    host_id = serializers.UUIDField(source="host_id.value")
    sections = MenuSectionSerializer(many=True)
    dinner_ids = serializers.SerializerMethodField()
    menu_review_ids = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()

    def get_dinner_ids(self, menu) -> list[str]:
        return [str(dinner_id) for dinner_id in menu.dinner_ids]

    def get_menu_review_ids(self, menu) -> list[str]:
        return [str(review_id) for review_id in menu.menu_review_ids]
