"""Rule sets for each command and query."""

from rest_framework import serializers

from booking.services.validation import Validator


def _text(label: str, max_length: int, **kwargs) -> serializers.CharField:
    return serializers.CharField(
        max_length=max_length,
        error_messages={
            "required": f"{label} is required.",
            "null": f"{label} is required.",
            "blank": f"{label} is required.",
            "max_length": f"{label} must not exceed {max_length} characters.",
        },
        **kwargs,
    )


class MenuItemRules(serializers.Serializer):
    name = _text("Item name", 100)
    description = _text("Item description", 100)


class MenuSectionRules(serializers.Serializer):
    name = _text("Section name", 100)
    description = _text("Section description", 100)
    items = serializers.ListField(
        child=MenuItemRules(),
        allow_empty=False,
        error_messages={"empty": "Sections must contain at least one item."},
    )


class CreateMenuRules(serializers.Serializer):
    name = _text("Name", 100)
    description = _text("Description", 500)
    host_id = serializers.UUIDField(
        error_messages={"invalid": "Host id must be a valid identifier."}
    )
    sections = serializers.ListField(
        child=MenuSectionRules(),
        allow_empty=False,
        error_messages={"empty": "Sections are required."},
    )


class GetMenuRules(serializers.Serializer):
    host_id = serializers.UUIDField(
        error_messages={"invalid": "Host id must be a valid identifier."}
    )
    menu_id = serializers.UUIDField(
        error_messages={"invalid": "Menu id must be a valid identifier."}
    )


class RegisterRules(serializers.Serializer):
    first_name = _text("First name", 100)
    last_name = _text("Last name", 100)
    email = serializers.EmailField(
        max_length=255,
        error_messages={
            "blank": "Email is required.",
            "invalid": "Email must be a valid email address.",
        },
    )
    password = _text("Password", 128, trim_whitespace=False)


class LoginRules(serializers.Serializer):
    email = serializers.EmailField(
        error_messages={
            "blank": "Email is required.",
            "invalid": "Email must be a valid email address.",
        },
    )
    password = _text("Password", 128, trim_whitespace=False)


class CreateMenuCommandValidator(Validator):
    serializer_class = CreateMenuRules


class GetMenuQueryValidator(Validator):
    serializer_class = GetMenuRules


class RegisterCommandValidator(Validator):
    serializer_class = RegisterRules


class LoginQueryValidator(Validator):
    serializer_class = LoginRules
