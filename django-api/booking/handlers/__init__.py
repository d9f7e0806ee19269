from booking.handlers.views import (
    DinnerListView,
    LoginView,
    MenuDetailView,
    MenuListView,
    RegisterView,
)

__all__ = [
    "DinnerListView",
    "LoginView",
    "MenuDetailView",
    "MenuListView",
    "RegisterView",
]
