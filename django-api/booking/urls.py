from django.urls import path

from booking.container import build_container
from booking.handlers import (
    DinnerListView,
    LoginView,
    MenuDetailView,
    MenuListView,
    RegisterView,
)

container = build_container()

urlpatterns = [
    path("auth/register", RegisterView.as_view(handler=container.register), name="register"),
    path("auth/login", LoginView.as_view(handler=container.login), name="login"),
    path(
        "hosts/<str:host_id>/menus",
        MenuListView.as_view(handler=container.create_menu),
        name="menu-list",
    ),
    path(
        "hosts/<str:host_id>/menus/<str:menu_id>",
        MenuDetailView.as_view(handler=container.get_menu),
        name="menu-detail",
    ),
    path("dinners", DinnerListView.as_view(), name="dinner-list"),
]
