"""Django ORM implementation of the stores."""

from django.db import IntegrityError, transaction

from booking import models
from booking.domain import (
    AverageRating,
    DinnerId,
    HostId,
    Menu,
    MenuId,
    MenuItem,
    MenuItemId,
    MenuReviewId,
    MenuSection,
    MenuSectionId,
    User,
    UserId,
)
from booking.stores.interfaces import EmailAlreadyRegisteredError, MenuStore, UserStore


class DjangoUserStore(UserStore):
    """Database-backed user store. Email uniqueness is a unique index."""

    def get_user_by_email(self, email: str) -> User | None:
        record = models.User.objects.filter(email=email).first()
        if record is None:
            return None
        return User(
            id=UserId.create(record.id),
            first_name=record.first_name,
            last_name=record.last_name,
            email=record.email,
            password=record.password,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    def add_user(self, user: User) -> None:
        try:
            with transaction.atomic():
                models.User.objects.create(
                    id=user.id.value,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    email=user.email,
                    password=user.password,
                    created_at=user.created_at,
                    updated_at=user.updated_at,
                )
        except IntegrityError as exc:
            raise EmailAlreadyRegisteredError(user.email) from exc


class DjangoMenuStore(MenuStore):
    """Database-backed menu store.

    Sections, items and back-references live in their own tables and are
    written in the same transaction as the menu row.
    """

    @transaction.atomic
    def create(self, menu: Menu) -> None:
        record = models.Menu.objects.create(
            id=menu.id.value,
            name=menu.name,
            description=menu.description,
            host_id=menu.host_id.value,
            average_rating=menu.average_rating.value,
            num_ratings=menu.average_rating.num_ratings,
            created_at=menu.created_at,
            updated_at=menu.updated_at,
        )
        for section_position, section in enumerate(menu.sections):
            section_record = models.MenuSection.objects.create(
                id=section.id.value,
                menu=record,
                position=section_position,
                name=section.name,
                description=section.description,
            )
            models.MenuItem.objects.bulk_create(
                models.MenuItem(
                    id=item.id.value,
                    section=section_record,
                    position=item_position,
                    name=item.name,
                    description=item.description,
                )
                for item_position, item in enumerate(section.items)
            )
        models.MenuDinner.objects.bulk_create(
            models.MenuDinner(menu=record, position=position, dinner_id=dinner_id.value)
            for position, dinner_id in enumerate(menu.dinner_ids)
        )
        models.MenuReview.objects.bulk_create(
            models.MenuReview(menu=record, position=position, review_id=review_id.value)
            for position, review_id in enumerate(menu.menu_review_ids)
        )

    def get_menu(self, menu_id: MenuId) -> Menu | None:
        record = (
            models.Menu.objects.filter(id=menu_id.value)
            .prefetch_related("sections__items", "dinners", "reviews")
            .first()
        )
        if record is None:
            return None
        return Menu(
            id=MenuId.create(record.id),
            name=record.name,
            description=record.description,
            host_id=HostId.create(record.host_id),
            average_rating=AverageRating(
                value=record.average_rating, num_ratings=record.num_ratings
            ),
            sections=tuple(self._to_section(section) for section in record.sections.all()),
            created_at=record.created_at,
            updated_at=record.updated_at,
            dinner_ids=tuple(DinnerId.create(ref.dinner_id) for ref in record.dinners.all()),
            menu_review_ids=tuple(
                MenuReviewId.create(ref.review_id) for ref in record.reviews.all()
            ),
        )

    @staticmethod
    def _to_section(record: models.MenuSection) -> MenuSection:
        return MenuSection(
            id=MenuSectionId.create(record.id),
            name=record.name,
            description=record.description,
            items=tuple(
                MenuItem(
                    id=MenuItemId.create(item.id),
                    name=item.name,
                    description=item.description,
                )
                for item in record.items.all()
            ),
        )
