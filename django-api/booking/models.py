"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
Ids are generated by the domain, never by the database.
"""

from django.db import models


class User(models.Model):
    """Persistence model for users."""

    id = models.UUIDField(primary_key=True, editable=False)
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField(max_length=255, unique=True)
    password = models.CharField(max_length=255)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    def __str__(self) -> str:
        return self.email


class Menu(models.Model):
    """Persistence model for menus."""

    id = models.UUIDField(primary_key=True, editable=False)
    name = models.CharField(max_length=100)
    description = models.CharField(max_length=500)
    host_id = models.UUIDField(db_index=True)
    average_rating = models.FloatField(default=0.0)
    num_ratings = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.name


class MenuSection(models.Model):
    """Persistence model for menu sections, owned by a menu."""

    id = models.UUIDField(primary_key=True, editable=False)
    menu = models.ForeignKey(Menu, on_delete=models.CASCADE, related_name="sections")
    position = models.PositiveIntegerField()
    name = models.CharField(max_length=100)
    description = models.CharField(max_length=100)

    class Meta:
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(
                fields=["menu", "position"], name="menu_section_position_unique"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.menu.name} - {self.name}"


class MenuItem(models.Model):
    """Persistence model for menu items, owned by a section."""

    id = models.UUIDField(primary_key=True, editable=False)
    section = models.ForeignKey(
        MenuSection, on_delete=models.CASCADE, related_name="items"
    )
    position = models.PositiveIntegerField()
    name = models.CharField(max_length=100)
    description = models.CharField(max_length=100)

    class Meta:
        ordering = ["position"]

    def __str__(self) -> str:
        return self.name


class MenuDinner(models.Model):
    """Reference from a menu to a dinner that serves it."""

    menu = models.ForeignKey(Menu, on_delete=models.CASCADE, related_name="dinners")
    position = models.PositiveIntegerField()
    dinner_id = models.UUIDField()

    class Meta:
        ordering = ["position"]


class MenuReview(models.Model):
    """Reference from a menu to one of its reviews."""

    menu = models.ForeignKey(Menu, on_delete=models.CASCADE, related_name="reviews")
    position = models.PositiveIntegerField()
    review_id = models.UUIDField()

    class Meta:
        ordering = ["position"]
