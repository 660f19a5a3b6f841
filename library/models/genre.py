from django.db import models


class Genre(models.Model):
    """Literary genre a book is filed under."""
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name
