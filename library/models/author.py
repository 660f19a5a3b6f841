from django.db import models


class Author(models.Model):
    """Person credited with writing a book."""
    name = models.CharField(max_length=255, unique=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name
