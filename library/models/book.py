"""Model for books held by the library."""

from django.db import models
from library.validators import validate_path_key
from .author import Author
from .genre import Genre


class Book(models.Model):
    """A book, addressed throughout the site by its unique title."""

    title = models.CharField(max_length=255, unique=True, validators=[validate_path_key])

    # FK → author.id
    author = models.ForeignKey(
        Author,
        on_delete=models.CASCADE,
        related_name='books'
    )

    # FK → genre.id
    genre = models.ForeignKey(
        Genre,
        on_delete=models.CASCADE,
        related_name='books'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Books are listed alphabetically."""
        ordering = ["title"]

    def __str__(self):
        return self.title
