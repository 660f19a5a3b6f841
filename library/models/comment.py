"""Model for comments annotating books."""

from django.core.validators import MaxLengthValidator
from django.db import models
from library.validators import validate_path_key
from .book import Book


class Comment(models.Model):
    """Text annotation attached to a book."""

    # FK → book.id
    book = models.ForeignKey(
        Book,
        on_delete=models.CASCADE,
        related_name='comments'
    )

    # text (1–2000)
    content = models.TextField(max_length=2000, validators=[MaxLengthValidator(2000), validate_path_key])

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Newest comments first."""
        ordering = ["-created_at", "-id"]

    def __str__(self):
        """Readable identifier for admin/debugging."""
        return f"{self.content[:50]} ({self.book_title})"

    @property
    def book_title(self):
        """Title of the annotated book."""
        return self.book.title
