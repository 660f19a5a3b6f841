"""Repository helpers for books and their catalogue entries."""

from typing import Optional, Tuple

from django.db.models import QuerySet

from library.models import Author, Book, Genre
from library.repos.base import ModelRepository


class BookRepo(ModelRepository):
    """Repository for book queries keyed by title."""
    def __init__(self) -> None:
        super().__init__(Book)

    def all_with_catalogue(self) -> QuerySet:
        return self.list(related=("author", "genre"))

    def get_by_title(self, title: str) -> Optional[Book]:
        """Return the book with this title, or None."""
        return self.list(filters={"title": title}, related=("author", "genre")).first()

    def catalogue_entries(self, author_name: str, genre_name: str) -> Tuple[Author, Genre]:
        """Return the named author and genre, creating them when they are new."""
        author, _ = Author.objects.get_or_create(name=author_name)
        genre, _ = Genre.objects.get_or_create(name=genre_name)
        return author, genre

    def create_book(self, title: str, author_name: str, genre_name: str) -> Book:
        """Create a book, adding its author and genre when they are new."""
        author, genre = self.catalogue_entries(author_name, genre_name)
        return self.create(title=title, author=author, genre=genre)

    def rename(self, title: str, new_title: str) -> int:
        return self.update({"title": title}, title=new_title)
