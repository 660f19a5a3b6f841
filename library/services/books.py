"""Service helpers for the book catalogue."""

import logging

from django.db import IntegrityError, transaction

from library.repos.book_repo import BookRepo

logger = logging.getLogger(__name__)

BOOK_UPDATED = "Book was updated"
BOOK_DELETED = "Book was deleted"
BOOK_NOT_FOUND = "Book was not found"
BOOK_TITLE_TAKEN = "A book with that title already exists"


class BookService:
    """Encapsulate book CRUD keyed by title."""

    def __init__(self, repo=None):
        self.repo = repo or BookRepo()

    def get_all(self):
        return self.repo.all_with_catalogue()

    def get_by_title(self, title):
        """Return the book with this title, or None."""
        return self.repo.get_by_title(title)

    def save(self, title, author_name, genre_name):
        """Create a book; None when the title is already taken."""
        if self.repo.exists(title=title):
            return None
        try:
            with transaction.atomic():
                book = self.repo.create_book(title, author_name, genre_name)
        except IntegrityError:
            logger.warning("Book %r was created concurrently", title)
            return None
        logger.info("Book %r added", book.title)
        return book

    def update_title(self, title, new_title):
        """Rename a book and report the outcome."""
        if not self.repo.exists(title=title):
            return BOOK_NOT_FOUND
        if title != new_title and self.repo.exists(title=new_title):
            return BOOK_TITLE_TAKEN
        self.repo.rename(title, new_title)
        logger.info("Book %r renamed to %r", title, new_title)
        return BOOK_UPDATED

    def delete_by_title(self, title):
        """Delete a book together with its comments."""
        if not self.repo.delete(title=title):
            return BOOK_NOT_FOUND
        logger.info("Book %r deleted", title)
        return BOOK_DELETED

    @transaction.atomic
    def update_book(self, book, title=None, author_name=None, genre_name=None):
        """Apply the given changes to a book, creating a new author or genre on demand."""
        if title is not None:
            book.title = title
        if author_name is not None or genre_name is not None:
            book.author, book.genre = self.repo.catalogue_entries(
                author_name or book.author.name,
                genre_name or book.genre.name,
            )
        book.save()
        logger.info("Book %s updated", book.pk)
        return book
