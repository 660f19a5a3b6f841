"""Repository helpers for comment lookups."""

from typing import Optional

from django.db.models import QuerySet

from library.models import Comment
from library.repos.base import ModelRepository


class CommentRepo(ModelRepository):
    """Repository for comment queries keyed by content and book title."""
    def __init__(self) -> None:
        super().__init__(Comment)

    def all_with_books(self) -> QuerySet:
        """Return every comment with its book preloaded."""
        return self.list(related=("book",))

    def first_by_content(self, content: str) -> Optional[Comment]:
        return self.list(filters={"content": content}, related=("book",)).first()

    def for_book_title(self, title: str) -> QuerySet:
        """Return comments attached to the book with the given title."""
        return self.list(filters={"book__title": title}, related=("book",))

    def update_content(self, content: str, new_content: str) -> int:
        return self.update({"content": content}, content=new_content)

    def delete_by_content(self, content: str) -> int:
        """Delete every comment with this content; return count deleted."""
        return self.delete(content=content)
