"""Service helpers for reading and changing book comments."""

import logging

from django.db import transaction
from django.http import Http404

from library.repos.comment_repo import CommentRepo
from library.services.books import BookService

logger = logging.getLogger(__name__)

COMMENT_UPDATED = "Comment was updated"
COMMENT_DELETED = "Comment was deleted"
COMMENT_NOT_FOUND = "Comment was not found"


class CommentService:
    """Encapsulate comment CRUD for books, keyed by comment content."""

    def __init__(self, repo=None, book_service=None):
        self.repo = repo or CommentRepo()
        self.book_service = book_service or BookService()

    def get_all(self):
        """Return every comment, newest first."""
        return self.repo.all_with_books()

    def get_comment_by_content(self, content):
        """Return the newest comment with this content or raise 404."""
        comment = self.repo.first_by_content(content)
        if comment is None:
            raise Http404("Comment not found.")
        return comment

    def get_comments_by_book(self, title):
        """Return the comments left on the book with this title."""
        return self.repo.for_book_title(title)

    def save(self, content, book_title):
        """Attach a new comment to the titled book; None when the book is unknown."""
        book = self.book_service.get_by_title(book_title)
        if book is None:
            logger.info("Comment not saved: no book titled %r", book_title)
            return None
        comment = self.repo.create(content=content, book=book)
        logger.info("Comment %s added to %r", comment.pk, book.title)
        return comment

    @transaction.atomic
    def update_comment(self, content, new_content):
        """Replace the content of matching comments and report the outcome."""
        updated = self.repo.update_content(content, new_content)
        if not updated:
            return COMMENT_NOT_FOUND
        logger.info("Updated %d comment(s) with content %r", updated, content)
        return COMMENT_UPDATED

    @transaction.atomic
    def delete_by_content(self, content):
        """Delete matching comments and report the outcome."""
        deleted = self.repo.delete_by_content(content)
        if not deleted:
            return COMMENT_NOT_FOUND
        logger.info("Deleted %d comment(s) with content %r", deleted, content)
        return COMMENT_DELETED

    def change_comment(self, comment, content=None, book=None):
        """Edit a single comment's text or move it to another book."""
        if content is not None:
            comment.content = content
        if book is not None:
            comment.book = book
        comment.save()
        logger.info("Comment %s changed", comment.pk)
        return comment

    def delete_comment(self, comment):
        """Delete one comment and return the title of the book it was on."""
        title = comment.book.title
        comment.delete()
        logger.info("Comment deleted from %r", title)
        return title
