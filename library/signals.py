import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from library.models import Book, Comment

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Comment)
def log_comment_saved(sender, instance, created, **kwargs):
    """Record comment creation and edits made through any entry point."""
    action = "created" if created else "changed"
    logger.debug("Comment %s %s on book %s", instance.pk, action, instance.book_id)


@receiver(post_delete, sender=Comment)
def log_comment_deleted(sender, instance, **kwargs):
    logger.debug("Comment %s removed from book %s", instance.pk, instance.book_id)


@receiver(post_delete, sender=Book)
def log_book_deleted(sender, instance, **kwargs):
    """Record removal of a book; its comments cascade with it."""
    logger.info("Book %r removed from the catalogue", instance.title)
