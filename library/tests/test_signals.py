from unittest.mock import patch

from django.test import TestCase

from library import signals
from library.tests.helpers import make_book, make_comment


class SignalLoggingTests(TestCase):
    def test_comment_lifecycle_is_logged(self):
        with patch.object(signals.logger, "debug") as log_mock:
            comment = make_comment(content="Logged")
            comment.delete()
        self.assertEqual(log_mock.call_count, 2)

    def test_book_deletion_is_logged(self):
        book = make_book(title="Ephemeral")
        with patch.object(signals.logger, "info") as log_mock:
            book.delete()
        log_mock.assert_called_once()
        self.assertIn("Ephemeral", log_mock.call_args.args)
