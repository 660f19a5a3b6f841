from unittest.mock import patch

from django.urls import reverse

from library.models import Book, Comment
from library.services.books import BOOK_DELETED, BOOK_UPDATED
from library.tests.helpers import make_book, make_comment
from library.tests.views.base import LibraryViewTestCase
from library.views import book_views


class BookViewTests(LibraryViewTestCase):
    fixtures = ["default_books.json"]

    def test_book_list_for_user(self):
        self.log_in_as_user()
        response = self.client.get(reverse("book_list"))
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "books/book_list.html")
        self.assertContains(response, "War and Peace")
        self.assertNotContains(response, reverse("book_add"))

    def test_book_list_redirects_anonymous(self):
        response = self.client.get(reverse("book_list"))
        self.assertEqual(response.status_code, 302)
        self.assertIn(reverse("log_in"), response.url)

    def test_home_redirects_to_book_list(self):
        response = self.client.get(reverse("home"))
        self.assertRedirects(response, reverse("book_list"), fetch_redirect_response=False)

    def test_book_detail_lists_comments(self):
        self.log_in_as_user()
        response = self.client.get(reverse("book_detail", args=["Ulysses"]))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Published in 1922")

    def test_unknown_book_is_404(self):
        self.log_in_as_user()
        response = self.client.get(reverse("book_detail", args=["Missing"]))
        self.assertEqual(response.status_code, 404)

    def test_admin_adds_book(self):
        self.log_in_as_admin()
        response = self.client.post(
            reverse("book_add"),
            {"title": "Anna Karenina", "author": "Leo Tolstoy", "genre": "Realist novel"},
        )
        self.assertRedirects(
            response, reverse("book_detail", args=["Anna Karenina"]), fetch_redirect_response=False
        )
        book = Book.objects.get(title="Anna Karenina")
        self.assertEqual(book.author.name, "Leo Tolstoy")
        self.assertEqual(book.genre.name, "Realist novel")

    def test_admin_add_duplicate_title_redirects_to_list(self):
        self.log_in_as_admin()
        response = self.client.post(
            reverse("book_add"), {"title": "Ulysses", "author": "Someone", "genre": "Other"}
        )
        self.assertRedirects(response, reverse("book_list"), fetch_redirect_response=False)
        self.assertEqual(Book.objects.filter(title="Ulysses").count(), 1)

    def test_reserved_title_is_rejected(self):
        self.log_in_as_admin()
        self.client.post(reverse("book_add"), {"title": "add", "author": "A", "genre": "G"})
        self.assertFalse(Book.objects.filter(title="add").exists())

    def test_user_cannot_add_book(self):
        self.log_in_as_user()
        response = self.client.post(
            reverse("book_add"), {"title": "Anna Karenina", "author": "Leo Tolstoy", "genre": "Novel"}
        )
        self.assertEqual(response.status_code, 403)
        self.assertFalse(Book.objects.filter(title="Anna Karenina").exists())

    def test_admin_renames_book(self):
        self.log_in_as_admin()
        response = self.client.post(reverse("book_edit", args=["Ulysses"]), {"title": "Ulysses (1922)"})
        self.assertEqual(response.status_code, 302)
        self.assertTrue(Book.objects.filter(title="Ulysses (1922)").exists())
        self.assertEqual(
            Comment.objects.filter(book__title="Ulysses (1922)").count(), 1
        )

    def test_admin_edit_form(self):
        self.log_in_as_admin()
        response = self.client.get(reverse("book_edit", args=["Ulysses"]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["form"].initial["title"], "Ulysses")

    def test_user_cannot_rename_book(self):
        self.log_in_as_user()
        response = self.client.post(reverse("book_edit", args=["Ulysses"]), {"title": "Other"})
        self.assertEqual(response.status_code, 403)

    def test_admin_deletes_book_and_its_comments(self):
        self.log_in_as_admin()
        response = self.client.post(reverse("book_detail", args=["Ulysses"]))
        self.assertRedirects(response, reverse("book_list"), fetch_redirect_response=False)
        self.assertFalse(Book.objects.filter(title="Ulysses").exists())
        self.assertFalse(Comment.objects.filter(content="Published in 1922").exists())

    def test_user_cannot_delete_book(self):
        self.log_in_as_user()
        response = self.client.post(reverse("book_detail", args=["Ulysses"]))
        self.assertEqual(response.status_code, 403)
        self.assertTrue(Book.objects.filter(title="Ulysses").exists())


class BookViewServiceTests(LibraryViewTestCase):
    @patch.object(book_views.book_service, "delete_by_title", return_value=BOOK_DELETED)
    def test_delete_delegates_to_service(self, mock_delete):
        self.log_in_as_admin()
        response = self.client.post(reverse("book_detail", args=["Book"]))
        self.assertEqual(response.status_code, 302)
        mock_delete.assert_called_once_with("Book")

    @patch.object(book_views.book_service, "update_title", return_value=BOOK_UPDATED)
    def test_rename_delegates_to_service(self, mock_update):
        self.log_in_as_admin()
        response = self.client.post(reverse("book_edit", args=["Book"]), {"title": "New"})
        self.assertEqual(response.status_code, 302)
        mock_update.assert_called_once_with("Book", "New")

    def test_admin_sees_admin_controls(self):
        book = make_book(title="Dubliners")
        make_comment(content="Fifteen stories", book=book)
        self.log_in_as_admin()
        response = self.client.get(reverse("book_detail", args=["Dubliners"]))
        self.assertContains(response, reverse("book_edit", args=["Dubliners"]))
        self.assertContains(response, reverse("comment_edit", args=["Fifteen stories"]))
