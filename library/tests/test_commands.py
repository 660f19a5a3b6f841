from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from library.models import Author, Book, Comment, User


class SeedCommandTests(TestCase):
    def test_seed_creates_accounts_and_catalogue(self):
        out = StringIO()
        call_command("seed", "--books", "6", "--max-comments", "1", stdout=out)

        self.assertIn("Seeding complete", out.getvalue())
        self.assertEqual(User.objects.get(username="User1").role, User.ROLE_USER)
        self.assertEqual(User.objects.get(username="User2").role, User.ROLE_ADMIN)
        self.assertTrue(User.objects.get(username="User2").check_password("Password2"))
        self.assertEqual(Book.objects.count(), 6)
        self.assertTrue(Comment.objects.filter(content="Published in 1922", book__title="Ulysses").exists())

    def test_seed_is_repeatable(self):
        call_command("seed", "--books", "4", stdout=StringIO())
        call_command("seed", "--books", "4", stdout=StringIO())
        self.assertEqual(User.objects.filter(username="User1").count(), 1)
        self.assertEqual(Comment.objects.filter(content="Published in 1922").count(), 1)
        self.assertEqual(Book.objects.count(), 4)


class UnseedCommandTests(TestCase):
    def test_unseed_keeps_staff(self):
        call_command("seed", "--books", "4", stdout=StringIO())
        User.objects.create_superuser(username="root", password="Password123")

        out = StringIO()
        call_command("unseed", stdout=out)

        self.assertFalse(Author.objects.exists())
        self.assertFalse(Book.objects.exists())
        self.assertFalse(Comment.objects.exists())
        self.assertEqual(list(User.objects.values_list("username", flat=True)), ["root"])
        self.assertIn("2 non-staff users", out.getvalue())
