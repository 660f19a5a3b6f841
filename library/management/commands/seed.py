"""Management command to seed the database with sample users, books and comments."""

from random import choice, randint

from faker import Faker
from django.core.management.base import BaseCommand
from django.db import transaction

from library.models import Book, Comment
from library.services import BookService, UserService
from .seed_data import book_fixtures, comment_fixtures, genre_pool, user_fixtures


class Command(BaseCommand):
    """Management command to seed the database with sample library data."""
    BOOK_COUNT = 20
    help = 'Seeds the database with sample data'

    def add_arguments(self, parser):
        parser.add_argument(
            "--books",
            type=int,
            default=self.BOOK_COUNT,
            help="Total number of books to have in the catalogue after seeding.",
        )
        parser.add_argument(
            "--max-comments",
            type=int,
            default=3,
            help="Upper bound of random comments added per generated book.",
        )

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')
        self.book_service = BookService()
        self.user_service = UserService()

    @transaction.atomic
    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        self.create_users()
        self.create_fixture_books()
        self.create_random_books(options["books"], options["max_comments"])
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_users(self):
        """Create the fixture accounts that do not exist yet."""
        for data in user_fixtures:
            if self.user_service.load_user_by_username(data["username"]):
                continue
            self.user_service.create_user(**data)

    def create_fixture_books(self):
        for data in book_fixtures:
            self.book_service.save(data["title"], data["author"], data["genre"])
        for data in comment_fixtures:
            book = self.book_service.get_by_title(data["book"])
            if not Comment.objects.filter(book=book, content=data["content"]).exists():
                Comment.objects.create(book=book, content=data["content"])

    def create_random_books(self, target, max_comments):
        """Generate books and comments until the catalogue reaches ``target``."""
        while Book.objects.count() < target:
            title = self.faker.unique.catch_phrase().replace("/", " ")
            book = self.book_service.save(title, self.faker.name(), choice(genre_pool))
            if book is None:
                continue
            for _ in range(randint(0, max_comments)):
                Comment.objects.create(book=book, content=self.faker.sentence(nb_words=8))
