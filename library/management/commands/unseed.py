from django.core.management.base import BaseCommand
from django.db import transaction
from library.models import Author, Genre, User

class Command(BaseCommand):
    """
    Management command to remove (unseed) library data from the database.

    Deletes the catalogue (authors, genres, books and, by cascade, comments)
    and every account that is neither staff nor superuser, so administrative
    logins survive a reset.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        with transaction.atomic():
            Author.objects.all().delete()
            Genre.objects.all().delete()
            users = User.objects.filter(is_staff=False, is_superuser=False)
            deleted_users = users.count()
            users.delete()

        self.stdout.write(self.style.SUCCESS(f"Deleted catalogue and {deleted_users} non-staff users."))
