from django.urls import reverse

from library.models import Author, Book, Comment, Genre, User

DEFAULT_PASSWORD = "Password123"


def reverse_with_next(url_name, next_url):
    """Extended version of reverse to generate URLs with redirects"""
    url = reverse(url_name)
    url += f"?next={next_url}"
    return url


def make_user(username="User1", role=User.ROLE_USER, **kwargs):
    password = kwargs.pop("password", DEFAULT_PASSWORD)
    return User.objects.create_user(
        username=username,
        password=password,
        email=kwargs.pop("email", f"{username.lower()}@example.org"),
        role=role,
        **kwargs,
    )


def make_admin(username="User2", **kwargs):
    return make_user(username=username, role=User.ROLE_ADMIN, **kwargs)


def make_book(title="Book", author="James Joyce", genre="Modernist novel"):
    """
    creates and returns a book, reusing an existing author/genre with the same name.
    """
    author_obj, _ = Author.objects.get_or_create(name=author)
    genre_obj, _ = Genre.objects.get_or_create(name=genre)
    return Book.objects.create(title=title, author=author_obj, genre=genre_obj)


def make_comment(content="Comment", book=None):
    if book is None:
        book = make_book()
    return Comment.objects.create(content=content, book=book)


def unsaved_comment(content, title):
    """In-memory comment for stubbing service return values."""
    return Comment(content=content, book=Book(title=title))


class LogInTester:
    """Class support login in tests."""

    def _is_logged_in(self):
        """Returns True if a user is logged in.  False otherwise."""
        return '_auth_user_id' in self.client.session.keys()
