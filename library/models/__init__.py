from .user import User
from .author import Author
from .genre import Genre
from .book import Book
from .comment import Comment

__all__ = [
    "User",
    "Author",
    "Genre",
    "Book",
    "Comment",
]
