from .books import BookService
from .comments import CommentService
from .users import UserService

__all__ = [
    "BookService",
    "CommentService",
    "UserService",
]
