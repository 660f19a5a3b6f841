from .book_forms import BookEditForm, BookForm
from .comment_form import CommentEditForm, CommentForm
from .log_in_form import LogInForm

__all__ = [
    "BookEditForm",
    "BookForm",
    "CommentEditForm",
    "CommentForm",
    "LogInForm",
]
