"""
URL configuration for booklibrary project.

Comment and book routes carry no trailing slash: the write routes are plain
form POSTs and the item routes address records by their natural keys
(comment content, book title). Fixed segments such as ``add``, ``edit`` and
``book`` are declared before the catch-all ``<str:...>`` patterns.
"""
from django.contrib import admin
from django.urls import path
from library import views
from library.views.api_views import (
    BookDetailApi,
    BookListApi,
    CommentDetailApi,
    CommentListApi,
)
from library.views.book_views import book_add, book_detail, book_edit, book_list
from library.views.comment_views import (
    comment_add,
    comment_detail,
    comment_edit,
    comment_list,
    comments_by_book,
)

handler403 = 'library.views.error_views.permission_denied'

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', views.home, name='home'),
    path('log_in/', views.LogInView.as_view(), name='log_in'),
    path('log_out/', views.log_out, name='log_out'),
    path('comments', comment_list, name='comment_list'),
    path('comments/add', comment_add, name='comment_add'),
    path('comments/book/<str:title>', comments_by_book, name='comments_by_book'),
    path('comments/edit/<str:content>', comment_edit, name='comment_edit'),
    path('comments/<str:content>', comment_detail, name='comment_detail'),
    path('books', book_list, name='book_list'),
    path('books/add', book_add, name='book_add'),
    path('books/edit/<str:title>', book_edit, name='book_edit'),
    path('books/<str:title>', book_detail, name='book_detail'),
    path('api/comments/', CommentListApi.as_view(), name='comment_list_api'),
    path('api/comments/<int:pk>/', CommentDetailApi.as_view(), name='comment_detail_api'),
    path('api/books/', BookListApi.as_view(), name='book_list_api'),
    path('api/books/<int:pk>/', BookDetailApi.as_view(), name='book_detail_api'),
]
