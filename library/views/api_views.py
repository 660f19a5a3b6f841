from rest_framework import filters, generics

from library.models import Book, Comment
from library.permissions import IsLibraryAdminOrReadOnly
from library.serializers import BookSerializer, CommentSerializer
from library.services import BookService, CommentService

book_service = BookService()
comment_service = CommentService()


class CommentListApi(generics.ListCreateAPIView):
    """List comments, optionally for one book, and let administrators add them."""
    serializer_class = CommentSerializer
    permission_classes = [IsLibraryAdminOrReadOnly]

    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['content', 'book__title']
    ordering_fields = ['created_at']

    def get_queryset(self):
        """Restrict to a single book when a `book` query parameter is given."""
        queryset = Comment.objects.select_related("book")
        book = self.request.query_params.get('book')
        if book:
            queryset = queryset.filter(book__title=book)
        return queryset


class CommentDetailApi(generics.RetrieveUpdateDestroyAPIView):
    """Retrieve a comment; administrators may update or delete it."""
    queryset = Comment.objects.select_related("book")
    serializer_class = CommentSerializer
    permission_classes = [IsLibraryAdminOrReadOnly]

    def perform_destroy(self, instance):
        comment_service.delete_comment(instance)


class BookListApi(generics.ListCreateAPIView):
    """List books and let administrators add them."""
    queryset = Book.objects.select_related("author", "genre")
    serializer_class = BookSerializer
    permission_classes = [IsLibraryAdminOrReadOnly]

    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['title', 'author__name', 'genre__name']
    ordering_fields = ['title', 'created_at']


class BookDetailApi(generics.RetrieveUpdateDestroyAPIView):
    queryset = Book.objects.select_related("author", "genre")
    serializer_class = BookSerializer
    permission_classes = [IsLibraryAdminOrReadOnly]

    def perform_destroy(self, instance):
        """Delete through the service so the book and its comments go together."""
        book_service.delete_by_title(instance.title)
