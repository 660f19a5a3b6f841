from rest_framework import serializers

from library.models import Book, Comment
from library.services import BookService, CommentService

book_service = BookService()
comment_service = CommentService()


class BookSerializer(serializers.ModelSerializer):
    """Serializer for Book; author and genre are exchanged by name and created on demand."""
    author = serializers.CharField(source="author.name", max_length=255)
    genre = serializers.CharField(source="genre.name", max_length=100)

    class Meta:
        model = Book
        fields = ["id", "title", "author", "genre", "created_at"]
        read_only_fields = ["id", "created_at"]

    def create(self, validated_data):
        book = book_service.save(
            validated_data["title"],
            validated_data["author"]["name"],
            validated_data["genre"]["name"],
        )
        if book is None:
            raise serializers.ValidationError({"title": ["A book with that title already exists."]})
        return book

    def update(self, instance, validated_data):
        return book_service.update_book(
            instance,
            title=validated_data.get("title"),
            author_name=validated_data.get("author", {}).get("name"),
            genre_name=validated_data.get("genre", {}).get("name"),
        )


class CommentSerializer(serializers.ModelSerializer):
    """Serializer for Comment; the book is exchanged by title."""
    book = serializers.SlugRelatedField(slug_field="title", queryset=Book.objects.all())

    class Meta:
        model = Comment
        fields = ["id", "content", "book", "created_at"]
        read_only_fields = ["id", "created_at"]

    def create(self, validated_data):
        comment = comment_service.save(validated_data["content"], validated_data["book"].title)
        if comment is None:
            raise serializers.ValidationError({"book": ["Unknown book."]})
        return comment

    def update(self, instance, validated_data):
        return comment_service.change_comment(
            instance,
            content=validated_data.get("content"),
            book=validated_data.get("book"),
        )
