from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from library.models import Author, Book, Comment, Genre, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Stock user admin with the library role exposed."""
    list_display = ('username', 'email', 'role', 'is_staff', 'is_superuser')
    list_filter = ('role', 'is_staff', 'is_superuser')
    fieldsets = BaseUserAdmin.fieldsets + (('Library', {'fields': ('role',)}),)
    add_fieldsets = BaseUserAdmin.add_fieldsets + (('Library', {'fields': ('role',)}),)


@admin.register(Author)
class AuthorAdmin(admin.ModelAdmin):
    search_fields = ('name',)


@admin.register(Genre)
class GenreAdmin(admin.ModelAdmin):
    search_fields = ('name',)


class CommentInline(admin.TabularInline):
    """Show a book's comments directly on the Book page in Admin."""
    model = Comment
    extra = 0
    readonly_fields = ['created_at']


@admin.register(Book)
class BookAdmin(admin.ModelAdmin):
    """Admin configuration for books with a comment clean-up action."""
    list_display = ('title', 'author', 'genre', 'comment_count_display')
    list_filter = ('genre',)
    search_fields = ('title', 'author__name')
    actions = ['clear_comments']
    inlines = [CommentInline]

    def comment_count_display(self, obj):
        """Return formatted count of comments on the book."""
        count = obj.comments.count()
        if count > 0:
            return format_html('<strong>{}</strong>', count)
        return "0"
    comment_count_display.short_description = "Comments"

    @admin.action(description='Remove all comments from selected books')
    def clear_comments(self, request, queryset):
        """Delete every comment attached to the selected books."""
        Comment.objects.filter(book__in=queryset).delete()


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    """Admin configuration for comments."""
    list_display = ('short_text', 'book', 'created_at')
    list_filter = ('created_at',)
    search_fields = ('content', 'book__title')

    def short_text(self, obj):
        """Shorten comment text for list display."""
        return obj.content[:50] + "..." if len(obj.content) > 50 else obj.content
