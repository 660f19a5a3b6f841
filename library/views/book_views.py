from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import Http404
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from library.forms import BookEditForm, BookForm, CommentForm
from library.services import BookService, CommentService
from library.views.decorators import admin_required

book_service = BookService()
comment_service = CommentService()


@login_required
@require_GET
def book_list(request):
    """List the catalogue, with the add form for administrators."""
    return render(
        request,
        "books/book_list.html",
        {"books": book_service.get_all(), "form": BookForm()},
    )


@login_required
@admin_required
@require_POST
def book_add(request):
    """Add a book from the submitted BookForm."""
    form = BookForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Error adding book.")
        return redirect("book_list")

    book = book_service.save(
        form.cleaned_data["title"],
        form.cleaned_data["author"],
        form.cleaned_data["genre"],
    )
    if book is None:
        messages.error(request, "A book with that title already exists.")
        return redirect("book_list")
    messages.success(request, "Book added.")
    return redirect("book_detail", title=book.title)


@login_required
@require_http_methods(["GET", "POST"])
def book_detail(request, title):
    """Show a book and its comments on GET; delete it on POST."""
    if request.method == "POST":
        return _delete_book(request, title)
    book = book_service.get_by_title(title)
    if book is None:
        raise Http404("Book not found.")
    return render(
        request,
        "books/book_detail.html",
        {
            "book": book,
            "comments": comment_service.get_comments_by_book(title),
            "form": CommentForm(initial={"book": title}),
        },
    )


@admin_required
def _delete_book(request, title):
    messages.info(request, book_service.delete_by_title(title))
    return redirect("book_list")


@login_required
@admin_required
@require_http_methods(["GET", "POST"])
def book_edit(request, title):
    """Rename a book."""
    if request.method == "GET":
        book = book_service.get_by_title(title)
        if book is None:
            raise Http404("Book not found.")
        form = BookEditForm(initial={"title": book.title})
        return render(request, "books/book_edit.html", {"book": book, "form": form})

    form = BookEditForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Error updating book.")
        return redirect("book_list")
    messages.info(request, book_service.update_title(title, form.cleaned_data["title"]))
    return redirect("book_list")
