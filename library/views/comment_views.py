from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from library.forms import CommentEditForm, CommentForm
from library.services import BookService, CommentService
from library.views.decorators import admin_required

comment_service = CommentService()
book_service = BookService()


@login_required
@require_GET
def comment_list(request):
    """List every comment, with the add form for administrators."""
    comments = comment_service.get_all()
    return render(
        request,
        "comments/comment_list.html",
        {"comments": comments, "form": CommentForm()},
    )


@login_required
@admin_required
@require_POST
def comment_add(request):
    """Attach a new comment to the book named in the form."""
    form = CommentForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Error posting comment.")
        return redirect("comment_list")

    title = form.cleaned_data["book"]
    comment = comment_service.save(form.cleaned_data["comment"], title)
    if comment is None:
        messages.error(request, f"No book titled \"{title}\".")
        return redirect("comment_list")
    messages.success(request, "Comment posted.")
    return redirect("comments_by_book", title=title)


@login_required
@require_GET
def comments_by_book(request, title):
    """List the comments left on one book."""
    comments = comment_service.get_comments_by_book(title)
    return render(
        request,
        "comments/book_comments.html",
        {
            "title": title,
            "book": book_service.get_by_title(title),
            "comments": comments,
            "form": CommentForm(initial={"book": title}),
        },
    )


@login_required
@require_http_methods(["GET", "POST"])
def comment_detail(request, content):
    """Show a comment on GET; delete comments with this content on POST."""
    if request.method == "POST":
        return _delete_comment(request, content)
    comment = comment_service.get_comment_by_content(content)
    return render(request, "comments/comment_detail.html", {"comment": comment})


@admin_required
def _delete_comment(request, content):
    message = comment_service.delete_by_content(content)
    messages.info(request, message)
    return redirect("comment_list")


@login_required
@admin_required
@require_http_methods(["GET", "POST"])
def comment_edit(request, content):
    """Replace the text of comments with the given content."""
    if request.method == "GET":
        comment = comment_service.get_comment_by_content(content)
        form = CommentEditForm(initial={"comment": comment.content})
        return render(request, "comments/comment_edit.html", {"comment": comment, "form": form})

    form = CommentEditForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Error updating comment.")
        return redirect("comment_list")
    message = comment_service.update_comment(content, form.cleaned_data["comment"])
    messages.info(request, message)
    return redirect("comment_list")
