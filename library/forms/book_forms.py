from django import forms

from library.forms.fields import PathKeyField


class BookForm(forms.Form):
    """Form for adding a book; author and genre are matched by name."""

    title = PathKeyField(max_length=255)
    author = forms.CharField(max_length=255)
    genre = forms.CharField(max_length=100)


class BookEditForm(forms.Form):
    """Form carrying the new title of an existing book."""

    title = PathKeyField(max_length=255)
