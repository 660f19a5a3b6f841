from django import forms

from library.forms.fields import PathKeyField


class CommentForm(forms.Form):
    """Form for adding a comment to a book named by title."""

    comment = PathKeyField(
        max_length=2000,
        widget=forms.Textarea(attrs={
            'rows': 2,
            'placeholder': 'Add a comment...',
            'class': 'form-control',
        }),
    )
    book = forms.CharField(
        max_length=255,
        widget=forms.TextInput(attrs={'placeholder': 'Book title', 'class': 'form-control'}),
    )


class CommentEditForm(forms.Form):
    """Form carrying the replacement text for an existing comment."""

    comment = PathKeyField(
        max_length=2000,
        widget=forms.Textarea(attrs={'rows': 2, 'class': 'form-control'}),
    )
