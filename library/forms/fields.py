from django import forms

from library.validators import validate_path_key


class PathKeyField(forms.CharField):
    """CharField whose value is later used to address the record in a URL."""

    default_validators = [validate_path_key]
