from django import forms
from django.contrib.auth import authenticate


class LogInForm(forms.Form):
    """Authenticate a library user by username/password."""
    username = forms.CharField(label="Username")
    password = forms.CharField(label="Password", widget=forms.PasswordInput())

    def get_user(self):
        """Return the authenticated user or None after validating credentials."""
        if not self.is_valid():
            return None

        username = self.cleaned_data.get("username")
        password = self.cleaned_data.get("password")
        return authenticate(username=username, password=password)
