from django.shortcuts import redirect


def home(request):
    """Send visitors to the catalogue; login_required there handles anonymous users."""
    return redirect('book_list')
