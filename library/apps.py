from django.apps import AppConfig

class LibraryConfig(AppConfig):
    """Django app config for the library; loads signal handlers on ready."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'library'

    def ready(self):
        """Import signal modules to register handlers."""
        import library.signals
