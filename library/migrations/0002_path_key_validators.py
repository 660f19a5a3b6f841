import django.core.validators
import library.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('library', '0001_initial'),
    ]

    operations = [
        migrations.AlterField(
            model_name='book',
            name='title',
            field=models.CharField(max_length=255, unique=True, validators=[library.validators.validate_path_key]),
        ),
        migrations.AlterField(
            model_name='comment',
            name='content',
            field=models.TextField(max_length=2000, validators=[django.core.validators.MaxLengthValidator(2000), library.validators.validate_path_key]),
        ),
    ]
