# Generated manually: stock alerts are handed out once

from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('assistant', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='stockalert',
            name='delivered_at',
            field=models.DateTimeField(blank=True, null=True),
        ),
    ]
