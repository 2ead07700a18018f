import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='WebsiteContent',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
                ('key', models.CharField(choices=[('heroSection', 'Hero Section'), ('aboutUsPage', 'About Us Page'), ('featuresSection', 'Features Section'), ('programsPageContent', 'Programs Page')], db_index=True, max_length=50, unique=True, verbose_name='section key')),
                ('data', models.JSONField(blank=True, default=dict, verbose_name='content')),
            ],
            options={
                'verbose_name': 'Website Content',
                'verbose_name_plural': 'Website Content',
                'ordering': ['key'],
            },
        ),
    ]
