import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Notice',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
                ('title', models.CharField(max_length=200, verbose_name='title')),
                ('content', models.TextField(blank=True, verbose_name='content')),
                ('audience', models.CharField(blank=True, help_text='e.g. All, Parents, Grade 5 Parents', max_length=100, verbose_name='audience')),
                ('publish_date', models.DateField(blank=True, db_index=True, null=True, verbose_name='publish date')),
                ('status', models.CharField(choices=[('Published', 'Published'), ('Draft', 'Draft')], db_index=True, default='Draft', max_length=20, verbose_name='status')),
                ('is_urgent', models.BooleanField(default=False, verbose_name='urgent')),
            ],
            options={
                'verbose_name': 'Notice',
                'verbose_name_plural': 'Notices',
                'ordering': ['-created_at'],
            },
        ),
    ]
