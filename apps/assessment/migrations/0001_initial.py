import django.db.models.deletion
import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('academics', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Result',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
                ('student_name', models.CharField(max_length=200, verbose_name='student name')),
                ('subject_name', models.CharField(max_length=100, verbose_name='subject')),
                ('marks', models.CharField(max_length=20, verbose_name='marks/grade')),
                ('term', models.CharField(db_index=True, max_length=100, verbose_name='term')),
                ('comments', models.TextField(blank=True, verbose_name='comments')),
                ('student', models.ForeignKey(db_constraint=False, on_delete=django.db.models.deletion.DO_NOTHING, related_name='results', to='academics.student', verbose_name='student')),
            ],
            options={
                'verbose_name': 'Result',
                'verbose_name_plural': 'Results',
                'ordering': ['-created_at'],
            },
        ),
    ]
