import django.core.validators
import django.db.models.deletion
import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Student',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
                ('student_name', models.CharField(db_index=True, max_length=200, verbose_name='student name')),
                ('student_id', models.CharField(db_index=True, help_text='School-issued identifier, e.g. S1001', max_length=50, unique=True, verbose_name='student ID')),
                ('grade_level', models.CharField(max_length=50, verbose_name='grade level')),
                ('date_of_birth', models.DateField(blank=True, null=True, verbose_name='date of birth')),
                ('parent_name', models.CharField(blank=True, max_length=200, verbose_name='parent name')),
                ('parent_email', models.EmailField(blank=True, db_index=True, max_length=254, verbose_name='parent email')),
            ],
            options={
                'verbose_name': 'Student',
                'verbose_name_plural': 'Students',
                'ordering': ['student_name'],
            },
        ),
        migrations.CreateModel(
            name='Teacher',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
                ('teacher_name', models.CharField(db_index=True, max_length=200, verbose_name='teacher name')),
                ('teacher_id', models.CharField(db_index=True, max_length=50, unique=True, verbose_name='teacher ID')),
                ('subjects_taught', models.CharField(blank=True, help_text='Comma separated, e.g. Mathematics, Physics', max_length=255, verbose_name='subjects taught')),
                ('department', models.CharField(blank=True, max_length=100, verbose_name='department')),
                ('email', models.EmailField(blank=True, max_length=254, verbose_name='email')),
                ('phone', models.CharField(blank=True, max_length=30, verbose_name='phone')),
                ('bio', models.TextField(blank=True, verbose_name='short bio')),
            ],
            options={
                'verbose_name': 'Teacher',
                'verbose_name_plural': 'Teachers',
                'ordering': ['teacher_name'],
            },
        ),
        migrations.CreateModel(
            name='SchoolClass',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
                ('class_name', models.CharField(max_length=100, verbose_name='class name')),
                ('grade_level', models.CharField(max_length=50, verbose_name='grade level')),
                ('section', models.CharField(blank=True, max_length=50, verbose_name='section')),
                ('class_teacher_name', models.CharField(blank=True, max_length=200, verbose_name='class teacher name')),
                ('capacity', models.PositiveIntegerField(default=0, validators=[django.core.validators.MinValueValidator(0)], verbose_name='capacity')),
                ('class_teacher', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='classes', to='academics.teacher', verbose_name='class teacher')),
            ],
            options={
                'verbose_name': 'Class',
                'verbose_name_plural': 'Classes',
                'ordering': ['grade_level', 'class_name', 'section'],
            },
        ),
        migrations.CreateModel(
            name='Subject',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
                ('subject_name', models.CharField(max_length=100, verbose_name='subject name')),
                ('subject_code', models.CharField(max_length=20, unique=True, verbose_name='subject code')),
                ('applicable_grade_levels', models.CharField(help_text='e.g. Grade 9, Grade 10', max_length=255, verbose_name='applicable grade levels')),
                ('assigned_teacher_name', models.CharField(blank=True, max_length=200, verbose_name='assigned teacher name')),
                ('assigned_teacher', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='subjects', to='academics.teacher', verbose_name='assigned teacher')),
            ],
            options={
                'verbose_name': 'Subject',
                'verbose_name_plural': 'Subjects',
                'ordering': ['subject_name'],
            },
        ),
    ]
