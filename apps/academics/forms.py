# apps/academics/forms.py

from django import forms
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from .models import Student, Teacher, SchoolClass, Subject
from .services import teacher_snapshot


class StudentForm(forms.ModelForm):
    """
    Form for creating and updating student records.
    """
    class Meta:
        model = Student
        fields = [
            'student_name', 'student_id', 'grade_level', 'date_of_birth',
            'parent_name', 'parent_email'
        ]
        widgets = {
            'student_name': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., John Doe')}),
            'student_id': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., S1001')}),
            'grade_level': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., Grade 5')}),
            'date_of_birth': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}),
            'parent_name': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., Jane Doe')}),
            'parent_email': forms.EmailInput(attrs={'class': 'form-control', 'placeholder': _('e.g., jane.doe@example.com')}),
        }

    def clean_student_id(self):
        student_id = self.cleaned_data.get('student_id', '').strip()
        if Student.objects.filter(student_id=student_id).exclude(pk=self.instance.pk).exists():
            raise forms.ValidationError(_('A student with this ID already exists.'))
        return student_id

    def clean_date_of_birth(self):
        date_of_birth = self.cleaned_data.get('date_of_birth')
        if date_of_birth and date_of_birth > timezone.now().date():
            raise forms.ValidationError(_('Date of birth cannot be in the future.'))
        return date_of_birth


class TeacherForm(forms.ModelForm):
    """
    Form for creating and updating teachers.
    """
    class Meta:
        model = Teacher
        fields = ['teacher_name', 'teacher_id', 'subjects_taught', 'department', 'email', 'phone', 'bio']
        widgets = {
            'teacher_name': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., Dr. Jane Smith')}),
            'teacher_id': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., T1001')}),
            'subjects_taught': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., Mathematics, Physics')}),
            'department': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., Science Department')}),
            'email': forms.EmailInput(attrs={'class': 'form-control', 'placeholder': _('e.g., jane.smith@example.com')}),
            'phone': forms.TextInput(attrs={'class': 'form-control', 'type': 'tel', 'placeholder': _('e.g., (555) 123-4567')}),
            'bio': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
        }

    def clean_teacher_id(self):
        teacher_id = self.cleaned_data.get('teacher_id', '').strip()
        if Teacher.objects.filter(teacher_id=teacher_id).exclude(pk=self.instance.pk).exists():
            raise forms.ValidationError(_('A teacher with this ID already exists.'))
        return teacher_id


class TeacherAssignmentFormMixin:
    """
    Copies the selected teacher's name onto the instance when saving.

    Subclasses name the reference field and its denormalized name field.
    """
    teacher_field = None
    teacher_name_field = None

    def save(self, commit=True):
        instance = super().save(commit=False)
        snapshot = teacher_snapshot(self.cleaned_data.get(self.teacher_field))
        setattr(instance, self.teacher_name_field, snapshot.teacher_name)
        if commit:
            instance.save()
        return instance


class SchoolClassForm(TeacherAssignmentFormMixin, forms.ModelForm):
    """
    Form for creating and updating classes.
    """
    teacher_field = 'class_teacher'
    teacher_name_field = 'class_teacher_name'

    class Meta:
        model = SchoolClass
        fields = ['class_name', 'grade_level', 'section', 'class_teacher', 'capacity']
        widgets = {
            'class_name': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., Grade 5 Blue')}),
            'grade_level': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., Grade 5')}),
            'section': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., A, B, Morning')}),
            'class_teacher': forms.Select(attrs={'class': 'form-control'}),
            'capacity': forms.NumberInput(attrs={'class': 'form-control', 'min': 0}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['class_teacher'].queryset = Teacher.objects.all()
        self.fields['class_teacher'].empty_label = _("Select Class Teacher (Optional)")


class SubjectForm(TeacherAssignmentFormMixin, forms.ModelForm):
    """
    Form for creating and updating subjects.
    """
    teacher_field = 'assigned_teacher'
    teacher_name_field = 'assigned_teacher_name'

    class Meta:
        model = Subject
        fields = ['subject_name', 'subject_code', 'applicable_grade_levels', 'assigned_teacher']
        widgets = {
            'subject_name': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., Mathematics')}),
            'subject_code': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., MATH101')}),
            'applicable_grade_levels': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., Grade 9, Grade 10')}),
            'assigned_teacher': forms.Select(attrs={'class': 'form-control'}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['assigned_teacher'].queryset = Teacher.objects.all()
        self.fields['assigned_teacher'].empty_label = _("Select Teacher (Optional)")

    def clean_subject_code(self):
        code = self.cleaned_data.get('subject_code')
        if code:
            code = code.strip().upper()
            if Subject.objects.filter(subject_code=code).exclude(pk=self.instance.pk).exists():
                raise forms.ValidationError(_('A subject with this code already exists.'))
        return code

