from apps.core.live import LiveQuery, register

from .models import Student, Teacher, SchoolClass, Subject
from .serializers import StudentSerializer, TeacherSerializer, SchoolClassSerializer, SubjectSerializer

register(LiveQuery('students', Student, StudentSerializer, lambda: Student.objects.all()))
register(LiveQuery('teachers', Teacher, TeacherSerializer, lambda: Teacher.objects.all()))
register(LiveQuery('classes', SchoolClass, SchoolClassSerializer, lambda: SchoolClass.objects.all()))
register(LiveQuery('subjects', Subject, SubjectSerializer, lambda: Subject.objects.all()))
