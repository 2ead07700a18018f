from apps.core.live import LiveQuery, register

from .models import AttendanceRecord
from .serializers import AttendanceRecordSerializer

register(LiveQuery(
    'attendanceRecords',
    AttendanceRecord,
    AttendanceRecordSerializer,
    lambda: AttendanceRecord.objects.all(),
))
