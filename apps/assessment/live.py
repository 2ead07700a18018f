from apps.core.live import LiveQuery, register

from .models import Result
from .serializers import ResultSerializer

register(LiveQuery('results', Result, ResultSerializer, lambda: Result.objects.all()))
