from apps.core.live import LiveQuery, register

from .models import Fee
from .serializers import FeeSerializer

register(LiveQuery('fees', Fee, FeeSerializer, lambda: Fee.objects.all()))
