from rest_framework import serializers
from .models import Notice

class NoticeSerializer(serializers.ModelSerializer):
    class Meta:
        model = Notice
        fields = '__all__'

class PublishedNoticeSerializer(serializers.ModelSerializer):
    snippet = serializers.CharField(read_only=True)

    class Meta:
        model = Notice
        fields = ['id', 'title', 'content', 'snippet', 'audience', 'publish_date', 'is_urgent']
