from rest_framework import serializers

from apps.events.models import Event
from apps.events.services import create_event, update_event


class EventSerializer(serializers.ModelSerializer):
    class Meta:
        model = Event
        fields = ("id", "site", "name", "start_date", "end_date")
        read_only_fields = ("id", "site")

    def create(self, validated_data):
        return create_event(site=self.context.get("site"), **validated_data)

    def update(self, instance, validated_data):
        return update_event(instance, **validated_data)
