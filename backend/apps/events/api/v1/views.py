from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.sites import get_current_site
from apps.events.api.v1.serializers import EventSerializer
from apps.events.models import Event


class EventListView(APIView):
    def get(self, request):
        queryset = Event.objects.for_site(get_current_site(request)).order_by("start_date", "name")
        return Response(EventSerializer(queryset, many=True).data)

    def post(self, request):
        serializer = EventSerializer(data=request.data, context={"site": get_current_site(request)})
        serializer.is_valid(raise_exception=True)
        event = serializer.save()
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    @staticmethod
    def _get_event(request, event_id):
        return get_object_or_404(Event.objects.for_site(get_current_site(request)), id=event_id)

    def get(self, request, event_id):
        return Response(EventSerializer(self._get_event(request, event_id)).data)

    def patch(self, request, event_id):
        event = self._get_event(request, event_id)
        serializer = EventSerializer(event, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(EventSerializer(event).data)
