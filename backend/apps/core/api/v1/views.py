import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.api.exceptions import NoCurrentSite
from apps.core.api.v1.serializers import SiteSerializer, SiteWriteSerializer
from apps.core.models import Site
from apps.core.sites import get_current_site

logger = logging.getLogger(__name__)


class HealthView(APIView):
    authentication_classes = []
    permission_classes = []

    def get(self, request):
        return Response({"status": "ok", "service": "qaday", "version": "v1"})


class SiteListView(APIView):
    def get(self, request):
        queryset = Site.objects.all().order_by("name")
        return Response(SiteSerializer(queryset, many=True).data)

    def post(self, request):
        serializer = SiteWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        site = serializer.save()
        logger.info("Created site %s", site.subdomain)
        return Response(SiteSerializer(site).data, status=status.HTTP_201_CREATED)


class CurrentSiteView(APIView):
    def get(self, request):
        site = get_current_site(request)
        if site is None:
            raise NoCurrentSite()
        return Response(SiteSerializer(site).data)
