from rest_framework import serializers

from apps.core.models import Site, normalize_subdomain


class SiteSerializer(serializers.ModelSerializer):
    class Meta:
        model = Site
        fields = ("id", "subdomain", "name", "description")


class SiteWriteSerializer(serializers.ModelSerializer):
    class Meta:
        model = Site
        fields = ("subdomain", "name", "description")
        extra_kwargs = {"description": {"required": False}}

    def validate_subdomain(self, value):
        normalized = normalize_subdomain(value)
        if Site.objects.filter(subdomain=normalized).exists():
            raise serializers.ValidationError("A site with this subdomain already exists.")
        return normalized
