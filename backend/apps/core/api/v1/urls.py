from django.urls import path

from apps.core.api.v1.views import CurrentSiteView, HealthView, SiteListView


urlpatterns = [
    path("health", HealthView.as_view(), name="health"),
    path("sites/", SiteListView.as_view(), name="site-list"),
    path("sites/current", CurrentSiteView.as_view(), name="site-current"),
]
