# lims_core/api/urls.py
from __future__ import annotations

from django.urls import path
from rest_framework.routers import DefaultRouter

from lims_core.organisations.api.views import OrganisationViewSet
from lims_core.profiles.api.views import OrganisationProfilesView
from lims_core.results.api.views import (
    OrganisationSamplesView,
    ProfileSampleDetailView,
    ProfileSamplesView,
)

router = DefaultRouter()
router.register(r"org", OrganisationViewSet, basename="org")

urlpatterns = [
    path("org/<str:org>/sample/", OrganisationSamplesView.as_view(), name="org-sample-search"),
    path("org/<str:org>/profile/", OrganisationProfilesView.as_view(), name="org-profile-create"),
    path(
        "org/<str:org>/profile/<str:profile_id>/sample/",
        ProfileSamplesView.as_view(),
        name="org-profile-sample-create",
    ),
    path(
        "org/<str:org>/profile/<str:profile_id>/sample/<str:sample_id>/",
        ProfileSampleDetailView.as_view(),
        name="org-profile-sample-detail",
    ),

    # Router URLs last (so explicit paths win if ever overlapping)
    *router.urls,
]
