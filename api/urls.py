"""
API URLs - JSON endpoints mounted under /api/

Paths carry no trailing slash, matching the frontend's fetch calls.
"""
from django.urls import include, path

urlpatterns = [
    path('', include('accounts.urls')),
    path('', include('heroes.urls')),
    path('', include('missions.urls')),
    path('', include('moderation.urls')),
    path('', include('recruitment.urls')),
]
