"""
Missions URL Configuration.
"""

from django.urls import path

from .views import MissionStatusView, MyMissionsView, ServiceRequestListCreateView

urlpatterns = [
    path('request', ServiceRequestListCreateView.as_view(), name='request-list'),
    path('hero/my-missions', MyMissionsView.as_view(), name='my-missions'),
    path('missions/<str:pk>/status', MissionStatusView.as_view(), name='mission-status'),
]
