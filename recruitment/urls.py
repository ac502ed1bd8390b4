"""
Recruitment URL Configuration.
"""

from django.urls import path

from .views import ApplicationDetailView, ApplicationListView, ApplyHeroView

urlpatterns = [
    path('apply-hero', ApplyHeroView.as_view(), name='apply-hero'),
    path('admin/applications', ApplicationListView.as_view(), name='application-list'),
    path('admin/applications/<str:pk>', ApplicationDetailView.as_view(), name='application-detail'),
]
