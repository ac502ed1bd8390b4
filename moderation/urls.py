"""
Moderation URL Configuration.
"""

from django.urls import path

from .views import (
    ApproveUpdateView,
    HeroSubmitUpdateView,
    PendingUpdatesView,
    PublicSubmitUpdateView,
    RejectUpdateView,
)

urlpatterns = [
    path('hero/submit-update', HeroSubmitUpdateView.as_view(), name='hero-submit-update'),
    path('hero/public-submit-update', PublicSubmitUpdateView.as_view(), name='hero-public-submit-update'),
    path('admin/updates', PendingUpdatesView.as_view(), name='pending-updates'),
    path('admin/approve-update/<str:pk>', ApproveUpdateView.as_view(), name='approve-update'),
    path('admin/reject-update/<str:pk>', RejectUpdateView.as_view(), name='reject-update'),
]
