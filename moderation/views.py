"""
Moderation Views - Profile change proposals and the approval queue.

POST   /api/hero/submit-update             propose from the portal (hero)
POST   /api/hero/public-submit-update      propose from the onboarding link
GET    /api/admin/updates                  pending queue (admin)
POST   /api/admin/approve-update/<id>      approve (admin)
DELETE /api/admin/reject-update/<id>       reject (admin)
"""

from rest_framework import generics, permissions, views
from rest_framework.response import Response

from accounts.permissions import IsAdminRole, IsHeroRole
from heroes.serializers import HeroAdminSerializer

from . import services
from .serializers import (
    ProfileChangeRequestSerializer,
    ProposeUpdateSerializer,
    PublicProposeUpdateSerializer,
)


class HeroSubmitUpdateView(views.APIView):
    """POST: Queue a change to the calling hero's profile."""
    permission_classes = [IsHeroRole]

    def post(self, request):
        serializer = ProposeUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        change = services.propose_update(
            request.user.subject_id,
            serializer.validated_data,
            is_public_submission=False,
        )

        return Response({'success': True, 'id': str(change.pk)})


class PublicSubmitUpdateView(views.APIView):
    """POST: Queue a change identified by hero id, alias included."""
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = PublicProposeUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)

        change = services.propose_update(
            data.pop('hero_id'),
            data,
            is_public_submission=True,
        )

        return Response({'success': True, 'id': str(change.pk)})


class PendingUpdatesView(generics.ListAPIView):
    """GET: All pending change requests, newest first."""
    permission_classes = [IsAdminRole]
    serializer_class = ProfileChangeRequestSerializer

    def get_queryset(self):
        return services.list_pending_updates()


class ApproveUpdateView(views.APIView):
    """POST: Merge a change request into its hero."""
    permission_classes = [IsAdminRole]

    def post(self, request, pk):
        hero = services.approve_update(pk)
        return Response({'success': True, 'hero': HeroAdminSerializer(hero).data})


class RejectUpdateView(views.APIView):
    """DELETE: Discard a change request."""
    permission_classes = [IsAdminRole]

    def delete(self, request, pk):
        services.reject_update(pk)
        return Response({'success': True})
