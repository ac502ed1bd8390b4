"""
Missions Views - Request intake, mission lists and status transitions.

POST /api/request                  submit a request (public)
GET  /api/request                  all missions (admin)
GET  /api/hero/my-missions         the caller's missions (hero)
PUT  /api/missions/<id>/status     status transition (hero)
"""

from rest_framework import generics, views
from rest_framework.response import Response

from django_filters.rest_framework import DjangoFilterBackend

from accounts.permissions import IsHeroRole, MethodScopedAccessMixin

from . import services
from .filters import ServiceRequestFilter
from .models import ServiceRequest
from .serializers import (
    MissionStatusUpdateSerializer,
    ServiceRequestCreateSerializer,
    ServiceRequestSerializer,
)


class ServiceRequestListCreateView(MethodScopedAccessMixin, generics.ListAPIView):
    """
    Service requests.

    POST: Submit a request to a hero (public).
    GET: List all missions, newest first (admin only).
    """
    public_methods = ('POST', 'OPTIONS')
    serializer_class = ServiceRequestSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_class = ServiceRequestFilter

    def get_queryset(self):
        return ServiceRequest.objects.select_related('hero').order_by('-created_at')

    def post(self, request):
        serializer = ServiceRequestCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        mission = services.submit_request(
            data['hero_id'],
            client_name=data['client_name'],
            client_phone=data['client_phone'],
            client_email=data.get('client_email', ''),
            description=data['description'],
        )

        return Response({'success': True, 'id': str(mission.pk)})


class MyMissionsView(generics.ListAPIView):
    """GET: Missions addressed to the calling hero, newest first."""
    permission_classes = [IsHeroRole]
    serializer_class = ServiceRequestSerializer

    def get_queryset(self):
        return services.missions_for_hero(self.request.user.subject_id).select_related('hero')


class MissionStatusView(views.APIView):
    """PUT: Write a new status (and optional photo) for a mission."""
    permission_classes = [IsHeroRole]

    def put(self, request, pk):
        serializer = MissionStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        mission = services.update_mission_status(
            pk,
            request.user,
            serializer.validated_data['status'],
            photo=serializer.validated_data.get('photo'),
        )

        return Response({'success': True, 'mission': ServiceRequestSerializer(mission).data})
