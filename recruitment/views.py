"""
Recruitment Views.

POST   /api/apply-hero                public application form
GET    /api/admin/applications        list applications (admin)
DELETE /api/admin/applications/<id>   reject application (admin)
"""

from rest_framework import generics, permissions, views
from rest_framework.response import Response

from accounts.permissions import IsAdminRole

from . import services
from .serializers import HeroApplicationSerializer


class ApplyHeroView(views.APIView):
    """POST: Submit an application to join the League."""
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = HeroApplicationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        application = services.submit_application(serializer.validated_data)

        return Response({'success': True, 'id': str(application.pk)})


class ApplicationListView(generics.ListAPIView):
    """GET: All applications, newest first."""
    permission_classes = [IsAdminRole]
    serializer_class = HeroApplicationSerializer

    def get_queryset(self):
        return services.list_applications()


class ApplicationDetailView(views.APIView):
    """DELETE: Reject an application."""
    permission_classes = [IsAdminRole]

    def delete(self, request, pk):
        services.reject_application(pk)
        return Response({'success': True})
