"""
Heroes Views - Directory, administrator hero management and reviews.

GET    /api/heroes              public directory
POST   /api/heroes              create hero (admin)
GET    /api/heroes/<id>         public profile
PUT    /api/heroes/<id>         direct edit (admin)
DELETE /api/heroes/<id>         delete (admin)
GET    /api/heroes/slug/<slug>  profile by slug, id fallback
POST   /api/reviews             submit review
"""

from rest_framework import filters, generics, permissions, views
from rest_framework.response import Response

from django_filters.rest_framework import DjangoFilterBackend

from accounts.permissions import MethodScopedAccessMixin

from . import services
from .serializers import (
    HeroAdminSerializer,
    HeroCreateSerializer,
    HeroPublicSerializer,
    HeroUpdateSerializer,
    ReviewCreateSerializer,
    ReviewSerializer,
)


class HeroListCreateView(MethodScopedAccessMixin, generics.ListAPIView):
    """
    Hero directory.

    GET: List heroes with their reviews, best reputation first.
    POST: Register a new hero (admin only).
    """
    serializer_class = HeroPublicSerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    filterset_fields = ['category']
    search_fields = ['alias', 'category', 'description']

    def get_queryset(self):
        return services.directory_queryset().order_by('-trust_score', 'alias')

    def post(self, request):
        serializer = HeroCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        hero = services.create_hero(serializer.validated_data)

        return Response({'success': True, 'heroId': str(hero.pk)})


class HeroDetailView(MethodScopedAccessMixin, views.APIView):
    """
    Single hero.

    GET: Public profile.
    PUT: Administrator direct edit, bypassing moderation.
    DELETE: Remove the hero with its missions and reviews.
    """

    def get(self, request, pk):
        hero = services.get_hero(pk)
        return Response(HeroPublicSerializer(hero).data)

    def put(self, request, pk):
        serializer = HeroUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        hero = services.update_hero(pk, serializer.validated_data)

        return Response({'success': True, 'hero': HeroAdminSerializer(hero).data})

    def delete(self, request, pk):
        services.delete_hero(pk)
        return Response({'success': True})


class HeroBySlugView(views.APIView):
    """GET: Public profile by slug; UUID-shaped values fall back to the id."""
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def get(self, request, slug):
        hero = services.find_hero_by_slug(slug)
        return Response(HeroPublicSerializer(hero).data)


class ReviewCreateView(views.APIView):
    """POST: Store a client review for a hero."""
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        review = services.submit_review(
            data['hero_id'],
            client_name=data['client_name'],
            rating=data['rating'],
            comment=data.get('comment', ''),
        )

        return Response({'success': True, 'review': ReviewSerializer(review).data})
