"""
Heroes URL Configuration.
"""

from django.urls import path

from .views import HeroBySlugView, HeroDetailView, HeroListCreateView, ReviewCreateView

urlpatterns = [
    path('heroes', HeroListCreateView.as_view(), name='hero-list'),
    path('heroes/slug/<str:slug>', HeroBySlugView.as_view(), name='hero-by-slug'),
    path('heroes/<str:pk>', HeroDetailView.as_view(), name='hero-detail'),
    path('reviews', ReviewCreateView.as_view(), name='review-create'),
]
