"""
SEO URL Configuration.
"""

from django.urls import path

from .views import HeroPreviewView, SitemapView

urlpatterns = [
    path('sitemap.xml', SitemapView.as_view(), name='sitemap'),
    path('hero/<str:pk>', HeroPreviewView.as_view(), name='hero-preview'),
]
