from django.urls import path

from .views import AdminLoginView, HeroLoginView

urlpatterns = [
    path('auth/login', AdminLoginView.as_view(), name='admin-login'),
    path('auth/hero-login', HeroLoginView.as_view(), name='hero-login'),
]
