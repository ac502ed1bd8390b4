"""
URL configuration for the SuperFix project.

JSON API under /api/, SEO collaborators and the health check at the root.
"""
from django.http import JsonResponse
from django.urls import include, path


def health_check(request):
    """Health check endpoint for load balancers and monitoring."""
    from django.db import connection

    health_status = {'status': 'healthy'}
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
        health_status['database'] = 'connected'
    except Exception as e:
        health_status['status'] = 'degraded'
        health_status['database'] = 'error'
        health_status['database_error'] = str(e)

    status_code = 200 if health_status['status'] == 'healthy' else 503
    return JsonResponse(health_status, status=status_code)


urlpatterns = [
    path('health/', health_check, name='health'),
    path('api/', include('api.urls')),
    path('', include('seo.urls')),
]
