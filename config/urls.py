"""
URL configuration for the KGL Produce Trading API.

Routes are mounted without trailing slashes:
    POST /procurement       - record produce bought (managers)
    POST /sales/cash        - record a cash sale (sales agents)
    POST /sales/credit      - record a credit sale (sales agents)
    POST /users             - register an account
    POST /users/login       - obtain a JWT
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from config.views import health_check

urlpatterns = [
    # Health check
    path('health', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api-docs/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api-docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # API endpoints
    path('', include('apps.accounts.urls')),
    path('', include('apps.procurement.urls')),
    path('sales/', include('apps.sales.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
