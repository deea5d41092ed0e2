"""
URL configuration.
"""
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView

urlpatterns = [
    path('api/v1/products/', include('apps.catalog.interfaces.api.v1.urls')),
    path('api/v1/orders/', include('apps.orders.interfaces.api.v1.urls')),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
]
