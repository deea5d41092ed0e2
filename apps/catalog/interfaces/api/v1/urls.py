"""
Catalog API v1 URLs.
"""
from django.urls import path

from .views import ItemListView, ItemDetailView

urlpatterns = [
    path('', ItemListView.as_view(), name='item-list'),
    path('<str:item_id>/', ItemDetailView.as_view(), name='item-detail'),
]
