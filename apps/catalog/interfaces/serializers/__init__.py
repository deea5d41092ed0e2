from .item_serializer import ItemSerializer

__all__ = ['ItemSerializer']
