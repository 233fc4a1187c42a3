from .order_index_service import OrderIndexOutOfRangeError, OrderIndexService

__all__ = [
    "OrderIndexOutOfRangeError",
    "OrderIndexService",
]
