from glamour_storefront.core.domain.sales.order import Order, OrderItem, OrderRequest, OrderStatusUpdate
from glamour_storefront.core.domain.sales.order_status import OrderStatus

__all__ = ["Order", "OrderItem", "OrderRequest", "OrderStatus", "OrderStatusUpdate"]
