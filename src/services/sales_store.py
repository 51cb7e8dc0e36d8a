"""
In-memory order aggregate store

Owns the customer, product, order and order item collections and keeps every
order's total_amount equal to the sum of its items' unit_price * quantity.
All operations run under a single lock; the total bookkeeping touches two
collections and is not atomic otherwise.
"""

import logging
import threading
from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from models.customer import Customer
from models.enums import ErrorType
from models.order import Order, OrderLineRequest, OrderResponse, OrderWithCustomerResponse
from models.order_item import OrderItem, OrderItemResponse
from models.product import Product
from services.base_service import ServiceResult, id_mismatch, invalid_reference, not_found

logger = logging.getLogger(__name__)

CUSTOMERS = "customers"
PRODUCTS = "products"
ORDERS = "orders"
ORDER_ITEMS = "order_items"


class OrderAggregateStore:
    """Customers, products, orders and order items held in process memory"""

    def __init__(self):
        self._lock = threading.RLock()
        self._customers: Dict[int, Customer] = {}
        self._products: Dict[int, Product] = {}
        self._orders: Dict[int, Order] = {}
        self._order_items: Dict[int, OrderItem] = {}
        self._next_ids: Dict[str, int] = {CUSTOMERS: 1, PRODUCTS: 1, ORDERS: 1, ORDER_ITEMS: 1}

    # ------------------------------------------------------------------
    # Bookkeeping
    # ------------------------------------------------------------------

    def load(
        self,
        customers: Iterable[Customer] = (),
        products: Iterable[Product] = (),
        orders: Iterable[Order] = (),
        order_items: Iterable[OrderItem] = ()
    ) -> None:
        """
        Bulk-load records with their ids as given.

        Counters move past the highest loaded id so seeded ids are never
        handed out again.
        """
        with self._lock:
            for kind, collection, records in (
                (CUSTOMERS, self._customers, customers),
                (PRODUCTS, self._products, products),
                (ORDERS, self._orders, orders),
                (ORDER_ITEMS, self._order_items, order_items),
            ):
                for record in records:
                    collection[record.id] = record.model_copy()
                    self._next_ids[kind] = max(self._next_ids[kind], record.id + 1)

    def clear(self) -> None:
        with self._lock:
            self._customers.clear()
            self._products.clear()
            self._orders.clear()
            self._order_items.clear()

    def peek_next_id(self, kind: str) -> int:
        with self._lock:
            return self._next_ids[kind]

    def counts(self) -> Dict[str, int]:
        with self._lock:
            return {
                CUSTOMERS: len(self._customers),
                PRODUCTS: len(self._products),
                ORDERS: len(self._orders),
                ORDER_ITEMS: len(self._order_items),
            }

    def _allocate_id(self, kind: str) -> int:
        next_id = self._next_ids[kind]
        self._next_ids[kind] = next_id + 1
        return next_id

    def _items_of(self, order_id: int) -> List[OrderItem]:
        return [item for item in self._order_items.values() if item.order_id == order_id]

    @staticmethod
    def _rejected(result: ServiceResult) -> ServiceResult:
        logger.warning(f"Rejected store operation ({result.error_type.value}): {result.error}")
        return result

    # ------------------------------------------------------------------
    # Customers
    # ------------------------------------------------------------------

    def list_customers(self) -> ServiceResult:
        with self._lock:
            return ServiceResult.ok([c.model_copy() for c in self._customers.values()])

    def get_customer(self, customer_id: int) -> ServiceResult:
        with self._lock:
            customer = self._customers.get(customer_id)
            if customer is None:
                return not_found("Customer", customer_id)
            return ServiceResult.ok(customer.model_copy())

    def create_customer(self, first_name: str, last_name: str, email: str) -> ServiceResult:
        with self._lock:
            customer = Customer(
                id=self._allocate_id(CUSTOMERS),
                first_name=first_name,
                last_name=last_name,
                email=email
            )
            self._customers[customer.id] = customer
            logger.info(f"Created customer {customer.id}")
            return ServiceResult.ok(customer.model_copy())

    def update_customer(
        self,
        customer_id: int,
        body_id: int,
        first_name: str,
        last_name: str,
        email: str
    ) -> ServiceResult:
        if customer_id != body_id:
            return self._rejected(id_mismatch(customer_id, body_id))

        with self._lock:
            customer = self._customers.get(customer_id)
            if customer is None:
                return self._rejected(not_found("Customer", customer_id))

            customer.first_name = first_name
            customer.last_name = last_name
            customer.email = email
            logger.info(f"Updated customer {customer_id}")
            return ServiceResult.ok()

    def delete_customer(self, customer_id: int) -> ServiceResult:
        # Orders that still reference the customer are left in place
        with self._lock:
            if self._customers.pop(customer_id, None) is None:
                return self._rejected(not_found("Customer", customer_id))
            logger.info(f"Deleted customer {customer_id}")
            return ServiceResult.ok()

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def list_products(self) -> ServiceResult:
        with self._lock:
            return ServiceResult.ok([p.model_copy() for p in self._products.values()])

    def list_products_by_max_price(self, max_price: Decimal) -> ServiceResult:
        with self._lock:
            return ServiceResult.ok([
                p.model_copy() for p in self._products.values() if p.price <= max_price
            ])

    def get_product(self, product_id: int) -> ServiceResult:
        with self._lock:
            product = self._products.get(product_id)
            if product is None:
                return not_found("Product", product_id)
            return ServiceResult.ok(product.model_copy())

    def create_product(self, name: str, description: Optional[str], price: Decimal) -> ServiceResult:
        with self._lock:
            product = Product(
                id=self._allocate_id(PRODUCTS),
                name=name,
                description=description,
                price=price
            )
            self._products[product.id] = product
            logger.info(f"Created product {product.id} at {product.price}")
            return ServiceResult.ok(product.model_copy())

    def update_product(
        self,
        product_id: int,
        body_id: int,
        name: str,
        description: Optional[str],
        price: Decimal
    ) -> ServiceResult:
        """Overwrite a product. Existing order items keep their price snapshot."""
        if product_id != body_id:
            return self._rejected(id_mismatch(product_id, body_id))

        with self._lock:
            product = self._products.get(product_id)
            if product is None:
                return self._rejected(not_found("Product", product_id))

            product.name = name
            product.description = description
            product.price = price
            logger.info(f"Updated product {product_id}")
            return ServiceResult.ok()

    def delete_product(self, product_id: int) -> ServiceResult:
        # Order items that still reference the product are left in place
        with self._lock:
            if self._products.pop(product_id, None) is None:
                return self._rejected(not_found("Product", product_id))
            logger.info(f"Deleted product {product_id}")
            return ServiceResult.ok()

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    def list_orders(self) -> ServiceResult:
        """All orders, each with its customer attached"""
        with self._lock:
            orders = []
            for order in self._orders.values():
                customer = self._customers.get(order.customer_id)
                orders.append(OrderWithCustomerResponse(
                    **order.model_dump(),
                    customer=customer.model_copy() if customer else None
                ))
            return ServiceResult.ok(orders)

    def get_order(self, order_id: int) -> ServiceResult:
        """One order with its customer and items attached"""
        with self._lock:
            order = self._orders.get(order_id)
            if order is None:
                return not_found("Order", order_id)

            customer = self._customers.get(order.customer_id)
            return ServiceResult.ok(OrderResponse(
                **order.model_dump(),
                customer=customer.model_copy() if customer else None,
                order_items=[item.model_copy() for item in self._items_of(order_id)]
            ))

    def list_orders_by_customer(self, customer_id: int) -> ServiceResult:
        with self._lock:
            if customer_id not in self._customers:
                return not_found("Customer", customer_id)
            return ServiceResult.ok([
                o.model_copy() for o in self._orders.values() if o.customer_id == customer_id
            ])

    def create_order(self, customer_id: int, items: Iterable[OrderLineRequest]) -> ServiceResult:
        """
        Create an order together with its items.

        Args:
            customer_id: Id of an existing customer
            items: Requested lines, each with product_id and quantity

        Returns:
            ServiceResult with an OrderResponse carrying the created items.
            Nothing is stored unless every line is valid.
        """
        items = list(items)

        with self._lock:
            if customer_id not in self._customers:
                return self._rejected(invalid_reference("CustomerId", customer_id))

            # Validate every line before touching any collection or counter
            priced = []
            for line in items:
                if line.quantity <= 0:
                    return self._rejected(ServiceResult.fail(
                        ErrorType.BAD_REQUEST, f"Quantity must be positive: {line.quantity}"
                    ))
                product = self._products.get(line.product_id)
                if product is None:
                    return self._rejected(invalid_reference("ProductId", line.product_id))
                priced.append((line, product.price))

            order_id = self._allocate_id(ORDERS)
            created_items = []
            total = Decimal("0")
            for line, unit_price in priced:
                item = OrderItem(
                    id=self._allocate_id(ORDER_ITEMS),
                    order_id=order_id,
                    product_id=line.product_id,
                    quantity=line.quantity,
                    unit_price=unit_price
                )
                total += item.line_total
                created_items.append(item)

            order = Order(
                id=order_id,
                customer_id=customer_id,
                order_date=datetime.now(),
                total_amount=total
            )
            self._orders[order.id] = order
            for item in created_items:
                self._order_items[item.id] = item

            logger.info(
                f"Created order {order.id} for customer {customer_id} "
                f"with {len(created_items)} items, total {total}"
            )
            customer = self._customers[customer_id]
            return ServiceResult.ok(OrderResponse(
                **order.model_dump(),
                customer=customer.model_copy(),
                order_items=[item.model_copy() for item in created_items]
            ))

    def update_order(
        self,
        order_id: int,
        body_id: int,
        customer_id: int,
        order_date: datetime,
        total_amount: Decimal
    ) -> ServiceResult:
        """
        Overwrite an order's header fields.

        total_amount is taken from the caller as-is and is not checked
        against the order's items, so this path can leave the total out of
        step with the item sum.
        """
        if order_id != body_id:
            return self._rejected(id_mismatch(order_id, body_id))

        with self._lock:
            order = self._orders.get(order_id)
            if order is None:
                return self._rejected(not_found("Order", order_id))

            if customer_id != order.customer_id and customer_id not in self._customers:
                return self._rejected(invalid_reference("CustomerId", customer_id))

            order.customer_id = customer_id
            order.order_date = order_date
            order.total_amount = total_amount
            logger.info(f"Updated order {order_id}")
            return ServiceResult.ok()

    def delete_order(self, order_id: int) -> ServiceResult:
        with self._lock:
            if order_id not in self._orders:
                return self._rejected(not_found("Order", order_id))

            item_ids = [item.id for item in self._items_of(order_id)]
            for item_id in item_ids:
                del self._order_items[item_id]
            del self._orders[order_id]

            logger.info(f"Deleted order {order_id} and {len(item_ids)} items")
            return ServiceResult.ok()

    # ------------------------------------------------------------------
    # Order items
    # ------------------------------------------------------------------

    def _item_response(self, item: OrderItem) -> OrderItemResponse:
        product = self._products.get(item.product_id)
        return OrderItemResponse(
            **item.model_dump(),
            product=product.model_copy() if product else None
        )

    def list_order_items(self) -> ServiceResult:
        with self._lock:
            return ServiceResult.ok([self._item_response(i) for i in self._order_items.values()])

    def get_order_item(self, item_id: int) -> ServiceResult:
        with self._lock:
            item = self._order_items.get(item_id)
            if item is None:
                return not_found("OrderItem", item_id)
            return ServiceResult.ok(self._item_response(item))

    def list_order_items_by_order(self, order_id: int) -> ServiceResult:
        with self._lock:
            if order_id not in self._orders:
                return not_found("Order", order_id)
            return ServiceResult.ok([self._item_response(i) for i in self._items_of(order_id)])

    def create_order_item(self, order_id: int, product_id: int, quantity: int) -> ServiceResult:
        """Add an item to an existing order and add its line amount to the order total"""
        if quantity <= 0:
            return self._rejected(ServiceResult.fail(
                ErrorType.BAD_REQUEST, f"Quantity must be positive: {quantity}"
            ))

        with self._lock:
            order = self._orders.get(order_id)
            if order is None:
                return self._rejected(invalid_reference("OrderId", order_id))

            product = self._products.get(product_id)
            if product is None:
                return self._rejected(invalid_reference("ProductId", product_id))

            item = OrderItem(
                id=self._allocate_id(ORDER_ITEMS),
                order_id=order_id,
                product_id=product_id,
                quantity=quantity,
                unit_price=product.price
            )
            self._order_items[item.id] = item
            order.total_amount += item.line_total

            logger.info(f"Added item {item.id} to order {order_id}, total now {order.total_amount}")
            return ServiceResult.ok(item.model_copy())

    def update_order_item(self, item_id: int, body_id: int, product_id: int, quantity: int) -> ServiceResult:
        """
        Change an item's product and/or quantity.

        The unit price is re-snapshotted only when the product changes;
        otherwise the stored snapshot is kept even if the product's price has
        moved since. The parent total swaps the old line amount for the new.
        """
        if item_id != body_id:
            return self._rejected(id_mismatch(item_id, body_id))
        if quantity <= 0:
            return self._rejected(ServiceResult.fail(
                ErrorType.BAD_REQUEST, f"Quantity must be positive: {quantity}"
            ))

        with self._lock:
            item = self._order_items.get(item_id)
            if item is None:
                return self._rejected(not_found("OrderItem", item_id))

            unit_price = item.unit_price
            if product_id != item.product_id:
                product = self._products.get(product_id)
                if product is None:
                    return self._rejected(invalid_reference("ProductId", product_id))
                unit_price = product.price

            order = self._orders.get(item.order_id)
            if order is not None:
                order.total_amount -= item.line_total
                order.total_amount += unit_price * quantity

            item.product_id = product_id
            item.quantity = quantity
            item.unit_price = unit_price

            logger.info(f"Updated item {item_id} on order {item.order_id}")
            return ServiceResult.ok()

    def delete_order_item(self, item_id: int) -> ServiceResult:
        with self._lock:
            item = self._order_items.get(item_id)
            if item is None:
                return self._rejected(not_found("OrderItem", item_id))

            order = self._orders.get(item.order_id)
            if order is not None:
                order.total_amount -= item.line_total
            del self._order_items[item_id]

            logger.info(f"Deleted item {item_id} from order {item.order_id}")
            return ServiceResult.ok()
