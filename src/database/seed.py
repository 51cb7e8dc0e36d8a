"""
Sample sales data loaded into the store at startup
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Dict, List

from models.customer import Customer
from models.order import Order
from models.order_item import OrderItem
from models.product import Product
from services.sales_store import OrderAggregateStore

SEED_PRODUCTS = [
    Product(id=1, name="Laptop", description="High-performance laptop", price=Decimal("1299.99")),
    Product(id=2, name="Smartphone", description="Latest model smartphone", price=Decimal("799.99")),
    Product(id=3, name="Headphones", description="Wireless noise-canceling headphones", price=Decimal("199.99")),
    Product(id=4, name="Tablet", description="10-inch tablet with stylus", price=Decimal("499.99")),
    Product(id=5, name="Smartwatch", description="Fitness tracking smartwatch", price=Decimal("299.99")),
]

SEED_CUSTOMERS = [
    Customer(id=1, first_name="John", last_name="Doe", email="john.doe@email.com"),
    Customer(id=2, first_name="Jane", last_name="Smith", email="jane.smith@email.com"),
    Customer(id=3, first_name="Bob", last_name="Johnson", email="bob.johnson@email.com"),
    Customer(id=4, first_name="Alice", last_name="Brown", email="alice.brown@email.com"),
    Customer(id=5, first_name="Charlie", last_name="Wilson", email="charlie.wilson@email.com"),
]

# order id -> (customer id, days before today)
SEED_ORDERS = {
    1: (1, 5),
    2: (2, 3),
    3: (1, 2),
    4: (3, 1),
    5: (4, 0),
}

# (item id, order id, product id, quantity)
SEED_ORDER_ITEMS = [
    (1, 1, 1, 1),
    (2, 1, 3, 1),
    (3, 2, 2, 1),
    (4, 3, 4, 1),
    (5, 3, 3, 1),
    (6, 4, 1, 1),
    (7, 4, 2, 1),
    (8, 5, 4, 1),
]


def build_seed_data(now: datetime = None) -> Dict[str, List]:
    """Build the sample records; order totals are summed from the seeded items"""
    now = now or datetime.now()
    prices = {p.id: p.price for p in SEED_PRODUCTS}

    order_items = [
        OrderItem(id=item_id, order_id=order_id, product_id=product_id,
                  quantity=quantity, unit_price=prices[product_id])
        for item_id, order_id, product_id, quantity in SEED_ORDER_ITEMS
    ]

    orders = []
    for order_id, (customer_id, days_ago) in SEED_ORDERS.items():
        total = sum(
            (item.line_total for item in order_items if item.order_id == order_id),
            Decimal("0")
        )
        orders.append(Order(
            id=order_id,
            customer_id=customer_id,
            order_date=now - timedelta(days=days_ago),
            total_amount=total
        ))

    return {
        "customers": SEED_CUSTOMERS,
        "products": SEED_PRODUCTS,
        "orders": orders,
        "order_items": order_items,
    }


def seed_store(store: OrderAggregateStore) -> OrderAggregateStore:
    store.load(**build_seed_data())
    return store
