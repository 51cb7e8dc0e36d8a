"""
Order creation and cascade delete
"""

from datetime import datetime, timedelta
from decimal import Decimal

from models.enums import ErrorType
from models.order import OrderLineRequest
from services.sales_store import ORDERS, ORDER_ITEMS
from infrastructure import assert_total_consistent


def lines(*pairs):
    return [OrderLineRequest(product_id=p, quantity=q) for p, q in pairs]


class TestCreateOrder:

    def test_create_order_snapshots_prices_and_total(self, store):
        result = store.create_order(customer_id=2, items=lines((2, 2), (5, 1)))

        assert result.success
        order = result.data
        assert order.id == 6
        assert order.customer_id == 2
        assert order.total_amount == Decimal("1899.97")
        assert [i.id for i in order.order_items] == [9, 10]
        assert all(i.order_id == 6 for i in order.order_items)
        assert [i.unit_price for i in order.order_items] == [Decimal("799.99"), Decimal("299.99")]
        assert abs(datetime.now() - order.order_date) < timedelta(minutes=1)
        assert_total_consistent(store, 6)

    def test_create_order_without_items(self, store):
        order = store.create_order(customer_id=1, items=[]).data
        assert order.total_amount == Decimal("0")
        assert order.order_items == []

    def test_unknown_customer_creates_nothing(self, store):
        counts = store.counts()

        result = store.create_order(customer_id=999, items=lines((1, 1)))

        assert result.error_type == ErrorType.INVALID_REFERENCE
        assert store.counts() == counts
        assert store.peek_next_id(ORDERS) == 6
        assert store.peek_next_id(ORDER_ITEMS) == 9

    def test_unknown_product_creates_nothing(self, store):
        counts = store.counts()

        result = store.create_order(customer_id=1, items=lines((1, 1), (999, 1)))

        assert result.error_type == ErrorType.INVALID_REFERENCE
        assert "999" in result.error
        assert store.counts() == counts
        assert store.peek_next_id(ORDERS) == 6
        assert store.peek_next_id(ORDER_ITEMS) == 9

    def test_item_ids_shared_across_orders(self, store):
        store.create_order(customer_id=1, items=lines((1, 1)))
        created = store.create_order_item(order_id=2, product_id=3, quantity=1).data
        second = store.create_order(customer_id=1, items=lines((4, 1))).data

        assert created.id == 10
        assert second.order_items[0].id == 11


class TestDeleteOrder:

    def test_delete_cascades_to_items(self, store):
        assert store.delete_order(1).success

        assert store.get_order(1).error_type == ErrorType.NOT_FOUND
        assert not [i for i in store.list_order_items().data if i.order_id == 1]
        assert store.get_order_item(1).error_type == ErrorType.NOT_FOUND
        assert store.counts()["order_items"] == 6

    def test_delete_unknown_order(self, store):
        assert store.delete_order(999).error_type == ErrorType.NOT_FOUND

    def test_order_ids_not_reused_after_delete(self, store):
        store.delete_order(5)
        assert store.create_order(customer_id=1, items=[]).data.id == 6


class TestOrderReads:

    def test_get_order_attaches_customer_and_items(self, store):
        order = store.get_order(1).data
        assert order.customer.first_name == "John"
        assert [i.id for i in order.order_items] == [1, 2]

    def test_list_orders_attaches_customer(self, store):
        orders = store.list_orders().data
        assert [o.customer.id for o in orders] == [1, 2, 1, 3, 4]
        assert all(not hasattr(o, "order_items") for o in orders)

    def test_orders_by_customer(self, store):
        assert [o.id for o in store.list_orders_by_customer(1).data] == [1, 3]
        assert store.list_orders_by_customer(5).data == []
        assert store.list_orders_by_customer(999).error_type == ErrorType.NOT_FOUND

    def test_deleted_customer_leaves_orders(self, store):
        store.delete_customer(1)
        order = store.get_order(1).data
        assert order.customer_id == 1
        assert order.customer is None

    def test_reads_return_copies(self, store):
        order = store.get_order(1).data
        order.total_amount = Decimal("0")
        assert store.get_order(1).data.total_amount == Decimal("1499.98")
