"""Tests for the observable order form."""

import pytest

from cupcake.application.order_form import OrderForm
from cupcake.domain.exceptions import ValidationError
from cupcake.domain.model.order import Order


class TestOrderFormUpdate:

    def test_update_changes_the_order(self):
        form = OrderForm()
        form.update(cake_type=2, quantity=10)
        assert form.order.cake_type == 2
        assert form.order.quantity == 10

    def test_update_keeps_the_same_order_instance(self):
        order = Order()
        form = OrderForm(order)
        form.update(quantity=4)
        assert form.order is order
        assert order.quantity == 4

    def test_summary_reflects_price(self):
        form = OrderForm()
        summary = form.update(
            cake_type=2,
            quantity=10,
            special_request_enabled=True,
            extra_frosting=True,
            add_sprinkles=True,
        )
        assert summary.total == "$36.00"
        assert summary.flavor == "Chocolate"
        assert summary.can_checkout is False

    def test_disabling_special_requests_clears_toppings(self):
        form = OrderForm()
        form.update(special_request_enabled=True, extra_frosting=True, add_sprinkles=True)
        form.update(special_request_enabled=False)
        assert form.order.extra_frosting is False
        assert form.order.add_sprinkles is False

    def test_toppings_without_special_requests_are_dropped(self):
        form = OrderForm()
        form.update(extra_frosting=True)
        assert form.order.extra_frosting is False

    def test_can_checkout_once_address_complete(self):
        form = OrderForm()
        summary = form.update(name="Taylor", street_address="1 Main St", city="Springfield", zip="12345")
        assert summary.can_checkout is True


class TestOrderFormRejections:

    def test_out_of_range_quantity_leaves_order_unchanged(self):
        form = OrderForm()
        form.update(quantity=5)
        with pytest.raises(ValidationError, match="Quantity"):
            form.update(cake_type=1, quantity=2)
        assert form.order.quantity == 5
        assert form.order.cake_type == 0

    def test_unknown_cake_type_rejected(self):
        with pytest.raises(ValidationError, match="Unknown cake type"):
            OrderForm().update(cake_type=4)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError, match="Unknown order field"):
            OrderForm().update(colour="pink")


class TestOrderFormListeners:

    def test_listener_receives_summary(self):
        form = OrderForm()
        seen = []
        form.subscribe(seen.append)
        form.update(quantity=6)
        assert len(seen) == 1
        assert seen[0].quantity == 6
        assert seen[0].total == "$12.00"

    def test_rejected_update_does_not_notify(self):
        form = OrderForm()
        seen = []
        form.subscribe(seen.append)
        with pytest.raises(ValidationError):
            form.update(quantity=99)
        assert seen == []

    def test_unsubscribe(self):
        form = OrderForm()
        seen = []
        unsubscribe = form.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        form.update(quantity=6)
        assert seen == []

    def test_non_text_delivery_field_leaves_order_unchanged(self):
        form = OrderForm()
        seen = []
        form.subscribe(seen.append)
        with pytest.raises(ValidationError, match="Delivery field 'name' must be text"):
            form.update(quantity=7, name=None)
        assert form.order == Order()
        assert seen == []
