"""Integration tests for the Django ORM stores.

Run with: pytest tests/test_stores.py -v
"""

from datetime import timedelta

import pytest
from django.db import connection

from ticketing.domain import EventId
from ticketing.domain.errors import DataIntegrityError
from ticketing.stores.django_store import DjangoEventStore, DjangoTicketSaleStore

from conftest import NOW


@pytest.mark.django_db
class TestDjangoEventStore:
    def test_get_event_returns_domain_model(self, create_event):
        create_event("E1", name="Harbour Jazz Night")

        event = DjangoEventStore().get_event(EventId("E1"))

        assert event.id == EventId("E1")
        assert event.name == "Harbour Jazz Night"
        assert event.starts_on == NOW + timedelta(days=10)

    def test_get_event_missing_returns_none(self):
        assert DjangoEventStore().get_event(EventId("nope")) is None

    def test_range_is_inclusive_on_both_ends(self, create_event):
        create_event("before", starts_in=-timedelta(seconds=1))
        create_event("at-start", starts_in=timedelta(0))
        create_event("at-end", starts_in=timedelta(days=30))
        create_event("after", starts_in=timedelta(days=30, seconds=1))

        events = DjangoEventStore().get_events_starting_in_range(NOW, NOW + timedelta(days=30))

        assert [e.id.value for e in events] == ["at-start", "at-end"]

    def test_range_orders_by_start_then_id(self, create_event):
        create_event("b", starts_in=timedelta(days=5))
        create_event("a", starts_in=timedelta(days=5))
        create_event("c", starts_in=timedelta(days=2))

        events = DjangoEventStore().get_events_starting_in_range(NOW, NOW + timedelta(days=30))

        assert [e.id.value for e in events] == ["c", "a", "b"]

    def test_list_events_orders_by_start(self, create_event):
        create_event("late", starts_in=timedelta(days=90))
        create_event("early", starts_in=timedelta(days=1))

        assert [e.id.value for e in DjangoEventStore().list_events()] == ["early", "late"]


@pytest.mark.django_db
class TestDjangoTicketSaleStore:
    def test_top_by_count_ranks_and_skips_events_without_sales(self, create_event, create_sale):
        e1, e2, e3 = create_event("E1"), create_event("E2"), create_event("E3")
        create_event("no-sales")
        for _ in range(3):
            create_sale(e2, 100)
        create_sale(e1, 5000)
        create_sale(e3, 100)
        create_sale(e3, 100)

        ranking = DjangoTicketSaleStore().get_top_events_by_count(10)

        assert [(s.event.id.value, s.ticket_count) for s in ranking] == [
            ("E2", 3),
            ("E3", 2),
            ("E1", 1),
        ]

    def test_top_by_revenue_sums_exact_cents(self, create_event, create_sale):
        e1, e2 = create_event("E1"), create_event("E2")
        create_sale(e1, 999)
        create_sale(e1, 1)
        create_sale(e2, 900)

        ranking = DjangoTicketSaleStore().get_top_events_by_revenue(5)

        assert [s.event.id.value for s in ranking] == ["E1", "E2"]
        assert ranking[0].revenue_in_cents == 1000
        assert str(ranking[0].revenue) == "10.00"

    def test_ties_break_by_event_id(self, create_event, create_sale):
        for event_id in ("zeta", "alpha", "mid"):
            create_sale(create_event(event_id), 500)

        by_count = DjangoTicketSaleStore().get_top_events_by_count(3)
        by_revenue = DjangoTicketSaleStore().get_top_events_by_revenue(3)

        assert [s.event.id.value for s in by_count] == ["alpha", "mid", "zeta"]
        assert [s.event.id.value for s in by_revenue] == ["alpha", "mid", "zeta"]

    def test_limit_applies(self, create_event, create_sale):
        for i in range(4):
            create_sale(create_event(f"E{i}"), 100 * (i + 1))

        ranking = DjangoTicketSaleStore().get_top_events_by_revenue(2)

        assert [s.event.id.value for s in ranking] == ["E3", "E2"]

    def test_top_with_no_sales_is_empty(self, create_event):
        create_event("E1")
        assert DjangoTicketSaleStore().get_top_events_by_count(5) == []

    def test_sales_for_event_ordered_by_purchase_date(self, create_event, create_sale):
        e1, e2 = create_event("E1", name="Harbour Jazz Night"), create_event("E2")
        create_sale(e1, 2500, sale_id="T-late", purchased_at=NOW - timedelta(hours=1))
        create_sale(e1, 1000, sale_id="T-early", purchased_at=NOW - timedelta(days=3))
        create_sale(e2, 700)

        sales = DjangoTicketSaleStore().get_sales_for_event(EventId("E1"))

        assert [s.id.value for s in sales] == ["T-early", "T-late"]
        assert {s.event_name for s in sales} == {"Harbour Jazz Night"}
        assert [str(s.price) for s in sales] == ["10.00", "25.00"]

    def test_sales_for_unknown_event_is_empty(self):
        assert DjangoTicketSaleStore().get_sales_for_event(EventId("ghost")) == []

    @pytest.mark.django_db(transaction=True)
    def test_dangling_sale_is_a_data_integrity_error(self, create_event, create_sale):
        create_sale(create_event("E1"), 1000)
        with connection.constraint_checks_disabled():
            with connection.cursor() as cursor:
                cursor.execute("UPDATE ticket_sales SET event_id = %s", ["ghost"])

        with pytest.raises(DataIntegrityError) as exc_info:
            DjangoTicketSaleStore().get_top_events_by_count(5)
        assert exc_info.value.event_ids == ["ghost"]

        with pytest.raises(DataIntegrityError):
            DjangoTicketSaleStore().get_sales_for_event(EventId("ghost"))

        with connection.cursor() as cursor:
            cursor.execute("DELETE FROM ticket_sales")
