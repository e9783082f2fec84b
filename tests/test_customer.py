"""
Tests for the customer model.
"""

from datetime import datetime

import pytest

from models.customer import (
    Customer, get_all_customers, get_customer_by_id, search_customers, get_top_customers
)
from models.errors import NotFoundError


class TestCustomerRecord:
    """Test in-memory customer behavior."""

    def test_new_customer_has_no_id(self):
        customer = Customer(first_name='Ann', last_name='Lee')
        assert customer.id is None

    @pytest.mark.parametrize('notes', [None, '', 0])
    def test_falsy_notes_become_empty_string(self, notes):
        customer = Customer(first_name='Ann', last_name='Lee', notes=notes)
        assert customer.notes == ''

    def test_notes_setter_normalizes(self):
        customer = Customer(first_name='Ann', last_name='Lee', notes='Booth')
        customer.notes = None
        assert customer.notes == ''

    def test_full_name_without_middle_name(self):
        """A missing middle name leaves two spaces between first and last name."""
        customer = Customer(first_name='Ann', last_name='Lee')
        assert customer.full_name == 'Ann  Lee'
        assert customer.middle_name is None

    def test_full_name_with_middle_name(self):
        customer = Customer(first_name='Ann', middle_name='Marie', last_name='Lee')
        assert customer.full_name == 'Ann Marie Lee'


class TestCustomerModel:
    """Test customer data access functions."""

    def test_get_all_customers_empty(self, app):
        assert get_all_customers() == []

    def test_save_assigns_id(self, app):
        customer = Customer(first_name='Ann', last_name='Lee', phone='555-0100')
        customer.save()
        assert customer.id is not None
        assert customer.id > 0

    def test_save_then_get_round_trip(self, app):
        customer = Customer(
            first_name='Ann', middle_name='Marie', last_name='Lee',
            phone='555-0100', notes='Window seat'
        )
        customer.save()

        loaded = get_customer_by_id(customer.id)
        assert loaded.to_dict() == customer.to_dict()

    @pytest.mark.parametrize('notes', [None, ''])
    def test_saved_falsy_notes_read_back_empty(self, app, notes):
        customer = Customer(first_name='Ann', last_name='Lee', notes=notes)
        customer.save()

        loaded = get_customer_by_id(customer.id)
        assert loaded.notes == ''
        assert loaded.middle_name is None

    def test_save_existing_updates_all_fields(self, app, make_customer):
        customer = make_customer('Ann', 'Lee', phone='555-0100')

        customer.first_name = 'Anne'
        customer.middle_name = 'K'
        customer.last_name = 'Leigh'
        customer.phone = '555-0199'
        customer.notes = 'Moved'
        customer.save()

        loaded = get_customer_by_id(customer.id)
        assert loaded.first_name == 'Anne'
        assert loaded.middle_name == 'K'
        assert loaded.last_name == 'Leigh'
        assert loaded.phone == '555-0199'
        assert loaded.notes == 'Moved'
        assert len(get_all_customers()) == 1

    def test_get_customer_by_id_missing(self, app):
        with pytest.raises(NotFoundError) as exc_info:
            get_customer_by_id(999999)
        assert exc_info.value.status_code == 404
        assert '999999' in str(exc_info.value)

    def test_get_all_customers_ordered_by_last_then_first(self, app, make_customer):
        make_customer('Bob', 'Lee')
        make_customer('Zoe', 'Adams')
        make_customer('Al', 'Lee')

        names = [(c.last_name, c.first_name) for c in get_all_customers()]
        assert names == [('Adams', 'Zoe'), ('Lee', 'Al'), ('Lee', 'Bob')]

    def test_get_reservations_delegates(self, app, make_customer, make_reservation):
        customer = make_customer('Ann', 'Lee')
        later = make_reservation(customer, datetime(2024, 5, 2, 19, 0))
        earlier = make_reservation(customer, datetime(2024, 5, 1, 12, 0))

        reservations = customer.get_reservations()
        assert [r.id for r in reservations] == [earlier.id, later.id]


class TestCustomerSearch:
    """Test name search."""

    @pytest.fixture
    def customers(self, make_customer):
        return {
            'ann': make_customer('Ann', 'Lee'),
            'anderson': make_customer('Bob', 'Anderson'),
            'carl': make_customer('Carl', 'Smith', middle_name='Hannes'),
            'dee': make_customer('Dee', 'Ross'),
        }

    def test_search_matches_first_and_last_name(self, app, customers):
        results = search_customers('an')
        ids = {c.id for c in results}
        assert customers['ann'].id in ids
        assert customers['anderson'].id in ids
        assert customers['dee'].id not in ids

    def test_search_matches_middle_name(self, app, customers):
        results = search_customers('hannes')
        assert [c.id for c in results] == [customers['carl'].id]

    def test_search_is_case_insensitive(self, app, customers):
        lower = {c.id for c in search_customers('anderson')}
        upper = {c.id for c in search_customers('ANDERSON')}
        assert lower == upper == {customers['anderson'].id}

    def test_search_is_case_insensitive_for_accented_names(self, app, make_customer):
        emile = make_customer('Émile', 'Østergaard', middle_name='Đorđe')

        assert [c.id for c in search_customers('émile')] == [emile.id]
        assert [c.id for c in search_customers('ØSTER')] == [emile.id]
        assert [c.id for c in search_customers('øster')] == [emile.id]
        assert [c.id for c in search_customers('đorđe')] == [emile.id]

    def test_search_matches_decomposed_accents(self, app, make_customer):
        emile = make_customer('\u00c9mile', 'Lee')
        # E followed by a combining acute accent
        assert [c.id for c in search_customers('E\u0301MILE')] == [emile.id]

    def test_search_non_latin_names(self, app, make_customer):
        sofia = make_customer('Σοφία', 'Παπαδοπούλου')
        assert [c.id for c in search_customers('ΣΟΦΊΑ')] == [sofia.id]

    def test_search_no_match_raises(self, app, customers):
        with pytest.raises(NotFoundError) as exc_info:
            search_customers('xyz')
        assert exc_info.value.status_code == 404

    def test_search_wildcards_are_literal(self, app, customers):
        with pytest.raises(NotFoundError):
            search_customers('%')
        with pytest.raises(NotFoundError):
            search_customers('_')

    def test_search_empty_store_raises(self, app):
        with pytest.raises(NotFoundError):
            search_customers('an')


class TestTopCustomers:
    """Test top customers by reservation count."""

    def test_ranked_by_reservation_count(self, app, make_customer, make_reservation):
        busy = make_customer('Busy', 'Diner')
        casual = make_customer('Casual', 'Diner')
        new = make_customer('New', 'Diner')

        for day in range(1, 6):
            make_reservation(busy, datetime(2024, 6, day, 19, 0))
        for day in range(1, 3):
            make_reservation(casual, datetime(2024, 6, day, 12, 0))

        top = get_top_customers()
        assert [c.id for c in top] == [busy.id, casual.id, new.id]
        assert [c.times for c in top] == [5, 2, 0]

    def test_zero_reservation_customers_are_included(self, app, make_customer):
        make_customer('Ann', 'Lee')
        top = get_top_customers()
        assert len(top) == 1
        assert top[0].times == 0

    def test_limit(self, app, make_customer, make_reservation):
        customers = [make_customer(f'Guest{i}', 'Diner') for i in range(12)]
        make_reservation(customers[11], datetime(2024, 6, 1, 19, 0))

        top = get_top_customers()
        assert len(top) == 10
        assert top[0].id == customers[11].id
        assert top[0].times == 1

        assert len(get_top_customers(limit=3)) == 3

    def test_negative_limit_returns_nothing(self, app, make_customer):
        make_customer('Ann', 'Lee')
        make_customer('Bob', 'Ross')
        assert get_top_customers(limit=-1) == []

    def test_times_is_not_persisted(self, app, make_customer):
        make_customer('Ann', 'Lee')
        top = get_top_customers()
        assert 'times' not in top[0].to_dict()
