"""Tests for the search and category predicates."""

import pytest

from epay_pro.filters import (
    filter_maintenance,
    filter_transactions,
    maintenance_matches,
    transaction_matches,
)
from epay_pro.models import MaintenanceStatus, Provider, TransactionType


class TestTransactionFilter:
    """Tests for the transaction list filter."""

    def test_identity_with_empty_query_and_all(self, transactions):
        assert filter_transactions(transactions, "", "all") == transactions

    def test_query_matches_client_name_case_insensitive(self, transactions):
        result = filter_transactions(transactions, "happy MOBILE")

        assert [tx.id for tx in result] == ["t1", "t4"]

    def test_query_matches_provider_label(self, transactions):
        result = filter_transactions(transactions, Provider.VODAFONE_CASH.value[:4])

        assert [tx.id for tx in result] == ["t2"]

    def test_query_matches_type_label(self, transactions):
        result = filter_transactions(transactions, TransactionType.DEPOSIT.value)

        assert [tx.id for tx in result] == ["t4"]

    def test_provider_filter_exact(self, transactions):
        result = filter_transactions(transactions, "", Provider.FAWRY)

        assert [tx.id for tx in result] == ["t1", "t3"]

    def test_provider_filter_accepts_label_string(self, transactions):
        result = filter_transactions(transactions, "", Provider.FAWRY.value)

        assert [tx.id for tx in result] == ["t1", "t3"]

    def test_unknown_provider_matches_nothing(self, transactions):
        assert filter_transactions(transactions, "", "Nope") == []

    def test_query_and_provider_are_anded(self, transactions):
        result = filter_transactions(transactions, "happy", Provider.AMAN)

        assert [tx.id for tx in result] == ["t4"]

    @pytest.mark.parametrize("query", ["", "happy", "star", "zzz"])
    @pytest.mark.parametrize("provider", ["all", Provider.FAWRY, Provider.AMAN])
    def test_predicates_commute(self, transactions, query, provider):
        combined = filter_transactions(transactions, query, provider)
        staged = filter_transactions(filter_transactions(transactions, query, "all"), "", provider)

        assert combined == staged

    def test_single_record_predicate(self, transactions):
        assert transaction_matches(transactions[0])
        assert not transaction_matches(transactions[0], "hope")


class TestMaintenanceFilter:
    """Tests for the maintenance list filter."""

    def test_identity_with_empty_query_and_all(self, tickets):
        assert filter_maintenance(tickets, "", "all") == tickets

    def test_query_matches_serial_number(self, tickets):
        result = filter_maintenance(tickets, "pax")

        assert [r.id for r in result] == ["m2", "m4"]

    def test_query_matches_issue(self, tickets):
        result = filter_maintenance(tickets, "BATTERY")

        assert [r.id for r in result] == ["m2", "m4"]

    def test_status_filter(self, tickets):
        result = filter_maintenance(tickets, "", MaintenanceStatus.FIXED)

        assert [r.id for r in result] == ["m3"]

    def test_query_and_status_are_anded(self, tickets):
        result = filter_maintenance(tickets, "battery", MaintenanceStatus.DELIVERED.value)

        assert [r.id for r in result] == ["m4"]

    def test_predicates_commute(self, tickets):
        for status in ["all", *MaintenanceStatus]:
            combined = filter_maintenance(tickets, "happy", status)
            staged = filter_maintenance(filter_maintenance(tickets, "happy", "all"), "", status)
            assert combined == staged

    def test_single_record_predicate(self, tickets):
        assert maintenance_matches(tickets[0], "card", MaintenanceStatus.IN_PROGRESS)
        assert not maintenance_matches(tickets[0], "card", MaintenanceStatus.PENDING)
