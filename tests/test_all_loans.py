"""Tests for the All Loans report."""

from decimal import Decimal

from portfolio_reports.reports import all_loans
from portfolio_reports.reports.context import ReportContext
from portfolio_reports.reports.filters import resolve_filters
from portfolio_reports.utils.formatting import EMPTY


class TestDetail:
    """Tests for the loan rows over the sample data."""

    def test_newest_first_without_withdrawn(self, static_snapshot) -> None:
        """Loans come newest first and the withdrawn loan is absent."""
        rows = all_loans.detail_rows(static_snapshot, resolve_filters().date_range)
        assert [r.disbursement_id for r in rows] == [5003, 5002, 5001]

    def test_repayment_position(self, static_snapshot) -> None:
        """Paid, outstanding and profit figures come from non-reversed repayments."""
        rows = {r.disbursement_id: r for r in all_loans.detail_rows(static_snapshot, resolve_filters().date_range)}

        repaid = rows[5001]
        assert repaid.paid_principal == 5000.0
        assert repaid.os_principal == 0.0
        assert repaid.os_interest == 160.0
        assert repaid.profit == 200.0
        assert repaid.fees_collected == 20.0
        assert str(repaid.last_paid_date) == "2024-05-04"

        bounced = rows[5002]
        assert bounced.os_principal == 6000.0
        assert bounced.os_interest == 390.0
        assert bounced.profit == -5900.0

    def test_borrower_details(self, static_snapshot) -> None:
        """Borrower demographics and the assembled address are included."""
        rows = all_loans.detail_rows(static_snapshot, resolve_filters("2024-03-01", "2024-03-31").date_range)
        (row,) = rows
        assert row.borrower_name == "Alicia Tan"
        assert row.full_address == "Blk 123, Serangoon Ave 3, #05-12, Golden Court, 123 Serangoon Ave 3, Postal 550123"
        assert row.tenure == 12

    def test_missing_borrower_and_account_fallback(self, make_snapshot) -> None:
        """A loan without borrower record is kept; its account number falls back to the application's."""
        snapshot = make_snapshot(
            applications=[{"id": 10, "borrower_id": 404, "account_number": "APP-1"}],
            disbursements=[{"id": 1, "application_id": 10, "date": "2024-01-01", "amount": 100}],
        )
        (row,) = all_loans.detail_rows(snapshot, resolve_filters().date_range)
        assert row.borrower_name == all_loans.UNKNOWN_BORROWER
        assert row.full_address == EMPTY
        assert row.account_number == "APP-1"


class TestSummary:
    """Tests for the catalogue figures and totals."""

    def test_unique_borrowers_by_uid(self, make_snapshot) -> None:
        """Borrower records sharing a uid count once."""
        snapshot = make_snapshot(
            borrowers=[{"id": 1, "uid": "S1"}, {"id": 2, "uid": "S1"}, {"id": 3}],
            applications=[{"id": 10, "borrower_id": 1}, {"id": 11, "borrower_id": 2}, {"id": 12, "borrower_id": 3}],
            disbursements=[
                {"id": 1, "application_id": 10, "date": "2024-01-01", "amount": 100},
                {"id": 2, "application_id": 11, "date": "2024-01-02", "amount": 200},
                {"id": 3, "application_id": 12, "date": "2024-01-03", "amount": 300},
            ],
        )
        summary = all_loans.summarize(all_loans.detail_rows(snapshot, resolve_filters().date_range))
        assert summary.loan_count == 3
        assert summary.unique_borrowers == 2
        assert summary.total_amount == Decimal("600.00")

    def test_report_on_sample_data(self, static_snapshot) -> None:
        """Descriptor metrics and detail totals over the sample data."""
        detail = all_loans.build_report(ReportContext(snapshot=static_snapshot))
        assert [m.formatted for m in detail.descriptor.metrics] == ["25,000.00", "3", "3"]
        totals = {m.label: m.formatted for m in detail.totals}
        assert totals["Principal Paid"] == "11,000.00"
        assert totals["Outstanding Principal"] == "14,000.00"
        assert totals["Interest Collected"] == "250.00"
