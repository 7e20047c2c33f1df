"""Tests for the per-year agreement number sequence."""

from sqlalchemy import insert, select

from models import AgreementSequence
from services import agreement_number
from services.agreement_number import (
    format_agreement_number,
    next_agreement_number,
    next_sequence_value,
)


def test_format_pads_to_four_digits():
    assert format_agreement_number(2026, 1) == "CHIOMA-2026-0001"
    assert format_agreement_number(2026, 42) == "CHIOMA-2026-0042"
    assert format_agreement_number(2026, 12345) == "CHIOMA-2026-12345"


def test_format_with_custom_prefix():
    assert format_agreement_number(2027, 7, prefix="TEST") == "TEST-2027-0007"


class TestSequence:
    def test_first_value_of_a_year_is_one(self, db):
        assert next_sequence_value(db, 2026) == 1
        assert db.get(AgreementSequence, 2026).year == 2026

    def test_values_increase_by_one(self, db):
        assert [next_sequence_value(db, 2026) for _ in range(4)] == [1, 2, 3, 4]

    def test_each_year_has_its_own_counter(self, db):
        next_sequence_value(db, 2026)
        next_sequence_value(db, 2026)
        assert next_sequence_value(db, 2027) == 1
        assert next_sequence_value(db, 2026) == 3

    def test_next_agreement_number_for_given_year(self, db):
        assert next_agreement_number(db, year=2030) == "CHIOMA-2030-0001"
        assert next_agreement_number(db, year=2030) == "CHIOMA-2030-0002"

    def test_lost_first_insert_race_retries_increment(self, db, monkeypatch):
        # The row for the year already exists, but the first increment saw no row
        db.execute(insert(AgreementSequence).values(year=2026, last_value=5))
        real_increment = agreement_number._increment
        calls = []

        def increment(session, year):
            calls.append(year)
            if len(calls) == 1:
                return 0
            return real_increment(session, year)

        monkeypatch.setattr(agreement_number, "_increment", increment)

        assert next_sequence_value(db, 2026) == 6
        assert calls == [2026, 2026]
        rows = db.execute(select(AgreementSequence).where(AgreementSequence.year == 2026)).scalars().all()
        assert len(rows) == 1
