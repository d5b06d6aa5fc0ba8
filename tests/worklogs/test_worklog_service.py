from __future__ import annotations

import pytest

from farm_office.core.exceptions import ValidationError
from farm_office.worklogs.model import WorkLogEntry
from farm_office.worklogs.service import WorkLogService


class FakeWorkLogRepo:
    def __init__(self, entries=None):
        self.entries = list(entries or [])
        self.add_calls = 0

    def add_many(self, entries):
        self.add_calls += 1
        self.entries.extend(entries)
        return list(entries)

    def find_in_range(self, start_date, end_date):
        return [e for e in self.entries if start_date <= e.date <= end_date]

    def find_by_month(self, year, month):
        return [e for e in self.entries if e.date.startswith(f"{year:04d}-{month:02d}-")]


def test_record_many_normalizes_and_saves():
    repo = FakeWorkLogRepo()
    svc = WorkLogService(repo)

    saved = svc.record_many([WorkLogEntry(date="2025-8-1", worker_name="  Ana ", production_quantity=3)])

    assert saved[0].date == "2025-08-01"
    assert saved[0].worker_name == "Ana"
    assert repo.add_calls == 1


def test_record_many_rejects_whole_batch_on_bad_row():
    repo = FakeWorkLogRepo()
    svc = WorkLogService(repo)

    with pytest.raises(ValidationError, match="Registro 2"):
        svc.record_many(
            [
                WorkLogEntry(date="2025-08-01", worker_name="Ana"),
                WorkLogEntry(date="2025-08-01", worker_name=""),
            ]
        )
    assert repo.add_calls == 0


def test_record_many_requires_entries():
    with pytest.raises(ValidationError):
        WorkLogService(FakeWorkLogRepo()).record_many([])


def test_list_by_month_sorted_by_date():
    repo = FakeWorkLogRepo(
        [
            WorkLogEntry(date="2025-08-15", worker_name="Ana"),
            WorkLogEntry(date="2025-07-31", worker_name="Ana"),
            WorkLogEntry(date="2025-08-02", worker_name="Carlos"),
        ]
    )

    entries = WorkLogService(repo).list_by_month(year="2025", month="08")

    assert [e.date for e in entries] == ["2025-08-02", "2025-08-15"]


@pytest.mark.parametrize("year, month", [(None, "08"), ("2025", ""), ("abc", "08"), ("2025", "13")])
def test_list_by_month_validates(year, month):
    with pytest.raises(ValidationError):
        WorkLogService(FakeWorkLogRepo()).list_by_month(year=year, month=month)


def test_list_in_range_is_inclusive():
    repo = FakeWorkLogRepo(
        [
            WorkLogEntry(date="2025-08-31", worker_name="Ana"),
            WorkLogEntry(date="2025-08-01", worker_name="Ana"),
            WorkLogEntry(date="2025-09-01", worker_name="Ana"),
        ]
    )

    entries = WorkLogService(repo).list_in_range(start="2025-08-01", end="2025-08-31")

    assert [e.date for e in entries] == ["2025-08-01", "2025-08-31"]


def test_list_in_range_rejects_inverted_range():
    with pytest.raises(ValidationError):
        WorkLogService(FakeWorkLogRepo()).list_in_range(start="2025-09-01", end="2025-08-01")
