from datetime import date

import pytest

from src.workforce_system.workforce_system.advances.model import DeductionEntry
from src.workforce_system.workforce_system.advances.mysql_advance_repository import MySQLAdvanceRepository
from src.workforce_system.workforce_system.core.exceptions import ValidationError


class _Cursor:
    def __init__(self, rowcount):
        self.rowcount = rowcount
        self.statements: list[tuple[str, tuple]] = []

    def execute(self, sql, params=()):
        self.statements.append((" ".join(sql.split()), params))

    def close(self):
        pass


class _Connection:
    def __init__(self, rowcount):
        self.cur = _Cursor(rowcount)
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=True):
        return self.cur

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class _Factory:
    def __init__(self, rowcount):
        self.conn = _Connection(rowcount)

    def connect(self):
        return self.conn


ENTRY = DeductionEntry(amount=600, date=date(2024, 3, 9), description="March")


def test_deduction_lowers_balance_only_when_it_covers_the_amount():
    factory = _Factory(rowcount=1)
    MySQLAdvanceRepository(factory).add_deduction("a1", ENTRY)

    update, insert = factory.conn.cur.statements
    assert update[0].startswith("UPDATE advances SET remaining_amount = remaining_amount - %s")
    assert "AND remaining_amount >= %s" in update[0]
    assert update[1] == (600, "a1", 600)
    assert insert[0].startswith("INSERT INTO advance_deductions")
    assert factory.conn.committed


def test_deduction_is_rolled_back_when_balance_ran_out():
    factory = _Factory(rowcount=0)
    with pytest.raises(ValidationError, match="Insufficient remaining advance"):
        MySQLAdvanceRepository(factory).add_deduction("a1", ENTRY)

    assert len(factory.conn.cur.statements) == 1
    assert factory.conn.rolled_back
    assert not factory.conn.committed
