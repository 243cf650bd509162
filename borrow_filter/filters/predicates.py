"""Dynamic borrow filtering.

Every supplied criterion becomes a ``Condition`` ``(field, operator, value)``
tuple. The list is folded into one SQLAlchemy clause for the joined
Borrow/Book/User query, and the same tuples can be checked against a loaded
``Borrow`` in Python.
"""
import logging
import operator
from collections import namedtuple
from typing import List

from sqlalchemy import and_, true
from sqlalchemy.orm import Session, contains_eager

from borrow_filter.models.models import Book, Borrow, User
from borrow_filter.schemas.schemas import BorrowFilter

logger = logging.getLogger("borrow_filter.filters")


def _contains(actual, expected):
    return actual is not None and expected in actual


def _less_than(actual, expected):
    return actual is not None and actual < expected


# operator name -> (SQL clause builder, Python check)
OPERATORS = {
    "contains": (lambda column, value: column.contains(value, autoescape=True), _contains),
    "eq": (lambda column, value: column == value, operator.eq),
    "lt": (lambda column, value: column < value, _less_than),
}

# criterion -> (column, accessor on a Borrow, operator name), in query order
FIELDS = {
    "title": (Book.title, lambda borrow: borrow.book.title, "contains"),
    "isbn": (Book.isbn, lambda borrow: borrow.book.isbn, "eq"),
    "available": (Book.available, lambda borrow: borrow.book.available, "eq"),
    "user_age": (User.age, lambda borrow: borrow.user.age, "lt"),
    "archived": (User.archived, lambda borrow: borrow.user.archived, "eq"),
    "dob": (User.dob, lambda borrow: borrow.user.dob, "eq"),
    "returned": (Borrow.returned, lambda borrow: borrow.returned, "eq"),
}


class Condition(namedtuple("Condition", ["field", "operator", "value"])):
    __slots__ = ()

    def clause(self):
        column = FIELDS[self.field][0]
        build, _ = OPERATORS[self.operator]
        return build(column, self.value)

    def holds(self, borrow: Borrow) -> bool:
        accessor = FIELDS[self.field][1]
        _, check = OPERATORS[self.operator]
        return bool(check(accessor(borrow), self.value))


def build_conditions(criteria: BorrowFilter) -> List[Condition]:
    """Return one condition per supplied criterion; absent ones are skipped."""
    conditions = []
    for field, (_, _, op) in FIELDS.items():
        value = getattr(criteria, field)
        if value is None:
            continue
        conditions.append(Condition(field, op, value))
    return conditions


def combine(conditions: List[Condition]):
    if not conditions:
        return true()
    return and_(*(c.clause() for c in conditions))


def build_predicate(criteria: BorrowFilter):
    return combine(build_conditions(criteria))


def matches(borrow: Borrow, conditions: List[Condition]) -> bool:
    return all(c.holds(borrow) for c in conditions)


def filter_borrows(db: Session, criteria: BorrowFilter) -> List[Borrow]:
    """Run the filter over all stored borrows, in storage order.

    Book and User are inner-joined; each borrow has exactly one of each so
    the joins never duplicate rows. The joined rows also populate
    ``borrow.book`` and ``borrow.user``.
    """
    conditions = build_conditions(criteria)
    query = (
        db.query(Borrow)
        .join(Borrow.book)
        .join(Borrow.user)
        .options(contains_eager(Borrow.book), contains_eager(Borrow.user))
        .filter(combine(conditions))
        .order_by(Borrow.id)
    )
    results = query.all()
    logger.info(
        "Borrow filter %s matched %d record(s)",
        [tuple(c) for c in conditions],
        len(results),
    )
    return results
