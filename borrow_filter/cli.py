import argparse
import logging
from datetime import date, timedelta

from borrow_filter.core.config import configure_logging
from borrow_filter.core.database import Base, SessionLocal, engine
from borrow_filter.filters.predicates import filter_borrows
from borrow_filter.models.models import Book, Borrow, User
from borrow_filter.schemas.schemas import BorrowFilter, BorrowOut

logger = logging.getLogger("borrow_filter.cli")


def _bool(value):
    lowered = value.lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    raise argparse.ArgumentTypeError(f"not a boolean: {value!r}")


def build_parser():
    parser = argparse.ArgumentParser(description='Borrow filter utilities')
    parser.add_argument('--initdb', action='store_true', help='Create tables')
    parser.add_argument('--seed', action='store_true', help='Seed sample data')
    parser.add_argument('--filter', action='store_true', help='Print borrows matching the filter options')
    group = parser.add_argument_group('filter options')
    group.add_argument('--title', help='book title substring (case-sensitive)')
    group.add_argument('--isbn')
    group.add_argument('--available', type=_bool)
    group.add_argument('--user-age', type=int, help='users strictly younger than this')
    group.add_argument('--archived', type=_bool)
    group.add_argument('--dob', type=date.fromisoformat, help='YYYY-MM-DD')
    group.add_argument('--returned', type=_bool)
    return parser


def seed(db):
    # idempotent: only seeds an empty database
    if db.query(Borrow).count() > 0:
        return
    john = User(name='John Doe', age=24, archived=False, dob=date(2000, 1, 1))
    jane = User(name='Jane Roe', age=41, archived=True, dob=date(1983, 6, 15))
    guide = Book(title='Spring Boot Guide', isbn='123456789', available=True)
    ddia = Book(title='Designing Data-Intensive Applications', isbn='978-1449373320', available=False)
    today = date.today()
    db.add_all([
        Borrow(user=john, book=guide, borrow_date=today, return_date=today + timedelta(days=14), returned=False),
        Borrow(user=jane, book=ddia, borrow_date=today - timedelta(days=30),
               return_date=today - timedelta(days=16), returned=True),
    ])
    db.commit()
    logger.info('Seeded sample data')


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging()
    # seeding needs the tables too
    if args.initdb or args.seed:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables ready")
    db = SessionLocal()
    try:
        if args.seed:
            seed(db)
        if args.filter:
            criteria = BorrowFilter(
                title=args.title,
                isbn=args.isbn,
                available=args.available,
                user_age=args.user_age,
                archived=args.archived,
                dob=args.dob,
                returned=args.returned,
            )
            for borrow in filter_borrows(db, criteria):
                print(BorrowOut.model_validate(borrow).model_dump_json())
    finally:
        db.close()
    print('Done')


if __name__ == '__main__':
    main()
