import os

# must be set before borrow_filter is imported
os.environ["BORROW_FILTER_DB"] = "sqlite://"

from datetime import date

import pytest
from fastapi.testclient import TestClient

from borrow_filter.core.database import Base, SessionLocal, engine
from borrow_filter.main import app
from borrow_filter.models.models import Book, Borrow, User


@pytest.fixture(autouse=True)
def fresh_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def john_borrow(db):
    """One user, one book and one open borrow linking them."""
    user = User(name="John Doe", age=24, archived=False, dob=date(2000, 1, 1))
    book = Book(title="Spring Boot Guide", isbn="123456789", available=True)
    borrow = Borrow(user=user, book=book, borrow_date=date.today(), returned=False)
    db.add(borrow)
    db.commit()
    return borrow.id
