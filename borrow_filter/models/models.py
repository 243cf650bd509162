from sqlalchemy import Column, Integer, String, Date, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from datetime import date
from borrow_filter.core.database import Base

class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    age = Column(Integer, nullable=True, index=True)
    archived = Column(Boolean, default=False, nullable=False, index=True)
    dob = Column(Date, nullable=True)
    borrows = relationship("Borrow", back_populates="user")

    def __repr__(self):
        return f"User(id={self.id!r}, name={self.name!r}, age={self.age!r})"

class Book(Base):
    __tablename__ = "books"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    isbn = Column(String, nullable=True, index=True)
    available = Column(Boolean, default=True, nullable=False, index=True)
    borrows = relationship("Borrow", back_populates="book")

    def __repr__(self):
        return f"Book(id={self.id!r}, title={self.title!r}, isbn={self.isbn!r})"

class Borrow(Base):
    __tablename__ = "borrows"
    id = Column(Integer, primary_key=True, index=True)
    borrow_date = Column(Date, default=date.today, nullable=False)
    return_date = Column(Date, nullable=True)
    returned = Column(Boolean, default=False, nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    book_id = Column(Integer, ForeignKey("books.id"), nullable=False, index=True)
    user = relationship("User", back_populates="borrows")
    book = relationship("Book", back_populates="borrows")

    def __repr__(self):
        return f"Borrow(id={self.id!r}, user_id={self.user_id!r}, book_id={self.book_id!r}, returned={self.returned!r})"
