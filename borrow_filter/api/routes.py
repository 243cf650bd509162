from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date
import logging

from borrow_filter.core.database import get_db
from borrow_filter.filters.predicates import filter_borrows
from borrow_filter.models import models
from borrow_filter.schemas import schemas

logger = logging.getLogger("borrow_filter.api")

router = APIRouter()

@router.post("/users/", response_model=schemas.UserOut)
def create_user(user_in: schemas.UserCreate, db: Session = Depends(get_db)):
    user = models.User(
        name=user_in.name.strip(),
        age=user_in.age,
        archived=user_in.archived,
        dob=user_in.dob,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Created user id=%s name=%s", user.id, user.name)
    return user

@router.get("/users/{user_id}", response_model=schemas.UserOut)
def read_user(user_id: int = Path(le=schemas.MAX_INT), db: Session = Depends(get_db)):
    user = db.query(models.User).filter(models.User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user

@router.get("/users/", response_model=List[schemas.UserOut])
def list_users(db: Session = Depends(get_db)):
    return db.query(models.User).order_by(models.User.id).all()

@router.post("/books/", response_model=schemas.BookOut)
def create_book(book_in: schemas.BookCreate, db: Session = Depends(get_db)):
    book = models.Book(title=book_in.title.strip(), isbn=book_in.isbn, available=book_in.available)
    db.add(book)
    db.commit()
    db.refresh(book)
    logger.info("Created book id=%s title=%s", book.id, book.title)
    return book

@router.get("/books/{book_id}", response_model=schemas.BookOut)
def read_book(book_id: int = Path(le=schemas.MAX_INT), db: Session = Depends(get_db)):
    book = db.query(models.Book).filter(models.Book.id == book_id).first()
    if not book:
        raise HTTPException(status_code=404, detail="Book not found")
    return book

@router.get("/books/", response_model=List[schemas.BookOut])
def list_books(db: Session = Depends(get_db)):
    return db.query(models.Book).order_by(models.Book.id).all()

# Declared before /borrows/{borrow_id} so "filter" is not read as an id.
@router.get("/borrows/filter", response_model=List[schemas.BorrowOut])
def filter_borrow_records(
    book_title: Optional[str] = Query(None, alias="bookTitle"),
    isbn: Optional[str] = Query(None),
    available: Optional[bool] = Query(None),
    user_age: Optional[int] = Query(None, alias="userAge", ge=schemas.MIN_INT, le=schemas.MAX_INT),
    archived: Optional[bool] = Query(None),
    dob: Optional[date] = Query(None, description="YYYY-MM-DD"),
    returned: Optional[bool] = Query(None),
    db: Session = Depends(get_db),
):
    criteria = schemas.BorrowFilter(
        title=book_title,
        isbn=isbn,
        available=available,
        user_age=user_age,
        archived=archived,
        dob=dob,
        returned=returned,
    )
    return filter_borrows(db, criteria)

@router.post("/borrows/", response_model=schemas.BorrowOut)
def create_borrow(borrow_in: schemas.BorrowCreate, db: Session = Depends(get_db)):
    user = db.query(models.User).filter(models.User.id == borrow_in.user_id).first()
    book = db.query(models.Book).filter(models.Book.id == borrow_in.book_id).first()
    if not user or not book:
        logger.warning("Borrow rejected: user=%s book=%s", borrow_in.user_id, borrow_in.book_id)
        raise HTTPException(status_code=404, detail="User or Book not found")
    borrow = models.Borrow(
        user=user,
        book=book,
        borrow_date=borrow_in.borrow_date,
        return_date=borrow_in.return_date,
        returned=False,
    )
    db.add(borrow)
    db.commit()
    db.refresh(borrow)
    logger.info("User %s borrowed book %s borrow %s", user.id, book.id, borrow.id)
    return borrow

@router.get("/borrows/{borrow_id}", response_model=schemas.BorrowOut)
def read_borrow(borrow_id: int = Path(le=schemas.MAX_INT), db: Session = Depends(get_db)):
    borrow = db.query(models.Borrow).filter(models.Borrow.id == borrow_id).first()
    if not borrow:
        raise HTTPException(status_code=404, detail="Borrow not found")
    return borrow

@router.get("/borrows/", response_model=List[schemas.BorrowOut])
def list_borrows(db: Session = Depends(get_db)):
    return db.query(models.Borrow).order_by(models.Borrow.id).all()

@router.post("/borrows/{borrow_id}/return", response_model=schemas.BorrowOut)
def return_borrow(borrow_id: int = Path(le=schemas.MAX_INT), db: Session = Depends(get_db)):
    borrow = db.query(models.Borrow).filter(models.Borrow.id == borrow_id).first()
    if not borrow:
        raise HTTPException(status_code=404, detail="Borrow not found")
    if borrow.returned:
        logger.warning("Borrow %s already returned", borrow_id)
        raise HTTPException(status_code=400, detail="Borrow already returned")
    borrow.returned = True
    if borrow.return_date is None:
        borrow.return_date = date.today()
    db.add(borrow)
    db.commit()
    db.refresh(borrow)
    logger.info("Borrow %s returned", borrow_id)
    return borrow
