from fastapi import FastAPI
from borrow_filter.core.config import configure_logging
from borrow_filter.core.database import Base, engine
from borrow_filter.api import routes

configure_logging()
Base.metadata.create_all(bind=engine)
app = FastAPI(title="User Borrow Book Filter")
app.include_router(routes.router)

@app.get("/health")
def health():
    return {"status": "ok"}
