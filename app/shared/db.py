from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from app.shared.config import settings, STORAGE_DIR

# Local SQLite DB under ./storage/ unless DATABASE_URL points elsewhere
if settings.DATABASE_URL.startswith("sqlite"):
    STORAGE_DIR.mkdir(parents=True, exist_ok=True)
    _connect_args = {"check_same_thread": False}
else:
    _connect_args = {}

engine = create_engine(settings.DATABASE_URL, connect_args=_connect_args)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

class Base(DeclarativeBase):
    pass

# FastAPI dep
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db():
    # import models so they register with Base.metadata
    from app.auth import models as auth_models  # noqa: F401
    from app.notes import models as notes_models  # noqa: F401
    from app.tasks import models as tasks_models  # noqa: F401

    Base.metadata.create_all(bind=engine)
