from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from taskboard.config.settings import Settings

Base = declarative_base()


class Database:
    """Engine and session factory owned by one application instance"""

    def __init__(self, url: str, **engine_kwargs):
        self.url = url
        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        connect_args = {}
        if settings.database_url.startswith("sqlite"):
            # Sync routes run in the threadpool
            connect_args["check_same_thread"] = False
        elif settings.db_sslmode:
            # Hosted PostgreSQL usually wants sslmode=require
            connect_args["sslmode"] = settings.db_sslmode
        return cls(settings.database_url, connect_args=connect_args)

    def create_all(self):
        # Models must be imported so they register on Base.metadata
        from taskboard.models import task, user  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self):
        self.engine.dispose()


# Per-request session from the database handle on app.state
def get_db(request: Request):
    db: Session = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
