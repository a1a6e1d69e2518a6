from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.sql import text

from placestore.core.config import settings
from placestore.schemas.health import ServiceHealth

SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL

engine = create_engine(SQLALCHEMY_DATABASE_URL, echo=settings.SQL_ECHO)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

PLACES_TABLE = "places"


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def health_check(db: Session) -> ServiceHealth:
    """
    Check that the database answers and that the places table exists.

    Never raises; failures are reported in the returned ServiceHealth.
    """
    try:
        result = db.execute(text("SELECT 1")).scalar()
        if result != 1:
            return ServiceHealth(
                healthy=False, message="Database query returned unexpected result"
            )
        if not inspect(db.get_bind()).has_table(PLACES_TABLE):
            return ServiceHealth(
                healthy=False,
                message=f"Database is reachable but the {PLACES_TABLE} table is missing; run migrations",
            )
        return ServiceHealth(
            healthy=True,
            message="Database connection successful",
        )
    except Exception as e:  # pylint: disable=broad-except
        return ServiceHealth(
            healthy=False, message=f"Database connection failed: {str(e)}"
        )
