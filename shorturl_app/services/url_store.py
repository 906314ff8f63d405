import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import update
from sqlalchemy import exc as sa_exc
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from shorturl_app.database.connection import Base, create_session_factory
from shorturl_app.errors import DuplicateUrlError, PoolError, StorageError
from shorturl_app.models.url import UrlMapping
from shorturl_app.services.short_code import RandomShortCodeStrategy

logger = logging.getLogger(__name__)


class UrlStore:
    """
    Persistence for identifier -> URL mappings.

    Every public method borrows one pooled connection for its duration
    through a Session context manager, and gives it back on every exit path.
    Methods are synchronous; URLService moves them off the event loop.
    """

    def __init__(
        self,
        engine: Engine,
        generator: Optional[RandomShortCodeStrategy] = None,
        max_retries: int = 5,
    ):
        self.engine = engine
        self.session_factory = create_session_factory(engine)
        self.generator = generator or RandomShortCodeStrategy()
        self.max_retries = max_retries

    @contextmanager
    def _session(self) -> Iterator[Session]:
        """Session scoped to one operation, with SQLAlchemy errors translated"""
        try:
            with self.session_factory() as session:
                yield session
        except sa_exc.TimeoutError as exc:
            raise PoolError(f"could not acquire a database connection: {exc}") from exc
        except sa_exc.SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    def ensure_schema(self) -> None:
        """Create the urls table if it does not exist yet."""
        try:
            Base.metadata.create_all(bind=self.engine)
        except sa_exc.SQLAlchemyError as exc:
            raise StorageError(f"error creating tables: {exc}") from exc

    def find_by_identifier(self, identifier: str) -> Optional[str]:
        with self._session() as session:
            return session.query(UrlMapping.url).filter(
                UrlMapping.id == identifier
            ).scalar()

    def find_identifier_by_url(self, url: str) -> Optional[str]:
        with self._session() as session:
            return self._identifier_for(session, url)

    def get_mapping(self, identifier: str) -> Optional[UrlMapping]:
        with self._session() as session:
            return session.query(UrlMapping).filter(UrlMapping.id == identifier).first()

    def count(self) -> int:
        with self._session() as session:
            return session.query(UrlMapping).count()

    def insert_mapping(self, url: str) -> str:
        """
        Store `url` under a freshly generated identifier.

        A colliding identifier is regenerated up to `max_retries` times.
        A URL that is already stored raises DuplicateUrlError.
        """
        for attempt in range(1, self.max_retries + 1):
            identifier = self.generator.generate()

            with self._session() as session:
                session.add(UrlMapping(id=identifier, url=url, hits=0))
                try:
                    session.commit()
                except sa_exc.IntegrityError:
                    session.rollback()
                    if self._identifier_for(session, url) is not None:
                        raise DuplicateUrlError(f"url is already stored: {url}")
                    logger.warning(
                        "Short code collision on %s (attempt %d/%d)",
                        identifier, attempt, self.max_retries,
                    )
                    continue

            return identifier

        raise StorageError(
            f"Could not generate unique short code after {self.max_retries} attempts"
        )

    def increment_hits(self, identifier: str) -> None:
        """Add one hit. Unknown identifiers update nothing and are not an error."""
        with self._session() as session:
            self._add_hit(session, identifier)
            session.commit()

    def shorten(self, url: str) -> str:
        """
        Return the identifier for `url`, creating the mapping if needed,
        and count one hit for it, all inside one transaction.

        If the insert trips a unique constraint (a concurrent request stored
        the same URL first, or the generated code collided) the transaction
        is rolled back and the lookup runs again, so a URL never ends up
        with two rows.
        """
        for attempt in range(1, self.max_retries + 1):
            with self._session() as session:
                identifier = self._identifier_for(session, url)

                if identifier is None:
                    identifier = self.generator.generate()
                    session.add(UrlMapping(id=identifier, url=url, hits=0))
                    try:
                        session.flush()
                    except sa_exc.IntegrityError:
                        session.rollback()
                        logger.warning(
                            "Insert of %s for %s conflicted (attempt %d/%d)",
                            identifier, url, attempt, self.max_retries,
                        )
                        continue

                self._add_hit(session, identifier)
                session.commit()
                return identifier

        raise StorageError(
            f"Could not store {url} after {self.max_retries} attempts"
        )

    @staticmethod
    def _identifier_for(session: Session, url: str) -> Optional[str]:
        return session.query(UrlMapping.id).filter(UrlMapping.url == url).scalar()

    @staticmethod
    def _add_hit(session: Session, identifier: str) -> None:
        session.execute(
            update(UrlMapping)
            .where(UrlMapping.id == identifier)
            .values(hits=UrlMapping.hits + 1)
            .execution_options(synchronize_session=False)
        )
