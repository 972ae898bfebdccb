from models.user import User
from models.post import Post
from models.comment import Comment
from models.refresh_token import RefreshToken
from sqlalchemy import create_engine, event
from sqlalchemy.orm import scoped_session, sessionmaker
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from os import getenv
from models.base_model import Base
from dotenv import load_dotenv

load_dotenv()
# Map model names for easy querying
classes = {
    "User": User,
    "Post": Post,
    "Comment": Comment,
    "RefreshToken": RefreshToken,
}

DEFAULT_DATABASE_URL = "sqlite:///blog.db"


class DBStorage:
    __engine = None
    __session = None

    def __init__(self, database_url=None):
        self.database_url = database_url or getenv("DATABASE_URL", DEFAULT_DATABASE_URL)

    def _make_engine(self, url):
        if url.startswith("sqlite"):
            kwargs = {"connect_args": {"check_same_thread": False}}
            if url in ("sqlite://", "sqlite:///:memory:"):
                # one shared connection so every session sees the same in-memory DB
                kwargs["poolclass"] = StaticPool
            engine = create_engine(url, **kwargs)

            # Enable SQLite foreign keys (needed for ON DELETE CASCADE)
            @event.listens_for(engine, "connect")
            def _set_sqlite_pragma(dbapi_connection, connection_record):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()
            return engine
        return create_engine(url, pool_pre_ping=True)

    def reload(self, database_url=None):
        """(Re)create the engine, create tables and start session"""
        if self.__session is not None:
            self.__session.remove()
        if database_url:
            self.database_url = database_url
        if self.__engine is not None:
            self.__engine.dispose()
        self.__engine = self._make_engine(self.database_url)
        Base.metadata.create_all(self.__engine)
        session_factory = sessionmaker(bind=self.__engine, expire_on_commit=False)
        self.__session = scoped_session(session_factory)

    def new(self, obj):
        """Add object to session"""
        self.__session.add(obj)

    def save(self):
        """Commit session"""
        try:
            self.__session.commit()
        except SQLAlchemyError:
            self.__session.rollback()
            raise

    def rollback(self):
        self.__session.rollback()

    def delete(self, obj=None):
        """Delete object if exists (hard delete)"""
        if obj:
            self.__session.delete(obj)

    def get(self, cls, id):
        """Fetch one object by class and primary key"""
        if cls in classes.values():
            return self.__session.get(cls, id)
        return None

    def count(self, cls=None):
        """Count objects"""
        if cls:
            return self.__session.query(cls).count()
        return sum(self.__session.query(model).count() for model in classes.values())

    def close(self):
        """Remove session (for API teardown)"""
        if self.__session is not None:
            self.__session.remove()

    # expose the SQLAlchemy session for advanced querying (joins, filters, etc.)
    def get_session(self):
        return self.__session
