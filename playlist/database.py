from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, scoped_session, sessionmaker

Base = declarative_base()

class Database:
    def __init__(self, connection_string, echo=False):
        self.engine = create_engine(connection_string, echo=echo)

    def create_session(self) -> scoped_session:
        session = scoped_session(sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine))
        Base.query = session.query_property()

        return session

    def create_all(self):
        Base.metadata.create_all(bind=self.engine)

    def drop_all(self):
        Base.metadata.drop_all(bind=self.engine)
