from sqlalchemy import Column, Integer, String
from shorturl_app.database.connection import Base


class UrlMapping(Base):
    """
    A short identifier and the URL it stands for.

    Rows are written once and never deleted; only `hits` changes afterwards.
    """
    __tablename__ = "urls"

    # Generated by the service, never supplied by clients
    id = Column(String, primary_key=True)
    # One mapping per distinct URL
    url = Column(String, nullable=False, unique=True)
    hits = Column(Integer, nullable=False, default=0, server_default="0")
