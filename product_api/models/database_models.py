from sqlalchemy import Column, REAL, Text
from sqlalchemy.orm import declarative_base


Base = declarative_base()


class ProductRecord(Base):
    """Persisted product row"""

    __tablename__ = "product"

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    price = Column(REAL, nullable=False)
