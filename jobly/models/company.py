from sqlalchemy import CheckConstraint, Column, Integer, String
from jobly.core.database import Base


class Company(Base):
    """
    Company that posts jobs. Read-only from the API's point of view.
    """
    __tablename__ = "companies"

    handle = Column(String(25), primary_key=True)
    name = Column(String, nullable=False, unique=True)
    num_employees = Column(Integer, CheckConstraint("num_employees >= 0"), nullable=True)
    description = Column(String, nullable=True)
    logo_url = Column(String, nullable=True)

    def __repr__(self):
        return f"<Company(handle='{self.handle}', name='{self.name}')>"
