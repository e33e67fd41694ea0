"""
company.py
- Purpose: Company table. Jobs hang off it by handle.
- Note: these models own the DDL; reads and writes go through the raw-SQL
  repos in jobly.repos so every statement stays explicit and parameterized.
"""

from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.orm import relationship, Mapped, mapped_column

from jobly.models.base import Base


class Company(Base):
    __tablename__ = "companies"
    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),
    )

    handle: Mapped[str] = mapped_column(String(25), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    num_employees: Mapped[int | None] = mapped_column(Integer, nullable=True)
    logo_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    jobs: Mapped[list["Job"]] = relationship(
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
