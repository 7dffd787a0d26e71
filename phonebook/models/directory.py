# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
ORM mapping for the directory tables.

    Person(ID, FirstName, LastName)
    PhoneNumber(ID, Number, PersonID)  PersonID -> Person.ID  ON DELETE RESTRICT

Deleting a person never touches its phone numbers; the foreign key decides.
"""
from sqlalchemy import Column, ForeignKey, Index, Integer, String
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()

# MySQL/MariaDB only; other dialects ignore the mysql_* options.
_TEXT_TABLE_ARGS = {"mysql_charset": "utf8mb4", "mysql_collate": "utf8mb4_general_ci"}


class Person(Base):
    __tablename__ = "Person"
    __table_args__ = _TEXT_TABLE_ARGS

    id = Column("ID", Integer, primary_key=True, autoincrement=True)
    first_name = Column("FirstName", String(255), nullable=False)
    last_name = Column("LastName", String(255), nullable=False)

    # passive_deletes="all" keeps the ORM from nulling PersonID on delete
    phone_numbers = relationship(
        "PhoneNumber",
        back_populates="person",
        passive_deletes="all",
        order_by="PhoneNumber.id",
    )

    def __repr__(self) -> str:
        return f"<Person id={self.id} {self.first_name} {self.last_name}>"


class PhoneNumber(Base):
    __tablename__ = "PhoneNumber"
    __table_args__ = (
        Index("IX_PhoneNumber_PersonID", "PersonID"),
        _TEXT_TABLE_ARGS,
    )

    id = Column("ID", Integer, primary_key=True, autoincrement=True)
    number = Column("Number", String(12), nullable=False)
    person_id = Column(
        "PersonID",
        Integer,
        ForeignKey("Person.ID", ondelete="RESTRICT", name="FK_PhoneNumber_Person"),
        nullable=False,
    )

    person = relationship("Person", back_populates="phone_numbers")

    def __repr__(self) -> str:
        return f"<PhoneNumber id={self.id} {self.number} person={self.person_id}>"
