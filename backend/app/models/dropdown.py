from sqlalchemy import Boolean, Column, Integer, String, UniqueConstraint

from backend.app.db.base_class import Base


class Dropdown(Base):
    __tablename__ = "dropdowns"
    __table_args__ = (UniqueConstraint("module_name", "field_name", "key", name="uq_dropdown_module_field_key"),)

    id = Column(Integer, primary_key=True, index=True)
    module_name = Column(String(50), nullable=False, index=True)
    field_name = Column(String(50), nullable=False)
    key = Column(String(100), nullable=False)
    value = Column(String(255), nullable=False)
    sequence = Column(Integer, nullable=False, default=0)
    is_default = Column(Boolean, nullable=False, default=False)
