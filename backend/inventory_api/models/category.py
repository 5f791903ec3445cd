from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from inventory_api.db.base_class import Base

class Category(Base):
    # __tablename__ will be 'category'

    category_id = Column(Integer, primary_key=True, index=True)
    category_name = Column(String(255), nullable=False)
    category_image_link = Column(String(2048), nullable=False)

    # The FK on item.category_id is ON DELETE CASCADE, so the database removes
    # the items; passive_deletes keeps the ORM from loading them first.
    items = relationship(
        "Item",
        back_populates="category",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Category(category_id={self.category_id}, category_name='{self.category_name}')>"
