from sqlalchemy import Boolean, CheckConstraint, Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from inventory_api.db.base_class import Base

class Item(Base):
    # __tablename__ will be 'item'
    __table_args__ = (
        CheckConstraint("item_price >= 0", name="ck_item_price_non_negative"),
        CheckConstraint("item_stock >= 0", name="ck_item_stock_non_negative"),
    )

    item_id = Column(Integer, primary_key=True, index=True)
    item_name = Column(String(255), nullable=False, index=True)
    item_desc = Column(Text, nullable=False)
    item_price = Column(Numeric(10, 2), nullable=False, default=0)
    item_stock = Column(Integer, nullable=False, default=0)
    item_status = Column(Boolean, nullable=False, default=True) # available / unavailable
    item_image_link = Column(String(2048), nullable=True)

    category_id = Column(
        Integer,
        ForeignKey("category.category_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    category = relationship("Category", back_populates="items")

    def __repr__(self):
        return f"<Item(item_id={self.item_id}, item_name='{self.item_name}')>"
