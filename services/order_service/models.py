from sqlalchemy import Column, DateTime, Float, Integer, String, func
from shared.config.database import Base

DEFAULT_ORDER_STATUS = "PENDING"

class Order(Base):
    __tablename__ = "orders"
    # Separate schema keeps the order tables isolated from other services
    __table_args__ = {"schema": "order_schema"}

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True) # lives in the user service, no FK
    product_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)
    total_price = Column(Float, nullable=False) # calculated at creation
    status = Column(String, nullable=False, default=DEFAULT_ORDER_STATUS) # free-form label
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Order id={self.id} user_id={self.user_id} status={self.status!r}>"
