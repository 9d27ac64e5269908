from sqlalchemy import Column, Integer, String, Float, Text
from shared.config.database import Base


class Product(Base):
    __tablename__ = "products"
    # AUTOINCREMENT keeps ids monotonic: a deleted id is never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text)
    price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False)
    category = Column(String)
    image_url = Column(String)

    def __repr__(self):
        return f"<Product {self.id} {self.name}>"
