# Ba collection sản phẩm dùng chung một bộ cột, khác nhau ở tên bảng và cột image

from sqlalchemy import Column, String, Text, Float, Boolean, JSON, TIMESTAMP
from ..core.database import Base
from ..user.models import new_id, utcnow


class CatalogItemMixin:
    id = Column(String(32), primary_key=True, default=new_id)
    title = Column(String(200), nullable=False, index=True)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    type_detail = Column(String(50), nullable=False, index=True)
    features = Column(JSON, nullable=False, default=list)
    specifications = Column(JSON, nullable=False, default=dict)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP, default=utcnow)
    updated_at = Column(TIMESTAMP, default=utcnow, onupdate=utcnow)


class CCTVProduct(CatalogItemMixin, Base):
    __tablename__ = "cctv_products"
    image = Column(String(255), nullable=False)


class NanoBeamProduct(CatalogItemMixin, Base):
    __tablename__ = "nanobeam_products"
    image = Column(String(255), nullable=False)


class InternetPackage(CatalogItemMixin, Base):
    __tablename__ = "internet_packages"
