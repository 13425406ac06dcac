"""
Cấu hình cho từng loại catalog: CCTV, NanoBeam và gói Internet.

Mỗi CatalogKind mô tả những gì khác nhau giữa các collection (bảng, đường dẫn
API, giá trị type_detail hợp lệ, thư mục upload, kiểu xóa) để routes và crud
chỉ cần viết một lần.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Type

from ..core import uploads
from ..core.exceptions import ValidationError
from .models import CCTVProduct, InternetPackage, NanoBeamProduct
from .schemas import CatalogItemResponse, ImageCatalogItemResponse


@dataclass(frozen=True)
class CatalogKind:
    name: str
    label: str
    model: Type
    prefixes: Tuple[str, ...]
    type_details: Tuple[str, ...]
    upload_namespace: Optional[str] = None
    soft_delete: bool = False
    active_only_default: bool = False

    @property
    def has_image(self) -> bool:
        return self.upload_namespace is not None

    @property
    def response_model(self) -> Type[CatalogItemResponse]:
        return ImageCatalogItemResponse if self.has_image else CatalogItemResponse

    def check_type_detail(self, value: Optional[str]) -> None:
        if value is not None and value not in self.type_details:
            raise ValidationError(
                f"Invalid type_detail '{value}'. Allowed values: {', '.join(self.type_details)}"
            )


CCTV = CatalogKind(
    name="cctv",
    label="Product",
    model=CCTVProduct,
    prefixes=("/api/cctv-products",),
    type_details=("camera", "dvr", "nvr", "accessories"),
    upload_namespace=uploads.CCTV,
)

NANOBEAM = CatalogKind(
    name="nanobeam",
    label="Product",
    model=NanoBeamProduct,
    prefixes=("/api/nanobeam-products",),
    type_details=("nanobeam", "nanostation", "powerbeam", "airmax"),
    upload_namespace=uploads.NANOBEAM,
)

INTERNET = CatalogKind(
    name="internet",
    label="Package",
    model=InternetPackage,
    prefixes=("/api/internet-packages", "/api/internet-products"),
    type_details=("wifi", "adsl", "vdsl"),
    soft_delete=True,
    active_only_default=True,
)

CATALOG_KINDS = (CCTV, NANOBEAM, INTERNET)
