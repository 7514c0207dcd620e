from sqlalchemy import String, Float, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from municipality_api.database.base import Base
import uuid


class Municipality(Base):
    """
    SQLAlchemy model for Municipality.

    A flat reference row describing one Italian municipality (ISTAT codes,
    names, cadastral code and coordinates). There are no relationships: the
    province / territorial-unit codes are stored as imported and are not
    cross-checked against the region code.
    """
    __tablename__ = "municipality"
    __table_args__ = (
        # Non-unique: homonymous municipalities exist in different provinces
        Index("idx_municipality_name", "municipality_name"),
    )

    # Generated once on insert; never updated afterwards
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    region_code: Mapped[str | None] = mapped_column(String(100))
    province_code: Mapped[str | None] = mapped_column(String(100))
    municipality_code: Mapped[str | None] = mapped_column(String(100))
    municipality_sigle: Mapped[str | None] = mapped_column(String(100))
    municipality_name: Mapped[str | None] = mapped_column(String(100))
    region_name: Mapped[str | None] = mapped_column(String(100))
    cadastral_code: Mapped[str | None] = mapped_column(String(100))
    territorial_unit_type: Mapped[str | None] = mapped_column(String(100))
    capitals_municipality: Mapped[str | None] = mapped_column(String(100))

    latitude: Mapped[float | None] = mapped_column(Float(precision=53))
    longitude: Mapped[float | None] = mapped_column(Float(precision=53))
    altitude: Mapped[float | None] = mapped_column(Float(precision=53))

    def __repr__(self) -> str:
        # Helpful for debugging/logging
        return (
            f"<Municipality(id={self.id!r}, municipality_name={self.municipality_name!r}, "
            f"province_code={self.province_code!r})>"
        )
