"""Raw rows are stored as loaded, one JSON payload per CSV line, for audit and replay."""

import uuid
from datetime import datetime

from sqlalchemy import JSON, DateTime, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from layoffs_etl.models.base import Base


class RawLayoff(Base):
    __tablename__ = "raw_layoffs"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    run_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True, index=True)

    filename: Mapped[str] = mapped_column(String, nullable=False)

    payload: Mapped[dict] = mapped_column(JSON, nullable=False)

    ingested_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
