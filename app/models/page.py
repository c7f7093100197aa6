"""Page model"""

import uuid
from sqlalchemy import Column, String, DateTime, JSON, UniqueConstraint
from datetime import datetime
from app.core.database import Base


def _new_page_id() -> str:
    return str(uuid.uuid4())


class Page(Base):
    __tablename__ = "pages"

    id = Column(String(36), primary_key=True, default=_new_page_id)
    slug = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False)

    # JSON (pas JSONB) : l'ordre des clés est conservé
    page_metadata = Column("metadata", JSON(none_as_null=True), nullable=True)
    components = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("slug", name="uq_pages_slug"),
    )

    def __repr__(self):
        return f"<Page {self.slug} ({self.id})>"
