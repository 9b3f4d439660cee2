# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from datetime import datetime

from sqlalchemy import DDL, DateTime, Integer, String, event, func
from sqlalchemy.orm import Mapped, mapped_column

from hero_api.domain.heroes import Hero

from .session import Base


class HeroRow(Base):
    __tablename__ = "heroes"
    # SERIAL semantics on SQLite too: deleted ids are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(100), nullable=False)
    difficulty: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )

    def to_domain(self) -> Hero:
        return Hero(
            id=self.id,
            name=self.name,
            role=self.role,
            difficulty=self.difficulty,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


# PostgreSQL keeps updated_at fresh even for writes that bypass the ORM.
_UPDATED_AT_FUNCTION = DDL(
    """
    CREATE OR REPLACE FUNCTION update_updated_at_column()
    RETURNS TRIGGER AS $$
    BEGIN
        NEW.updated_at = CURRENT_TIMESTAMP;
        RETURN NEW;
    END;
    $$ language 'plpgsql'
    """
)
_UPDATED_AT_TRIGGER = DDL(
    """
    CREATE TRIGGER update_heroes_updated_at
        BEFORE UPDATE ON heroes
        FOR EACH ROW
        EXECUTE FUNCTION update_updated_at_column()
    """
)

event.listen(
    HeroRow.__table__, "after_create", _UPDATED_AT_FUNCTION.execute_if(dialect="postgresql")
)
event.listen(
    HeroRow.__table__, "after_create", _UPDATED_AT_TRIGGER.execute_if(dialect="postgresql")
)
