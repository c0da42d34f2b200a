from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roster_lite.infra.db.models.base import Base
from roster_lite.infra.db.models.team import TeamRow


class MemberRow(Base):
    __tablename__ = "members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    age: Mapped[int] = mapped_column(Integer, nullable=False)

    # Many members to one team; a member may have no team
    team_id: Mapped[int | None] = mapped_column(
        ForeignKey("teams.id"), nullable=True, index=True
    )
    team: Mapped[TeamRow | None] = relationship(lazy="raise")
