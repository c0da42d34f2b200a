from roster_lite.infra.db.models.base import Base
from roster_lite.infra.db.models.member import MemberRow
from roster_lite.infra.db.models.team import TeamRow

__all__ = ["Base", "MemberRow", "TeamRow"]
