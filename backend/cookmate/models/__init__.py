"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the ownership root; every other row is reachable from exactly one User

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from cookmate.models.user import User  # noqa: F401
from cookmate.models.profile import Profile  # noqa: F401
from cookmate.models.worker_profile import WorkerProfile  # noqa: F401
from cookmate.models.service_post import ServicePost  # noqa: F401
from cookmate.models.requirement import Requirement  # noqa: F401
