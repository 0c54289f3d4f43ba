"""Persistence Boundary — capability-scoped store handles over the relational schema.

Invariants:
    - PublicStore (anonymous) can only read the public views, filtered to
      active service posts / open requirements
    - DelegatedStore is bound to one Identity; every owner-scoped read and every
      UPDATE/DELETE carries an explicit ownership predicate keyed by users.auth_id
    - ElevatedStore bypasses ownership: used ONLY by admin verification and by
      self-verification after the eligibility check passed
    - Each mutating method commits on its own; no multi-statement transactions
    - Uniqueness violations surface as ConflictError, never as raw IntegrityError

Design Decisions:
    - Row-level security reimplemented in the application layer: the hosted store's
      per-row policies become ownership subqueries (owned user ids / owned worker ids)
    - Profile and WorkerProfile upserts are single INSERT ... ON CONFLICT (user_id)
      DO UPDATE statements: two concurrent first-time saves cannot both insert
    - Views are SELECT builders returning plain dicts: users_view,
      service_posts_view and requirements_view are read-only by construction
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import Select, select, delete
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cookmate.core.domain_types import Identity, Role
from cookmate.core.errors import (
    ConflictError,
    DatabaseError,
    NotFoundOrNotOwnedError,
    PhoneInUseError,
    ProfileConflictError,
)
from cookmate.models import User, Profile, WorkerProfile, ServicePost, Requirement

logger = logging.getLogger(__name__)


# ─── Row helpers ─────────────────────────────────────────────────

def row_to_dict(obj) -> dict:
    """Serialize an ORM row to {column_name: value}."""
    return {
        attr.key: getattr(obj, attr.key)
        for attr in obj.__mapper__.column_attrs
    }


def _is_unique_violation(e: IntegrityError) -> bool:
    msg = str(e.orig).lower()
    return "unique" in msg or "duplicate key" in msg


def _profile_conflict(e: IntegrityError) -> ConflictError:
    """Phone conflicts are reported distinctly from any other duplicate."""
    if "phone" in str(e.orig).lower():
        return PhoneInUseError()
    return ProfileConflictError()


# ─── Views ───────────────────────────────────────────────────────

def users_view() -> Select:
    """User joined with its optional Profile and WorkerProfile."""
    return (
        select(
            User.id, User.auth_id, User.role, User.created_at, User.updated_at,
            Profile.name, Profile.phone, Profile.block, Profile.flat_no,
            Profile.age, Profile.verified,
            WorkerProfile.worker_type, WorkerProfile.cuisine,
            WorkerProfile.experience_yrs, WorkerProfile.charges,
            WorkerProfile.long_term_offer, WorkerProfile.rating,
            WorkerProfile.rating_count, WorkerProfile.time_slots,
        )
        .select_from(User)
        .outerjoin(Profile, Profile.user_id == User.id)
        .outerjoin(WorkerProfile, WorkerProfile.user_id == User.id)
    )


def service_posts_view() -> Select:
    """ServicePost enriched with worker stats and the poster's contact."""
    return (
        select(
            ServicePost.id, ServicePost.worker_id, ServicePost.title,
            ServicePost.cuisine, ServicePost.price, ServicePost.service_area,
            ServicePost.available_timing, ServicePost.description,
            ServicePost.time_slots, ServicePost.is_active,
            ServicePost.created_at, ServicePost.updated_at,
            WorkerProfile.user_id, WorkerProfile.rating,
            WorkerProfile.rating_count, WorkerProfile.experience_yrs,
            User.role, User.auth_id, Profile.name, Profile.phone,
        )
        .select_from(ServicePost)
        .join(WorkerProfile, WorkerProfile.id == ServicePost.worker_id)
        .join(User, User.id == WorkerProfile.user_id)
        .outerjoin(Profile, Profile.user_id == User.id)
    )


def requirements_view() -> Select:
    """Requirement enriched with the owner's role, contact and home address."""
    return (
        select(
            Requirement.id, Requirement.owner_id, Requirement.need_type,
            Requirement.details, Requirement.preferred_timing,
            Requirement.preferred_price, Requirement.block,
            Requirement.flat_no, Requirement.urgency, Requirement.is_open,
            Requirement.created_at, Requirement.updated_at,
            User.role, Profile.name, Profile.phone,
            Profile.block.label("profile_block"),
            Profile.flat_no.label("profile_flat_no"),
        )
        .select_from(Requirement)
        .join(User, User.id == Requirement.owner_id)
        .outerjoin(Profile, Profile.user_id == User.id)
    )


# ─── Handles ─────────────────────────────────────────────────────

class PublicStore:
    """Anonymous handle — read-only access to publicly visible rows."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def active_service_posts(self) -> list[dict]:
        stmt = (
            service_posts_view()
            .where(ServicePost.is_active.is_(True))
            .order_by(ServicePost.created_at.desc())
        )
        return await self._fetch_all(stmt)

    async def open_requirements(self) -> list[dict]:
        stmt = (
            requirements_view()
            .where(Requirement.is_open.is_(True))
            .order_by(Requirement.created_at.desc())
        )
        return await self._fetch_all(stmt)

    async def _fetch_all(self, stmt: Select) -> list[dict]:
        result = await self._db.execute(stmt)
        return [dict(row) for row in result.mappings().all()]

    async def _fetch_one(self, stmt: Select) -> dict | None:
        result = await self._db.execute(stmt)
        row = result.mappings().first()
        return dict(row) if row else None

    async def _commit(self, operation: str) -> None:
        try:
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            logger.error(f"DB integrity error during {operation}: {e.orig}")
            raise DatabaseError("Integrity constraint violated", operation)

    def _insert(self):
        """Dialect-specific INSERT supporting ON CONFLICT."""
        dialect = self._db.get_bind().dialect.name
        if dialect == "postgresql":
            return postgresql.insert
        if dialect == "sqlite":
            return sqlite.insert
        raise DatabaseError(f"upsert unsupported on {dialect}", "upsert")


class DelegatedStore(PublicStore):
    """Handle acting with the caller's privileges: sees and changes only owned rows."""

    def __init__(self, db: AsyncSession, identity: Identity):
        super().__init__(db)
        self.identity = identity

    @property
    def auth_id(self) -> UUID:
        return self.identity.subject_id

    # ownership predicates

    def _owned_user_ids(self) -> Select:
        return select(User.id).where(User.auth_id == self.auth_id)

    def _owned_worker_ids(self) -> Select:
        return select(WorkerProfile.id).where(
            WorkerProfile.user_id.in_(self._owned_user_ids()),
        )

    def _guard_user(self, user: User) -> None:
        if user.auth_id != self.auth_id:
            raise NotFoundOrNotOwnedError("User not found")

    # users

    async def current_user(self) -> User | None:
        result = await self._db.execute(
            select(User).where(User.auth_id == self.auth_id),
        )
        return result.scalar_one_or_none()

    async def create_user(self, role: Role) -> User:
        user = User(auth_id=self.auth_id, role=role.value)
        self._db.add(user)
        try:
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            if _is_unique_violation(e):
                raise ConflictError("User already exists", "USER_EXISTS")
            raise DatabaseError("Integrity constraint violated", "insert user")
        return user

    async def set_role(self, user: User, role: Role) -> User:
        self._guard_user(user)
        user.role = role.value
        await self._commit("update role")
        return user

    async def user_view(self) -> dict | None:
        return await self._fetch_one(
            users_view().where(User.auth_id == self.auth_id),
        )

    # profiles

    async def upsert_profile(self, user: User, values: dict) -> Profile:
        """Insert-or-update keyed by user_id; phone conflicts become PhoneInUseError."""
        self._guard_user(user)
        try:
            return await self._upsert_by_user(Profile, user.id, values)
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise _profile_conflict(e)
            raise DatabaseError("Integrity constraint violated", "upsert profile")

    async def upsert_worker_profile(self, user: User, values: dict) -> WorkerProfile:
        self._guard_user(user)
        try:
            return await self._upsert_by_user(WorkerProfile, user.id, values)
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise ConflictError("Worker profile already exists", "PROFILE_EXISTS")
            raise DatabaseError("Integrity constraint violated", "upsert worker profile")

    async def worker_profile(self, user: User) -> WorkerProfile | None:
        self._guard_user(user)
        result = await self._db.execute(
            select(WorkerProfile).where(
                WorkerProfile.user_id == user.id,
                WorkerProfile.user_id.in_(self._owned_user_ids()),
            ),
        )
        return result.scalar_one_or_none()

    async def _upsert_by_user(self, model, user_id: UUID, values: dict):
        insert = self._insert()
        stmt = insert(model).values(user_id=user_id, **values)
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id"],
            set_={**values, "updated_at": datetime.now(timezone.utc)},
        ).returning(model)
        try:
            result = await self._db.scalars(
                stmt, execution_options={"populate_existing": True},
            )
            row = result.one()
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            logger.warning(f"Upsert on {model.__tablename__} rejected: {e.orig}")
            raise
        return row

    # service posts

    async def insert_service_post(self, worker_id: UUID, values: dict) -> ServicePost:
        owned = await self._db.execute(
            select(WorkerProfile.id).where(
                WorkerProfile.id == worker_id,
                WorkerProfile.id.in_(self._owned_worker_ids()),
            ),
        )
        if owned.scalar_one_or_none() is None:
            raise NotFoundOrNotOwnedError("Worker profile not found")
        post = ServicePost(worker_id=worker_id, **values)
        self._db.add(post)
        await self._commit("insert service post")
        return post

    async def my_service_posts(self) -> list[dict]:
        stmt = (
            service_posts_view()
            .where(User.auth_id == self.auth_id)
            .order_by(ServicePost.created_at.desc())
        )
        return await self._fetch_all(stmt)

    async def owned_service_post(self, post_id: UUID) -> ServicePost | None:
        """Lookup by id AND ownership — a bare id is never sufficient."""
        result = await self._db.execute(
            select(ServicePost).where(
                ServicePost.id == post_id,
                ServicePost.worker_id.in_(self._owned_worker_ids()),
            ),
        )
        return result.scalar_one_or_none()

    async def toggle_service_post(self, post: ServicePost) -> ServicePost:
        post.is_active = not post.is_active
        await self._commit("toggle service post")
        return post

    async def delete_service_post(self, post_id: UUID) -> bool:
        result = await self._db.execute(
            delete(ServicePost)
            .where(
                ServicePost.id == post_id,
                ServicePost.worker_id.in_(self._owned_worker_ids()),
            )
            .execution_options(synchronize_session=False),
        )
        await self._commit("delete service post")
        return result.rowcount > 0

    # requirements

    async def insert_requirement(self, user: User, values: dict) -> Requirement:
        self._guard_user(user)
        requirement = Requirement(owner_id=user.id, **values)
        self._db.add(requirement)
        await self._commit("insert requirement")
        return requirement

    async def owned_requirement(
        self, requirement_id: UUID, owner_id: UUID,
    ) -> Requirement | None:
        result = await self._db.execute(
            select(Requirement).where(
                Requirement.id == requirement_id,
                Requirement.owner_id == owner_id,
                Requirement.owner_id.in_(self._owned_user_ids()),
            ),
        )
        return result.scalar_one_or_none()

    async def delete_requirement(self, requirement_id: UUID) -> bool:
        result = await self._db.execute(
            delete(Requirement)
            .where(
                Requirement.id == requirement_id,
                Requirement.owner_id.in_(self._owned_user_ids()),
            )
            .execution_options(synchronize_session=False),
        )
        await self._commit("delete requirement")
        return result.rowcount > 0


class ElevatedStore(PublicStore):
    """Privileged handle — no ownership predicates. Keep call sites to a minimum."""

    async def user_id_for_auth_id(self, auth_id: UUID) -> UUID | None:
        result = await self._db.execute(
            select(User.id).where(User.auth_id == auth_id),
        )
        return result.scalar_one_or_none()

    async def set_profile_verified(
        self, user_id: UUID, verified: bool,
    ) -> Profile | None:
        result = await self._db.execute(
            select(Profile).where(Profile.user_id == user_id),
        )
        profile = result.scalar_one_or_none()
        if profile is None:
            return None
        profile.verified = verified
        await self._commit("verify profile")
        return profile
