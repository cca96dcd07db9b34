"""Repository pattern helpers for database operations.

`BaseRepository` wraps the common CRUD calls; `EntryRepository` adds the
owner and date-range filtering shared by meals and workouts.
"""

from datetime import date, datetime, time
from typing import TypeVar, Generic, Type, Optional, List, Any

from sqlalchemy.orm import Session

from core.exceptions import ValidationError
from database.models import Base, User

T = TypeVar('T', bound=Base)


class BaseRepository(Generic[T]):
    """Generic repository for common database operations.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    def __init__(self, model: Type[T], session: Session):
        self.model = model
        self.session = session

    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an object by its primary key, or None."""
        return self.session.get(self.model, id)

    def update(self, obj: T, changes: dict) -> T:
        """Apply attribute changes to an existing object, commit and refresh.

        Args:
            obj: Model instance to modify.
            changes: Mapping of attribute name to new value.

        Returns:
            The updated object with refreshed attributes.
        """
        for key, value in changes.items():
            setattr(obj, key, value)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def delete(self, obj: T) -> None:
        """Delete an object and commit."""
        self.session.delete(obj)
        self.session.commit()

    def count(self, **filters) -> int:
        """Count records, optionally filtered by column equality."""
        return self.session.query(self.model).filter_by(**filters).count()


class UserRepository(BaseRepository[User]):
    """User lookups beyond primary key."""

    def __init__(self, session: Session):
        super().__init__(User, session)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.query(User).filter(User.email == email.strip().lower()).first()

    def newest_first(self) -> List[User]:
        return self.session.query(User).order_by(User.created_at.desc(), User.id.desc()).all()


def day_bounds(start: Optional[date], end: Optional[date]):
    """Turn inclusive calendar-date bounds into datetime bounds.

    Raises:
        ValidationError: If the range ends before it starts.
    """
    if start and end and start > end:
        raise ValidationError("startDate must not be after endDate", field="startDate")
    start_dt = datetime.combine(start, time.min) if start else None
    end_dt = datetime.combine(end, time.max) if end else None
    return start_dt, end_dt


class EntryRepository(BaseRepository[T]):
    """Queries over per-user log entries (meals and workouts)."""

    def _filtered(self, owner_id: Optional[int], start: Optional[date], end: Optional[date], **filters):
        query = self.session.query(self.model)
        if owner_id is not None:
            query = query.filter(self.model.user_id == owner_id)
        start_dt, end_dt = day_bounds(start, end)
        if start_dt is not None:
            query = query.filter(self.model.date >= start_dt)
        if end_dt is not None:
            query = query.filter(self.model.date <= end_dt)
        for column, value in filters.items():
            if value is not None:
                query = query.filter(getattr(self.model, column) == value)
        return query

    def list_for_owner(
        self,
        owner_id: Optional[int],
        start: Optional[date] = None,
        end: Optional[date] = None,
        **filters,
    ) -> List[T]:
        """Entries for one owner (or everyone when owner_id is None), newest first.

        Date bounds are inclusive whole days. Keyword filters with a None value
        are ignored.
        """
        query = self._filtered(owner_id, start, end, **filters)
        return query.order_by(self.model.date.desc(), self.model.id.desc()).all()


def save(session: Session, obj: Base) -> Base:
    """Convenience function to add, commit and refresh an object."""
    session.add(obj)
    session.commit()
    session.refresh(obj)
    return obj
