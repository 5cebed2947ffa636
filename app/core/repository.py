"""Base repository pattern implementation.

This module provides a generic repository that domain-specific
repositories build on.
"""

from typing import Any, Generic, TypeVar, cast

from sqlalchemy.orm import Session

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """Generic repository with lookup, count and delete.

    Example:
        ```python
        class StoreRepository(BaseRepository[Store]):
            def __init__(self, db: Session):
                super().__init__(db, Store)

            def find_by_slug(self, slug: str) -> Store | None:
                return self.db.query(self.model).filter(self.model.slug == slug).first()
        ```
    """

    def __init__(self, db: Session, model: type[ModelType]):
        """Initialize repository with database session and model class.

        Args:
            db: SQLAlchemy session.
            model: The model class this repository operates on.
        """
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: Any) -> ModelType | None:
        """Get a single entity by primary key, or None."""
        result = self.db.get(self.model, entity_id)
        return cast(ModelType | None, result)

    def count(self) -> int:
        result: int = self.db.query(self.model).count()
        return result

    def delete(self, instance: ModelType) -> None:
        self.db.delete(instance)
        self.db.commit()
