# eduassess/services/category_service.py
from typing import List, Optional

from sqlalchemy import case, or_
from sqlalchemy.orm import Session

from eduassess.db.seed import seed_categories
from eduassess.models.category import Category
from eduassess.models.enums import LEVEL_ORDER, Level
from eduassess.schemas.category import CategoryCreate, CategoryUpdate

_REQUIRED_FIELDS = {"name", "engineering_field", "level", "topics", "video_resources"}

_level_rank = case(
    {level: rank for rank, level in enumerate(LEVEL_ORDER)},
    value=Category.level,
    else_=len(LEVEL_ORDER),
)


def list_categories(db: Session) -> List[Category]:
    """All categories, beginner first."""
    return db.query(Category).order_by(_level_rank, Category.name, Category.id).all()


def get_category(db: Session, category_id: int) -> Optional[Category]:
    return db.get(Category, category_id)


def create_category(db: Session, *, obj_in: CategoryCreate) -> Category:
    data = obj_in.model_dump()
    data["level"] = obj_in.level.value
    db_obj = Category(**data)
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    return db_obj


def update_category(
    db: Session,
    *,
    db_obj: Category,
    obj_in: CategoryUpdate,
) -> Category:
    update_data = obj_in.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        if value is None and field in _REQUIRED_FIELDS:
            continue
        if isinstance(value, Level):
            value = value.value
        setattr(db_obj, field, value)
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    return db_obj


def delete_category(db: Session, *, db_obj: Category) -> None:
    db.delete(db_obj)
    db.commit()


def initialize_categories(db: Session) -> tuple[bool, int]:
    """Seed defaults on demand. Returns (created, category_count)."""
    inserted = seed_categories(db)
    return inserted > 0, db.query(Category).count()


def list_beginner_courses(db: Session, *, fields: List[str]) -> List[Category]:
    fields = [f.strip() for f in fields if f.strip()]
    if not fields:
        return []
    return (
        db.query(Category)
        .filter(
            Category.level == Level.BEGINNER.value,
            or_(*[Category.name.ilike(f"%{field}%") for field in fields]),
        )
        .order_by(Category.name, Category.id)
        .all()
    )
