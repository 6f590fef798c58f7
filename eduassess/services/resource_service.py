# eduassess/services/resource_service.py
from typing import List, Optional

from sqlalchemy.orm import Session

from eduassess.models.assessment import Assessment
from eduassess.models.resource import Resource
from eduassess.models.user import User
from eduassess.schemas.resource import ResourceCreate, ResourceUpdate

RECENT_RESOURCES_LIMIT = 9


def create_resource(
    db: Session,
    *,
    admin: User,
    assessment: Assessment,
    obj_in: ResourceCreate,
) -> Resource:
    data = obj_in.model_dump()
    data["type"] = obj_in.type.value
    db_obj = Resource(**data, assessment_id=assessment.id, created_by=admin.id)
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    return db_obj


def get_resource(db: Session, resource_id: int) -> Optional[Resource]:
    return db.get(Resource, resource_id)


def list_resources_for_assessment(db: Session, *, assessment_id: int) -> List[Resource]:
    return (
        db.query(Resource)
        .filter(Resource.assessment_id == assessment_id)
        .order_by(Resource.created_at.desc(), Resource.id.desc())
        .all()
    )


def list_recent_resources(db: Session, *, limit: int = RECENT_RESOURCES_LIMIT) -> List[Resource]:
    return (
        db.query(Resource)
        .order_by(Resource.created_at.desc(), Resource.id.desc())
        .limit(limit)
        .all()
    )


def update_resource(
    db: Session,
    *,
    db_obj: Resource,
    obj_in: ResourceUpdate,
) -> Resource:
    update_data = obj_in.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        if value is None:
            continue
        setattr(db_obj, field, getattr(value, "value", value))
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    return db_obj


def delete_resource(db: Session, *, db_obj: Resource) -> None:
    db.delete(db_obj)
    db.commit()
