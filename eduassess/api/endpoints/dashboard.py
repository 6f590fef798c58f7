# eduassess/api/endpoints/dashboard.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from eduassess.core.security import get_current_admin, get_current_user
from eduassess.db.deps import get_db
from eduassess.models.enums import Role
from eduassess.models.user import User
from eduassess.schemas.assessment import AssessmentCreate, AssessmentDetail, AssessmentUpdate
from eduassess.schemas.category import (
    CategoryCreate,
    CategoryInitResponse,
    CategoryPublic,
    CategoryUpdate,
)
from eduassess.schemas.common import MessageResponse
from eduassess.schemas.recommendation import RecommendationResponse
from eduassess.schemas.report import PlatformOverview, PlatformStats
from eduassess.schemas.resource import ResourceCreate, ResourcePublic, ResourceUpdate
from eduassess.schemas.user import UserPublic
from eduassess.services import (
    assessment_service,
    category_service,
    recommendation_service,
    report_service,
    resource_service,
    user_service,
)

router = APIRouter(tags=["dashboard"])


def _get_assessment_or_404(db: Session, assessment_id: int):
    assessment = assessment_service.get_assessment(db, assessment_id)
    if not assessment:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assessment not found")
    return assessment


# --------- Any authenticated user ---------

@router.get("/recommendations", response_model=RecommendationResponse)
def get_recommendations(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    message, recommendations = recommendation_service.get_recommendations(
        db, student=current_user
    )
    return RecommendationResponse(message=message, recommendations=recommendations)


# --------- Reporting (admin) ---------

@router.get("/stats", response_model=PlatformStats)
def platform_stats(
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    return report_service.platform_stats(db)


@router.get("/overview", response_model=PlatformOverview)
def platform_overview(
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    return report_service.platform_overview(db)


# --------- Students (admin) ---------

@router.get("/students", response_model=List[UserPublic])
def list_students(
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
    skip: int = 0,
    limit: int = 100,
):
    return user_service.list_students(db, skip=skip, limit=limit)


@router.delete("/students/{student_id}", response_model=MessageResponse)
def delete_student(
    student_id: int,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    student = db.get(User, student_id)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    if student.role != Role.STUDENT.value:
        raise HTTPException(status_code=400, detail="Can only delete student accounts")

    user_service.delete_user(db, db_obj=student)
    return MessageResponse(message="Student deleted successfully")


# --------- Assessments (admin) ---------

@router.post("/assessments", response_model=AssessmentDetail, status_code=status.HTTP_201_CREATED)
def create_assessment(
    obj_in: AssessmentCreate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    return assessment_service.create_assessment(db, admin=current_admin, obj_in=obj_in)


@router.get("/assessments", response_model=List[AssessmentDetail])
def list_assessments(
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
    skip: int = 0,
    limit: int = 100,
):
    return assessment_service.list_assessments(db, skip=skip, limit=limit)


@router.get("/assessments/{assessment_id}", response_model=AssessmentDetail)
def get_assessment(
    assessment_id: int,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    return _get_assessment_or_404(db, assessment_id)


@router.put("/assessments/{assessment_id}", response_model=AssessmentDetail)
def update_assessment(
    assessment_id: int,
    obj_in: AssessmentUpdate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    assessment = _get_assessment_or_404(db, assessment_id)
    return assessment_service.update_assessment(db, db_obj=assessment, obj_in=obj_in)


@router.delete("/assessments/{assessment_id}", response_model=MessageResponse)
def delete_assessment(
    assessment_id: int,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    assessment = _get_assessment_or_404(db, assessment_id)
    assessment_service.delete_assessment(db, db_obj=assessment)
    return MessageResponse(message="Assessment deleted successfully")


# --------- Resources (admin) ---------

@router.post(
    "/assessments/{assessment_id}/resources",
    response_model=ResourcePublic,
    status_code=status.HTTP_201_CREATED,
)
def add_resource(
    assessment_id: int,
    obj_in: ResourceCreate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    assessment = _get_assessment_or_404(db, assessment_id)
    return resource_service.create_resource(
        db, admin=current_admin, assessment=assessment, obj_in=obj_in
    )


@router.get("/assessments/{assessment_id}/resources", response_model=List[ResourcePublic])
def list_assessment_resources(
    assessment_id: int,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    _get_assessment_or_404(db, assessment_id)
    return resource_service.list_resources_for_assessment(db, assessment_id=assessment_id)


@router.get("/resources", response_model=List[ResourcePublic])
def list_recent_resources(
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    return resource_service.list_recent_resources(db)


@router.put("/resources/{resource_id}", response_model=ResourcePublic)
def update_resource(
    resource_id: int,
    obj_in: ResourceUpdate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    resource = resource_service.get_resource(db, resource_id)
    if not resource:
        raise HTTPException(status_code=404, detail="Resource not found")
    return resource_service.update_resource(db, db_obj=resource, obj_in=obj_in)


@router.delete("/resources/{resource_id}", response_model=MessageResponse)
def delete_resource(
    resource_id: int,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    resource = resource_service.get_resource(db, resource_id)
    if not resource:
        raise HTTPException(status_code=404, detail="Resource not found")
    resource_service.delete_resource(db, db_obj=resource)
    return MessageResponse(message="Resource deleted successfully")


# --------- Categories (admin) ---------

@router.get("/categories", response_model=List[CategoryPublic])
def list_categories(
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    return category_service.list_categories(db)


@router.post("/categories", response_model=CategoryPublic, status_code=status.HTTP_201_CREATED)
def create_category(
    obj_in: CategoryCreate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    return category_service.create_category(db, obj_in=obj_in)


@router.post("/categories/init", response_model=CategoryInitResponse)
def initialize_categories(
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    created, count = category_service.initialize_categories(db)
    message = "Categories initialized successfully" if created else "Categories already exist"
    return CategoryInitResponse(message=message, count=count)


@router.get("/categories/beginner-courses", response_model=List[CategoryPublic])
def list_beginner_courses(
    fields: str = Query(..., description="Comma-separated engineering fields"),
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    return category_service.list_beginner_courses(db, fields=fields.split(","))


@router.put("/categories/{category_id}", response_model=CategoryPublic)
def update_category(
    category_id: int,
    obj_in: CategoryUpdate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    category = category_service.get_category(db, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category_service.update_category(db, db_obj=category, obj_in=obj_in)


@router.delete("/categories/{category_id}", response_model=MessageResponse)
def delete_category(
    category_id: int,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    category = category_service.get_category(db, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    category_service.delete_category(db, db_obj=category)
    return MessageResponse(message="Category deleted successfully")
