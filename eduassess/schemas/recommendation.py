# eduassess/schemas/recommendation.py
from eduassess.schemas.category import VideoResource
from eduassess.schemas.common import CamelModel


class Recommendation(CamelModel):
    id: int
    title: str
    description: str | None = None
    engineering_field: str
    level: str
    topics: list[str] = []
    duration: int | None = None
    video_resources: list[VideoResource] = []
    reason: str


class RecommendationResponse(CamelModel):
    success: bool = True
    message: str
    recommendations: list[Recommendation]
