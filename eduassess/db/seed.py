# eduassess/db/seed.py
import logging

from sqlalchemy.orm import Session

from eduassess.models.category import Category

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    {
        "name": "Computer Science Fundamentals",
        "description": "Core computer science concepts and principles",
        "engineering_field": "Computer Science",
        "level": "beginner",
        "topics": ["Algorithms", "Data Structures", "Programming Basics"],
        "recommended_duration": 4,
        "video_resources": [
            {
                "title": "Introduction to Programming",
                "url": "https://www.youtube.com/watch?v=zOjov-2OZ0E",
                "description": "Learn programming basics",
            },
            {
                "title": "Data Structures Explained",
                "url": "https://www.youtube.com/watch?v=RBSGKlAvoiM",
                "description": "Understanding data structures",
            },
        ],
    },
    {
        "name": "Advanced Programming Concepts",
        "description": "Advanced programming and software design",
        "engineering_field": "Computer Science",
        "level": "intermediate",
        "topics": ["Object-Oriented Programming", "Design Patterns", "Software Architecture"],
        "recommended_duration": 6,
        "video_resources": [
            {
                "title": "Advanced Programming Concepts",
                "url": "https://www.youtube.com/watch?v=Mus_vwhTCq0",
                "description": "Learn advanced programming",
            },
        ],
    },
]


def seed_categories(db: Session) -> int:
    """Insert the default categories if the table is empty. Returns the number inserted."""
    existing = db.query(Category).count()
    if existing > 0:
        logger.debug(f"Categories already present ({existing}), skipping seed")
        return 0

    db.add_all(Category(**data) for data in DEFAULT_CATEGORIES)
    db.commit()
    logger.info(f"Seeded {len(DEFAULT_CATEGORIES)} default categories")
    return len(DEFAULT_CATEGORIES)
