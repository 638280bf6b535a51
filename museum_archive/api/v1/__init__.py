"""
API v1 routes.
"""

from fastapi import APIRouter

from museum_archive.api.v1 import auth, artifacts, competitions, news, events, exhibitions, users, tour

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
router.include_router(artifacts.router, prefix="/artifacts", tags=["Artifacts"])
router.include_router(competitions.router, prefix="/competitions", tags=["Competitions"])
router.include_router(news.router, prefix="/news", tags=["News"])
router.include_router(events.router, prefix="/events", tags=["Events"])
router.include_router(exhibitions.router, prefix="/exhibitions", tags=["Exhibitions"])
router.include_router(users.router, prefix="/users", tags=["Users"])
router.include_router(tour.router, prefix="/tour", tags=["Virtual Tour"])
