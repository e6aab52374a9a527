from fastapi import APIRouter
from .batches import router as batches_router
from .projections import router as proj_router

api_router = APIRouter()
api_router.include_router(batches_router)
api_router.include_router(proj_router)
