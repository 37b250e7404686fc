"""
FastAPI Routers Package

All routers are included in api/index.py.
"""

from core.routers.widget import router as widget_router
from core.routers.chatbot import router as chatbot_router

__all__ = [
    "widget_router",
    "chatbot_router",
]
