"""Routes package - Blueprint imports and exports"""
from app.routes.greeting import bp as greeting_bp

__all__ = ['greeting_bp']
