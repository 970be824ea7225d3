"""API routes."""

from app.api.routes import career_paths, roadmaps, skills

__all__ = ["career_paths", "roadmaps", "skills"]
