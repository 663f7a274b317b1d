"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from implied_growth.config import settings
from implied_growth.domain.models import ModelVariant


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_model_variant() -> ModelVariant:
    """Model variant configured for this deployment"""
    return settings.model_variant


def get_horizon_years() -> int:
    """Projection horizon configured for this deployment"""
    return settings.projection_years
