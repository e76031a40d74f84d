"""Localization service orchestration."""

from .service import GenerationReport, LocalizeService

__all__ = ["GenerationReport", "LocalizeService"]
