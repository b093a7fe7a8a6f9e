"""Tool enrichment: canonical tags and ownership flags."""

from src.enrichment.tool_enricher import InvalidURLError, ToolEnricher, normalize_url

__all__ = ["InvalidURLError", "ToolEnricher", "normalize_url"]
