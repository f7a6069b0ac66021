"""Template rendering for generated documentation."""

from actions_bootstrap.rendering.engine import SecureTemplateEngine

__all__ = ["SecureTemplateEngine"]
