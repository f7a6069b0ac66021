"""Derived artifact generation."""

from actions_bootstrap.generators.config_emitter import ConfigEmitter, GeneratedArtifact, StateDocument

__all__ = ["ConfigEmitter", "GeneratedArtifact", "StateDocument"]
