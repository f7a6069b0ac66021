"""Onboarding engine.

Key Components:
    - OnboardingOrchestrator: Runs the phases in order
    - DependencyPreflight / AuthenticationCheck: Fatal gates
    - RunContext / RunSummary: State passed between phases and the result
"""

from actions_bootstrap.engine.context import RunContext, RunSummary
from actions_bootstrap.engine.orchestrator import OnboardingOrchestrator
from actions_bootstrap.engine.preflight import AuthenticationCheck, DependencyPreflight, ToolDependency

__all__ = [
    "AuthenticationCheck",
    "DependencyPreflight",
    "OnboardingOrchestrator",
    "RunContext",
    "RunSummary",
    "ToolDependency",
]
