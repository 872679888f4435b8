"""
SaaSistent Project Wizard.

The wizard state machine, its step table and the configuration it accumulates.
"""

from saasistent.wizard.core import AdvanceResult, InvalidUpdateError, ProjectWizard
from saasistent.wizard.models import ProjectConfig
from saasistent.wizard.options import (
    AIFeature,
    AIProvider,
    ApplicationPattern,
    AuthProvider,
    ComponentLibrary,
    Database,
    DesignStyle,
    Framework,
    Option,
    StorageProvider,
)
from saasistent.wizard.steps import STEPS, WizardStep, get_step

__all__ = [
    "AIFeature",
    "AIProvider",
    "AdvanceResult",
    "ApplicationPattern",
    "AuthProvider",
    "ComponentLibrary",
    "Database",
    "DesignStyle",
    "Framework",
    "InvalidUpdateError",
    "Option",
    "ProjectConfig",
    "ProjectWizard",
    "STEPS",
    "StorageProvider",
    "WizardStep",
    "get_step",
]
