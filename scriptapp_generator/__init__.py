"""
DX Script App Generator

Scaffolds new script applications for deployment to HCL DX from the
bundled React/Vite templates.
"""

__version__ = "0.1.0"

from scriptapp_generator.core.application import ScaffoldResult, ScriptAppCreator
from scriptapp_generator.core.placeholders import update_placeholders

__all__ = [
    "ScaffoldResult",
    "ScriptAppCreator",
    "update_placeholders",
]
