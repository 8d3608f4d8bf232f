"""Template customiser -- rewrites a cloned project template.

Quick usage::

    from template_setup.customizer import TemplateCustomizer
    from template_setup.config import ProjectConfig, SetupConfig, TechStack

    project = ProjectConfig(name="widget-ai", tech_stack=TechStack.PYTHON)
    result = await TemplateCustomizer(project, SetupConfig(project_dir=path)).apply()
"""

from template_setup.customizer.customizer import SetupResult, TemplateCustomizer
from template_setup.customizer.manifest import (
    JqManifestWriter,
    ManifestWriter,
    TextManifestWriter,
    select_manifest_writer,
)
from template_setup.customizer.templates import TemplateRenderer

__all__ = [
    "JqManifestWriter",
    "ManifestWriter",
    "SetupResult",
    "TemplateCustomizer",
    "TemplateRenderer",
    "TextManifestWriter",
    "select_manifest_writer",
]
