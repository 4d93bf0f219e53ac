"""项目脚手架：模板集合与文件写入。"""

from nexus_studio.project.builder import BuildResult, ProjectBuilder
from nexus_studio.project.scaffold import (
    GeneratedComponent,
    ProjectConfig,
    ProjectScaffold,
    ProjectSpec,
    validate_component_name,
)

__all__ = [
    "BuildResult",
    "GeneratedComponent",
    "ProjectBuilder",
    "ProjectConfig",
    "ProjectScaffold",
    "ProjectSpec",
    "validate_component_name",
]
