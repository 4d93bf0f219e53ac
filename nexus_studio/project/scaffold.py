"""项目脚手架写入器。

根据向导收集的 ProjectSpec 创建目录结构、写入框架模板文件与 nexus.yaml，
并支持在已有项目中生成组件文件。
"""

from dataclasses import asdict, dataclass
from pathlib import Path
import re
from typing import List, Optional

import yaml

from nexus_studio.domain.exceptions import StorageError, ValidationError
from nexus_studio.infrastructure.logging.logger import logger
from nexus_studio.project.templates import (
    COMPONENT_TYPES,
    FRAMEWORK_TEMPLATES,
    PROJECT_TEMPLATES,
    component_extension,
    render,
)

PROJECT_FILE = "nexus.yaml"
COMPONENT_NAME_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
BASE_DIRS = ("src", "dist", "templates")


def validate_component_name(name: str) -> Optional[str]:
    if not name:
        return "Component name is required"
    if not COMPONENT_NAME_RE.fullmatch(name):
        return f"Invalid component name: {name!r} (use letters, digits, '_' or '$', not starting with a digit)"
    return None


@dataclass
class ProjectSpec:
    name: str
    framework: str
    template: str
    use_ai: bool = False
    init_git: bool = False


@dataclass
class ProjectConfig:
    """写入 nexus.yaml 的内容。"""

    name: str
    template: str
    framework: str


@dataclass
class GeneratedComponent:
    path: Path


class ProjectScaffold:
    def __init__(self, root: str | Path, config: ProjectConfig):
        self.root = Path(root)
        self.config = config

    @classmethod
    def for_spec(cls, parent_dir: str | Path, spec: ProjectSpec) -> "ProjectScaffold":
        return cls(Path(parent_dir) / spec.name, ProjectConfig(name=spec.name, template=spec.template, framework=spec.framework))

    @classmethod
    def load(cls, path: str | Path) -> "ProjectScaffold":
        root = Path(path)
        config_path = root / PROJECT_FILE
        if not config_path.exists():
            raise ValidationError(
                code="NOT_A_PROJECT",
                message=f"Not in a Nexus project directory ({config_path} missing). Create a project first.",
            )
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
            config = ProjectConfig(name=data["name"], template=data["template"], framework=data["framework"])
        except (OSError, yaml.YAMLError, KeyError, TypeError) as e:
            raise StorageError(code="PROJECT_CONFIG_INVALID", message=f"Invalid config at {config_path}: {e}")
        return cls(root, config)

    def create(self) -> List[Path]:
        """创建目录与模板文件，返回写入的文件列表。"""

        if self.root.exists() and any(self.root.iterdir()):
            raise ValidationError(code="PROJECT_EXISTS", message=f"Directory already exists and is not empty: {self.root}")
        self.create_structure()
        written = self.generate_files()
        logger.info(
            "project.created",
            extra={"extra": {"root": str(self.root), "framework": self.config.framework, "files": len(written)}},
        )
        return written

    def create_structure(self) -> None:
        extra_dirs = PROJECT_TEMPLATES.get(self.config.template, {}).get("dirs", [])
        try:
            for d in (*BASE_DIRS, *extra_dirs):
                (self.root / d).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(code="SCAFFOLD_WRITE_ERROR", message=str(e))

    def generate_files(self) -> List[Path]:
        written = [self.write_file(PROJECT_FILE, yaml.safe_dump(asdict(self.config), sort_keys=False))]
        written.append(
            self.write_file("README.md", f"# {self.config.name}\n\nGenerated with Nexus Studio AI.\n")
        )
        files = FRAMEWORK_TEMPLATES.get(self.config.framework, FRAMEWORK_TEMPLATES["vanilla"])
        for rel, content in files.items():
            written.append(self.write_file(rel, render(content, self.config.name)))
        return written

    def write_file(self, relative_path: str, contents: str) -> Path:
        path = self.root / relative_path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(contents, encoding="utf-8")
        except OSError as e:
            raise StorageError(code="SCAFFOLD_WRITE_ERROR", message=str(e), path=str(path))
        return path

    def component_path(self, name: str, framework: str) -> str:
        error = validate_component_name(name)
        if error:
            raise ValidationError(code="INVALID_COMPONENT_NAME", message=error)
        return f"src/components/{name}.{component_extension(framework)}"

    def generate_component(self, component_type: str, name: str, framework: str) -> GeneratedComponent:
        if component_type not in COMPONENT_TYPES:
            raise ValidationError(code="INVALID_COMPONENT_TYPE", message=f"Unknown component type: {component_type}")
        contents = (
            f"// Generated {component_type} component\n\n"
            f"export default function {name}() {{\n  return <div>{name}</div>;\n}}\n"
        )
        path = self.write_file(self.component_path(name, framework), contents)
        return GeneratedComponent(path=path)

    def tree(self) -> List[str]:
        """返回项目目录树（相对路径，目录以 / 结尾），用于展示。"""

        lines: List[str] = []
        for p in sorted(self.root.rglob("*")):
            rel = p.relative_to(self.root).as_posix()
            lines.append(rel + "/" if p.is_dir() else rel)
        return lines
