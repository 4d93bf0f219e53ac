"""项目构建。

把项目构建到输出目录（默认 dist/），写入入口页面并统计输出大小、
文件数与耗时。部署流程在 dist/ 为空时会先调用这里。
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from nexus_studio.domain.exceptions import StorageError
from nexus_studio.infrastructure.logging.logger import logger
from nexus_studio.project.scaffold import ProjectScaffold

DEFAULT_BUILD_MODE = "production"
DEFAULT_BUILD_TARGET = "web"
BUILD_ENTRY = "index.html"

BUILD_PAGE_TEMPLATE = (
    "<html><body><h1>{name}</h1><p>Mode: {mode}</p><p>Target: {target}</p></body></html>\n"
)


@dataclass
class BuildResult:
    output_dir: Path
    size_mb: float
    file_count: int
    build_time: float
    warnings: List[str] = field(default_factory=list)


class ProjectBuilder:
    def __init__(self, scaffold: ProjectScaffold):
        self.scaffold = scaffold

    def build(
        self,
        mode: str = DEFAULT_BUILD_MODE,
        target: str = DEFAULT_BUILD_TARGET,
        out_dir: Optional[Path] = None,
    ) -> BuildResult:
        start_time = time.time()
        output_dir = Path(out_dir) if out_dir is not None else self.scaffold.root / "dist"
        page = BUILD_PAGE_TEMPLATE.format(name=self.scaffold.config.name, mode=mode, target=target)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            (output_dir / BUILD_ENTRY).write_text(page, encoding="utf-8")
            files = [p for p in output_dir.rglob("*") if p.is_file()]
            size = sum(p.stat().st_size for p in files)
        except OSError as e:
            raise StorageError(code="BUILD_WRITE_ERROR", message=str(e), path=str(output_dir))

        warnings: List[str] = []
        if not (self.scaffold.root / "src").is_dir():
            warnings.append("src/ not found; only the entry page was built")
        result = BuildResult(
            output_dir=output_dir,
            size_mb=size / (1024 * 1024),
            file_count=len(files),
            build_time=time.time() - start_time,
            warnings=warnings,
        )
        logger.info(
            "project.built",
            extra={
                "extra": {
                    "root": str(self.scaffold.root),
                    "mode": mode,
                    "target": target,
                    "files": result.file_count,
                }
            },
        )
        return result
