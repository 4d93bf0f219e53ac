"""Deployment targets.

Each target lists the cosmetic steps shown by the progress bar and performs
whatever real work it can (invoking a CLI, writing a Dockerfile, copying the
build output). Missing tools and failed processes become warnings on the
report instead of aborting the session.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Protocol

from nexus_studio.domain.exceptions import StorageError, ToolError, ValidationError
from nexus_studio.infrastructure.logging.logger import logger
from nexus_studio.tools.process import ProcessRunner


DOCKERFILE_TEMPLATE = """FROM node:18-alpine AS builder
WORKDIR /app
COPY package*.json ./
RUN npm ci
COPY . .
RUN npm run build

FROM nginx:alpine
COPY --from=builder /app/dist /usr/share/nginx/html
EXPOSE 80
CMD ["nginx", "-g", "daemon off;"]
"""


@dataclass
class DeployOptions:
    target: str
    project_root: Path
    env: str = "production"
    preview: bool = False


@dataclass
class DeployReport:
    target: str
    steps: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    artifacts: List[str] = field(default_factory=list)
    success: bool = True

    def warn(self, message: str) -> None:
        self.warnings.append(message)
        logger.warning("deploy.warning", extra={"extra": {"target": self.target, "warning": message}})


class DeployTarget(Protocol):
    name: str
    description: str

    def steps(self, options: DeployOptions) -> List[str]:
        ...

    def run(self, options: DeployOptions, runner: ProcessRunner) -> DeployReport:
        ...


class VercelTarget:
    name = "vercel"
    description = "Vercel (requires the vercel CLI)"

    def steps(self, options: DeployOptions) -> List[str]:
        return ["Checking Vercel CLI", "Uploading build", "Assigning domain"]

    def run(self, options: DeployOptions, runner: ProcessRunner) -> DeployReport:
        report = DeployReport(target=self.name, steps=self.steps(options))
        if not runner.exists("vercel"):
            report.warn("Vercel CLI not found. Install with: npm i -g vercel")
            report.success = False
            return report
        args = ["vercel", "--target=preview" if options.preview else "--prod"]
        result = runner.run(args, cwd=options.project_root, env={"VERCEL_ENV": options.env})
        if result.stdout.strip():
            report.artifacts.append(result.stdout.strip().splitlines()[-1])
        return report


class NetlifyTarget:
    name = "netlify"
    description = "Netlify (requires the netlify CLI)"

    def steps(self, options: DeployOptions) -> List[str]:
        return ["Checking Netlify CLI", "Uploading dist/", "Publishing site"]

    def run(self, options: DeployOptions, runner: ProcessRunner) -> DeployReport:
        report = DeployReport(target=self.name, steps=self.steps(options))
        if not runner.exists("netlify"):
            report.warn("Netlify CLI not found. Install with: npm i -g netlify-cli")
            report.success = False
            return report
        args = ["netlify", "deploy", "--dir", "dist"]
        if not options.preview:
            args.append("--prod")
        runner.run(args, cwd=options.project_root)
        return report


class DockerTarget:
    name = "docker"
    description = "Docker image served by nginx"

    def steps(self, options: DeployOptions) -> List[str]:
        return ["Writing Dockerfile", "Building Docker image", "Tagging image"]

    def run(self, options: DeployOptions, runner: ProcessRunner) -> DeployReport:
        report = DeployReport(target=self.name, steps=self.steps(options))
        dockerfile = options.project_root / "Dockerfile"
        if not dockerfile.exists():
            try:
                dockerfile.write_text(DOCKERFILE_TEMPLATE, encoding="utf-8")
            except OSError as e:
                raise StorageError(code="DOCKERFILE_WRITE_ERROR", message=str(e))
            report.artifacts.append(str(dockerfile))
        image_name = f"nexus-app:{options.env}"
        if not runner.exists("docker"):
            report.warn("Docker not found; Dockerfile written but image not built")
            report.success = False
            return report
        runner.run(["docker", "build", "-t", image_name, "."], cwd=options.project_root)
        report.artifacts.append(image_name)
        if not options.preview:
            report.artifacts.append(f"docker run -p 8080:80 {image_name}")
        return report


class StaticTarget:
    name = "static"
    description = "Copy dist/ to deploy/<env>/"

    def steps(self, options: DeployOptions) -> List[str]:
        return ["Collecting build output", "Copying files"]

    def run(self, options: DeployOptions, runner: ProcessRunner) -> DeployReport:
        report = DeployReport(target=self.name, steps=self.steps(options))
        dist = options.project_root / "dist"
        if not dist.is_dir() or not any(dist.iterdir()):
            report.warn("No build output found in dist/")
            report.success = False
            return report
        dest = options.project_root / "deploy" / options.env
        try:
            shutil.copytree(dist, dest, dirs_exist_ok=True)
        except OSError as e:
            raise StorageError(code="STATIC_COPY_ERROR", message=str(e))
        report.artifacts.append(str(dest))
        return report


class GithubTarget:
    name = "github"
    description = "GitHub Pages (push dist/ to gh-pages)"

    def steps(self, options: DeployOptions) -> List[str]:
        return ["Checking git repository", "Preparing gh-pages branch", "Pushing"]

    def run(self, options: DeployOptions, runner: ProcessRunner) -> DeployReport:
        report = DeployReport(target=self.name, steps=self.steps(options))
        if not runner.exists("git"):
            report.warn("git not found")
            report.success = False
            return report
        runner.run(["git", "rev-parse", "--is-inside-work-tree"], cwd=options.project_root)
        report.artifacts.append("git subtree push --prefix dist origin gh-pages")
        return report


DEPLOY_TARGETS: Dict[str, DeployTarget] = {
    t.name: t for t in (VercelTarget(), NetlifyTarget(), DockerTarget(), StaticTarget(), GithubTarget())
}


def get_target(name: str) -> DeployTarget:
    target = DEPLOY_TARGETS.get(name.strip().lower())
    if target is None:
        raise ValidationError(
            code="UNKNOWN_DEPLOY_TARGET",
            message=f"Unknown deploy target: {name!r} (choose from {', '.join(DEPLOY_TARGETS)})",
        )
    return target


def run_deployment(options: DeployOptions, runner: ProcessRunner) -> DeployReport:
    """执行部署；外部工具错误记录为 warning，不向上抛出。"""

    target = get_target(options.target)
    logger.info(
        "deploy.start",
        extra={"extra": {"target": target.name, "env": options.env, "preview": options.preview}},
    )
    try:
        report = target.run(options, runner)
    except ToolError as exc:
        report = DeployReport(target=target.name, steps=target.steps(options))
        report.warn(exc.message)
        report.success = False
    logger.info("deploy.end", extra={"extra": {"target": target.name, "success": report.success}})
    return report
