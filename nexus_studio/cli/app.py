"""主菜单应用。

按 MenuState 状态机驱动主循环：主菜单读取选项并切换状态，
每个子流程执行完毕后通过 "done" 回到主菜单。子流程中抛出的
BusinessError 只会以警告形式展示，不会结束整个程序。
"""

import platform
from pathlib import Path
from typing import Callable, Dict, Optional

from nexus_studio import __version__
from nexus_studio.agents.chat_session import ChatSession, SessionConfig
from nexus_studio.cli.chat import HELP as CHAT_HELP, ChatLoop
from nexus_studio.config.settings import USER_KEYS, Settings, apply_overrides
from nexus_studio.config.user_store import UserConfigStore
from nexus_studio.deploy.targets import DEPLOY_TARGETS, DeployOptions, get_target, run_deployment
from nexus_studio.domain.exceptions import BusinessError, StorageError, ToolError, ValidationError
from nexus_studio.domain.models import GenerationRequest, GenerationResult
from nexus_studio.flows.menu import DONE, menu_options, next_state
from nexus_studio.flows.state import MenuState
from nexus_studio.flows.wizard import run_project_wizard
from nexus_studio.infrastructure.logging.logger import logger
from nexus_studio.project.builder import ProjectBuilder
from nexus_studio.project.scaffold import PROJECT_FILE, ProjectScaffold, ProjectSpec, validate_component_name
from nexus_studio.project.templates import COMPONENT_TYPES, FRAMEWORK_TEMPLATES, PROJECT_TEMPLATES
from nexus_studio.prompts import (
    build_code_prompt,
    build_component_prompt,
    build_readme_prompt,
    build_starter_prompt,
)
from nexus_studio.providers import create_backend
from nexus_studio.providers.base import GenerationBackend
from nexus_studio.tools.process import ProcessRunner
from nexus_studio.ui.console import ConsoleUI

KNOWN_TOOLS = ("git", "node", "npm", "docker", "vercel", "netlify")


class NexusApp:
    def __init__(
        self,
        settings: Settings,
        ui: ConsoleUI,
        backend: Optional[GenerationBackend] = None,
        runner: Optional[ProcessRunner] = None,
        store: Optional[UserConfigStore] = None,
    ):
        self.ui = ui
        self.backend = backend or create_backend(settings.backend)
        self.runner = runner or ProcessRunner()
        self.store = store or UserConfigStore(settings.user_config_file)
        self._base_settings = settings
        self.settings = self._with_user_overrides(settings)
        self.active_model = self.settings.default_model
        self.state = MenuState.MAIN_MENU
        self._handlers: Dict[MenuState, Callable[[], None]] = {
            MenuState.CHAT_SESSION: self.chat,
            MenuState.PROJECT_WIZARD: self.new_project,
            MenuState.CODE_GEN: self.generate_code,
            MenuState.COMPONENT: self.create_component,
            MenuState.DEPLOY: self.deploy,
            MenuState.TEMPLATES: self.show_templates,
            MenuState.SETTINGS: self.edit_settings,
            MenuState.ABOUT: self.about,
        }

    def _with_user_overrides(self, settings: Settings) -> Settings:
        try:
            return apply_overrides(settings, self.store.load())
        except BusinessError as e:
            self.ui.warn(f"Ignoring saved settings: {e.message}")
            return settings

    # ---- 主循环 ----

    def run(self) -> int:
        logger.info("app.start", extra={"extra": {"version": __version__, "model": self.active_model}})
        while self.state is not MenuState.EXIT:
            if self.state is MenuState.MAIN_MENU:
                self.show_main_menu()
                choice = self.ui.ask(f"Select an option [1-{len(menu_options())}]")
                try:
                    self.state = next_state(self.state, choice)
                except ValidationError as e:
                    self.ui.error(e.message)
                continue
            self._run_flow(self.state)
            self.state = next_state(self.state, DONE)
        self.ui.info("Goodbye!")
        logger.info("app.exit")
        return 0

    def show_main_menu(self) -> None:
        self.ui.menu(f"Nexus Studio AI v{__version__}", menu_options())

    def _run_flow(self, state: MenuState) -> None:
        try:
            self._handlers[state]()
        except BusinessError as e:
            logger.warning("flow.error", extra={"extra": {"state": state.value, "code": e.code, "error": e.message}})
            self.ui.warn(e.message)

    def _ask_required(self, question: str, default: str = "") -> str:
        while True:
            answer = self.ui.ask(question, default)
            if answer:
                return answer
            self.ui.error("This field is required")

    def _generate(self, prompt: str, model: Optional[str] = None) -> GenerationResult:
        self.ui.thinking()
        return self.backend.generate(
            GenerationRequest(
                prompt=prompt,
                model=model or self.active_model,
                max_tokens=self.settings.max_tokens,
                temperature=self.settings.temperature,
            )
        )

    @staticmethod
    def _code_of(result: GenerationResult) -> str:
        return result.code_block.code if result.code_block else result.text

    # ---- 1. 聊天 ----

    def chat(self) -> None:
        session = ChatSession(
            self.backend,
            SessionConfig(
                model=self.active_model,
                max_tokens=self.settings.max_tokens,
                temperature=self.settings.temperature,
            ),
        )
        ChatLoop(session, self.ui).run()
        self.active_model = session.model

    # ---- 2. 新项目向导 ----

    def new_project(self) -> None:
        self.ui.header("New Project Wizard")
        spec = run_project_wizard(self.ui, self.settings.default_framework, self.settings.default_template)
        if spec is None:
            self.ui.warn("Project creation cancelled")
            return
        scaffold = ProjectScaffold.for_spec(self.settings.projects_dir, spec)
        self.ui.progress(["Creating directories", "Generating files", "Writing nexus.yaml"])
        scaffold.create()
        if spec.use_ai:
            self._enhance_project(scaffold, spec)
        if spec.init_git:
            try:
                self.runner.run(["git", "init"], cwd=scaffold.root)
                self.ui.success("Initialized git repository")
            except ToolError as e:
                self.ui.warn(f"git init skipped: {e.message}")
        self.ui.success(f"Project created at {scaffold.root}")
        self.ui.tree(f"{spec.name}/", scaffold.tree())
        self.ui.info(f"Next steps:\n  cd {spec.name}\n  npm install\n  npm run dev")

    def _enhance_project(self, scaffold: ProjectScaffold, spec: ProjectSpec) -> None:
        readme = self._generate(build_readme_prompt(spec.name, spec.template, spec.framework))
        scaffold.write_file("README.md", readme.text)
        starter = self._generate(build_starter_prompt(spec.name, spec.template, spec.framework))
        path = scaffold.write_file(scaffold.component_path("Starter", spec.framework), self._code_of(starter))
        self.ui.success(f"AI starter component written to {path}")

    # ---- 3. 代码生成 ----

    def generate_code(self) -> None:
        self.ui.header("AI Code Generator")
        description = self._ask_required("What should the code do?")
        model = self.ui.ask("Model", self.active_model)
        framework = self.ui.ask("Framework", self.settings.default_framework)
        result = self._generate(build_code_prompt(description, framework), model)
        self.ui.show_response(result.text)
        output = self.ui.ask("Save to file (leave empty to skip)")
        if not output:
            return
        path = Path(output).expanduser()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self._code_of(result), encoding="utf-8")
        except OSError as e:
            raise StorageError(code="OUTPUT_WRITE_ERROR", message=str(e), path=str(path))
        self.ui.success(f"Code saved to {path}")

    # ---- 4. 组件 ----

    def create_component(self) -> None:
        self.ui.header("Create Component")
        scaffold = ProjectScaffold.load(self.ui.ask("Project directory", "."))
        while True:
            component_type = self.ui.ask(f"Component type ({', '.join(COMPONENT_TYPES)})", "ui").lower()
            if component_type in COMPONENT_TYPES:
                break
            self.ui.error(f"Unknown component type: {component_type}")
        while True:
            name = self.ui.ask("Component name")
            error = validate_component_name(name)
            if error is None:
                break
            self.ui.error(error)
        framework = self.ui.ask("Framework", scaffold.config.framework)
        if self.ui.confirm("Generate with AI?"):
            result = self._generate(build_component_prompt(component_type, name, framework))
            path = scaffold.write_file(scaffold.component_path(name, framework), self._code_of(result))
        else:
            path = scaffold.generate_component(component_type, name, framework).path
        self.ui.success(f"Component created at {path}")

    # ---- 5. 部署 ----

    def deploy(self) -> None:
        self.ui.header("Deploy Project")
        project_root = Path(self.ui.ask("Project directory", ".")).expanduser()
        self.ui.table("Targets", ["Target", "Description"], [(t.name, t.description) for t in DEPLOY_TARGETS.values()])
        while True:
            try:
                target = get_target(self.ui.ask("Target", "vercel"))
                break
            except ValidationError as e:
                self.ui.error(e.message)
        options = DeployOptions(
            target=target.name,
            project_root=project_root,
            env=self.ui.ask("Environment", "production"),
            preview=self.ui.confirm("Preview deployment?"),
        )
        needs_build = self._needs_build(project_root)
        if needs_build and self.ui.confirm("No build output in dist/. Build the project first?", default=True):
            self._build(ProjectScaffold.load(project_root), mode=options.env)
        self.ui.progress(target.steps(options))
        report = run_deployment(options, self.runner)
        for warning in report.warnings:
            self.ui.warn(warning)
        for artifact in report.artifacts:
            self.ui.info(f"  {artifact}")
        if report.success:
            self.ui.success(f"Deployed to {target.name} ({options.env})")
        else:
            self.ui.warn(f"Deployment to {target.name} finished with warnings")

    @staticmethod
    def _needs_build(project_root: Path) -> bool:
        dist = project_root / "dist"
        if not (project_root / PROJECT_FILE).exists():
            return False
        return not dist.is_dir() or not any(dist.iterdir())

    def _build(self, scaffold: ProjectScaffold, mode: str) -> None:
        self.ui.progress(["Loading project", "Building"])
        result = ProjectBuilder(scaffold).build(mode=mode)
        self.ui.success("Build completed")
        self.ui.table(
            "Build statistics",
            ["Output", "Size", "Files", "Time"],
            [(result.output_dir, f"{result.size_mb:.2f} MB", result.file_count, f"{result.build_time:.2f}s")],
        )
        for warning in result.warnings:
            self.ui.warn(warning)

    # ---- 6. 模板 ----

    def show_templates(self) -> None:
        self.ui.table(
            "Project templates",
            ["Template", "Description"],
            [(name, meta["description"]) for name, meta in PROJECT_TEMPLATES.items()],
        )
        self.ui.table(
            "Frameworks",
            ["Framework", "Files"],
            [(name, ", ".join(files)) for name, files in FRAMEWORK_TEMPLATES.items()],
        )

    # ---- 7. 设置 ----

    def edit_settings(self) -> None:
        while True:
            self.ui.table(
                f"Settings ({self.store.path})",
                ["Key", "Value"],
                [(key, getattr(self.settings, key)) for key in USER_KEYS],
            )
            answer = self.ui.ask("key=value to change, 'reset' to restore defaults, empty to return")
            if not answer:
                return
            if answer == "reset":
                self.store.reset()
                self.settings = self._base_settings
                self.active_model = self.settings.default_model
                self.ui.success("Settings reset to defaults")
                continue
            try:
                self._set_setting(answer)
            except ValidationError as e:
                self.ui.error(e.message)

    def _set_setting(self, assignment: str) -> None:
        key, sep, value = assignment.partition("=")
        key, value = key.strip(), value.strip()
        if not sep or key not in USER_KEYS:
            raise ValidationError(
                code="INVALID_SETTING",
                message=f"Expected key=value with key in: {', '.join(USER_KEYS)}",
            )
        updated = apply_overrides(self.settings, {key: value})
        self.store.set(key, getattr(updated, key))
        self.settings = updated
        if key == "default_model":
            self.active_model = updated.default_model
        self.ui.success(f"{key} = {getattr(updated, key)}")

    # ---- 8. 关于 ----

    def about(self) -> None:
        self.ui.header(f"Nexus Studio AI v{__version__}", subtitle=f"Python {platform.python_version()}")
        self.ui.info("Build apps instantly with template-driven AI code generation.")
        self.ui.table(
            "Tools",
            ["Tool", "Available"],
            [(tool, "yes" if self.runner.exists(tool) else "no") for tool in KNOWN_TOOLS],
        )
        self.ui.info(f"Chat commands:\n{CHAT_HELP}")
