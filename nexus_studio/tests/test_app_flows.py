import json
from pathlib import Path

from nexus_studio.cli.app import NexusApp
from nexus_studio.config.user_store import UserConfigStore
from nexus_studio.domain.models import GenerationRequest
from nexus_studio.project.scaffold import PROJECT_FILE, ProjectScaffold, ProjectSpec
from nexus_studio.prompts import build_code_prompt
from nexus_studio.providers import TemplateBackend


def _run(make_ui, settings, inputs, runner=None):
    ui = make_ui(inputs)
    app = NexusApp(settings, ui, runner=runner)
    assert app.run() == 0
    return app, ui


def test_code_generator_saves_code_block(make_ui, settings, tmp_path):
    out = tmp_path / "out" / "Counter.jsx"
    _, ui = _run(make_ui, settings, ["3", "a counter", "", "", str(out), "9"])
    expected = TemplateBackend().generate(
        GenerationRequest(prompt=build_code_prompt("a counter", "react"), model="phi-3-mini")
    )
    assert out.read_text(encoding="utf-8") == expected.code_block.code
    assert "Code saved to" in ui.output


def test_code_generator_requires_description(make_ui, settings):
    _, ui = _run(make_ui, settings, ["3", "", "todo", "", "", "", "9"])
    assert "This field is required" in ui.output


def test_new_project_is_scaffolded(make_ui, settings, fake_runner):
    runner = fake_runner()
    _, ui = _run(make_ui, settings, ["2", "shop", "", "", "n", "n", "y", "9"], runner=runner)
    root = ProjectScaffold.load(f"{settings.projects_dir}/shop").root
    assert (root / PROJECT_FILE).exists()
    assert (root / "src" / "App.jsx").exists()
    assert runner.calls == []
    assert "Project created at" in ui.output
    assert "npm run dev" in ui.output


def test_new_project_with_ai_and_git(make_ui, settings, fake_runner):
    runner = fake_runner(tools={"git"})
    _run(make_ui, settings, ["2", "shop", "vue", "", "y", "y", "", "9"], runner=runner)
    scaffold = ProjectScaffold.load(f"{settings.projects_dir}/shop")
    assert "shop" in (scaffold.root / "README.md").read_text(encoding="utf-8")
    assert (scaffold.root / "src" / "components" / "Starter.vue").exists()
    assert runner.calls[0]["cmd"] == ["git", "init"]
    assert runner.calls[0]["cwd"] == scaffold.root


def test_cancelled_wizard_writes_nothing(make_ui, settings):
    _, ui = _run(make_ui, settings, ["2", "shop", "", "", "", "", "n", "9"])
    assert "Project creation cancelled" in ui.output
    assert not (Path(settings.projects_dir) / "shop").exists()


def test_create_component_in_project(make_ui, settings, tmp_path):
    scaffold = ProjectScaffold.for_spec(tmp_path, ProjectSpec(name="site", framework="svelte", template="default"))
    scaffold.create()
    _, ui = _run(make_ui, settings, ["4", str(scaffold.root), "widget", "page", "Header", "", "n", "9"])
    assert (scaffold.root / "src" / "components" / "Header.svelte").exists()
    assert "Unknown component type: widget" in ui.output


def test_component_name_cannot_leave_project(make_ui, settings, tmp_path):
    scaffold = ProjectScaffold.for_spec(tmp_path, ProjectSpec(name="p", framework="react", template="default"))
    scaffold.create()
    _, ui = _run(make_ui, settings, ["4", str(scaffold.root), "ui", "../../../escaped", "Safe", "", "n", "9"])
    assert not list(tmp_path.rglob("escaped*"))
    assert (scaffold.root / "src" / "components" / "Safe.tsx").exists()
    assert "Invalid component name" in ui.output


def test_component_outside_project_returns_to_menu(make_ui, settings, tmp_path):
    app, ui = _run(make_ui, settings, ["4", str(tmp_path), "9"])
    assert "Not in a Nexus project directory" in ui.output
    assert ui.output.count("Select an option") == 2


def test_deploy_static(make_ui, settings, tmp_path, fake_runner):
    (tmp_path / "dist").mkdir()
    (tmp_path / "dist" / "app.js").write_text("x", encoding="utf-8")
    _, ui = _run(make_ui, settings, ["5", str(tmp_path), "heroku", "static", "qa", "", "9"], runner=fake_runner())
    assert (tmp_path / "deploy" / "qa" / "app.js").exists()
    assert "Unknown deploy target: 'heroku'" in ui.output
    assert "Deployed to static (qa)" in ui.output


def test_deploy_offers_build_for_fresh_project(make_ui, settings, fake_runner):
    inputs = ["2", "shop", "", "", "n", "n", "y"]
    root = Path(settings.projects_dir) / "shop"
    inputs += ["5", str(root), "static", "", "", "", "9"]
    _, ui = _run(make_ui, settings, inputs, runner=fake_runner())
    assert (root / "dist" / "index.html").exists()
    assert (root / "deploy" / "production" / "index.html").exists()
    assert "Build completed" in ui.output
    assert "Deployed to static (production)" in ui.output
    assert "No build output found" not in ui.output


def test_deploy_build_can_be_declined(make_ui, settings, tmp_path, fake_runner):
    scaffold = ProjectScaffold.for_spec(tmp_path, ProjectSpec(name="site", framework="react", template="default"))
    scaffold.create()
    _, ui = _run(make_ui, settings, ["5", str(scaffold.root), "static", "", "", "n", "9"], runner=fake_runner())
    assert not (scaffold.root / "dist" / "index.html").exists()
    assert "No build output found in dist/" in ui.output


def test_deploy_missing_cli_is_reported(make_ui, settings, tmp_path, fake_runner):
    _, ui = _run(make_ui, settings, ["5", str(tmp_path), "", "", "y", "9"], runner=fake_runner())
    assert "Vercel CLI not found" in ui.output
    assert "finished with warnings" in ui.output


def test_settings_are_persisted_and_reset(make_ui, settings):
    app, ui = _run(make_ui, settings, ["7", "default_model=gpt-4", "bogus", "analytics=maybe", "", "9"])
    store = UserConfigStore(settings.user_config_file)
    assert store.load() == {"default_model": "gpt-4"}
    assert app.active_model == "gpt-4"
    assert "Expected key=value" in ui.output

    app, _ = _run(make_ui, settings, ["7", "reset", "", "9"])
    assert not store.path.exists()
    assert app.active_model == "phi-3-mini"


def test_saved_settings_apply_on_start(make_ui, settings):
    UserConfigStore(settings.user_config_file).set("default_model", "codellama")
    app = NexusApp(settings, make_ui([]))
    assert app.active_model == "codellama"
    assert app.settings.default_model == "codellama"


def test_corrupt_saved_settings_are_ignored(make_ui, settings):
    store = UserConfigStore(settings.user_config_file)
    store.path.parent.mkdir(parents=True, exist_ok=True)
    store.path.write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")
    ui = make_ui([])
    app = NexusApp(settings, ui)
    assert app.active_model == "phi-3-mini"
    assert "Ignoring saved settings" in ui.output


def test_chat_model_switch_carries_over(make_ui, settings):
    app, _ = _run(make_ui, settings, ["1", "/model", "gpt-4", "/exit", "9"])
    assert app.active_model == "gpt-4"


def test_templates_and_about(make_ui, settings, fake_runner):
    _, ui = _run(make_ui, settings, ["6", "8", "9"], runner=fake_runner(tools={"git"}))
    assert "dashboard" in ui.output
    assert "nextjs" in ui.output
    assert "/model" in ui.output
    assert "Nexus Studio AI v1.0.0" in ui.output
