import pytest

from nexus_studio.domain.exceptions import StorageError
from nexus_studio.project.builder import BUILD_ENTRY, ProjectBuilder
from nexus_studio.project.scaffold import ProjectScaffold, ProjectSpec


@pytest.fixture
def scaffold(tmp_path):
    s = ProjectScaffold.for_spec(tmp_path, ProjectSpec(name="shop", framework="react", template="default"))
    s.create()
    return s


def test_build_writes_entry_page_to_dist(scaffold):
    result = ProjectBuilder(scaffold).build()
    page = scaffold.root / "dist" / BUILD_ENTRY
    assert result.output_dir == scaffold.root / "dist"
    assert page.read_text(encoding="utf-8") == (
        "<html><body><h1>shop</h1><p>Mode: production</p><p>Target: web</p></body></html>\n"
    )
    assert result.file_count == 1
    assert result.size_mb == page.stat().st_size / (1024 * 1024)
    assert result.build_time >= 0
    assert result.warnings == []


def test_build_mode_target_and_out_dir(scaffold, tmp_path):
    out = tmp_path / "out"
    result = ProjectBuilder(scaffold).build(mode="development", target="desktop", out_dir=out)
    assert result.output_dir == out
    text = (out / BUILD_ENTRY).read_text(encoding="utf-8")
    assert "Mode: development" in text and "Target: desktop" in text
    assert not any((scaffold.root / "dist").iterdir())


def test_build_counts_existing_output(scaffold):
    (scaffold.root / "dist" / "app.js").write_text("console.log(1)", encoding="utf-8")
    assert ProjectBuilder(scaffold).build().file_count == 2


def test_build_warns_without_sources(scaffold):
    (scaffold.root / "src" / "App.jsx").unlink()
    (scaffold.root / "src" / "main.jsx").unlink()
    (scaffold.root / "src").rmdir()
    assert ProjectBuilder(scaffold).build().warnings == ["src/ not found; only the entry page was built"]


def test_build_into_a_file_path_fails(scaffold, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(StorageError) as exc:
        ProjectBuilder(scaffold).build(out_dir=blocker)
    assert exc.value.code == "BUILD_WRITE_ERROR"
