"""End-to-end tests for ``scaffold setup-docker``."""

from pathlib import Path

import pytest

from scaffold_tasks.templates.loader import read_template

pytestmark = pytest.mark.cli

SCAFFOLD_FILES = ["Dockerfile", "docker-compose.dev.yml", "docker-compose.prod.yml"]


class TestSetupDockerCli:

    def test_confirmed_run_scaffolds_project(self, project_dir: Path, run_scaffold) -> None:
        result = run_scaffold("setup-docker", input="y\n")

        assert result.return_value == 0
        assert "The Dockerfile is experimental. Continue?" in result.output
        assert "✓ Adding the experimental Dockerfile..." in result.output
        assert "✓ Adding config to redwood.toml..." in result.output
        assert "https://community.redwoodjs.com/t/4380" in result.output
        for name in SCAFFOLD_FILES:
            assert (project_dir / name).read_bytes() == read_template("docker", name)
        assert "[experimental.dockerfile]" in (project_dir / "redwood.toml").read_text()

    def test_refused_run_touches_nothing(self, project_dir: Path, run_scaffold) -> None:
        config_before = (project_dir / "redwood.toml").read_bytes()

        result = run_scaffold("setup-docker", input="n\n")

        assert result.return_value == 1
        assert "✖ Confirmation" in result.output
        for name in SCAFFOLD_FILES:
            assert not (project_dir / name).exists()
        assert (project_dir / "redwood.toml").read_bytes() == config_before

    def test_rerun_reports_skipped_steps(self, project_dir: Path, run_scaffold) -> None:
        run_scaffold("setup-docker", input="y\n")

        result = run_scaffold("setup-docker", input="y\n")

        assert result.return_value == 0
        assert "⊘ Adding the experimental Dockerfile... [SKIPPED:" in result.output
        assert "Use --force to overwrite." in result.output
        assert "⊘ Adding config to redwood.toml... [SKIPPED:" in result.output

    def test_force_overwrites_edited_files(self, project_dir: Path, run_scaffold) -> None:
        (project_dir / "Dockerfile").write_text("FROM custom\n", encoding="utf-8")

        result = run_scaffold("setup-docker", "--force", input="y\n")

        assert result.return_value == 0
        assert (project_dir / "Dockerfile").read_bytes() == read_template("docker", "Dockerfile")

    def test_verbose_prints_lifecycle_events(self, project_dir: Path, run_scaffold) -> None:
        result = run_scaffold("setup-docker", "-v", input="y\n")

        assert result.return_value == 0
        assert "[STARTED] Confirmation (waiting for input)" in result.output
        assert "[COMPLETED] Adding config to redwood.toml..." in result.output
        assert "Pipeline completed" in result.output

    def test_help_lists_flags(self, run_scaffold) -> None:
        result = run_scaffold("setup-docker", "--help")

        assert "--force" in result.output
        assert "--verbose" in result.output
        assert "Setup the experimental Dockerfile" in result.output
