from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from tmplkit.cli import cli as tmplkit_cli


def write_template(tmp_path: Path, body: str, manifest: str | None = None) -> Path:
    template_dir = tmp_path / "tpl"
    template_dir.mkdir(parents=True, exist_ok=True)
    template = template_dir / "README.md.jinja"
    template.write_text(body, encoding="utf-8")
    if manifest is not None:
        (template_dir / ".tmplkit.yaml").write_text(manifest, encoding="utf-8")
    return template


MANIFEST = """
variables:
  - name: project_name
    ask: Name of the project
  - name: license
    default_value: MIT
    select_in_values: [MIT, Apache-2.0]
  - name: cache
    hidden: true
""".lstrip()


def test_helpers_lists_groups() -> None:
    result = CliRunner().invoke(tmplkit_cli, ["helpers"])
    assert result.exit_code == 0, result.output
    for expected in ("string:", "to_snake_case", "http:", "gitignore_io", "path:", "env_var"):
        assert expected in result.output


def test_variables_from_template_dir(tmp_path: Path) -> None:
    template = write_template(tmp_path, "", manifest=MANIFEST)
    result = CliRunner().invoke(tmplkit_cli, ["variables", str(template.parent)])
    assert result.exit_code == 0, result.output
    assert "project_name: Name of the project" in result.output
    assert "one of MIT, Apache-2.0" in result.output
    assert "cache: cache" in result.output
    assert "(hidden)" in result.output


def test_variables_rejects_invalid_manifest(tmp_path: Path) -> None:
    template = write_template(tmp_path, "", manifest="variables:\n  - nam: typo\n")
    result = CliRunner().invoke(tmplkit_cli, ["variables", str(template.parent)])
    assert result.exit_code == 1
    assert "Invalid manifest" in result.output


def test_render_uses_manifest_defaults_and_vars(tmp_path: Path) -> None:
    template = write_template(
        tmp_path,
        "# {{ project_name | to_title_case }}\nLicense: {{ license }}\n",
        manifest=MANIFEST,
    )
    result = CliRunner().invoke(
        tmplkit_cli, ["render", str(template), "--var", "project_name=my-cool_app"]
    )
    assert result.exit_code == 0, result.output
    assert result.output == "# My Cool App\nLicense: MIT\n"


def test_render_undefined_variable_fails(tmp_path: Path) -> None:
    template = write_template(tmp_path, "{{ project_name }}\n")
    result = CliRunner().invoke(tmplkit_cli, ["render", str(template)])
    assert result.exit_code == 1
    assert "Template error" in result.output
    assert "project_name" in result.output


def test_render_to_output_file(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("TMPLKIT_TEST_USER", "ada")
    template = write_template(tmp_path, "{{ env_var('TMPLKIT_TEST_USER') }}\n")
    output = tmp_path / "out" / "README.md"
    result = CliRunner().invoke(
        tmplkit_cli, ["render", str(template), "-o", str(output)]
    )
    assert result.exit_code == 0, result.output
    assert output.read_text(encoding="utf-8") == "ada\n"


def test_render_rejects_malformed_var(tmp_path: Path) -> None:
    template = write_template(tmp_path, "x\n")
    result = CliRunner().invoke(tmplkit_cli, ["render", str(template), "--var", "oops"])
    assert result.exit_code == 2
    assert "KEY=VALUE" in result.output
