"""Create the C project skeleton on disk."""

from pathlib import Path

from create_c_project.core.models import Feature, ProjectConfig


class TemplateNotFoundError(FileNotFoundError):
    """Raised when a template file is missing from the template directory."""


def get_templates_dir() -> Path:
    """Return the directory holding the bundled template files."""
    import create_c_project.templates as c_templates

    return Path(c_templates.__file__).parent


def load_template(filename: str, templates_dir: Path | None = None) -> bytes:
    """Read a template file as raw bytes.

    Args:
        filename: Template file name (e.g. 'Makefile', '.gitignore')
        templates_dir: Directory to read from, defaults to the bundled templates

    Raises:
        TemplateNotFoundError: If the template does not exist
    """
    template_path = (templates_dir or get_templates_dir()) / filename
    if not template_path.is_file():
        raise TemplateNotFoundError(f"Template not found: {template_path}")
    return template_path.read_bytes()


def render_readme(name: str, description: str) -> str:
    """Return README.md content for the project."""
    return f"# {name}\n\n{description}\n"


def create_project_structure(
    config: ProjectConfig,
    base_dir: Path,
    templates_dir: Path | None = None,
) -> Path:
    """Create the project directory and write its files.

    Creates:
    - <name>/src/ and, if selected, <name>/tests/
    - Makefile and src/main.c copied from the templates
    - .gitignore copied from the template, if selected
    - README.md built from the name and description, if selected

    Nothing is rolled back if a step fails; OSError propagates to the caller.

    Args:
        config: Validated project answers
        base_dir: Directory the project is created in
        templates_dir: Template override, defaults to the bundled templates

    Returns:
        Path to the created project directory
    """
    project_path = base_dir / config.name

    project_path.mkdir()
    (project_path / "src").mkdir()
    if config.has(Feature.TESTS):
        (project_path / "tests").mkdir()

    (project_path / "Makefile").write_bytes(load_template("Makefile", templates_dir))
    (project_path / "src" / "main.c").write_bytes(load_template("main.c", templates_dir))

    if config.has(Feature.GITIGNORE):
        (project_path / ".gitignore").write_bytes(
            load_template(".gitignore", templates_dir)
        )

    if config.has(Feature.README):
        (project_path / "README.md").write_text(
            render_readme(config.name, config.description),
            encoding="utf-8",
        )

    return project_path
