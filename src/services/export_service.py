"""
Export helpers for a generated script package.
Pure serialization of a GenerationResult: single-file downloads, a ZIP package, a gist payload.
"""
import io
import zipfile

from src.models.script import GenerationResult, Language, ScriptType


class ExportError(Exception):
    """Raised when a requested export has nothing to serialize."""


ARCHIVE_FILENAME = "engineering-package.zip"
GIST_DESCRIPTION_CHARS = 50

_EXTENSIONS = {
    Language.PYTHON: "py",
    Language.BASH: "sh",
    Language.POWERSHELL: "ps1",
    Language.JAVASCRIPT: "js",
    Language.TYPESCRIPT: "ts",
    Language.GO: "go",
    Language.RUBY: "rb",
    Language.YAML: "yml",
    Language.JSON: "json",
}

EXPORTABLE_SECTIONS = ("script", "tests", "dockerfile", "cicd")


def file_extension(language: Language) -> str:
    return _EXTENSIONS.get(language, "txt")


def section_filename(section: str, language: Language) -> str:
    ext = file_extension(language)
    if section == "script":
        return f"script.{ext}"
    if section == "tests":
        return f"test_script.{ext}"
    if section == "dockerfile":
        return "Dockerfile"
    if section == "cicd":
        return "github-workflow.yml"
    raise ExportError(f"Unknown section: {section}")


def export_section(result: GenerationResult, section: str, language: Language) -> tuple[str, str]:
    """(filename, content) for one downloadable section."""
    filename = section_filename(section, language)
    content = getattr(result, section)
    if not content:
        raise ExportError(f"Section '{section}' is empty")
    return filename, content


def build_readme(result: GenerationResult, script_type: ScriptType) -> str:
    failures = "\n\n".join(
        f"### {f.scenario}\n**Trigger:** {f.trigger}\n**Behavior:** {f.behavior}"
        for f in result.failure_simulations
    )
    metrics = result.metrics
    return (
        f"# {script_type.value} Script\n\n"
        "## Value Summary\n"
        f"- Engineering Time Saved: {metrics.time_saved_minutes} mins\n"
        f"- Optimized Production Code: {metrics.lines_produced} Lines\n"
        f"- Explicit Error Handlers: {metrics.potential_errors_mitigated}\n\n"
        f"## Summary\n{result.summary}\n\n"
        f"## Failure Mode Simulations\n{failures}\n\n"
        f"## Usage\n```bash\n{result.usage}\n```"
    )


def build_archive(result: GenerationResult, language: Language, script_type: ScriptType) -> bytes:
    """ZIP with the script, optional tests/Dockerfile/workflow and a README."""
    if not result.script:
        raise ExportError("Nothing to archive: script is empty")

    ext = file_extension(language)
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
        archive.writestr(f"script.{ext}", result.script)
        if result.tests:
            archive.writestr(f"tests.{ext}", result.tests)
        if result.dockerfile:
            archive.writestr("Dockerfile", result.dockerfile)
        if result.cicd:
            archive.writestr(".github/workflows/main.yml", result.cicd)
        archive.writestr("README.md", build_readme(result, script_type))
    return buffer.getvalue()


def build_gist_payload(result: GenerationResult, description: str, language: Language) -> dict:
    """Body accepted by the GitHub gists API. Private by default."""
    ext = file_extension(language)
    files = {
        f"script.{ext}": {"content": result.script},
        "README.md": {"content": f"{result.summary}\n\nUsage: {result.usage}"},
    }
    if result.tests:
        files[f"tests.{ext}"] = {"content": result.tests}
    if result.dockerfile:
        files["Dockerfile"] = {"content": result.dockerfile}

    return {
        "description": f"Engineered Script: {description[:GIST_DESCRIPTION_CHARS]}...",
        "public": False,
        "files": files,
    }
