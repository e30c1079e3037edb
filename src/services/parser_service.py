"""
Structured response parser.
Turns the marker-tagged text returned by the generation provider into a GenerationResult.

One forward pass over the lines. Each line is checked for a section marker
(substring match, so a marker inside a code body is also read as a header);
lines without a marker are accumulated into whatever section is open.
Missing or out-of-order sections degrade to empty/default fields, never to an error.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from src.models.script import FailureSimulation, GenerationResult, ValueMetrics
from src.utils.logger import logger


SUMMARY_MARKER = "🧠 Summary"
ASSUMPTIONS_MARKER = "⚙️ Assumptions"
SCRIPT_MARKER = "📜 Script"
TESTS_MARKER = "🧪 Tests"
DOCKERFILE_MARKER = "🐳 Dockerfile"
CICD_MARKER = "🚀 CI/CD"
FAILURES_MARKER = "☢️ Failure Simulations"
METRICS_MARKER = "📊 Metrics"
USAGE_MARKER = "▶️ Usage"

# Checked in this order; the first marker found on a line wins.
SECTION_MARKERS: list[tuple[str, str]] = [
    ("summary", SUMMARY_MARKER),
    ("assumptions", ASSUMPTIONS_MARKER),
    ("script", SCRIPT_MARKER),
    ("tests", TESTS_MARKER),
    ("dockerfile", DOCKERFILE_MARKER),
    ("cicd", CICD_MARKER),
    ("failures", FAILURES_MARKER),
    ("metrics", METRICS_MARKER),
    ("usage", USAGE_MARKER),
]

CODE_SECTIONS = ("script", "tests", "dockerfile", "cicd")
CODE_FENCE = "```"
BULLET = "-"
NOT_APPLICABLE = "N/A"

# Fallbacks for a metrics line that is present but has unreadable numbers
DEFAULT_TIME_SAVED_MINUTES = 30
DEFAULT_LINES_PRODUCED = 0
DEFAULT_ERRORS_MITIGATED = 5

_LEADING_INT = re.compile(r"^[+-]?\d+")


@dataclass
class _ParseState:
    section: Optional[str] = None
    in_code_block: bool = False
    summary: str = ""
    assumptions: list[str] = field(default_factory=list)
    code: dict[str, str] = field(default_factory=lambda: {name: "" for name in CODE_SECTIONS})
    failures: list[FailureSimulation] = field(default_factory=list)
    metrics: ValueMetrics = field(default_factory=ValueMetrics)
    usage: str = ""


def _match_marker(trimmed: str) -> Optional[str]:
    for name, marker in SECTION_MARKERS:
        if marker in trimmed:
            return name
    return None


def _text_after_marker(trimmed: str, marker: str) -> str:
    """Everything after the marker, minus an optional colon."""
    rest = trimmed[trimmed.index(marker) + len(marker):]
    if rest.startswith(":"):
        rest = rest[1:]
    return rest.strip()


def _leading_int(text: str) -> Optional[int]:
    match = _LEADING_INT.match(text.strip())
    if not match:
        return None
    try:
        return int(match.group())
    except ValueError:
        # past the interpreter's int digit limit
        return None


def _metric_value(text: str, fallback: int) -> int:
    value = _leading_int(text)
    # zero and negative counts are treated like unreadable ones
    if not value or value < 0:
        return fallback
    return value


def parse_metrics_line(line: str) -> Optional[ValueMetrics]:
    """
    `📊 Metrics | 90 | 240 | 7` -> ValueMetrics(90, 240, 7).
    Returns None when the line has fewer than four pipe-separated parts.
    """
    parts = [p.strip() for p in line.strip().split("|")]
    if len(parts) < 4:
        return None
    return ValueMetrics(
        time_saved_minutes=_metric_value(parts[1], DEFAULT_TIME_SAVED_MINUTES),
        lines_produced=_metric_value(parts[2], DEFAULT_LINES_PRODUCED),
        potential_errors_mitigated=_metric_value(parts[3], DEFAULT_ERRORS_MITIGATED),
    )


def parse_failure_line(trimmed: str) -> Optional[FailureSimulation]:
    """`- scenario | trigger | behavior`; extra parts are ignored, fewer than three drop the line."""
    parts = [p.strip() for p in trimmed[len(BULLET):].split("|")]
    if len(parts) < 3:
        return None
    return FailureSimulation(scenario=parts[0], trigger=parts[1], behavior=parts[2])


def _enter_section(state: _ParseState, name: str, trimmed: str) -> None:
    if name == "metrics":
        # leaf action, the open section stays open
        metrics = parse_metrics_line(trimmed)
        if metrics is not None:
            state.metrics = metrics
        return

    state.section = name
    if name == "summary":
        state.summary = _text_after_marker(trimmed, SUMMARY_MARKER)
    elif name == "usage":
        state.usage = _text_after_marker(trimmed, USAGE_MARKER)
    elif name in CODE_SECTIONS:
        state.in_code_block = False
        state.code[name] = ""


def _accumulate(state: _ParseState, line: str, trimmed: str) -> None:
    section = state.section

    if section == "summary":
        if trimmed and trimmed not in state.summary:
            state.summary = f"{state.summary} {trimmed}" if state.summary else trimmed

    elif section == "assumptions":
        if trimmed.startswith(BULLET):
            state.assumptions.append(trimmed[len(BULLET):].strip())

    elif section == "failures":
        if trimmed.startswith(BULLET):
            failure = parse_failure_line(trimmed)
            if failure is not None:
                state.failures.append(failure)

    elif section in CODE_SECTIONS:
        if trimmed.startswith(CODE_FENCE):
            # fences are tracked but do not gate capture
            state.in_code_block = not state.in_code_block
        else:
            state.code[section] += line + "\n"

    elif section == "usage":
        if trimmed and USAGE_MARKER not in trimmed:
            state.usage = f"{state.usage} {trimmed}" if state.usage else trimmed


def parse_model_response(text: str) -> GenerationResult:
    """Parse a provider response. Never raises; callers check for empty text first."""
    state = _ParseState()

    for line in text.split("\n"):
        line = line.rstrip("\r")  # CRLF responses
        trimmed = line.strip()
        name = _match_marker(trimmed)
        if name is not None:
            _enter_section(state, name, trimmed)
        else:
            _accumulate(state, line, trimmed)

    tests = state.code["tests"].strip()
    if tests == NOT_APPLICABLE:
        tests = ""

    result = GenerationResult(
        summary=state.summary,
        assumptions=state.assumptions,
        script=state.code["script"].strip(),
        tests=tests,
        dockerfile=state.code["dockerfile"].strip(),
        cicd=state.code["cicd"].strip(),
        failure_simulations=state.failures,
        metrics=state.metrics,
        usage=state.usage,
    )

    logger.debug(
        f"Parsed response: assumptions={len(result.assumptions)}, "
        f"failures={len(result.failure_simulations)}, script_chars={len(result.script)}, "
        f"tests={'yes' if result.tests else 'no'}"
    )
    return result
