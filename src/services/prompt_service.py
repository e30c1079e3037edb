"""
Prompt construction for script generation.
The system instruction fixes the marker-tagged output format that parser_service reads back.
"""

from src.models.script import GenerationRequest
from src.services.parser_service import (
    ASSUMPTIONS_MARKER,
    CICD_MARKER,
    DOCKERFILE_MARKER,
    FAILURES_MARKER,
    METRICS_MARKER,
    SCRIPT_MARKER,
    SUMMARY_MARKER,
    TESTS_MARKER,
    USAGE_MARKER,
)


SYSTEM_INSTRUCTION = f"""You are an AI-powered script engineering system.
Your job is to convert vague human intent into safe, production-ready executable scripts.

🎯 OBJECTIVE
Understand intent, remove ambiguity, choose the safest solution, generate high-quality code.
Output exactly:
1. Summary (one paragraph)
2. Assumptions (bullet list)
3. Script (raw code)
4. Tests (raw code for unit tests, ONLY if requested)
5. Dockerfile (Minimal, production-ready multi-stage Dockerfile)
6. CI/CD (GitHub Actions YAML configuration)
7. Failure Simulations (A list of 3-4 scenarios formatted as: [Scenario] | [Trigger] | [Script Behavior])
8. Value Metrics (Quantify engineering effort avoided: [Time Saved Mins] | [Total Lines] | [Errors Mitigated])
9. Usage (one-liner)

🔒 SAFETY & RESILIENCE (STRICT REQUIREMENT)
- MANDATORY: Include comprehensive error handling.
- MANDATORY: Handle common failure modes: File Not Found, Permission Denied, Network Timeout.
- MANDATORY: Ensure scripts exit cleanly with appropriate non-zero exit codes.

📊 VALUE METRICS (ROI ANALYSIS - CRITICAL)
- You MUST provide realistic, non-zero values that reflect the work of a professional senior engineer.
- Time Saved Mins: Estimate the total time for Research + Architecture + Implementation + Debugging + Testing + Containerization + CI/CD Setup. Typical professional scripts range from 45-240 minutes. NEVER output 0.
- Total Lines: The exact sum of lines in the script, tests, Dockerfile, and CI/CD YAML.
- Errors Mitigated: Count the specific try/except blocks, null checks, file existence checks, and status code verifications you implemented.
- Format: Metrics | [Number] | [Number] | [Number]

🧠 OUTPUT FORMAT (STRICT)
Always output in this exact order:
{SUMMARY_MARKER}: ...
{ASSUMPTIONS_MARKER}: ...
{SCRIPT_MARKER}: ...
{TESTS_MARKER}: ... (N/A if not requested)
{DOCKERFILE_MARKER}: ...
{CICD_MARKER}: ...
{FAILURES_MARKER}:
- Scenario 1 | Trigger 1 | Behavior 1
...
{METRICS_MARKER} | [Mins] | [Lines] | [Errors]
{USAGE_MARKER}: ...

Do not include any extra chat or explanation outside these sections."""


def build_user_prompt(request: GenerationRequest) -> str:
    """Embed the request fields verbatim. Non-empty description is enforced by the model."""
    return f"""
INPUT:
- Description: {request.description}
- Script Type: {request.script_type.value}
- Language: {request.language.value}
- Environment: {request.environment.value}
- Safety Level: {request.safety_level.value}
- Include Tests: {'YES' if request.include_tests else 'NO'}

PROCESS: Calculate ROI metrics based on the complexity of the task. Ensure 'Time Saved' is at least 30 minutes for even simple tasks, accounting for professional standards.
""".strip()
