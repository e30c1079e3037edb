import pytest

from src.models.script import FailureSimulation, GenerationResult, ValueMetrics

CANONICAL_RESPONSE = """🧠 Summary: Builds a backup tool that copies a directory to S3.
It retries transient failures.
⚙️ Assumptions:
- AWS credentials are available in the environment
- The source directory exists
📜 Script:
```python
import sys

def main():
    print("backup")
```
🧪 Tests:
```python
def test_main():
    assert True
```
🐳 Dockerfile:
```dockerfile
FROM python:3.12-slim
COPY backup.py /app/
```
🚀 CI/CD:
```yaml
name: ci
on: [push]
```
☢️ Failure Simulations:
- Source missing | Directory deleted before run | Exits with code 2
- Network timeout | S3 unreachable | Retries three times then exits 1
- Permission denied | Read-only file | Logs and skips the file
📊 Metrics | 90 | 240 | 7
▶️ Usage: python backup.py --src /data --bucket my-bucket
"""


@pytest.fixture
def canonical_response() -> str:
    return CANONICAL_RESPONSE


@pytest.fixture
def sample_result() -> GenerationResult:
    return GenerationResult(
        summary="Backs up a directory.",
        assumptions=["Source exists"],
        script='print("backup")',
        tests="def test_backup():\n    assert True",
        dockerfile="FROM python:3.12-slim",
        cicd="name: ci",
        failure_simulations=[
            FailureSimulation(scenario="Disk full", trigger="No space left", behavior="Exits 1"),
        ],
        metrics=ValueMetrics(time_saved_minutes=90, lines_produced=40, potential_errors_mitigated=6),
        usage="python backup.py /data",
    )
