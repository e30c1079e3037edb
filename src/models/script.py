from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Language(str, Enum):
    PYTHON = "Python"
    BASH = "Bash"
    POWERSHELL = "PowerShell"
    JAVASCRIPT = "JavaScript"
    TYPESCRIPT = "TypeScript"
    GO = "Go"
    RUBY = "Ruby"
    YAML = "YAML"
    JSON = "JSON"
    AUTO = "Auto"


class Environment(str, Enum):
    LINUX = "Linux"
    WINDOWS = "Windows"
    MACOS = "macOS"
    AWS = "AWS"
    AZURE = "Azure"
    GCP = "GCP"
    DOCKER = "Docker"
    KUBERNETES = "Kubernetes"
    GENERIC = "Generic"


class SafetyLevel(str, Enum):
    DRY_RUN = "Dry Run Only"
    NORMAL = "Normal (Recommended)"
    PRODUCTION = "Production (Strict)"


class ScriptType(str, Enum):
    AUTOMATION = "Automation"
    WORKFLOW = "Workflow"
    INTEGRATION = "Integration"
    BUSINESS_LOGIC = "Business Logic"
    DEVOPS = "DevOps"
    DATA_PROCESSING = "Data Processing"


class GenerationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str = Field(min_length=1, max_length=4000)
    language: Language = Language.PYTHON
    environment: Environment = Environment.LINUX
    safety_level: SafetyLevel = SafetyLevel.NORMAL
    script_type: ScriptType = ScriptType.AUTOMATION
    include_tests: bool = True

    @field_validator("description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("description must not be blank")
        return value


class FailureSimulation(BaseModel):
    scenario: str
    trigger: str
    behavior: str


class ValueMetrics(BaseModel):
    time_saved_minutes: int = Field(ge=0, default=0)
    lines_produced: int = Field(ge=0, default=0)
    potential_errors_mitigated: int = Field(ge=0, default=0)


class GenerationResult(BaseModel):
    summary: str = ""
    assumptions: list[str] = []
    script: str = ""
    tests: str = ""
    dockerfile: str = ""
    cicd: str = ""
    failure_simulations: list[FailureSimulation] = []
    metrics: ValueMetrics = Field(default_factory=ValueMetrics)
    usage: str = ""
