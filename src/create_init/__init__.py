"""Public API surface for create-init."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("create-init")
except PackageNotFoundError:
    __version__ = "0.0.0"

from create_init.config import ScaffoldSettings, load_config
from create_init.contracts import Choice, Prompter
from create_init.exceptions import ConfigError, CreateInitError, ManifestError, ManifestReadError, ScaffoldError
from create_init.flow import run_flow
from create_init.materializer import materialize
from create_init.models import (
    Cancelled,
    CancelReason,
    CliInvocation,
    Completed,
    DecisionRecord,
    FlowResult,
    Mode,
    OverwriteChoice,
)
from create_init.naming import is_valid_package_name, normalize_target_dir, to_valid_package_name
from create_init.templates import TEMPLATES, Template, get_template, template_names

__all__ = [
    "TEMPLATES",
    "CancelReason",
    "Cancelled",
    "Choice",
    "CliInvocation",
    "Completed",
    "ConfigError",
    "CreateInitError",
    "DecisionRecord",
    "FlowResult",
    "ManifestError",
    "ManifestReadError",
    "Mode",
    "OverwriteChoice",
    "Prompter",
    "ScaffoldError",
    "ScaffoldSettings",
    "Template",
    "__version__",
    "get_template",
    "is_valid_package_name",
    "load_config",
    "materialize",
    "normalize_target_dir",
    "run_flow",
    "template_names",
    "to_valid_package_name",
]
