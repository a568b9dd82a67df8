"""Top-level package for the MCQ Toolkit.

Provides subpackages:
- mcq_toolkit.core – immutable question/entity models, validation, serialization
- mcq_toolkit.generator – the text-to-MCQ generation pipeline
- mcq_toolkit.common – shared tables used by the generator
"""

def _get_version() -> str:
    """Get the installed version, or 0.0.0 when running from a source tree."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("mcq_toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()

from .generator import GenerationError, GenerationSettings, generate, generate_questions

__all__: list[str] = [
    "__version__",
    "GenerationError",
    "GenerationSettings",
    "generate",
    "generate_questions",
]
