"""resourcegen configuration.

Centralised, typed configuration for resource generation.  All settings use
Pydantic v2 models so they can be validated at construction time and
serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from resourcegen.utils import NAMESPACE_SEPARATOR, is_valid_fqn, normalize_fqn

DEFAULT_NAVIGATION_ICON = "heroicon-o-rectangle-stack"


class Config(BaseModel):
    """Global resourcegen configuration.

    Namespaces follow PSR-4: ``app_namespace`` maps to ``app_path`` below
    ``output_dir``, and every generated class lands in the directory that
    mirrors the rest of its namespace.
    """

    output_dir: Path = Field(default=Path("."))
    app_namespace: str = Field(default="App")
    app_path: str = Field(default="app")
    resources_namespace: str = Field(default="App\\Filament\\Resources")
    models_namespace: str = Field(default="App\\Models")
    navigation_icon: str | None = Field(default=DEFAULT_NAVIGATION_ICON)
    partial_imports: bool = Field(
        default=True,
        description="Import a shared page namespace once instead of every page class",
    )
    sort_imports: bool = Field(default=True, description="Sort use statements when printing")

    @field_validator("app_namespace", "resources_namespace", "models_namespace")
    @classmethod
    def _validate_namespace(cls, value: str) -> str:
        value = normalize_fqn(value).rstrip(NAMESPACE_SEPARATOR)
        if not is_valid_fqn(value):
            raise ValueError(f"Invalid namespace: {value!r}")
        return value

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def app_dir(self) -> Path:
        """Directory that holds the ``app_namespace`` root."""
        return self.output_dir / self.app_path

    def path_for_class(self, fqn: str) -> Path:
        """Return the PSR-4 file path for a class.

        Raises:
            ValueError: If *fqn* lies outside ``app_namespace``.
        """
        name = normalize_fqn(fqn)
        prefix = self.app_namespace + NAMESPACE_SEPARATOR
        if not name.startswith(prefix):
            raise ValueError(f"Class {name} is outside the {self.app_namespace} namespace")
        segments = name[len(prefix):].split(NAMESPACE_SEPARATOR)
        return self.app_dir.joinpath(*segments[:-1]) / f"{segments[-1]}.php"

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            RESOURCEGEN_OUTPUT_DIR, RESOURCEGEN_APP_NAMESPACE,
            RESOURCEGEN_APP_PATH, RESOURCEGEN_RESOURCES_NAMESPACE,
            RESOURCEGEN_MODELS_NAMESPACE, RESOURCEGEN_NAVIGATION_ICON,
            RESOURCEGEN_PARTIAL_IMPORTS, RESOURCEGEN_SORT_IMPORTS.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("RESOURCEGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["RESOURCEGEN_OUTPUT_DIR"])
        for field_name in ("app_namespace", "app_path", "resources_namespace", "models_namespace"):
            value = os.environ.get(f"RESOURCEGEN_{field_name.upper()}")
            if value:
                kwargs[field_name] = value
        if "RESOURCEGEN_NAVIGATION_ICON" in os.environ:
            kwargs["navigation_icon"] = os.environ["RESOURCEGEN_NAVIGATION_ICON"] or None
        for flag in ("partial_imports", "sort_imports"):
            value = os.environ.get(f"RESOURCEGEN_{flag.upper()}")
            if value:
                kwargs[flag] = value.strip().lower() in ("1", "true", "yes", "on")
        return cls(**kwargs)
