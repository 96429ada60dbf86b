"""Run configuration for the model code generator."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .codegen_config import get_config, parse_collection_types


@dataclass
class Config:
    """Configuration for one generation run."""

    input_paths: list[Path]
    output_dir: Path
    target_platform: str = "wpf"
    root_namespace: str = "Microsoft.StandardUI"
    collection_types: dict[str, str] = field(default_factory=dict)
    verbose: bool = False
    log_dir: Path | None = Path("logs")

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        defaults = get_config()

        input_paths_str = os.getenv("INPUT_PATHS", "")
        output_dir_str = os.getenv("OUTPUT_DIR", "src")
        target_platform = os.getenv("TARGET_PLATFORM", "wpf")
        root_namespace = os.getenv("ROOT_NAMESPACE", defaults["ROOT_NAMESPACE"])
        collection_types_str = os.getenv("COLLECTION_TYPES", defaults["COLLECTION_TYPES"])
        verbose_str = os.getenv("VERBOSE", "false").lower()

        input_paths = [Path(p) for p in input_paths_str.split(os.pathsep) if p.strip()]

        return cls(
            input_paths=input_paths,
            output_dir=Path(output_dir_str),
            target_platform=target_platform.lower(),
            root_namespace=root_namespace,
            collection_types=parse_collection_types(collection_types_str),
            verbose=verbose_str in ("true", "1", "yes"),
            log_dir=Path(defaults["LOG_DIR"]) if defaults["ENABLE_FILE_LOG"] else None,
        )

    @classmethod
    def from_args(
        cls,
        input_paths: Optional[list[Path]] = None,
        output_dir: Optional[Path] = None,
        target_platform: Optional[str] = None,
        verbose: Optional[bool] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            input_paths: Declaration files or directories (overrides env)
            output_dir: Output root directory (overrides env)
            target_platform: Platform identifier (overrides env)
            verbose: Enable verbose output (overrides env)

        Returns:
            Config object
        """
        config = cls.from_env()

        if input_paths:
            config.input_paths = list(input_paths)
        if output_dir is not None:
            config.output_dir = output_dir
        if target_platform is not None:
            config.target_platform = target_platform.lower()
        if verbose is not None:
            config.verbose = verbose

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if not self.input_paths:
            raise ValueError("No input paths given")

        for input_path in self.input_paths:
            if not input_path.exists():
                raise ValueError(f"Input path not found: {input_path}")

        if not self.root_namespace or self.root_namespace.startswith(".") or self.root_namespace.endswith("."):
            raise ValueError(f"Invalid root namespace: '{self.root_namespace}'")

    def ensure_output_dir(self) -> None:
        """Create the output directory if it doesn't exist."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
