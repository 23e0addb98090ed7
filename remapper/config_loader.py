# Path: remapper/config_loader.py
"""
Configuration Loader for remapper

Loads configuration from .env file for the type remapping system.
Singleton pattern ensures consistent configuration across the entry point.

The matching engine never reads this object directly: main.py pulls the
values it needs and passes them in as explicit arguments.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'
DEFAULT_LOG_MAX_SIZE_MB: int = 10
DEFAULT_LOG_BACKUP_COUNT: int = 5

# Matching Defaults
DEFAULT_MAX_ALTERNATIVES: int = 5

# Performance Defaults
DEFAULT_MAX_CONCURRENT_JOBS: int = 4

# Output Defaults
DEFAULT_JSON_INDENT: int = 2


class ConfigLoader:
    """
    Singleton configuration loader for remapper.

    Loads configuration from environment variables with
    type conversion and sensible defaults.

    Example:
        config = ConfigLoader()
        module_path = config.get('module_path')  # Returns Path object
        jobs = config.get('max_concurrent_jobs')  # Returns int
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads the .env file
        next to this module on first instantiation.
        """
        if ConfigLoader._initialized:
            return

        # remapper/config_loader.py -> .env is in same directory
        env_path = Path(__file__).resolve().parent / '.env'

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load and validate all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types

        Raises:
            ValueError: If required configuration is missing
        """
        config = {
            # ================================================================
            # ENVIRONMENT & DEBUG
            # ================================================================
            'environment': self._get_env('REMAPPER_ENVIRONMENT', 'development'),
            'debug': self._get_bool('REMAPPER_DEBUG', False),

            # ================================================================
            # INPUT PATHS (READ-ONLY)
            # ================================================================
            'module_path': self._get_path('REMAPPER_MODULE_PATH'),
            'specs_path': self._get_path('REMAPPER_SPECS_PATH'),

            # ================================================================
            # OUTPUT PATHS (WRITE)
            # ================================================================
            'output_dir': self._get_path('REMAPPER_OUTPUT_DIR', required=True),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('REMAPPER_LOG_DIR', required=True),
            'log_level': self._get_env('REMAPPER_LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('REMAPPER_LOG_CONSOLE', True),
            'log_max_size_mb': self._get_int(
                'REMAPPER_LOG_MAX_SIZE_MB', DEFAULT_LOG_MAX_SIZE_MB
            ),
            'log_backup_count': self._get_int(
                'REMAPPER_LOG_BACKUP_COUNT', DEFAULT_LOG_BACKUP_COUNT
            ),

            # ================================================================
            # MATCHING CONFIGURATION
            # ================================================================
            'diagnostics': self._get_bool('REMAPPER_DIAGNOSTICS', True),
            'max_alternatives': self._get_int(
                'REMAPPER_MAX_ALTERNATIVES', DEFAULT_MAX_ALTERNATIVES
            ),

            # ================================================================
            # PERFORMANCE CONFIGURATION
            # ================================================================
            'max_concurrent_jobs': self._get_int(
                'REMAPPER_MAX_CONCURRENT_JOBS', DEFAULT_MAX_CONCURRENT_JOBS
            ),
            'enable_multithreading': self._get_bool(
                'REMAPPER_ENABLE_MULTITHREADING', False
            ),

            # ================================================================
            # POST-MATCH TRANSFORMS
            # ================================================================
            'publicize': self._get_bool('REMAPPER_PUBLICIZE', False),
            'unseal': self._get_bool('REMAPPER_UNSEAL', False),

            # ================================================================
            # OUTPUT CONFIGURATION
            # ================================================================
            'output_json': self._get_bool('REMAPPER_OUTPUT_JSON', True),
            'output_text': self._get_bool('REMAPPER_OUTPUT_TEXT', True),
            'json_indent': self._get_int('REMAPPER_JSON_INDENT', DEFAULT_JSON_INDENT),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self._config.get(key)
        return default if value is None else value

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name
            required: If True, raise error when missing

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(key)

        if value is None:
            if required:
                raise ValueError(f"Required path not configured: {key}")
            return None

        # Handle variable interpolation
        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def __repr__(self) -> str:
        """String representation showing key paths."""
        return (
            f"ConfigLoader("
            f"module_path={self._config.get('module_path')}, "
            f"environment={self._config.get('environment')})"
        )


__all__ = ['ConfigLoader']
