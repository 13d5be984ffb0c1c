"""
.env file loading for the Quotes client.

This module finds and loads a .env file with a hierarchical search so that
QUOTES_* variables (and any variables referenced through ``env:NAME``
markers) are in the environment before settings are read.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import dotenv_values, load_dotenv

logger = logging.getLogger(__name__)


class EnvFileLoader:
    """
    .env file loader with hierarchical search.

    Search order (stops at first file found):
    1. Current directory: .quotes/.env → .env
    2. Parent directories (up to git root or home): .quotes/.env → .env
    3. Home directory: ~/.quotes/.env → ~/.env
    """

    CONFIG_DIR_NAME = ".quotes"
    ENV_FILE_NAME = ".env"

    def __init__(self, working_directory: Optional[Path] = None, home_directory: Optional[Path] = None):
        """Initialize env file loader.

        Args:
            working_directory: Starting directory for search
            home_directory: Home directory used as the last fallback
        """
        self.working_directory = Path(working_directory or Path.cwd()).resolve()
        self.home_directory = Path(home_directory or Path.home()).resolve()
        self._loaded_file: Optional[Path] = None
        self._loaded_vars: Dict[str, Optional[str]] = {}

    def load_env_file(self, override: bool = False) -> Optional[Path]:
        """Load environment variables from the first .env file found.

        Existing environment variables win unless ``override`` is set.

        Returns:
            Path to loaded .env file or None if none found
        """
        env_file_path = self.find_env_file()

        if env_file_path is None:
            logger.debug("No .env file found in search path")
            return None

        load_dotenv(env_file_path, override=override)
        self._loaded_file = env_file_path
        self._loaded_vars = dict(dotenv_values(env_file_path))

        logger.info(f"Loaded environment variables from: {env_file_path}")
        return env_file_path

    def get_loaded_file(self) -> Optional[Path]:
        return self._loaded_file

    def get_loaded_vars(self) -> Dict[str, Optional[str]]:
        return self._loaded_vars.copy()

    def find_env_file(self) -> Optional[Path]:
        """Find the first .env file in the search hierarchy."""
        for candidate in self.get_search_paths():
            if candidate.is_file():
                return candidate
        return None

    def get_search_paths(self) -> List[Path]:
        """Get list of all paths that would be searched for .env files."""
        search_paths = []

        current_dir = self.working_directory
        while current_dir != current_dir.parent:
            search_paths.append(current_dir / self.CONFIG_DIR_NAME / self.ENV_FILE_NAME)
            search_paths.append(current_dir / self.ENV_FILE_NAME)

            if self._should_stop_search(current_dir):
                break

            current_dir = current_dir.parent

        search_paths.append(self.home_directory / self.CONFIG_DIR_NAME / self.ENV_FILE_NAME)
        search_paths.append(self.home_directory / self.ENV_FILE_NAME)

        return search_paths

    def _should_stop_search(self, directory: Path) -> bool:
        # Stop at Git repository root or home directory
        return (directory / ".git").exists() or directory == self.home_directory


def load_env_with_hierarchy(working_directory: Optional[Path] = None) -> Optional[Path]:
    """Convenience function to load .env file with hierarchical search."""
    loader = EnvFileLoader(working_directory)
    return loader.load_env_file()
