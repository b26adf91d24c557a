"""
Environment Variable Handling.

Loads a .env file into os.environ using python-dotenv so that
${VAR} references and PATTERNBOOK_* overrides in configuration
can be supplied from it.
"""

from pathlib import Path

from dotenv import load_dotenv

# Track whether dotenv has been loaded
_dotenv_loaded: bool = False


def ensure_dotenv_loaded(env_file: str = ".env") -> bool:
    """Ensure .env file is loaded into os.environ.

    Variables already present in the environment win over the file.

    Args:
        env_file: Path to .env file (relative or absolute)

    Returns:
        True if a .env file was found and loaded, False otherwise
    """
    global _dotenv_loaded

    if _dotenv_loaded:
        return True

    for env_path in (Path(env_file), Path.cwd() / env_file):
        if env_path.exists():
            load_dotenv(env_path, override=False)
            _dotenv_loaded = True
            return True

    # No .env file found, that's okay - use defaults
    _dotenv_loaded = True
    return False


def reset_environment() -> None:
    """Forget that .env was loaded.

    Useful for testing or reloading after .env changes.
    """
    global _dotenv_loaded
    _dotenv_loaded = False
