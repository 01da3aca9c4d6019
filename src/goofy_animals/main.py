"""goofy-animal command-line entry point."""

import logging
import os
import random
from pathlib import Path

import yaml
from dotenv import load_dotenv

from .core import generate_name

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV = "GOOFY_ANIMALS_LOG_LEVEL"


def load_config(config_path: Path | None = None) -> dict:
    """Load configuration from YAML file.

    A missing, unparsable or non-mapping file gives an empty config.
    """
    if config_path is None:
        config_path = Path.home() / ".goofy-animals" / "config.yaml"

    if not config_path.exists():
        return {}

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.warning(f"Invalid config file {config_path}, using defaults: {e}")
        return {}

    if not isinstance(config, dict):
        if config is not None:
            logger.warning(f"Config file {config_path} is not a mapping, using defaults")
        return {}

    return config


def setup_logging(config: dict) -> None:
    """Set up logging configuration.

    The environment variable overrides ``logging.level`` from the config file.
    Records go to stderr, leaving stdout for the generated name.
    """
    log_config = config.get("logging")
    if not isinstance(log_config, dict):
        log_config = {}

    level_name = os.getenv(LOG_LEVEL_ENV) or log_config.get("level", DEFAULT_LOG_LEVEL)
    level = getattr(logging, str(level_name).upper(), logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main() -> None:
    """Main entry point."""
    config = load_config()
    setup_logging(config)

    # Seeded from OS entropy on every run
    rng = random.Random(os.urandom(32))

    try:
        print(generate_name(rng))
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        raise


if __name__ == "__main__":
    main()
