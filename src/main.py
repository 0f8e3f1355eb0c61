"""
Main entry point for the pangram checker.
"""

import argparse
import logging
from pathlib import Path
import yaml

from src.detection.pangram_detector import is_pangram, missing_letters
from src.utils.constants import DEFAULT_SENTENCE, RESULT_TEMPLATE, DEFAULT_LOG_LEVEL

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / 'config' / 'config.yaml'

logger = logging.getLogger(__name__)


def setup_logging(level: str = DEFAULT_LOG_LEVEL):
    """Configure logging for the project."""
    # stderr only, stdout is reserved for the result line
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler()
        ]
    )


def load_config(config_path=DEFAULT_CONFIG_PATH) -> dict:
    """Load configuration from YAML file, falling back to defaults if it is absent."""
    config_path = Path(config_path)
    if not config_path.exists():
        logger.warning(f"Config file {config_path} not found, using defaults")
        return {'logging': {'level': DEFAULT_LOG_LEVEL}}

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f) or {}
    config.setdefault('logging', {}).setdefault('level', DEFAULT_LOG_LEVEL)
    return config


def format_result(result: bool) -> str:
    """Render the result line, e.g. 'Is this a pangram? true!'."""
    return RESULT_TEMPLATE.format(result=str(result).lower())


def main(argv=None) -> int:
    """Check the fixed sentence and print whether it is a pangram."""
    parser = argparse.ArgumentParser(
        description="Check whether a fixed sentence is a pangram"
    )
    parser.add_argument(
        '--config',
        type=str,
        default=str(DEFAULT_CONFIG_PATH),
        help='Path to configuration file'
    )

    args = parser.parse_args(argv)

    config = load_config(args.config)
    setup_logging(config['logging']['level'])
    logger.info(f"Checking sentence: {DEFAULT_SENTENCE!r}")

    result = is_pangram(DEFAULT_SENTENCE)
    if not result:
        logger.info(f"Missing letters: {missing_letters(DEFAULT_SENTENCE)}")

    print(format_result(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
