"""
Default option values for the command line.

Defaults can be overridden through REFOLDER_* environment variables or a
.env file in the working directory. Explicit command-line flags always win.
"""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

ENV_MATCHING = "REFOLDER_MATCHING"
ENV_PREFIX = "REFOLDER_PREFIX"
ENV_SUFFIX = "REFOLDER_SUFFIX"


@dataclass(frozen=True)
class Defaults:
    matching: str = "*"
    prefix: str = "group"
    suffix: str = "numbers"


def load_defaults(dotenv_path: str | None = None) -> Defaults:
    """
    Build CLI defaults from the environment.

    Args:
        dotenv_path: Optional explicit .env file. When omitted, the nearest
            .env at or above the current directory is used, if any.

    Returns:
        Defaults with any REFOLDER_* overrides applied.
    """
    env_file = dotenv_path or find_dotenv(usecwd=True)
    if env_file:
        # Variables already set in the process environment take precedence
        load_dotenv(env_file)

    base = Defaults()
    return Defaults(
        matching=os.environ.get(ENV_MATCHING) or base.matching,
        prefix=os.environ.get(ENV_PREFIX) or base.prefix,
        suffix=os.environ.get(ENV_SUFFIX) or base.suffix,
    )
