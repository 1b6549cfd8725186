"""Console entry point for the interactive converter."""

import sys
from typing import Optional

from .bootstrap import build_application
from .errors import ConfigurationError


def main(config_dir: Optional[str] = None) -> int:
    """Run the converter on stdin/stdout until end of input."""
    try:
        components = build_application(config_dir=config_dir)
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return 2

    return components.application.run()


if __name__ == "__main__":
    sys.exit(main())
