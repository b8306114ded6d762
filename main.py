"""startup-metrics: extract and compare startup milestones from application logs."""

import sys

from startup_metrics.cli import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
