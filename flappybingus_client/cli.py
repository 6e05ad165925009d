"""flappybingus-client command-line entry point"""

import os
import sys
from typing import NoReturn


def main() -> NoReturn:
    """
    Main entry point for the flappybingus-client command

    Exits with the runner's code (0 or 2), or 1 when the shell settings file
    cannot be used.
    """
    from flappybingus_client.client.main import client_run

    try:
        exit_code: int = client_run(sys.argv[1:], os.environ)
    except KeyboardInterrupt:
        print("\nShutting down...")
        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
