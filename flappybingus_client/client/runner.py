"""
Client runner: resolution outcome to exit code.

Exit codes:
    0   help shown, or window handed off successfully
    2   configuration errors (reported with usage text)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from flappybingus_client.client.client_cli import ClientOutput, errors_print, usage_text
from flappybingus_client.common.config import config_resolve
from flappybingus_client.common.types import ConfigOutcome, ErrorsOutcome, HelpOutcome, ParseOutcome
from flappybingus_client.shell.backend import WindowFactory

__all__ = ["ClientRunner", "EXIT_OK", "EXIT_USAGE"]

logger = logging.getLogger(__name__)

EXIT_OK: int = 0
EXIT_USAGE: int = 2


class ClientRunner:
    """Resolves configuration, reports problems, and launches the window."""

    def run(
        self,
        args: Sequence[str] | None,
        env: Mapping[str, str],
        output: ClientOutput,
        window_factory: WindowFactory,
    ) -> int:
        """
        Run one client launch.

        Args:
            args: Command-line tokens without the program name.
            env: Environment mapping.
            output: Output sink for usage and errors.
            window_factory: Creates the window for a valid configuration.

        Returns:
            Process exit code.
        """
        outcome: ParseOutcome = config_resolve(args, env)

        if isinstance(outcome, HelpOutcome):
            output.println(usage_text())
            return EXIT_OK

        if isinstance(outcome, ErrorsOutcome):
            logger.debug(f"Configuration rejected with {len(outcome.issues)} issue(s)")
            errors_print(output, outcome.errors)
            output.errln("")
            output.errln(usage_text())
            return EXIT_USAGE

        if not isinstance(outcome, ConfigOutcome):
            logger.error(f"Unexpected resolution outcome: {outcome!r}")
            errors_print(output, ["Configuration was not created."])
            return EXIT_USAGE

        config = outcome.config
        logger.info(f"Launching {config.title} against {config.server_url}")
        window_factory.create(config).show()
        return EXIT_OK
