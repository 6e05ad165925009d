"""FlappyBingus desktop client composition root."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from flappybingus_client.client.bootstrap import (
    loggingWithConfig_setup,
    runtime_initialize,
    shellConfig_load,
    windowFactory_create,
)
from flappybingus_client.client.client_cli import ClientOutput, StreamOutput, usage_text
from flappybingus_client.client.client_logging import logging_setup
from flappybingus_client.client.runner import EXIT_OK, ClientRunner
from flappybingus_client.common.config import config_resolve
from flappybingus_client.common.shell_config import ShellConfig
from flappybingus_client.common.types import HelpOutcome
from flappybingus_client.shell.runtime import WebviewRuntime

logger = logging.getLogger(__name__)


def client_run(
    args: Sequence[str],
    env: Mapping[str, str],
    output: ClientOutput | None = None,
) -> int:
    """
    Wire the shell together and run one launch.

    Help is answered before the settings file is read, so `--help` works
    even when that file is broken. Otherwise settings-file and logging errors
    propagate to the caller.

    Args:
        args: Command-line tokens without the program name.
        env: Environment mapping.
        output: Output sink; stdout/stderr when omitted.

    Returns:
        Process exit code from the runner.
    """
    output = output or StreamOutput()
    if isinstance(config_resolve(args, env), HelpOutcome):
        output.println(usage_text())
        return EXIT_OK

    shell_config: ShellConfig = shellConfig_load(env)
    loggingWithConfig_setup(shell_config, logging_setup)

    runtime: WebviewRuntime = runtime_initialize(shell_config)
    window_factory = windowFactory_create(runtime)

    runner: ClientRunner = ClientRunner()
    return runner.run(args, env, output, window_factory)
