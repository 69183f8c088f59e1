# server/core/reload.py

import logging
import shlex
import subprocess

from core.errors import ReloadError


logger = logging.getLogger(__name__)

DEFAULT_RELOAD_COMMAND = "systemctl reload dnsmasq.service"


def reload_dns(command: str = DEFAULT_RELOAD_COMMAND) -> None:
    """
    Runs the DNS service reload command once. Output is discarded.
    Raises ReloadError if the command cannot be started or exits non-zero.
    An empty command disables the reload.
    """
    args = shlex.split(command)
    if not args:
        logger.info("DNS reload disabled, skipping")
        return

    try:
        result = subprocess.run(args, capture_output=True, text=True)
    except OSError as e:
        logger.error("DNS reload command %r could not be started: %s", command, e)
        raise ReloadError(str(e)) from e

    if result.returncode != 0:
        stderr = result.stderr.strip()
        logger.error("DNS reload command %r exited with %d: %s", command, result.returncode, stderr)
        raise ReloadError(f"{args[0]} exited with status {result.returncode}: {stderr}")

    logger.info("DNS reloaded")
