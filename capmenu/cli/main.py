"""
capmenu CLI - screenshot and screen recording from one menu.

Usage:
    capmenu                 Show the menu (Stop/Cancel while recording)
    capmenu -s              Screenshot
    capmenu -r              Start a video recording
    capmenu -g              Start a GIF recording
    capmenu -q              Stop the recording and finalize it
    capmenu -nu ...         Do not upload the result
"""

import sys
from typing import Optional

import click

from capmenu import __version__
from capmenu.config import load_config
from capmenu.core.controller import SessionController
from capmenu.core.errors import CaptureError, RecordingActiveError, SelectionCancelled
from capmenu.core.mode import Mode
from capmenu.logging import get_logger, set_level
from capmenu.runner import LocalRunner

logger = get_logger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(
    __version__, "-v", "--version",
    prog_name="capmenu",
    message="%(prog)s version %(version)s",
)
@click.option("-s", "--screenshot", is_flag=True, help="Take a screenshot")
@click.option("-g", "--gif", is_flag=True, help="Start recording a GIF")
@click.option("-r", "--record", is_flag=True, help="Start recording a video")
@click.option("-q", "--stop", is_flag=True, help="Stop the active recording")
@click.option("-nu", "--no-upload", is_flag=True, help="Do not upload the result")
@click.option("--config", "config_path", type=click.Path(dir_okay=False),
              help="Config file (default: $XDG_CONFIG_HOME/capmenu/config)")
@click.option("--debug", is_flag=True, help="Verbose logging")
def cli(screenshot: bool, gif: bool, record: bool, stop: bool,
        no_upload: bool, config_path: Optional[str], debug: bool):
    """Capture screenshots, videos and GIFs through a menu."""
    config = load_config(config_path)
    if no_upload:
        config.no_upload = True
    set_level("DEBUG" if debug else config.log_level)

    controller = SessionController(config, LocalRunner())
    controller.check_dependencies()

    try:
        mode = controller.resolve_mode(requested_mode(screenshot, gif, record, stop))
        if mode == Mode.EXIT:
            logger.debug("Nothing selected")
            return
        controller.run(mode)
    except SelectionCancelled as e:
        logger.debug(str(e))
        return
    except (CaptureError, RecordingActiveError, OSError) as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)


def requested_mode(screenshot: bool, gif: bool, record: bool, stop: bool) -> Optional[Mode]:
    """Explicit mode from flags. Screenshot beats gif beats record beats stop."""
    if screenshot:
        return Mode.SCREENSHOT
    if gif:
        return Mode.GIF
    if record:
        return Mode.VIDEO
    if stop:
        return Mode.STOP
    return None


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
