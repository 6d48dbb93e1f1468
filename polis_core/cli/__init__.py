"""POLIS command line interface."""
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..config import PolisSettings
from . import general, layout

app = typer.Typer(help="Inspect POLIS resource layouts and directory files.")


@app.callback()
def main():
    """Configure logging from the POLIS_* settings before running a command."""
    PolisSettings().configure_logging()
    logger = logging.getLogger("polis_core")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


app.command("info")(general.info)
app.command("check")(general.check)
app.command("paths")(layout.paths)
app.command("urls")(layout.urls)
