import logging

from rich.logging import RichHandler
from rich.traceback import install as _install_tb


def setup_logging(level: int = logging.INFO, use_rich: bool = True) -> None:
    """Configure project-wide logging.

    - With `use_rich`, installs `rich.logging.RichHandler` for pretty console
      output and rich tracebacks.
    - Otherwise uses a standard library `StreamHandler` with a readable format.

    Existing root handlers are removed so repeated calls do not duplicate logs.
    """
    if use_rich:
        _install_tb()
        handler = RichHandler(rich_tracebacks=True)
        _reset_root(handler, level)
        logging.getLogger("a11y_heuristics").setLevel(level)
    else:
        _std_setup(level)


def _reset_root(handler: logging.Handler, level: int) -> None:
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel(level)


def _std_setup(level: int) -> None:
    fmt = "%(levelname)s:%(name)s: %(message)s"
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    _reset_root(handler, level)
