"""Console script entry point for ``basics-tour``.

Wires production services from the composition layer before handing control
to the CLI, so the pip-installed command and ``python -m basics_tour`` share
one code path.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the tour with production services.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
