"""Static package metadata surfaced to CLI commands and documentation.

Values here mirror ``pyproject.toml`` and are kept in sync by hand; the
layered-configuration identifiers decide where config files are searched.

Contents:
    * Package metadata constants (name, title, version, homepage, author).
    * Layered configuration identifiers (vendor, app, slug).
    * :func:`print_info` - render the metadata block for ``basics-tour info``.
"""

from __future__ import annotations

from typing import Final

#: Distribution name declared in ``pyproject.toml``.
name: Final[str] = "basics_tour"
#: Human-readable summary shown in CLI help output.
title: Final[str] = "Tour of basic declarations: variables, shorthand values, constants and printing"
#: Current release version.
version: Final[str] = "1.0.0"
#: Repository homepage.
homepage: Final[str] = "https://github.com/bitranox/basics_tour"
#: Author attribution.
author: Final[str] = "bitranox"
#: Contact email for the author.
author_email: Final[str] = "bitranox@gmail.com"
#: Console-script name published by the package.
shell_command: Final[str] = "basics-tour"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: Final[str] = "bitranox"
#: Application name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: Final[str] = "Basics Tour"
#: Configuration slug for lib_layered_config Linux paths and environment variables.
LAYEREDCONF_SLUG: Final[str] = "basics-tour"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for basics_tour:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
