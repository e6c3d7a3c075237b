"""tablecraft — build ASCII/Unicode tables interactively in the terminal.

A small layered application: the ``core`` table model and command
processor, an ``infra`` file writer, and a ``cli`` interactive session.
"""

from tablecraft.version import __version__

__all__: list[str] = ["__version__"]
