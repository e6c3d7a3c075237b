"""Infrastructure layer — filesystem integration.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~tablecraft.exceptions.TablecraftError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from tablecraft.infra.file_writer import FileTableWriter

__all__: list[str] = ["FileTableWriter"]
