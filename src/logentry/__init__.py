"""logentry — command-line logbook entry submission.

Turns command-line flags into a logbook entry and submits it, either
immediately or through the local entry queue.
"""

from logentry.version import __version__

__all__: list[str] = ["__version__"]
