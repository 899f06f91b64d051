"""quote-keeper — read, prune, and append to a plain-text quote file.

Built around a declarative command tree with a custom parser so that
every invocation is validated in full before any file is touched.
"""

from quote_keeper.version import __version__

__all__: list[str] = ["__version__"]
