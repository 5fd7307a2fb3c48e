"""GitHub Release Body Updater.

Rewrites the notes of published GitHub releases with a literal substring
replacement:
- every release of a repository (--all) or a single release by tag (--release)
- asks for confirmation before anything is mutated
- only releases whose body actually changes are written back
"""

__version__ = "1.0.0"
