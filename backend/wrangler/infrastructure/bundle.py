"""Plugin Bundle — resolves the directory the plugin's static assets ship in.

Invariants:
    - get_bundle_path() returns an absolute, existing directory or raises BundlePathError
"""

from pathlib import Path

from wrangler.core.errors import BundlePathError


class StaticBundle:
    """Implements BundleProvider for a bundle unpacked at a fixed location."""

    def __init__(self, root: str | Path):
        self._root = Path(root)

    def get_bundle_path(self) -> Path:
        try:
            resolved = self._root.resolve(strict=True)
        except (OSError, RuntimeError) as e:
            raise BundlePathError(f"bundle path {self._root} unavailable: {e}")
        if not resolved.is_dir():
            raise BundlePathError(f"bundle path {resolved} is not a directory")
        return resolved
