"""Directory Scanner for Markdown and MDX files."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Union


@dataclass
class ScannerConfig:
    """Configuration for the directory scanner."""

    skip_hidden_files: bool = False
    supported_extensions: List[str] = None

    def __post_init__(self):
        if self.supported_extensions is None:
            self.supported_extensions = [".md", ".mdx"]


class DirectoryScanner:
    """Scans documentation directories for Markdown/MDX files."""

    def __init__(self, config: ScannerConfig = None):
        self.config = config or ScannerConfig()

    def scan_for_markdown_files(self, root_dir: Union[str, Path]) -> Iterator[str]:
        """
        Recursively scan for Markdown files.

        Args:
            root_dir: Root directory path to scan

        Yields:
            Absolute file paths with supported extensions (.md, .mdx)

        Raises:
            FileNotFoundError: If the root directory does not exist
            NotADirectoryError: If the root path is not a directory
            PermissionError: If a directory cannot be read
        """
        root_path = Path(root_dir)

        if not root_path.exists():
            raise FileNotFoundError(f"Directory not found: {root_dir}")

        if not root_path.is_dir():
            raise NotADirectoryError(f"Path is not a directory: {root_dir}")

        for file_path in self._walk_directory(root_path.resolve()):
            yield str(file_path)

    def _walk_directory(self, path: Path) -> Iterator[Path]:
        """Recursively walk directory tree and yield matching files."""
        # Sorted so the generated index is stable between runs
        for item in sorted(path.iterdir(), key=lambda p: p.name):
            if self.config.skip_hidden_files and item.name.startswith("."):
                continue

            if item.is_file():
                if self._is_markdown_file(item):
                    yield item
            elif item.is_dir():
                yield from self._walk_directory(item)

    def _is_markdown_file(self, file_path: Path) -> bool:
        """Check if file has a supported Markdown extension."""
        return file_path.suffix.lower() in self.config.supported_extensions
