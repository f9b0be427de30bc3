"""Output writer for Level 3.

Writes generated definitions to disk. Writes never overwrite an existing
file unless explicitly allowed, and create parent directories as needed.
"""

from pathlib import Path

from utils import get_logger, validate_output_file

logger = get_logger(__name__)


class OutputWriter:
    """Writes generated text to a file.

    Args:
        encoding: Encoding used for written files
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def write(self, text: str, output_path: str | Path, overwrite: bool = False) -> Path:
        """Write text to ``output_path``.

        Args:
            text: Generated definitions
            output_path: Destination file
            overwrite: If True, overwrites an existing file. Defaults to False.

        Returns:
            Resolved path of the written file

        Raises:
            PathValidationError: If the destination is unsafe or a directory
            FileExistsError: If file exists and overwrite is False
            OSError: If directory creation or file write fails
        """
        resolved_path = validate_output_file(output_path)

        if resolved_path.exists() and not overwrite:
            raise FileExistsError(
                f"Output file already exists: {resolved_path}. "
                "Use --overwrite to replace it."
            )

        try:
            resolved_path.parent.mkdir(parents=True, exist_ok=True)
            resolved_path.write_text(text, encoding=self.encoding)
        except OSError as e:
            logger.error(f"Failed to write output to {resolved_path}: {e}")
            raise

        logger.info(f"Output written to: {resolved_path}")
        return resolved_path
