"""
Command line entry point for the UVF encoder.

Reads a JSON observation document and writes it as a UVF file.
"""

import sys
from pathlib import Path
from typing import List, Optional

from .core import Config, EncoderError
from .encoder import UVFEncoder
from .logger import setup_logger, LoggerContext
from .reader import ObservationReader


class UVFEncoderApp:
    """Encode observation documents to UVF files."""

    def __init__(
        self,
        config_file: Optional[str] = None,
        log_level: Optional[str] = None,
        log_file: Optional[str] = None
    ):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
            log_level: Logging level, overrides the configuration
            log_file: Log file path, overrides the configuration
        """
        # Load configuration
        self.config = Config(config_file)

        # Setup logger
        self.logger = setup_logger(
            log_file=log_file or self.config.log_file,
            log_level=log_level or self.config.log_level
        )
        self.logger.debug(f"Configuration: {self.config}")

        self.reader = ObservationReader(self.logger)
        self.encoder = UVFEncoder(self.config, self.logger)

    def run(self, input_file: str, output_file: Optional[str] = None) -> int:
        """
        Encode one observation document.

        Args:
            input_file: Path to JSON observation document
            output_file: Path of the UVF file; stdout when None

        Returns:
            Number of bytes written
        """
        with LoggerContext(self.logger, f"encoding {input_file}"):
            collection = self.reader.read(input_file)
            attachment = self.encoder.encode(collection)

        if attachment.is_empty:
            self.logger.warning(f"Nothing to write for {input_file}")
            return 0

        if output_file is None:
            sys.stdout.buffer.write(attachment.content)
            sys.stdout.buffer.flush()
        else:
            output_path = Path(output_file)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(attachment.content)
            self.logger.info(f"Wrote {attachment.size} bytes to {output_file}")

        return attachment.size


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Encode JSON observation documents as UVF files"
    )
    parser.add_argument(
        "input",
        type=str,
        help="Path to JSON observation document"
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Path of the UVF file. Default: stdout"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Path to log file"
    )

    args = parser.parse_args(argv)

    try:
        app = UVFEncoderApp(
            config_file=args.config,
            log_level=args.log_level,
            log_file=args.log_file
        )
        app.run(args.input, args.output)
    except (EncoderError, ValueError, FileNotFoundError) as e:
        print(f"Encoding failed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
