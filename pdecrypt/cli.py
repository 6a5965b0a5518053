#!/usr/bin/env python3
"""
Command-line interface for pdecrypt.
"""

import argparse
import os
import sys
import time
from typing import List, Optional

from pdecrypt import __version__
from pdecrypt.core.decryptor import BatchDecryptor
from pdecrypt.core.generator import (
    BirthdatePasswordGenerator,
    parse_date_of_birth,
    parse_national_id,
)
from pdecrypt.core.store import PasswordListStore
from pdecrypt.utils.config import Config, verbosity_to_level
from pdecrypt.utils.exceptions import InvalidInputError, PDecryptError
from pdecrypt.utils.logger import Logger
from pdecrypt.utils.paths import default_output_dir, expand_path


def _argument_type(parse):
    """Wrap a parser so argparse shows its own error message"""
    def convert(text):
        try:
            return parse(text)
        except InvalidInputError as e:
            raise argparse.ArgumentTypeError(str(e))
    convert.__name__ = parse.__name__
    return convert


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="pdecrypt",
        description=(
            "Decrypt all PDF files in a directory using a password list built "
            "from a date of birth and a national ID. Run 'pdecrypt init dd/mm/yyyy ID' "
            "once, then 'pdecrypt decrypt -i /path/to/pdfs'."
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Output options
    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "-v",
        "--verbosity",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging verbosity level (default: from config, info)",
    )
    output_group.add_argument("--log-file", help="Save log output to this file")
    output_group.add_argument(
        "-q", "--quiet", action="store_true", help="Suppress standard output messages"
    )

    # Config management
    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument("--config", help="Path to configuration file")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    p_init = subparsers.add_parser(
        "init",
        help="Create the password list from a date of birth and national ID",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p_init.add_argument(
        "dob",
        type=_argument_type(parse_date_of_birth),
        help="Date of birth, e.g. 01/01/1999 or 27/12/1994",
    )
    p_init.add_argument(
        "national_id",
        type=_argument_type(parse_national_id),
        help="13-digit national ID",
    )
    p_init.add_argument("--pw-list", help="Password list file (default: from config)")

    p_decrypt = subparsers.add_parser(
        "decrypt",
        help="Decrypt all PDF files in a directory",
    )
    p_decrypt.add_argument(
        "-i", "--input-dir", help="Directory with encrypted PDFs (default: current directory)"
    )
    p_decrypt.add_argument(
        "-o",
        "--output-dir",
        help="Directory to create for decrypted PDFs "
        "(default: <INPUT_DIR>_pdfs_decrypted_<TIMESTAMP> next to the input directory)",
    )
    p_decrypt.add_argument("--pw-list", help="Password list file (default: from config)")
    p_decrypt.add_argument(
        "-p", "--processes", type=int, help="Number of worker processes (default: from config, 1)"
    )
    p_decrypt.add_argument(
        "--strict",
        action="store_true",
        help="Exit with a non-zero status if any file could not be decrypted",
    )

    return parser


def setup_logger(args, config: Config) -> Logger:
    """Set up logging based on command-line arguments and config"""
    # Command-line args override config
    verbosity = args.verbosity or config.get("verbosity", "info")
    log_file = args.log_file or config.get("log_file")
    if log_file:
        log_file = expand_path(log_file)

    return Logger(
        name="pdecrypt",
        log_file=log_file,
        level=verbosity_to_level(verbosity),
        console=not args.quiet,
    )


def password_list_path(args, config: Config) -> str:
    return expand_path(args.pw_list or config.get("password_list"))


def run_init(args, config: Config, logger) -> int:
    """Generate and save the password list"""
    generator = BirthdatePasswordGenerator()
    candidates = generator.generate(args.dob, args.national_id)

    store = PasswordListStore(password_list_path(args, config))
    if store.exists():
        logger.info(f"Overwriting existing password list: {store.path}")
    store.save(candidates)

    logger.info(f"Wrote {len(candidates)} passwords to {store.path}")
    return 0


def run_decrypt(args, config: Config, logger) -> int:
    """Decrypt every PDF in the input directory"""
    store = PasswordListStore(password_list_path(args, config))
    candidates = store.load()
    logger.debug(f"Loaded {len(candidates)} passwords from {store.path}")

    input_dir = expand_path(args.input_dir) if args.input_dir else os.getcwd()
    output_dir = expand_path(args.output_dir) if args.output_dir else default_output_dir(input_dir)
    logger.info(f"Input directory: {input_dir}")
    logger.info(f"Output directory: {output_dir}")

    processes = args.processes or config.get("processes", 1)

    decryptor = BatchDecryptor(
        processes=processes,
        logger=logger,
        show_progress=not args.quiet,
    )

    start_time = time.time()
    outcome = decryptor.process(input_dir, candidates, output_dir)

    for line in outcome.report():
        if outcome.failed:
            logger.warning(line)
        else:
            logger.info(line)
    logger.info(f"Total time: {time.time() - start_time:.2f} seconds")

    if outcome.failed and args.strict:
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the pdecrypt CLI

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(args.config)
    except PDecryptError as e:
        print(f"pdecrypt: {e}", file=sys.stderr)
        return 1

    logger = setup_logger(args, config).get_logger()

    try:
        if args.command == "init":
            return run_init(args, config, logger)
        return run_decrypt(args, config, logger)

    except PDecryptError as e:
        logger.error(f"Error: {str(e)}")
        return 1
    except KeyboardInterrupt:
        logger.info("\nProcess interrupted by user.")
        return 130
    except Exception as e:
        logger.exception(f"Unexpected error: {str(e)}")
        return 1


def display_examples():
    """Display usage examples"""
    examples = [
        "Create the password list:",
        "  pdecrypt init 27/12/1994 1234567890123",
        "",
        "Decrypt the PDFs of the current directory:",
        "  pdecrypt decrypt",
        "",
        "Decrypt a directory into a chosen output directory:",
        "  pdecrypt decrypt -i ~/statements -o ~/statements_plain",
        "",
        "Use a password list stored elsewhere:",
        "  pdecrypt decrypt -i ~/statements --pw-list ./pw_list.json",
        "",
        "For more options:",
        "  pdecrypt -h",
    ]

    print("\n".join(examples))


if __name__ == "__main__":
    if len(sys.argv) == 1:
        display_examples()
        sys.exit(1)

    sys.exit(main())
