"""
Filesystem helpers for locating and naming pdecrypt's directories.
"""

import os
from datetime import datetime
from typing import Optional

OUTPUT_DIR_SUFFIX = "_pdfs_decrypted_"
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


def expand_path(path: str) -> str:
    """Expand ``~`` and environment variables in a user supplied path"""
    return os.path.expandvars(os.path.expanduser(path))


def default_output_dir(input_dir: str, now: Optional[datetime] = None) -> str:
    """Build the default output directory for an input directory

    The directory is a sibling of ``input_dir`` named
    ``<input basename>_pdfs_decrypted_<YYYYmmddHHMMSS>``. Nothing is created here.

    Args:
        input_dir: Directory holding the encrypted PDFs
        now: Timestamp to use (default: current local time)

    Returns:
        Path of the output directory
    """
    now = now or datetime.now()
    input_dir = os.path.abspath(input_dir)
    parent, basename = os.path.split(input_dir)
    dirname = f"{basename}{OUTPUT_DIR_SUFFIX}{now.strftime(TIMESTAMP_FORMAT)}"
    return os.path.join(parent, dirname)
