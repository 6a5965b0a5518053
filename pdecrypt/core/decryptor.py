"""
Batch decryptor for pdecrypt.

This module provides the BatchDecryptor class that decrypts every PDF of a
directory into a fresh output directory.
"""

import concurrent.futures
import os
from concurrent.futures.process import BrokenProcessPool
from typing import List, Optional, Sequence

from tqdm import tqdm

from .codec import PikePDFCodec
from .models import BatchOutcome, FailedFile
from .worker import decrypt_file
from pdecrypt.utils.exceptions import (
    InputDirectoryError,
    OutputDirectoryError,
    OutputDirectoryExistsError,
)
from pdecrypt.utils.logger import get_default_logger

PDF_EXTENSION = ".pdf"


def find_pdf_files(input_dir: str) -> List[str]:
    """List the PDF files directly inside input_dir

    Subdirectories are not searched. The extension check ignores case, so
    ``a.PDF`` is picked up while ``a.pdfx`` is not.

    Raises:
        InputDirectoryError: If the directory cannot be listed
    """
    try:
        with os.scandir(input_dir) as entries:
            return [
                entry.path
                for entry in entries
                if entry.is_file()
                and os.path.splitext(entry.name)[1].lower() == PDF_EXTENSION
            ]
    except OSError as e:
        raise InputDirectoryError(f"Cannot read input directory {input_dir}: {e}")


def create_output_dir(output_dir: str) -> None:
    """Create the output directory, refusing to reuse an existing one"""
    if os.path.lexists(output_dir):
        raise OutputDirectoryExistsError(f"Output directory already exists: {output_dir}")
    try:
        os.makedirs(output_dir)
    except FileExistsError:
        raise OutputDirectoryExistsError(f"Output directory already exists: {output_dir}")
    except OSError as e:
        raise OutputDirectoryError(f"Cannot create output directory {output_dir}: {e}")


class BatchDecryptor:
    """Decrypts all PDFs of a directory with a shared candidate list"""

    def __init__(self, codec=None, processes: Optional[int] = 1, logger=None,
                 show_progress: bool = False):
        """Initialize with a PDF codec, process count and optional logger

        Args:
            codec: PDF codec (default: pikepdf). Must be picklable when processes > 1
            processes: Number of worker processes, 1 runs everything in this process
            logger: Optional logger instance
            show_progress: Whether to draw a progress bar over the files
        """
        self.codec = codec or PikePDFCodec()
        self.processes = max(1, processes or 1)
        self.logger = logger or get_default_logger()
        self.show_progress = show_progress

    def process(self, input_dir: str, candidates: Sequence[str],
                output_dir: str) -> BatchOutcome:
        """Decrypt every PDF of input_dir into output_dir

        Files that no candidate opens, or whose copy cannot be written, are
        recorded in the outcome and never stop the batch.

        Args:
            input_dir: Directory holding the encrypted PDFs
            candidates: Passwords to try on each file, in order
            output_dir: Directory to create and fill, must not exist yet

        Returns:
            The aggregated outcome

        Raises:
            InputDirectoryError: If input_dir cannot be listed
            OutputDirectoryExistsError: If output_dir already exists
            OutputDirectoryError: If output_dir cannot be created
        """
        candidates = tuple(candidates)
        pdf_files = find_pdf_files(input_dir)
        self.logger.info(f"Found {len(pdf_files)} PDF file(s) in {input_dir}")

        self.logger.info(f"Creating output directory: {output_dir}")
        create_output_dir(output_dir)

        outcome = BatchOutcome()
        progress_bar = tqdm(total=len(pdf_files), unit="pdf", disable=not self.show_progress)
        try:
            if self.processes > 1 and len(pdf_files) > 1:
                results = self._run_parallel(pdf_files, candidates, output_dir, progress_bar)
            else:
                results = self._run_sequential(pdf_files, candidates, output_dir, progress_bar)
        finally:
            progress_bar.close()

        for result in results:
            outcome.add(result)
            if isinstance(result, FailedFile):
                self.logger.warning(f"Failed to decrypt {result.source}: {result.reason}")
            else:
                self.logger.info(f"Wrote decrypted file: {result.destination}")

        return outcome

    def _run_sequential(self, pdf_files, candidates, output_dir, progress_bar):
        results = []
        for pdf_path in pdf_files:
            results.append(
                decrypt_file(pdf_path, candidates, output_dir, self.codec, self.logger)
            )
            progress_bar.update(1)
        return results

    def _run_parallel(self, pdf_files, candidates, output_dir, progress_bar):
        """Run each file's pipeline in a worker process, one result slot per file

        A worker that dies breaks the whole pool. Files left without a result
        are then retried one per fresh single-worker pool, so only the file
        that kills its worker is reported as failed.
        """
        workers = min(self.processes, len(pdf_files))
        self.logger.info(f"Using {workers} worker processes")

        slots = [None] * len(pdf_files)
        try:
            with concurrent.futures.ProcessPoolExecutor(max_workers=workers) as pool:
                futures = {}
                for index, pdf_path in enumerate(pdf_files):
                    future = pool.submit(decrypt_file, pdf_path, candidates, output_dir, self.codec)
                    futures[future] = index
                for future in concurrent.futures.as_completed(futures):
                    index = futures[future]
                    try:
                        slots[index] = future.result()
                    except BrokenProcessPool:
                        continue
                    except Exception as e:
                        # Result could not be pickled or unpickled
                        slots[index] = FailedFile(pdf_files[index], f"worker error: {e}")
                    progress_bar.update(1)
        except BrokenProcessPool:
            # Raised by submit once a worker has died, handled with the rest below
            pass

        unfinished = [index for index, slot in enumerate(slots) if slot is None]
        if unfinished:
            self.logger.warning(
                f"A worker process died, retrying {len(unfinished)} file(s) one at a time"
            )
        for index in unfinished:
            slots[index] = self._run_isolated(pdf_files[index], candidates, output_dir)
            progress_bar.update(1)
        return slots

    def _run_isolated(self, pdf_path, candidates, output_dir):
        """Run one file in a pool of its own"""
        try:
            with concurrent.futures.ProcessPoolExecutor(max_workers=1) as pool:
                future = pool.submit(decrypt_file, pdf_path, candidates, output_dir, self.codec)
                return future.result()
        except BrokenProcessPool:
            return FailedFile(pdf_path, "worker process died")
        except Exception as e:
            return FailedFile(pdf_path, f"worker error: {e}")
