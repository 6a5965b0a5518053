"""
PDF codec backed by pikepdf.

The rest of pdecrypt only needs two operations from a PDF library: open a
file with a password, and save an open document without its encryption.
"""

from typing import Optional

import pikepdf


class PikePDFCodec:
    """Open and re-save password protected PDFs with pikepdf"""

    def try_open(self, pdf_path: str, password: str) -> Optional[pikepdf.Pdf]:
        """Open the PDF with a password

        Returns:
            The open document, or None if the password is wrong

        Raises:
            pikepdf.PdfError: If the file is not a readable PDF
        """
        try:
            return pikepdf.open(pdf_path, password=password)
        except pikepdf.PasswordError:
            return None

    def write_decrypted(self, document: pikepdf.Pdf, destination: str) -> None:
        """Save an open document to destination with encryption removed"""
        document.save(destination, encryption=False)

    def close(self, document: pikepdf.Pdf) -> None:
        document.close()
