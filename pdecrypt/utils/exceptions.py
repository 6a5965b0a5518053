"""
Custom exceptions for pdecrypt.
"""

class PDecryptError(Exception):
    """Base exception for pdecrypt errors"""
    pass


class InvalidInputError(PDecryptError, ValueError):
    """Invalid value given on the command line or to the generator"""
    pass


class InvalidDateError(InvalidInputError):
    """Date of birth is not a valid day/month/year date"""
    pass


class InvalidNationalIDError(InvalidInputError):
    """National ID is not exactly 13 ASCII digits"""
    pass


class PasswordListError(PDecryptError):
    """Error reading or writing the password list file"""
    pass


class ConfigError(PDecryptError):
    """Error in configuration"""
    pass


class InputDirectoryError(PDecryptError):
    """Input directory missing or unreadable"""
    pass


class OutputDirectoryError(PDecryptError):
    """Output directory could not be created"""
    pass


class OutputDirectoryExistsError(OutputDirectoryError):
    """Output directory already exists"""
    pass
