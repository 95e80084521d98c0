"""Exceptions for use in Santa Pairing"""

# Santa Pairing
# Copyright (C) 2025  Santa Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


# ========== Base Application Exception ==========


class SantaPairingException(Exception):
    """Base exception for all Santa Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(SantaPairingException):
    """Base exception for pairing-related errors."""

    pass


class NoPairingAvailableException(PairingException):
    """Raised when no valid pairing could be generated within the attempt budget."""

    def __init__(self, message: str, attempts: int = 0):
        super().__init__(message)
        self.attempts = attempts


# ========== Validation Exceptions ==========


class ValidationException(SantaPairingException):
    """Base exception for invalid input.

    Invalid input is never fixed by reshuffling, so these are raised before
    any pairing attempt is made.
    """

    pass


class InvalidParticipantsException(ValidationException):
    """Raised when the participant list is too short, blank or has duplicates."""

    pass


class InvalidGroupException(ValidationException):
    """Raised when a group names a non-participant or leaves someone stranded."""

    pass


class InvalidHistoryException(ValidationException):
    """Raised when history names a non-participant or leaves someone stranded."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(SantaPairingException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(SantaPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
