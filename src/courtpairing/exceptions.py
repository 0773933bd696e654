"""Exceptions for use in Court Pairing"""

# Court Pairing
# Copyright (C) 2025  Court Pairing developers
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


class CourtPairingException(Exception):
    """Base exception for all Court Pairing errors.

    All custom exceptions in the package should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(CourtPairingException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingException(PairingException):
    """Raised when a pair, team or match is malformed (e.g. a player paired with themself)."""

    pass


# ========== Roster Exceptions ==========


class RosterException(CourtPairingException):
    """Base exception for roster-related errors."""

    pass


class PlayerNotFoundException(RosterException):
    """Raised when a requested player cannot be found on the roster."""

    pass


class DuplicatePlayerException(RosterException):
    """Raised when attempting to add a player that already exists."""

    pass


class WaitlistException(RosterException):
    """Base exception for waitlist errors."""

    pass


class EmptyWaitlistException(WaitlistException):
    """Raised when an operation needs a waitlisted player and there are none."""

    pass


class PlayerNotOnWaitlistException(WaitlistException):
    """Raised when approving a player who is not waitlisted."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(CourtPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(CourtPairingException):
    """Base exception for resource-related errors."""

    pass


class ScheduleFileException(ResourceException):
    """Raised when a schedule file cannot be loaded or saved."""

    pass
