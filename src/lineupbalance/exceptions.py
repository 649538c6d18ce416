"""Exceptions for use in Lineup Balance"""

# Lineup Balance
# Copyright (C) 2025  Lineup Balance developers
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


class LineupBalanceException(Exception):
    """Base exception for all Lineup Balance errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Template Exceptions ==========


class TemplateException(LineupBalanceException):
    """Base exception for lineup template errors."""

    pass


class InvalidTemplateException(TemplateException):
    """Raised when a lineup template is malformed (bad seat, court or round)."""

    pass


# ========== Player Exceptions ==========


class PlayerException(LineupBalanceException):
    """Base exception for player-related errors."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player data is invalid or incomplete."""

    pass


class RosterException(PlayerException):
    """Base exception for roster errors."""

    pass


class InvalidRosterException(RosterException):
    """Raised when a roster is empty, has duplicate names or does not fit the template."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(LineupBalanceException):
    """Base exception for validation errors."""

    pass


class RatingValidationException(ValidationException):
    """Raised when a rating value is invalid."""

    pass


class NameValidationException(ValidationException):
    """Raised when a player name is invalid."""

    pass


# ========== Search Exceptions ==========


class SearchException(LineupBalanceException):
    """Base exception for search errors."""

    pass


class SearchStateException(SearchException):
    """Raised when a result is requested before any trial has been evaluated."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(LineupBalanceException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


class MissingConfigurationException(ConfigurationException):
    """Raised when a configuration file cannot be found."""

    pass
