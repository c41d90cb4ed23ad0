"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    INVALID_MANIFEST = 2


class LogCode(Enum):
    """Stable diagnostic codes attached to packaging errors.

    Args:
        Enum (string): Diagnostic code reported to downstream tooling.
    """

    NU5032 = "NU5032"  # license expression could not be parsed
    NU5034 = "NU5034"  # license expression version is not a valid version


class OutputFormats(Enum):
    """Output formats supported by the command line.

    Args:
        Enum (string): Output formats supported by the command line.
    """

    JSON = "json"
    TEXT = "text"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    NUSPEC_EXTENSION = ".nuspec"
    SUPPORTED_FORMATS = [
        OutputFormats.JSON.value,
        OutputFormats.TEXT.value,
    ]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

    # Environment and configuration
    ENV_LOG_LEVEL = "NUSPECREAD_LOG_LEVEL"
    ENV_STRICT = "NUSPECREAD_STRICT"
    CONFIG_SEARCH_PATHS = [
        "./nuspecread.yml",
        "./nuspecread.yaml",
        "~/.config/nuspecread/nuspecread.yml",
    ]

    # Tunables; may be overridden by YAML config or CLI flags
    STRICT_DEPENDENCY_VERSIONS = False
    OUTPUT_FORMAT = OutputFormats.JSON.value

    # License metadata
    LICENSE_EXPRESSION_URL = "https://licenses.nuget.org/"
    LICENSE_FILE_DEPRECATION_URL = "https://aka.ms/deprecateLicenseUrl"


class Messages:  # pylint: disable=too-few-public-methods
    """Message templates for packaging errors."""

    INVALID_NUSPEC_ENTRY = "The nuspec contains an invalid entry '{0}' in package '{1}'."
    INVALID_DEPENDENCY_VERSION = "Dependency '{0}' in package '{1}' has an invalid version range: '{2}'."
    INVALID_LICENSE_EXPRESSION_VERSION = "The license version string '{0}' is invalid."
    INVALID_PACKAGE_VERSION = "The nuspec contains an invalid version '{0}'."
    MISSING_METADATA_NODE = "The nuspec file is missing the required '{0}' element."
    MISSING_PACKAGE_ID = "The nuspec file does not declare a package id."
