"""Parse framework short folder names and long framework names."""

import logging
import re
import urllib.parse
from typing import List, Optional

from common.logging_utils import extra_context, is_debug_enabled

from .constants import (
    CANONICAL_LONG_NAMES,
    NET5_MAJOR_VERSION,
    PROFILE_SHORT_NAMES,
    SHORT_IDENTIFIERS,
    FrameworkIdentifiers,
)
from .framework import (
    EMPTY_VERSION,
    UNSUPPORTED_FRAMEWORK,
    FrameworkParseError,
    FrameworkVersion,
    NuGetFramework,
)

logger = logging.getLogger(__name__)

_FOLDER_RE = re.compile(r"^(?P<identifier>[A-Za-z]+)(?P<version>[0-9][0-9.]*)?(?:-(?P<suffix>.+))?$")
_PLATFORM_RE = re.compile(r"^(?P<platform>[A-Za-z]+)(?P<version>[0-9][0-9.]*)?$")
_PORTABLE_PROFILE_RE = re.compile(r"^Profile[0-9]+$", re.IGNORECASE)


def _parse_version_digits(text: Optional[str]) -> Optional[FrameworkVersion]:
    """Parse ``45`` (one digit per part) or ``4.5`` (dotted) into a version tuple."""
    if not text:
        return EMPTY_VERSION
    if "." in text:
        parts = text.split(".")
        if any(not part.isdigit() for part in parts) or len(parts) > 4:
            return None
        numbers = [int(part) for part in parts]
    else:
        if len(text) > 4:
            return None
        numbers = [int(digit) for digit in text]
    return tuple(numbers + [0] * (4 - len(numbers)))  # type: ignore[return-value]


def _parse_version_digits_dotted(text: Optional[str]) -> Optional[FrameworkVersion]:
    """Platform versions are always read as dotted numbers (``windows10`` is 10.0)."""
    if not text:
        return EMPTY_VERSION
    parts = text.split(".")
    if any(not part.isdigit() for part in parts) or len(parts) > 4:
        return None
    numbers = [int(part) for part in parts]
    return tuple(numbers + [0] * (4 - len(numbers)))  # type: ignore[return-value]


def _parse_portable(folder: str) -> NuGetFramework:
    """Parse ``portable-net45+win8`` or ``portable-Profile259``."""
    _, _, profile = folder.partition("-")
    if not profile:
        return NuGetFramework(FrameworkIdentifiers.PORTABLE.value)
    if _PORTABLE_PROFILE_RE.match(profile):
        return NuGetFramework(FrameworkIdentifiers.PORTABLE.value, profile=f"Profile{profile[7:]}")

    members: List[str] = []
    for token in profile.split("+"):
        token = token.strip()
        if not token:
            continue
        member = parse_folder(token)
        if not member.is_specific_framework or member.is_portable:
            raise FrameworkParseError(f"Invalid portable framework '{token}' in '{folder}'.")
        members.append(member.get_short_folder_name())
    if not members:
        raise FrameworkParseError(f"Invalid portable framework '{folder}'.")
    # Member order is not significant; normalize it so equal profiles compare equal
    normalized = "+".join(sorted(set(members), key=str.lower))
    return NuGetFramework(FrameworkIdentifiers.PORTABLE.value, profile=normalized)


def parse_folder(folder_name: str) -> NuGetFramework:
    """Parse a short folder name such as ``net45``, ``netstandard2.0`` or ``net6.0-windows``.

    Unknown identifiers yield the Unsupported framework rather than an error.
    """
    folder = folder_name.strip()
    if "%" in folder:
        folder = urllib.parse.unquote(folder)
    if not folder:
        raise FrameworkParseError("Framework folder name must not be empty.")

    if folder.lower() == "portable" or folder.lower().startswith("portable-"):
        return _parse_portable(folder)

    match = _FOLDER_RE.match(folder)
    if not match:
        return UNSUPPORTED_FRAMEWORK

    short = match.group("identifier").lower()
    identifier = SHORT_IDENTIFIERS.get(short)
    if identifier is None:
        if is_debug_enabled(logger):
            logger.debug("Unknown framework identifier", extra=extra_context(
                event="decision", component="frameworks", action="parse_folder",
                target=folder, outcome="unsupported"
            ))
        return UNSUPPORTED_FRAMEWORK

    if identifier in (FrameworkIdentifiers.ANY, FrameworkIdentifiers.AGNOSTIC, FrameworkIdentifiers.UNSUPPORTED):
        return NuGetFramework(identifier.value)

    version = _parse_version_digits(match.group("version"))
    if version is None:
        return UNSUPPORTED_FRAMEWORK

    suffix = match.group("suffix") or ""

    if identifier == FrameworkIdentifiers.NET and version[0] >= NET5_MAJOR_VERSION:
        platform = ""
        platform_version = EMPTY_VERSION
        if suffix:
            platform_match = _PLATFORM_RE.match(suffix)
            if not platform_match:
                raise FrameworkParseError(f"Invalid platform '{suffix}' in framework '{folder}'.")
            platform = platform_match.group("platform")
            parsed_platform_version = _parse_version_digits_dotted(platform_match.group("version"))
            if parsed_platform_version is None:
                raise FrameworkParseError(f"Invalid platform version in framework '{folder}'.")
            platform_version = parsed_platform_version
        return NuGetFramework(
            FrameworkIdentifiers.NET_CORE_APP.value,
            version,
            platform=platform,
            platform_version=platform_version,
        )

    profile = PROFILE_SHORT_NAMES.get(suffix.lower(), suffix) if suffix else ""
    return NuGetFramework(identifier.value, version, profile=profile)


def parse_framework_name(name: str) -> NuGetFramework:
    """Parse a long name such as ``.NETFramework,Version=v4.5,Profile=Client``.

    Raises:
        FrameworkParseError: when a component is malformed.
    """
    parts = [part.strip() for part in name.split(",")]
    identifier = parts[0]
    if not identifier:
        raise FrameworkParseError(f"Framework name '{name}' has no identifier.")
    identifier = CANONICAL_LONG_NAMES.get(identifier.lower(), identifier)

    version = EMPTY_VERSION
    profile = ""
    for part in parts[1:]:
        if not part:
            continue
        key, sep, value = part.partition("=")
        if not sep:
            raise FrameworkParseError(f"Invalid framework name component '{part}' in '{name}'.")
        key = key.strip().lower()
        value = value.strip()
        if key == "version":
            text = value[1:] if value[:1] in ("v", "V") else value
            parsed = _parse_version_digits_dotted(text)
            if parsed is None or not text:
                raise FrameworkParseError(f"Invalid framework version '{value}' in '{name}'.")
            version = parsed
        elif key == "profile":
            profile = value

    return NuGetFramework(identifier, version, profile=profile)


def parse(framework: str) -> NuGetFramework:
    """Parse a framework string in either short or long form.

    Long names are recognized by the comma separating their components.

    Raises:
        FrameworkParseError: when the string is empty or malformed.
    """
    if framework is None:
        raise FrameworkParseError("Framework string must not be None.")
    text = framework.strip()
    if not text:
        raise FrameworkParseError("Framework string must not be empty.")
    if "," in text:
        return parse_framework_name(text)
    return parse_folder(text)
