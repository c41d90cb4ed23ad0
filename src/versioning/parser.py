"""Token parsing utilities for NuGet version ranges."""

from typing import Optional, Tuple

from .models import FloatBehavior, FloatRange, VersionRange
from .version import NuGetVersion

_NUMERIC_FLOATS = {
    0: FloatBehavior.MAJOR,
    1: FloatBehavior.MINOR,
    2: FloatBehavior.PATCH,
    3: FloatBehavior.REVISION,
}

_PRERELEASE_FLOATS = {
    FloatBehavior.MAJOR: FloatBehavior.PRERELEASE_MAJOR,
    FloatBehavior.MINOR: FloatBehavior.PRERELEASE_MINOR,
    FloatBehavior.PATCH: FloatBehavior.PRERELEASE_PATCH,
    FloatBehavior.REVISION: FloatBehavior.PRERELEASE_REVISION,
}


def _split_numeric_float(numeric: str) -> Optional[Tuple[str, FloatBehavior]]:
    """Return (min version text, behavior) for a numeric part such as ``1.2.*``."""
    parts = numeric.split(".")
    if len(parts) > 4:
        return None
    if "*" not in numeric:
        return numeric, FloatBehavior.NONE
    # Only the final part may float, and only as a bare '*'
    if parts[-1] != "*" or any("*" in part for part in parts[:-1]):
        return None
    fixed = parts[:-1]
    if not all(part.isdigit() for part in fixed):
        return None
    padded = fixed + ["0"] * (3 - len(fixed)) if len(fixed) < 3 else fixed + ["0"]
    return ".".join(padded), _NUMERIC_FLOATS[len(fixed)]


def parse_float_range(value: Optional[str]) -> Optional[FloatRange]:
    """Parse a floating version (``*``, ``1.*``, ``1.0.0-beta*``, ``*-*``).

    A plain version parses to a FloatRange with FloatBehavior.NONE.
    Returns None when the text is not a valid floating version.
    """
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None

    if text == "*-*":
        return FloatRange(FloatBehavior.ABSOLUTE_LATEST, NuGetVersion.parse("0.0.0-0"), "", original_string=text)

    if "*" not in text:
        version = NuGetVersion.try_parse(text)
        if version is None:
            return None
        return FloatRange(FloatBehavior.NONE, version, original_string=text)

    numeric, sep, release = text.partition("-")
    split = _split_numeric_float(numeric)
    if split is None:
        return None
    min_text, behavior = split

    if not sep:
        version = NuGetVersion.try_parse(min_text)
        if version is None:
            return None
        return FloatRange(behavior, version, original_string=text)

    # Prerelease floats must end with the only '*' of the label
    if not release.endswith("*") or release.count("*") != 1:
        return None
    prefix = release[:-1]
    label = prefix.rstrip(".-") or "0"
    version = NuGetVersion.try_parse(f"{min_text}-{label}")
    if version is None:
        return None
    if behavior == FloatBehavior.NONE:
        behavior = FloatBehavior.PRERELEASE
    else:
        behavior = _PRERELEASE_FLOATS[behavior]
    return FloatRange(behavior, version, prefix, original_string=text)


def _parse_bound(text: str, allow_floating: bool) -> Tuple[bool, Optional[NuGetVersion], Optional[FloatRange]]:
    """Parse one side of an interval. Returns (ok, version, float range)."""
    if not text:
        return True, None, None
    if allow_floating and "*" in text:
        float_range = parse_float_range(text)
        if float_range is None:
            return False, None, None
        return True, float_range.min_version, float_range
    version = NuGetVersion.try_parse(text)
    return version is not None, version, None


def parse_version_range(value: Optional[str], allow_floating: bool = True) -> Optional[VersionRange]:
    """Parse NuGet range syntax into a VersionRange, or None when invalid.

    Accepts a bare minimum version (``1.0``), interval notation
    (``[1.0,2.0)``, ``(,1.0]``, ``[1.0]``) and, when allowed, floating
    versions (``1.*``).
    """
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None

    if text[0] not in "[(":
        if allow_floating and "*" in text:
            float_range = parse_float_range(text)
            if float_range is None:
                return None
            return VersionRange(
                min_version=float_range.min_version,
                is_min_inclusive=True,
                float_range=float_range,
                original_string=value,
            )
        version = NuGetVersion.try_parse(text)
        if version is None:
            return None
        return VersionRange(min_version=version, is_min_inclusive=True, original_string=value)

    if len(text) < 3 or text[-1] not in "])":
        return None
    is_min_inclusive = text[0] == "["
    is_max_inclusive = text[-1] == "]"

    parts = text[1:-1].split(",")
    if len(parts) > 2:
        return None
    parts = [part.strip() for part in parts]
    if not any(parts):
        return None

    if len(parts) == 1:
        # '[1.0]' is an exact match; '(1.0)' and friends are meaningless
        if not (is_min_inclusive and is_max_inclusive):
            return None
        min_text = max_text = parts[0]
    else:
        min_text, max_text = parts

    ok, min_version, float_range = _parse_bound(min_text, allow_floating)
    if not ok:
        return None
    ok, max_version, _ = _parse_bound(max_text, False)
    if not ok:
        return None

    if min_version is not None and max_version is not None:
        if min_version > max_version:
            return None
        if min_version == max_version and not (is_min_inclusive and is_max_inclusive):
            return None

    return VersionRange(
        min_version=min_version,
        is_min_inclusive=is_min_inclusive,
        max_version=max_version,
        is_max_inclusive=is_max_inclusive,
        float_range=float_range,
        original_string=value,
    )
