"""Framework identifiers and short-name mappings."""

from enum import Enum


class FrameworkIdentifiers(str, Enum):
    """Long framework identifiers as they appear in ``.NETFramework,Version=v4.5``.

    Args:
        Enum (string): Canonical long identifier.
    """

    NET = ".NETFramework"
    NET_STANDARD = ".NETStandard"
    NET_CORE_APP = ".NETCoreApp"
    NET_CORE = ".NETCore"
    NET_PLATFORM = ".NETPlatform"
    NET_MICRO = ".NETMicroFramework"
    NET_NANO = ".NETnanoFramework"
    PORTABLE = ".NETPortable"
    WINDOWS = "Windows"
    WINDOWS_PHONE = "WindowsPhone"
    WINDOWS_PHONE_APP = "WindowsPhoneApp"
    SILVERLIGHT = "Silverlight"
    UAP = "UAP"
    DNX = "DNX"
    DNX_CORE = "DNXCore"
    ASP_NET = "ASP.NET"
    ASP_NET_CORE = "ASP.NETCore"
    MONO_ANDROID = "MonoAndroid"
    MONO_TOUCH = "MonoTouch"
    MONO_MAC = "MonoMac"
    XAMARIN_IOS = "Xamarin.iOS"
    XAMARIN_MAC = "Xamarin.Mac"
    XAMARIN_TVOS = "Xamarin.TVOS"
    XAMARIN_WATCHOS = "Xamarin.WatchOS"
    TIZEN = "Tizen"
    NATIVE = "native"
    ANY = "Any"
    AGNOSTIC = "Agnostic"
    UNSUPPORTED = "Unsupported"


SHORT_IDENTIFIERS = {
    "net": FrameworkIdentifiers.NET,
    "netstandard": FrameworkIdentifiers.NET_STANDARD,
    "netcoreapp": FrameworkIdentifiers.NET_CORE_APP,
    "netcore": FrameworkIdentifiers.NET_CORE,
    "dotnet": FrameworkIdentifiers.NET_PLATFORM,
    "netmf": FrameworkIdentifiers.NET_MICRO,
    "netnano": FrameworkIdentifiers.NET_NANO,
    "portable": FrameworkIdentifiers.PORTABLE,
    "win": FrameworkIdentifiers.WINDOWS,
    "wp": FrameworkIdentifiers.WINDOWS_PHONE,
    "wpa": FrameworkIdentifiers.WINDOWS_PHONE_APP,
    "sl": FrameworkIdentifiers.SILVERLIGHT,
    "uap": FrameworkIdentifiers.UAP,
    "dnx": FrameworkIdentifiers.DNX,
    "dnxcore": FrameworkIdentifiers.DNX_CORE,
    "aspnet": FrameworkIdentifiers.ASP_NET,
    "aspnetcore": FrameworkIdentifiers.ASP_NET_CORE,
    "monoandroid": FrameworkIdentifiers.MONO_ANDROID,
    "monotouch": FrameworkIdentifiers.MONO_TOUCH,
    "monomac": FrameworkIdentifiers.MONO_MAC,
    "xamarinios": FrameworkIdentifiers.XAMARIN_IOS,
    "xamarinmac": FrameworkIdentifiers.XAMARIN_MAC,
    "xamarintvos": FrameworkIdentifiers.XAMARIN_TVOS,
    "xamarinwatchos": FrameworkIdentifiers.XAMARIN_WATCHOS,
    "tizen": FrameworkIdentifiers.TIZEN,
    "native": FrameworkIdentifiers.NATIVE,
    "any": FrameworkIdentifiers.ANY,
    "agnostic": FrameworkIdentifiers.AGNOSTIC,
    "unsupported": FrameworkIdentifiers.UNSUPPORTED,
}

# Reverse lookup used when rendering short folder names
LONG_TO_SHORT = {identifier.value.lower(): short for short, identifier in SHORT_IDENTIFIERS.items()}

# Long identifiers matched ignoring case map back to canonical casing
CANONICAL_LONG_NAMES = {identifier.value.lower(): identifier.value for identifier in FrameworkIdentifiers}

# Frameworks whose short names always use dotted versions (netstandard2.0, not netstandard20)
DOTTED_VERSION_FRAMEWORKS = {
    FrameworkIdentifiers.NET_STANDARD.value,
    FrameworkIdentifiers.NET_CORE_APP.value,
    FrameworkIdentifiers.NET_PLATFORM.value,
    FrameworkIdentifiers.UAP.value,
    FrameworkIdentifiers.TIZEN.value,
}

# Frameworks rendered with a bare major version when the rest is zero (win8, sl5)
SINGLE_DIGIT_VERSION_FRAMEWORKS = {
    FrameworkIdentifiers.WINDOWS.value,
    FrameworkIdentifiers.WINDOWS_PHONE.value,
    FrameworkIdentifiers.SILVERLIGHT.value,
}

PROFILE_SHORT_NAMES = {
    "client": "Client",
    "full": "",
    "cf": "CompactFramework",
    "wp": "WindowsPhone",
    "wp71": "WindowsPhone71",
}

# "net" with a major version at or above this maps to .NETCoreApp
NET5_MAJOR_VERSION = 5

EMPTY_FOLDER_PLACEHOLDER = "_._"
