"""Device capability profiles.

- DeviceProfile: immutable per-device capability data
- DlnaFlag: DLNA.ORG_FLAGS capability bits
- ProfileRegistry: friendly-name lookup with default fallback
- load_registry: built-ins plus YAML profile files
"""

from dlnaneg.profiles.flags import (
    DEFAULT_FLAGS,
    DlnaFlag,
    flag_names,
    flags_from_names,
    format_flags,
)
from dlnaneg.profiles.loader import (
    ProfileError,
    ProfileNotFoundError,
    get_profiles_directory,
    load_profile_file,
    load_registry,
)
from dlnaneg.profiles.models import DeviceProfile
from dlnaneg.profiles.registry import (
    DLNA_PROFILE,
    SAMSUNG_DTV_DMR,
    SAMSUNG_PROFILE,
    ProfileRegistry,
    default_registry,
)

__all__ = [
    "DEFAULT_FLAGS",
    "DLNA_PROFILE",
    "SAMSUNG_DTV_DMR",
    "SAMSUNG_PROFILE",
    "DeviceProfile",
    "DlnaFlag",
    "ProfileError",
    "ProfileNotFoundError",
    "ProfileRegistry",
    "default_registry",
    "flag_names",
    "flags_from_names",
    "format_flags",
    "get_profiles_directory",
    "load_profile_file",
    "load_registry",
]
