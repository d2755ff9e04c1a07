"""INI file resolver."""

import configparser

from ..errors import BadPathError, NotFoundError, ResolverError
from .base import BaseResolver, expand_env, read_file, split_file_and_key

DEFAULT_SECTION = "DEFAULT"

# No header can contain a newline, so DEFAULT parses as an ordinary section
# and named sections never inherit its keys
_UNUSED_DEFAULT_SECTION = "\n"


class IniResolver(BaseResolver):
    """Resolve a value by loading an INI file and selecting a key.

    Format: ``ini:/path/file.ini//Section.Key`` or ``ini:/path/file.ini//Key``
    for the default section. Keys that appear before any section header
    belong to the default section. A key is only found in the section that
    defines it. Without a key path the whole file is returned, trimmed.
    """

    @property
    def scheme(self) -> str:
        """Return scheme prefix."""
        return "ini:"

    def resolve(self, value: str) -> str:
        """Load the file and return the selected key's value."""
        file_path, key_path = split_file_and_key(value)
        file_path = expand_env(file_path)

        text = read_file(file_path, "INI")
        parser = _load(text, file_path)

        if not key_path:
            return text.strip()

        if "." in key_path:
            section_name, key_name = key_path.split(".", 1)
        else:
            section_name, key_name = DEFAULT_SECTION, key_path
        section_name = section_name or DEFAULT_SECTION
        if not key_name.strip():
            raise BadPathError(f"empty key in {key_path!r}")

        if not parser.has_section(section_name):
            raise NotFoundError(f"section {section_name!r} in {file_path!r}")

        section = parser[section_name]
        if key_name not in section:
            raise NotFoundError(
                f"key {key_name!r} in section {section_name!r} of {file_path!r}"
            )
        return section[key_name]


def _load(text: str, file_path: str) -> configparser.ConfigParser:
    """Parse INI text with case-sensitive keys and no value interpolation."""
    parser = configparser.ConfigParser(
        interpolation=None,
        strict=False,
        default_section=_UNUSED_DEFAULT_SECTION,
    )
    parser.optionxform = str  # type: ignore[method-assign]
    try:
        # Leading keys without a header go into the default section
        parser.read_string(f"[{DEFAULT_SECTION}]\n{text}", source=file_path)
    except configparser.Error as e:
        raise ResolverError(f"failed to parse INI file {file_path!r}", cause=e) from e
    return parser
