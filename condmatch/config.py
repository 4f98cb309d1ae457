"""Configuration classes for condmatch components."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SemanticVersionConfig:
    """Grammar settings for semantic version strings."""

    # Maximum number of dot-separated numeric core segments
    max_core_parts: int = 3

    # Separator introducing a prerelease identifier
    prerelease_separator: str = "-"

    # Separator introducing build metadata, which never affects ordering
    build_separator: str = "+"

    def __post_init__(self) -> None:
        if self.max_core_parts < 1:
            raise ValueError("max_core_parts must be at least 1")
        if self.prerelease_separator == self.build_separator:
            raise ValueError("prerelease and build separators must differ")
        for sep in (self.prerelease_separator, self.build_separator):
            if len(sep) != 1 or sep.isalnum() or sep == ".":
                raise ValueError(f"Invalid separator: {sep!r}")


# Global configuration instance
SEMVER_CONFIG = SemanticVersionConfig()
