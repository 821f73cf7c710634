"""Core domain models for swmanifest.

These models are pure Python dataclasses with no I/O dependencies. The
configuration models mirror the JSON configuration file; the manifest
models mirror the JSON manifest consumed by the runtime client.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Literal, Self

from swmanifest.core.exceptions import ConfigurationError


InstallMode = Literal["prefetch", "lazy"]
Strategy = Literal["freshness", "performance"]

INSTALL_MODES: tuple[str, ...] = ("prefetch", "lazy")
STRATEGIES: tuple[str, ...] = ("freshness", "performance")

DEFAULT_INSTALL_MODE = "prefetch"
DEFAULT_STRATEGY = "performance"
DEFAULT_DATA_GROUP_VERSION = 1
CONFIG_VERSION = 1


def _string_list(data: Mapping[str, Any], key: str, field: str) -> tuple[str, ...]:
    """Read an optional list of strings from a JSON mapping."""
    value = data.get(key)
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError(f"'{field}' must be a list of strings", field=field)
    for item in value:
        if not isinstance(item, str):
            raise ConfigurationError(
                f"'{field}' must contain only strings, got {item!r}", field=field
            )
    return tuple(value)


def _require_mapping(value: object, field: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"'{field}' must be an object", field=field)
    return value


@dataclass(frozen=True, slots=True)
class AssetResources:
    """Glob lists describing the resources of an asset group.

    Attributes:
        files: Globs matched against the build output (e.g. "/*.js").
        versioned_files: Deprecated alias of files, kept for old configs.
        urls: URL globs cached at runtime but not resolved against files.
    """

    files: tuple[str, ...] = ()
    versioned_files: tuple[str, ...] = ()
    urls: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], group: str) -> Self:
        """Build resources from the JSON "resources" object of a group."""
        prefix = f"assetGroups[{group}].resources"
        return cls(
            files=_string_list(data, "files", f"{prefix}.files"),
            versioned_files=_string_list(
                data, "versionedFiles", f"{prefix}.versionedFiles"
            ),
            urls=_string_list(data, "urls", f"{prefix}.urls"),
        )


@dataclass(frozen=True, slots=True)
class AssetGroup:
    """A named collection of static files sharing an install/update policy.

    Attributes:
        name: Unique group name.
        resources: The file and URL globs of the group.
        install_mode: "prefetch" or "lazy"; None means "prefetch".
        update_mode: "prefetch" or "lazy"; None inherits the install mode.

    Example:
        >>> group = AssetGroup(
        ...     name="app",
        ...     resources=AssetResources(files=("/index.html", "/*.js")),
        ...     install_mode="lazy",
        ... )
        >>> group.resolved_update_mode
        'lazy'
    """

    name: str
    resources: AssetResources = AssetResources()
    install_mode: InstallMode | None = None
    update_mode: InstallMode | None = None

    def __post_init__(self) -> None:
        """Validate group fields after initialization."""
        if not self.name:
            raise ConfigurationError("Asset group name cannot be empty", field="name")
        for field, value in (
            ("installMode", self.install_mode),
            ("updateMode", self.update_mode),
        ):
            if value is not None and value not in INSTALL_MODES:
                raise ConfigurationError(
                    f"Asset group '{self.name}' has invalid {field} '{value}'; "
                    f"expected one of {', '.join(INSTALL_MODES)}",
                    field=f"assetGroups[{self.name}].{field}",
                )

    @property
    def resolved_install_mode(self) -> str:
        """Install mode with the default applied."""
        return self.install_mode or DEFAULT_INSTALL_MODE

    @property
    def resolved_update_mode(self) -> str:
        """Update mode, falling back to the install mode."""
        return self.update_mode or self.resolved_install_mode

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Build an asset group from its JSON object."""
        data = _require_mapping(data, "assetGroups[]")
        name = data.get("name", "")
        resources = _require_mapping(
            data.get("resources", {}), f"assetGroups[{name}].resources"
        )
        return cls(
            name=name,
            resources=AssetResources.from_dict(resources, name),
            install_mode=data.get("installMode"),
            update_mode=data.get("updateMode"),
        )


@dataclass(frozen=True, slots=True)
class CacheConfig:
    """Runtime caching policy of a data group.

    Attributes:
        max_size: Maximum number of cached responses.
        max_age: Duration string, e.g. "3d12h".
        timeout: Optional network timeout duration string.
        strategy: "freshness" or "performance"; None means "performance".
    """

    max_size: int
    max_age: str
    timeout: str | None = None
    strategy: Strategy | None = None

    def __post_init__(self) -> None:
        """Validate cache policy fields."""
        if isinstance(self.max_size, bool) or not isinstance(self.max_size, int):
            raise ConfigurationError(
                f"maxSize must be an integer, got {self.max_size!r}",
                field="cacheConfig.maxSize",
            )
        if not isinstance(self.max_age, str):
            raise ConfigurationError(
                f"maxAge must be a duration string, got {self.max_age!r}",
                field="cacheConfig.maxAge",
            )
        if self.timeout is not None and not isinstance(self.timeout, str):
            raise ConfigurationError(
                f"timeout must be a duration string, got {self.timeout!r}",
                field="cacheConfig.timeout",
            )
        if self.strategy is not None and self.strategy not in STRATEGIES:
            raise ConfigurationError(
                f"Invalid strategy '{self.strategy}'; "
                f"expected one of {', '.join(STRATEGIES)}",
                field="cacheConfig.strategy",
            )

    @property
    def resolved_strategy(self) -> str:
        """Strategy with the default applied."""
        return self.strategy or DEFAULT_STRATEGY

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Build a cache policy from its JSON object."""
        data = _require_mapping(data, "cacheConfig")
        missing = [key for key in ("maxSize", "maxAge") if key not in data]
        if missing:
            raise ConfigurationError(
                f"cacheConfig is missing {', '.join(missing)}",
                field=f"cacheConfig.{missing[0]}",
            )
        return cls(
            max_size=data["maxSize"],
            max_age=data["maxAge"],
            timeout=data.get("timeout"),
            strategy=data.get("strategy"),
        )


@dataclass(frozen=True, slots=True)
class DataGroup:
    """A named collection of dynamic URL patterns with a caching policy.

    Attributes:
        name: Unique group name.
        urls: URL globs; "?" is matched literally.
        cache_config: The caching policy.
        version: Cache version; bump to invalidate stored responses.
    """

    name: str
    urls: tuple[str, ...]
    cache_config: CacheConfig
    version: int | None = None

    def __post_init__(self) -> None:
        """Validate data group fields."""
        if not self.name:
            raise ConfigurationError("Data group name cannot be empty", field="name")
        if self.version is not None and (
            isinstance(self.version, bool) or not isinstance(self.version, int)
        ):
            raise ConfigurationError(
                f"Data group '{self.name}' version must be an integer",
                field=f"dataGroups[{self.name}].version",
            )

    @property
    def resolved_version(self) -> int:
        """Version with the default applied."""
        return self.version if self.version is not None else DEFAULT_DATA_GROUP_VERSION

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Build a data group from its JSON object."""
        data = _require_mapping(data, "dataGroups[]")
        name = data.get("name", "")
        if "cacheConfig" not in data:
            raise ConfigurationError(
                f"Data group '{name}' has no cacheConfig",
                field=f"dataGroups[{name}].cacheConfig",
            )
        return cls(
            name=name,
            urls=_string_list(data, "urls", f"dataGroups[{name}].urls"),
            cache_config=CacheConfig.from_dict(data["cacheConfig"]),
            version=data.get("version"),
        )


@dataclass(frozen=True, slots=True)
class Config:
    """Top-level configuration of one manifest generation run.

    Attributes:
        index: Path of the application's entry document.
        asset_groups: Asset groups in priority order (first match wins).
        data_groups: Data groups in declaration order.
        navigation_urls: Navigation globs; None selects the defaults.
        app_data: Opaque application data copied into the manifest.
        push: Opaque push configuration copied into the manifest.
    """

    index: str
    asset_groups: tuple[AssetGroup, ...] = ()
    data_groups: tuple[DataGroup, ...] = ()
    navigation_urls: tuple[str, ...] | None = None
    app_data: Any = None
    push: Any = None

    def __post_init__(self) -> None:
        """Validate the index and group name uniqueness."""
        if not self.index or not isinstance(self.index, str):
            raise ConfigurationError("Configuration must define 'index'", field="index")
        for kind, groups in (
            ("assetGroups", self.asset_groups),
            ("dataGroups", self.data_groups),
        ):
            seen: set[str] = set()
            for group in groups:
                if group.name in seen:
                    raise ConfigurationError(
                        f"Duplicate group name '{group.name}' in {kind}",
                        field=f"{kind}[{group.name}].name",
                    )
                seen.add(group.name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Build a configuration from a parsed JSON document.

        Unknown top-level keys (e.g. "$schema") are ignored.

        Raises:
            ConfigurationError: If the document is structurally invalid.
        """
        data = _require_mapping(data, "config")
        navigation_urls = (
            _string_list(data, "navigationUrls", "navigationUrls")
            if data.get("navigationUrls") is not None
            else None
        )
        return cls(
            index=data.get("index", ""),
            asset_groups=tuple(
                AssetGroup.from_dict(group) for group in data.get("assetGroups") or ()
            ),
            data_groups=tuple(
                DataGroup.from_dict(group) for group in data.get("dataGroups") or ()
            ),
            navigation_urls=navigation_urls,
            app_data=data.get("appData"),
            push=data.get("push"),
        )


@dataclass(frozen=True, slots=True)
class AssetGroupManifest:
    """A resolved asset group as written to the manifest."""

    name: str
    install_mode: str
    update_mode: str
    urls: tuple[str, ...]
    patterns: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "installMode": self.install_mode,
            "updateMode": self.update_mode,
            "urls": list(self.urls),
            "patterns": list(self.patterns),
        }


@dataclass(frozen=True, slots=True)
class DataGroupManifest:
    """A resolved data group as written to the manifest.

    Durations are in milliseconds; timeout_ms is None when no timeout
    was configured and is then omitted from the serialized form.
    """

    name: str
    patterns: tuple[str, ...]
    strategy: str
    max_size: int
    max_age: int
    timeout_ms: int | None
    version: int

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "name": self.name,
            "patterns": list(self.patterns),
            "strategy": self.strategy,
            "maxSize": self.max_size,
            "maxAge": self.max_age,
        }
        if self.timeout_ms is not None:
            result["timeoutMs"] = self.timeout_ms
        result["version"] = self.version
        return result


@dataclass(frozen=True, slots=True)
class NavigationUrl:
    """An anchored navigation rule; negative rules exclude requests."""

    positive: bool
    regex: str

    def to_dict(self) -> dict[str, Any]:
        return {"positive": self.positive, "regex": self.regex}


@dataclass(frozen=True, slots=True)
class Manifest:
    """The generated, versioned manifest of one deployment.

    The hash table is held as (url, hash) pairs sorted by URL so that
    iteration and serialization order never depend on file enumeration.

    Attributes:
        index: Entry document URL, joined with the base href.
        asset_groups: Resolved asset groups in configuration order.
        data_groups: Resolved data groups in configuration order.
        hash_table: Sorted (url, content hash) pairs.
        navigation_urls: Navigation rules in configuration order.
        app_data: Opaque application data, or None.
        push: Opaque push configuration, or None.
        config_version: Manifest format version.
    """

    index: str
    asset_groups: tuple[AssetGroupManifest, ...]
    data_groups: tuple[DataGroupManifest, ...]
    hash_table: tuple[tuple[str, str], ...]
    navigation_urls: tuple[NavigationUrl, ...]
    app_data: Any = None
    push: Any = None
    config_version: int = CONFIG_VERSION

    def __post_init__(self) -> None:
        """Validate that the hash table is sorted with unique keys."""
        urls = [url for url, _hash in self.hash_table]
        if urls != sorted(set(urls)):
            raise ValueError("Manifest hash_table must be sorted by unique URL")

    @property
    def hashes(self) -> Mapping[str, str]:
        """Read-only mapping view of the hash table (sorted key order)."""
        return MappingProxyType(dict(self.hash_table))

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-serializable wire representation."""
        result: dict[str, Any] = {"configVersion": self.config_version}
        if self.app_data is not None:
            result["appData"] = self.app_data
        if self.push is not None:
            result["push"] = self.push
        result["index"] = self.index
        result["assetGroups"] = [group.to_dict() for group in self.asset_groups]
        result["dataGroups"] = [group.to_dict() for group in self.data_groups]
        result["hashTable"] = dict(self.hash_table)
        result["navigationUrls"] = [url.to_dict() for url in self.navigation_urls]
        return result

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize the manifest; identical manifests give identical text."""
        return json.dumps(self.to_dict(), indent=indent)
