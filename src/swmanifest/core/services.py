"""Core domain services for swmanifest."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import cast

from swmanifest.core.duration import parse_duration_ms
from swmanifest.core.exceptions import MalformedDurationError
from swmanifest.core.glob_utils import (
    glob_list_to_matcher,
    join_urls,
    split_negation,
    url_to_regex,
)
from swmanifest.core.models import (
    AssetGroup,
    AssetGroupManifest,
    Config,
    DataGroup,
    DataGroupManifest,
    Manifest,
    NavigationUrl,
)
from swmanifest.core.ports import DiagnosticReporter, ExecutorPort, FilesystemPort
from swmanifest.logging import get_logger


logger = get_logger("generator")

# Include all URLs, then exclude files (an extension in the last segment)
# and anything containing "__" in the last or any other segment.
DEFAULT_NAVIGATION_URLS: tuple[str, ...] = (
    "/**",
    "!/**/*.*",
    "!/**/*__*",
    "!/**/*__*/**",
)

ROOT_DIRECTORY = "/"
DEFAULT_MANIFEST_PATH = "/sw-manifest.json"


class Generator:
    """Compiles a configuration and a file snapshot into a Manifest.

    The generator holds no state between runs: every call to generate()
    lists the filesystem afresh and builds a new manifest.

    Example:
        >>> from swmanifest import Config, Generator, InMemoryFilesystem
        >>> fs = InMemoryFilesystem({"/main.js": "console.log(1)"})
        >>> manifest = Generator(fs, "/").generate(Config(index="/index.html"))
        >>> manifest.index
        '/index.html'
    """

    def __init__(
        self,
        filesystem: FilesystemPort,
        base_href: str,
        diagnostics: DiagnosticReporter | None = None,
        executor: ExecutorPort | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            filesystem: Snapshot of the deployed directory.
            base_href: URL prefix applied to every emitted path.
            diagnostics: Receives deprecation notices. Defaults to logging.
            executor: Optional executor used to list files for all asset
                groups concurrently. Claiming and hashing stay sequential.
        """
        if diagnostics is None:
            from swmanifest.diagnostics import LoggingDiagnosticReporter

            diagnostics = LoggingDiagnosticReporter()

        self._filesystem = filesystem
        self._base_href = base_href
        self._diagnostics = diagnostics
        self._executor = executor

    @property
    def filesystem(self) -> FilesystemPort:
        """The filesystem snapshot this generator reads from."""
        return self._filesystem

    @property
    def base_href(self) -> str:
        """URL prefix applied to every emitted path."""
        return self._base_href

    def generate(self, config: Config) -> Manifest:
        """Build the manifest for a configuration.

        Args:
            config: The configuration to compile.

        Returns:
            A new, fully resolved Manifest.

        Raises:
            MalformedDurationError: If a data group duration is invalid.
            FilesystemError: If listing or hashing a file fails.
        """
        unordered_hash_table: dict[str, str] = {}
        asset_groups = self._process_asset_groups(config, unordered_hash_table)
        data_groups = self._process_data_groups(config)

        logger.debug("Hash table holds %d entries", len(unordered_hash_table))

        return Manifest(
            index=join_urls(self._base_href, config.index),
            asset_groups=asset_groups,
            data_groups=data_groups,
            hash_table=with_ordered_keys(unordered_hash_table),
            navigation_urls=process_navigation_urls(
                self._base_href, config.navigation_urls
            ),
            app_data=config.app_data,
            push=config.push,
        )

    def _process_asset_groups(
        self, config: Config, hash_table: dict[str, str]
    ) -> tuple[AssetGroupManifest, ...]:
        """Resolve asset groups in configuration order.

        A file claimed by one group is never claimed by a later group.
        """
        groups = config.asset_groups
        listings = self._list_files(len(groups))
        seen: set[str] = set()

        return tuple(
            self._process_asset_group(group, files, seen, hash_table)
            for group, files in zip(groups, listings, strict=True)
        )

    def _list_files(self, count: int) -> list[list[str]]:
        """List the snapshot once per asset group.

        With an executor the listings are requested concurrently; results
        are still returned in group order.
        """
        if self._executor is None or count <= 1:
            return [self._filesystem.list(ROOT_DIRECTORY) for _ in range(count)]

        executor = self._executor
        with executor:
            futures = [
                executor.submit(self._filesystem.list, ROOT_DIRECTORY)
                for _ in range(count)
            ]
            return [cast(list[str], future.result()) for future in futures]

    def _process_asset_group(
        self,
        group: AssetGroup,
        all_files: Sequence[str],
        seen: set[str],
        hash_table: dict[str, str],
    ) -> AssetGroupManifest:
        resources = group.resources
        logger.debug("Resolving asset group '%s'", group.name)
        if resources.versioned_files:
            self._diagnostics.warn(
                f"Asset group '{group.name}' uses the 'versionedFiles' option. "
                "'versionedFiles' and 'files' have the same behavior; "
                "use 'files' instead."
            )

        plain_files = _claim(all_files, glob_list_to_matcher(resources.files), seen)
        versioned_files = _claim(
            all_files, glob_list_to_matcher(resources.versioned_files), seen
        )
        matched_files = sorted([*plain_files, *versioned_files])

        logger.debug("Asset group '%s' matched %d files", group.name, len(matched_files))

        # One file at a time to bound concurrent reads.
        for file in matched_files:
            hash_table[join_urls(self._base_href, file)] = self._filesystem.hash(file)

        return AssetGroupManifest(
            name=group.name,
            install_mode=group.resolved_install_mode,
            update_mode=group.resolved_update_mode,
            urls=tuple(join_urls(self._base_href, file) for file in matched_files),
            patterns=tuple(
                url_to_regex(url, self._base_href, literal_question_mark=True)
                for url in resources.urls
            ),
        )

    def _process_data_groups(self, config: Config) -> tuple[DataGroupManifest, ...]:
        return tuple(self._process_data_group(group) for group in config.data_groups)

    def _process_data_group(self, group: DataGroup) -> DataGroupManifest:
        cache_config = group.cache_config
        logger.debug("Resolving data group '%s'", group.name)

        timeout_ms = None
        if cache_config.timeout:
            timeout_ms = _group_duration_ms(cache_config.timeout, group.name, "timeout")

        return DataGroupManifest(
            name=group.name,
            patterns=tuple(
                url_to_regex(url, self._base_href, literal_question_mark=True)
                for url in group.urls
            ),
            strategy=cache_config.resolved_strategy,
            max_size=cache_config.max_size,
            max_age=_group_duration_ms(cache_config.max_age, group.name, "maxAge"),
            timeout_ms=timeout_ms,
            version=group.resolved_version,
        )


def _claim(
    files: Iterable[str], matcher: Callable[[str], bool], seen: set[str]
) -> list[str]:
    """Return unclaimed files accepted by matcher and mark them as seen."""
    claimed: list[str] = []
    for file in files:
        if file not in seen and matcher(file):
            seen.add(file)
            claimed.append(file)
    return claimed


def _group_duration_ms(duration: str, group: str, field: str) -> int:
    try:
        return parse_duration_ms(duration)
    except MalformedDurationError as e:
        raise e.in_group(group, field) from None


def process_navigation_urls(
    base_href: str, urls: Iterable[str] | None = None
) -> tuple[NavigationUrl, ...]:
    """Compile navigation globs into anchored rules.

    Args:
        base_href: URL prefix for relative patterns.
        urls: Navigation globs, optionally prefixed with "!" to exclude.
            None selects DEFAULT_NAVIGATION_URLS.

    Returns:
        Rules in the given order; "?" acts as a wildcard here.
    """
    if urls is None:
        urls = DEFAULT_NAVIGATION_URLS

    rules: list[NavigationUrl] = []
    for url in urls:
        positive, body = split_negation(url)
        rules.append(
            NavigationUrl(positive=positive, regex=f"^{url_to_regex(body, base_href)}$")
        )
    return tuple(rules)


def with_ordered_keys(table: Mapping[str, str]) -> tuple[tuple[str, str], ...]:
    """Return the table's items sorted lexicographically by key."""
    return tuple((key, table[key]) for key in sorted(table))


def publish_manifest(
    manifest: Manifest,
    filesystem: FilesystemPort,
    path: str = DEFAULT_MANIFEST_PATH,
) -> str:
    """Write the manifest as JSON through the filesystem port.

    Returns:
        The path the manifest was written to.
    """
    filesystem.write(path, manifest.to_json())
    logger.debug("Wrote manifest to %s", path)
    return path
