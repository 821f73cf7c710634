"""swmanifest - Build-time manifest generator for offline-caching clients.

Given a declarative configuration (asset groups, data groups and
navigation rules) and a snapshot of a deployed static-asset directory,
swmanifest compiles a deterministic, versioned manifest: which files to
cache and how, their content hashes, and regex routing rules.

Example:
    >>> from swmanifest import Config, Generator, LocalFilesystem
    >>> config = Config.from_dict({
    ...     "index": "/index.html",
    ...     "assetGroups": [
    ...         {"name": "app", "resources": {"files": ["/index.html", "/*.js"]}},
    ...     ],
    ... })
    >>> manifest = Generator(LocalFilesystem("dist"), "/").generate(config)  # Lists and hashes dist/
    >>> print(manifest.to_json())
"""

from swmanifest.adapters.executor import (
    SynchronousExecutor,
    ThreadPoolExecutorAdapter,
)
from swmanifest.adapters.filesystem import InMemoryFilesystem, LocalFilesystem
from swmanifest.config import find_config, find_project_root, load_config
from swmanifest.core.duration import parse_duration_ms
from swmanifest.core.exceptions import (
    ConfigLoadError,
    ConfigurationError,
    FilesystemAccessError,
    FilesystemError,
    FilesystemNotFoundError,
    MalformedDurationError,
    SwManifestError,
)
from swmanifest.core.glob_utils import glob_to_regex, join_urls
from swmanifest.core.models import (
    AssetGroup,
    AssetGroupManifest,
    AssetResources,
    CacheConfig,
    Config,
    DataGroup,
    DataGroupManifest,
    Manifest,
    NavigationUrl,
)
from swmanifest.core.ports import (
    DiagnosticReporter,
    ExecutorPort,
    FilesystemPort,
    NullDiagnosticReporter,
)
from swmanifest.core.services import (
    Generator,
    process_navigation_urls,
    publish_manifest,
)
from swmanifest.diagnostics import LoggingDiagnosticReporter, RichDiagnosticReporter


__version__ = "0.1.0"

__all__ = [
    "AssetGroup",
    "AssetGroupManifest",
    "AssetResources",
    "CacheConfig",
    "Config",
    "ConfigLoadError",
    "ConfigurationError",
    "DataGroup",
    "DataGroupManifest",
    "DiagnosticReporter",
    "ExecutorPort",
    "FilesystemAccessError",
    "FilesystemError",
    "FilesystemNotFoundError",
    "FilesystemPort",
    "Generator",
    "InMemoryFilesystem",
    "LocalFilesystem",
    "LoggingDiagnosticReporter",
    "MalformedDurationError",
    "Manifest",
    "NavigationUrl",
    "NullDiagnosticReporter",
    "RichDiagnosticReporter",
    "SwManifestError",
    "SynchronousExecutor",
    "ThreadPoolExecutorAdapter",
    "__version__",
    "find_config",
    "find_project_root",
    "glob_to_regex",
    "join_urls",
    "load_config",
    "parse_duration_ms",
    "process_navigation_urls",
    "publish_manifest",
]
