"""Custom diagnostics and parallel listing.

Embedding tools can collect deprecation notices instead of printing
them, and list the build output for all asset groups concurrently.
Claim order and hashing stay sequential, so the manifest is the same
as with a single worker.
"""

from swmanifest import Config, Generator, InMemoryFilesystem, ThreadPoolExecutorAdapter


class CollectingReporter:
    """DiagnosticReporter that keeps notices for a build summary."""

    def __init__(self) -> None:
        self.notices: list[str] = []

    def warn(self, message: str) -> None:
        self.notices.append(message)


filesystem = InMemoryFilesystem(
    {
        "/index.html": "<html></html>",
        "/main.js": "console.log('main')",
        "/assets/logo.svg": "<svg/>",
    }
)
config = Config.from_dict(
    {
        "index": "/index.html",
        "assetGroups": [
            {"name": "app", "resources": {"files": ["/index.html", "/*.js"]}},
            {"name": "assets", "resources": {"versionedFiles": ["/assets/**"]}},
        ],
    }
)

reporter = CollectingReporter()
generator = Generator(
    filesystem,
    "/",
    diagnostics=reporter,
    executor=ThreadPoolExecutorAdapter(max_workers=2),
)
manifest = generator.generate(config)

for notice in reporter.notices:
    print(f"notice: {notice}")
print(manifest.to_json())
