"""Generate a manifest for a build output directory.

This example shows the simplest usage pattern: describe asset and data
groups, snapshot the build output, and write the manifest next to it.
"""

from swmanifest import Config, Generator, LocalFilesystem, publish_manifest


config = Config.from_dict(
    {
        "index": "/index.html",
        "assetGroups": [
            {
                # Downloaded when the client installs
                "name": "app",
                "installMode": "prefetch",
                "resources": {"files": ["/favicon.ico", "/index.html", "/*.css", "/*.js"]},
            },
            {
                # Fetched on first use, refreshed eagerly afterwards
                "name": "assets",
                "installMode": "lazy",
                "updateMode": "prefetch",
                "resources": {"files": ["/assets/**", "/*.svg", "/*.png"]},
            },
        ],
        "dataGroups": [
            {
                "name": "api",
                "urls": ["/api/**"],
                "cacheConfig": {"maxSize": 100, "maxAge": "3d12h", "timeout": "5s"},
            }
        ],
    }
)

# Every emitted URL is prefixed with the base href
filesystem = LocalFilesystem("dist")
manifest = Generator(filesystem, "/").generate(config)

path = publish_manifest(manifest, filesystem)
print(f"Wrote {path} with {len(manifest.hash_table)} hashed files")
