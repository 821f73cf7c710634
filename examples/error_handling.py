"""Error handling patterns with recovery hints.

This example demonstrates how to handle common errors and use
the recovery_hint property to provide actionable guidance.
"""

from pathlib import Path

from swmanifest import (
    ConfigLoadError,
    ConfigurationError,
    FilesystemNotFoundError,
    Generator,
    LocalFilesystem,
    MalformedDurationError,
    Manifest,
    # Exceptions
    SwManifestError,
    load_config,
)


# Pattern 1: Report a bad duration with the data group it came from
def generate_or_explain(generator: Generator, config_path: Path) -> Manifest | None:
    """Generate a manifest, explaining malformed cache durations."""
    try:
        return generator.generate(load_config(config_path))
    except MalformedDurationError as e:
        print(f"Data group '{e.group}' has a bad {e.field}: {e.duration}")
        print(f"Hint: {e.recovery_hint}")
        return None


# Pattern 2: Point at the broken line of the configuration file
def load_or_explain(config_path: Path) -> None:
    """Load the configuration, reporting JSON and structural errors."""
    try:
        load_config(config_path)
    except ConfigLoadError as e:
        print(f"Could not load {e.config_path}")
        print(f"Hint: {e.recovery_hint}")
    except ConfigurationError as e:
        print(f"Invalid setting {e.field}: {e}")


# Pattern 3: Catch-all for any library error
def generate_safe(dist: Path, config_path: Path) -> Manifest | None:
    """Generate a manifest with comprehensive error handling."""
    generator = Generator(LocalFilesystem(dist), "/")
    try:
        return generator.generate(load_config(config_path))
    except FilesystemNotFoundError as e:
        print(f"Build output not found: {e.source}")
        return None
    except SwManifestError as e:
        print(f"Error: {e}")
        if e.recovery_hint:
            print(f"Hint: {e.recovery_hint}")
        return None


if __name__ == "__main__":
    manifest = generate_safe(Path("dist"), Path("sw-config.json"))
    if manifest is not None:
        print(manifest.to_json())
