"""Unit tests for port interfaces."""

import pytest


@pytest.mark.core
@pytest.mark.tra("Port.FilesystemPort")
@pytest.mark.tier(0)
def test_filesystem_port_has_operations():
    """FilesystemPort should declare list, read, hash and write."""
    from swmanifest.core.ports import FilesystemPort

    for name in ("list", "read", "hash", "write"):
        assert hasattr(FilesystemPort, name)


@pytest.mark.core
@pytest.mark.tra("Port.FilesystemPort")
@pytest.mark.tier(0)
def test_in_memory_filesystem_satisfies_port():
    from swmanifest.adapters.filesystem import InMemoryFilesystem
    from swmanifest.core.ports import FilesystemPort

    assert isinstance(InMemoryFilesystem(), FilesystemPort)


@pytest.mark.core
@pytest.mark.tra("Port.FilesystemPort")
@pytest.mark.tier(0)
def test_local_filesystem_satisfies_port(tmp_path):
    from swmanifest.adapters.filesystem import LocalFilesystem
    from swmanifest.core.ports import FilesystemPort

    assert isinstance(LocalFilesystem(tmp_path), FilesystemPort)


@pytest.mark.core
@pytest.mark.tra("Port.DiagnosticReporter")
@pytest.mark.tier(0)
@pytest.mark.parametrize(
    "factory",
    ["NullDiagnosticReporter", "LoggingDiagnosticReporter", "RichDiagnosticReporter"],
)
def test_reporters_satisfy_protocol(factory):
    """All bundled reporters implement DiagnosticReporter."""
    import swmanifest
    from swmanifest.core.ports import DiagnosticReporter

    reporter = getattr(swmanifest, factory)()

    assert isinstance(reporter, DiagnosticReporter)


@pytest.mark.core
@pytest.mark.tra("Port.DiagnosticReporter")
@pytest.mark.tier(0)
def test_null_reporter_discards_warnings():
    from swmanifest.core.ports import NullDiagnosticReporter

    assert NullDiagnosticReporter().warn("ignored") is None


@pytest.mark.core
@pytest.mark.tra("Port.ExecutorPort")
@pytest.mark.tier(0)
def test_executors_satisfy_port():
    from swmanifest.adapters.executor import (
        SynchronousExecutor,
        ThreadPoolExecutorAdapter,
    )
    from swmanifest.core.ports import ExecutorPort

    pool = ThreadPoolExecutorAdapter(max_workers=1)
    with pool:
        assert isinstance(pool, ExecutorPort)
    assert isinstance(SynchronousExecutor(), ExecutorPort)
