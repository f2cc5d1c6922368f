from pathlib import Path

import pytest
import responses

from nakudynamo.environment import (
    DynamoEnvironment,
    EnvironmentError_,
    prepare_environment,
)
from nakudynamo.platforms import UnsupportedPlatformError, get_jre_release


def _populate(home: Path, java_name: str = "java") -> Path:
    working = home / ".nakudynamo"
    (working / "jre" / "bin").mkdir(parents=True)
    (working / "jre" / "bin" / java_name).write_text("java")
    (working / "DynamoDBLocal.jar").write_text("jar")
    return working


@pytest.fixture
def mocked_http():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_existing_installation_is_reused(tmp_path):
    working = _populate(tmp_path)
    env = prepare_environment(tmp_path, "linux")
    assert env == DynamoEnvironment(
        jre_path=working / "jre" / "bin" / "java",
        dynamo_jar_path=working / "DynamoDBLocal.jar",
        working_dir=working,
        port=8000,
    )


def test_download_dir_is_created(tmp_path):
    working = _populate(tmp_path)
    prepare_environment(tmp_path, "linux")
    assert (working / ".tmp").is_dir()


def test_windows_uses_exe_suffix(tmp_path):
    working = _populate(tmp_path, "java.exe")
    env = prepare_environment(tmp_path, "windows")
    assert env.jre_path == working / "jre" / "bin" / "java.exe"


def test_existing_files_are_left_untouched(tmp_path):
    working = _populate(tmp_path)
    prepare_environment(tmp_path, "linux")
    assert (working / "DynamoDBLocal.jar").read_text() == "jar"
    assert (working / "jre" / "bin" / "java").read_text() == "java"


def test_missing_jre_download_failure_raises(tmp_path, mocked_http):
    working = tmp_path / ".nakudynamo"
    working.mkdir()
    (working / "DynamoDBLocal.jar").write_text("jar")
    with pytest.raises(EnvironmentError_, match="failed to download jre"):
        prepare_environment(tmp_path, "linux")


def test_missing_jar_download_failure_raises(tmp_path, mocked_http):
    working = tmp_path / ".nakudynamo"
    (working / "jre" / "bin").mkdir(parents=True)
    (working / "jre" / "bin" / "java").write_text("java")
    with pytest.raises(EnvironmentError_, match="DynamoDBLocal"):
        prepare_environment(tmp_path, "linux")


def test_bad_checksum_download_is_rejected(tmp_path, mocked_http):
    mocked_http.add(responses.GET, get_jre_release("linux").url, body=b"not a jre")
    with pytest.raises(EnvironmentError_, match="checksum mismatch"):
        prepare_environment(tmp_path, "linux")
    assert not (tmp_path / ".nakudynamo" / ".tmp" / "jre.tar.gz").exists()


def test_unknown_platform_needing_download_raises(tmp_path):
    with pytest.raises(UnsupportedPlatformError):
        prepare_environment(tmp_path, "plan9")