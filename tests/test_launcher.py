import subprocess
import sys
from pathlib import Path

import pytest

from nakudynamo.environment import DynamoEnvironment
from nakudynamo.launcher import build_command, start, stop_dynamodb


def _env(jre: str, jar: str = "/opt/DynamoDBLocal.jar") -> DynamoEnvironment:
    return DynamoEnvironment(
        jre_path=Path(jre),
        dynamo_jar_path=Path(jar),
        working_dir=Path("/opt"),
    )


def test_build_command_runs_jar_in_memory():
    env = _env("/opt/jre/bin/java")
    cmd = build_command(env)
    assert cmd[1:] == ["-jar", str(Path("/opt/DynamoDBLocal.jar")), "-inMemory"]
    assert cmd[0] == str(Path("/opt/jre/bin/java"))


def test_start_uses_built_command():
    env = _env(sys.executable, "missing.jar")
    process = start(env)
    try:
        assert process.args == build_command(env)
    finally:
        process.wait(timeout=30)


def test_start_with_missing_executable_raises(tmp_path):
    env = _env(str(tmp_path / "no-such-java"))
    with pytest.raises(OSError):
        start(env)


def test_stop_interrupts_process():
    script = (
        "import sys, time\n"
        "try:\n"
        "    print('ready', flush=True)\n"
        "    time.sleep(60)\n"
        "except KeyboardInterrupt:\n"
        "    print('interrupted', flush=True)\n"
    )
    process = subprocess.Popen(
        [sys.executable, "-c", script], stdout=subprocess.PIPE, text=True
    )
    try:
        assert process.stdout.readline().strip() == "ready"
        stop_dynamodb(process)
        output, _ = process.communicate(timeout=30)
    finally:
        if process.poll() is None:
            process.kill()
            process.wait()
    assert output.strip() == "interrupted"