"""Starting and stopping the DynamoDB Local server process."""

from __future__ import annotations

import os
import signal
import subprocess

from .environment import DynamoEnvironment


def build_command(env: DynamoEnvironment) -> list[str]:
    """Return the command line that runs DynamoDB Local in memory."""
    return [os.fspath(env.jre_path), "-jar", os.fspath(env.dynamo_jar_path), "-inMemory"]


def start(env: DynamoEnvironment) -> subprocess.Popen:
    """Start DynamoDB Local, sharing this process's standard output and error."""
    return subprocess.Popen(build_command(env))


def stop_dynamodb(process: subprocess.Popen) -> None:
    """Ask the server process to stop by sending it an interrupt."""
    if os.name == "nt":
        process.terminate()
    else:
        process.send_signal(signal.SIGINT)