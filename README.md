# nakudynamo

Run DynamoDB Local on your machine with a single command. No Java
installation is needed: nakudynamo fetches a Java 21 runtime and the DynamoDB
Local distribution, checks their SHA-256 checksums, unpacks them, and starts
the server in memory.

Supported platforms are Linux and Windows on x86-64. On any other system
`nakudynamo.platforms.UnsupportedPlatformError` is raised.

## Installation

```
pip install nakudynamo
```

## Usage

```
nakudynamo
```

The command takes no options other than `--help`. When it is run for the
first time, it:

1. creates `~/.nakudynamo` and a download cache in `~/.nakudynamo/.tmp`;
2. downloads a Java runtime archive, unpacks it into `~/.nakudynamo` and
   renames the unpacked `jdk-21.0.7+6-jre` folder to `jre`;
3. downloads DynamoDB Local and unpacks it, including `DynamoDBLocal.jar`,
   into `~/.nakudynamo`;
4. runs `java -jar DynamoDBLocal.jar -inMemory` with the bundled runtime,
   sharing the terminal's output. DynamoDB Local then listens on its default
   port, 8000.

An archive that is already in the cache and has the right checksum is used
again without fetching it; one with a wrong checksum is fetched again. Later
runs find `jre/bin/java` (`java.exe` on Windows) and the jar already in place
and start at once.

Press Ctrl+C, or send SIGTERM, to stop. nakudynamo sends an interrupt to
DynamoDB Local (on Windows it terminates the process), prints `Done!` and
exits. If preparing the environment or starting Java fails, the command
prints the error and exits with status 1.

Point your AWS SDK or CLI at `http://localhost:8000`. The data is held in
memory and is gone when the server stops.

## Using it from Python

```python
from nakudynamo.environment import prepare_environment
from nakudynamo.launcher import start, stop_dynamodb

env = prepare_environment()
process = start(env)
try:
    ...  # talk to f"http://localhost:{env.port}"
finally:
    stop_dynamodb(process)
```

- `prepare_environment(home=None, platform=None)` makes sure the runtime and
  the jar are present under `<home>/.nakudynamo` (the user's home directory
  by default) and returns a `DynamoEnvironment` with `jre_path`,
  `dynamo_jar_path`, `working_dir` and `port` (always 8000). A failed
  download, checksum check, unpacking or rename raises
  `nakudynamo.environment.EnvironmentError_`.
- `nakudynamo.launcher.build_command(env)` returns the command line;
  `start(env)` runs it as a `subprocess.Popen`; `stop_dynamodb(process)`
  asks it to stop.
- `nakudynamo.download.download_jre(dest_dir, platform=None)` and
  `download_dynamo(dest_dir, platform=None)` fetch and verify a single
  archive, raising `nakudynamo.download.DownloadError` on failure.
- `nakudynamo.extract.decompress(path, dest)` unpacks a `.zip`, `.tar.gz` or
  `.tgz` archive; symbolic and hard links in tar archives are skipped.
- `nakudynamo.checksum.sha256_of(path)` and `verify_sha256(path, expected)`
  compute and compare SHA-256 digests.
- `nakudynamo.platforms` holds the archive URLs and checksums per platform
  (`get_jre_release`, `get_dynamo_release`, `current_platform`).

## What it does not do

nakudynamo always starts DynamoDB Local in memory on its default port: there
is no option to choose a port, keep data on disk, or pass other arguments to
the server. It does not check whether the server came up, and it does not
update an installed runtime or jar; remove `~/.nakudynamo` to fetch them
again.

## Development

```
pip install -e ".[test]"
pytest
```