# ossup

Helpers that change service definitions of a local docker compose
environment for development work.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The service model

`ossup.service` holds a small model of a compose service, built from
dataclasses:

- `ServiceConfig`: `name`, `image`, `environment` (a dict),
  `ports` (a list of `ServicePort`), `volumes` (a list of
  `ServiceVolume`) and `deploy` (a `DeployConfig` or `None`).
- `ServicePort`: `target`, `published`, `protocol` (default `"tcp"`)
  and `mode` (default `"ingress"`).
- `ServiceVolume`: `type`, `source` and `target`.
- `DeployConfig`: `replicas`.

Two helpers go with it:

- `create_bind(source, target)` returns a `ServiceVolume` of type
  `"bind"`.
- `ensure_regular_file(path)` returns the path as a `pathlib.Path` and
  raises `FileNotFoundError`, `IsADirectoryError` or `OSError` when it
  is not an existing regular file.

## The helpers

Every helper changes the `ServiceConfig` it is given in place.

- `ossup.debug.enable_debug(service)` sets `GO_DLV` to `"true"` and
  publishes TCP port 2345 in ingress mode, unless that port is already
  published, so the container waits for a Delve debugger to attach.
  `ossup.debug.disable_debug(service)` removes `GO_DLV` and every port
  whose target is 2345.
- `ossup.entrypoint.update_entrypoint(service)` checks that
  `entrypoint.sh` exists in the current directory and bind-mounts
  `./entrypoint.sh` on `/var/lib/oss/entrypoint.sh`, unless a bind
  mount on that target is already there.
- `ossup.localbin.mount_binaries(service, directory=None, subdir="", command="")`
  bind-mounts a locally built executable from `directory/subdir` on
  `/var/lib/oss/go/bin/<name>`, replacing any bind mount on that target.
  `directory` defaults to `$GOPATH/bin`. The executable name is looked
  up in `ossup.localbin.BINARY_DICT` by the service name with trailing
  digits removed (`storagenode3` uses `storagenode`, `satellite-api`
  uses `satellite`), unless `command` names it. The executable must
  exist as a regular file.
- `ossup.localbin.strip_numeric(name)` removes trailing digits from a
  name.
- `ossup.localbin.resolve_target(source)` matches a local web source
  directory against the patterns in `ossup.localbin.FRONTENDS` and
  returns a `WebMount` with the `services` that use it and the
  container `target_path`; it raises `ValueError` when nothing matches.
- `ossup.localbin.mount_web_dir(service, source, target)` adds a bind
  mount of `source` on `target` unless the same mount exists.
- `ossup.scale.scale(service, count)` parses `count` as a non-negative
  decimal number and sets it as the number of replicas; a count of 1
  removes the deploy section. A count that is not a number, or does not
  fit in 64 bits, raises `ValueError`.

## Example

```python
from ossup.service import ServiceConfig
from ossup.debug import enable_debug
from ossup.scale import scale

service = ServiceConfig(name="storagenode", image="storagenode")
enable_debug(service)
scale(service, "10")

print(service.environment["GO_DLV"])   # true
print(service.deploy.replicas)         # 10
```

## What it does not do

The package has no command line, and it does not read or write compose
files: it works only on `ServiceConfig` objects that the caller builds
and then saves. It keeps no history of earlier versions, so there is no
undo, and it does not choose services by a selector.