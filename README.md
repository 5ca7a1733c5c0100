# gfsplugin

A GlusterFS volume plugin for Docker. It checks volume creation requests,
builds the argument list that the GlusterFS client needs to mount a volume,
and opens the Unix socket through which Docker reaches volume plugins.

## Installation

```
pip install .
```

## Running the plugin

```
gfsplugin --servers gluster1,gluster2 --root /mnt/glusterfs
```

- `--servers` (also `-servers`, required): comma separated list of GlusterFS
  servers. Spaces around each name are stripped. Without it the command
  exits with `servers parameter is required`.
- `--root` (also `-root`): mount root of the plugin, `/mnt/glusterfs` by
  default.
- `--socket-dir`: directory in which the socket is created,
  `/run/docker/plugins` by default.

The command creates the socket directory if needed, removes anything left at
`glusterfs.sock` inside it, listens there with mode `0660`, and logs each
incoming connection at INFO level. If the socket cannot be set up, the
command exits with the error message.

## Volume options

When servers are given on the command line, volumes take neither the
`servers` nor the `glusteropts` driver option. Without them, a volume needs
exactly one of:

- `servers`: comma separated server list for this volume;
- `glusteropts`: the full, space separated argument list for the GlusterFS
  client.

A volume name may carry a subdirectory: `myvolume/sub/dir` gives
`--volfile-id=myvolume` and `--subdir-mount=/sub/dir`. `--logger=syslog` is
always appended to the arguments.

## Using the driver from Python

```python
from gfsplugin.driver import GlusterDriver
from gfsplugin.volume import CreateRequest, MountRequest

driver = GlusterDriver(["server1", "server2"])
request = CreateRequest(name="data/projects", options={})
driver.validate(request)
print(driver.mount_options(request))
# ['-s', 'server1', '-s', 'server2', '--volfile-id=data',
#  '--subdir-mount=/projects', '--logger=syslog']

driver.pre_mount(MountRequest(name="data", mountpoint="/mnt/glusterfs/data"))
```

- `GlusterDriver.validate` raises `gfsplugin.errors.ValidationError` for a
  request it rejects.
- `GlusterDriver.pre_mount` raises `gfsplugin.errors.MountError` when the
  mount point cannot be reached; `post_mount` only logs whether the mount
  point is reachable afterwards.
- `gfsplugin.driver.append_volume_options(args, volume_name)` returns a new
  list with the volfile id and subdirectory options added.
- `CreateRequest.validate()` and `MountRequest.validate()` raise
  `ValueError` when a required field is empty.
- `gfsplugin.rsyslog.start_syslog()` launches `rsyslogd -n` in the
  background and returns the process; it raises `gfsplugin.errors.PluginError`
  if the daemon cannot be started.

All errors raised by the package derive from `gfsplugin.errors.PluginError`,
except the `ValueError` from the request `validate` methods.

## What the package does not do

- The socket listener accepts connections and logs them, but does not read
  or answer the Docker volume plugin protocol: no create, mount, unmount,
  remove or list requests are served over it.
- The driver builds mount arguments but never runs the GlusterFS client or
  mounts anything itself.
- The command does not start `rsyslogd`; call `start_syslog()` yourself if
  you need it.

## Tests

```
pip install ".[test]"
pytest
```