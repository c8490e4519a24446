# conserva

A command line first pomodoro timer.

Run `conserva` with no arguments to start a server instance. The instance
keeps the timer and moves it from work to relax to standby. It listens for
commands on a Unix datagram socket at `/tmp/conserva_<pid>_v1.0.sock`. When
you run `conserva` again with a subcommand, it sends a message to the running
instances it finds in `/tmp`.

It needs Linux. The client binds an abstract Unix socket so that the server
can answer it.

## Installation

```
pip install .
```

## Usage

Start a server:

```
conserva
conserva --auto-reload
```

Stop the server with Ctrl-C. It removes its socket file when it exits.

When the pomodoro starts, when work ends, and when it goes back to standby,
the server writes a line such as `Conserva: Started work pomodoro.` to its
standard error.

Auto-reload changes what happens when a relax period ends. Without it, the
timer goes back to standby. With it, a new work period begins on its own. That
work period lasts as long as the relax time.

### Start a pomodoro

```
conserva start
conserva start --name writing --work-time 25:00 --relax-time 300
```

Times can be given as whole seconds or as `minutes:seconds`. If you give a
work time and no relax time, the relax time is one fifth of the work time.
Options you leave out keep their current values. A new server starts with a
pomodoro named `pomodoro`, 25 minutes of work and 5 minutes of rest. If a
time cannot be read, the command prints `Invalid time input: ...` and the
help, and exits with status 1.

### Stop the current pomodoro

```
conserva stop
```

The timer goes back to standby.

### Print the current state

```
conserva report
```

This prints `standby`, `work,<name>,MM:SS` or `relax,<name>,MM:SS`, where
`MM:SS` is the time left. The answer comes from the first instance found,
which has 200 ms to reply. If nothing answers, nothing is printed. The server
also writes a longer description of its state to its standard error, for
example `Conserva: Work on writing for 24:59.`

### Change the settings of a running instance

```
conserva config --auto-reload
```

With `--auto-reload`, this turns auto-reload on. Without the flag, it turns
auto-reload off.

The `start`, `stop` and `config` commands go to every instance found in
`/tmp`.

## Using it as a library

- `conserva.model.Model` is the state machine. It has `start_pomodoro`,
  `stop`, `manage` and `quit`, and its `state` is one of `PomodoroState.STANDBY`,
  `WORKING` and `RELAXING`. `conserva.stopwatch.Stopwatch` is its monotonic
  countdown.
- `conserva.commands` holds the `Start`, `Stop`, `Report` and `Config`
  commands. `from_json` decodes a command, `send(command, directory)` delivers
  one, and `Server` applies received commands to a model.
- `conserva.socket_queue` holds `SocketQueueReceiver` and `SocketQueueSender`,
  the datagram transport.
- `conserva.notifier.Notifier` takes a sink, called as
  `sink(title, body, timeout_ms)`. By default the sink prints to standard
  error. `update_message` and `report_message` build the texts.
- `conserva.cli.parse_time` parses `seconds` or `minutes:seconds`.

## What it does not do

- It has no system tray icon or menu.
- It shows no desktop notification pop-ups. Notifications are only written to
  the server's standard error, unless you pass a `Notifier` a sink of your own.
- The timer state is not saved. When the server exits, its state is lost.

## Running the tests

```
pip install .[test]
pytest
```