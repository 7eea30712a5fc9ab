# minitalk

A small server and client that pass text between processes using nothing but
the two user signals. The client sends each byte as eight signals, lowest bit
first: `SIGUSR1` for a 0 bit, `SIGUSR2` for a 1 bit. After every full byte the
server writes it to standard output and answers the sender with `SIGUSR1`; the
client waits for that answer before it sends the next byte. Every message ends
with a newline byte.

The server keeps a separate partial byte for each sending process, so several
clients may talk to it at once. It tracks up to 256 senders; signals from
further new senders are ignored.

## Platforms

Both commands need POSIX signals. The server waits for signals with
`signal.sigwaitinfo`, which Python provides on Linux but not on macOS, so the
server runs on Linux. The client uses `signal.sigwait` and runs on Linux and
other Unix-like systems.

## Installing

```
pip install .
```

## Running

Start the server in one terminal. It prints its process id and then waits
until interrupted with Ctrl-C:

```
minitalk-server
PID: 12345
```

From another terminal, send it a message:

```
minitalk-client 12345 "hello there"
```

The server prints `hello there` followed by a newline. The client takes
exactly two arguments, the server's process id and the message. With any other
number of arguments, or a process id that does not parse to a positive number,
it prints `Error.` and `Check the arguments` and exits with status 1. It does
the same if no process with that id exists.

## Using it from Python

```python
from minitalk.protocol import Decoder, encode_message

decoder = Decoder()
received = bytearray()
for frame in encode_message("hi"):
    for bit in frame:
        value = decoder.feed(4242, bit)
        if value is not None:
            received.append(value)

assert received == b"hi\n"
```

- `minitalk.protocol`: `encode_char` gives the eight bits of one byte, lowest
  first; `encode_message` yields one such frame per byte of a message plus one
  for the closing newline. `Decoder.feed(pid, bit)` rebuilds bytes per sending
  process and returns each byte once it is complete; `Decoder.state_for(pid)`
  returns that sender's `ClientState`.
- `minitalk.server`: `Server.handle(signum, pid)` processes one signal,
  writes a completed byte to its output and acknowledges the sender;
  `Server.serve_forever()` runs the receive loop.
- `minitalk.client`: `parse_args` checks a `[pid, message]` argument list and
  raises `UsageError` if it is wrong; `send_message(server_pid, message)` sends
  a whole message to a running server.

The package also has the helpers the commands are built on:
`minitalk.chars` (`atoi`, `itoa`, and the ASCII character tests and case
mappings), `minitalk.strops` (C-style string and buffer helpers such as
`split`, `strtrim`, `strnstr`, `strncmp` and `memcmp`) and
`minitalk.formatting` (`format_message` and `printf` for the
`%c %s %p %d %i %u %x %X %%` conversions).

## Tests

```
pip install ".[test]"
pytest
```