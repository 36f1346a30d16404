# sigtalk

Pass text messages between two processes on the same POSIX machine using
nothing but the user signals `SIGUSR1` and `SIGUSR2`.

Each byte of the UTF-8 encoded message is sent as eight bits, most
significant bit first. A set bit is sent as `SIGUSR1` and a clear bit as
`SIGUSR2`. After the message comes a NUL byte. A message that itself
contains a NUL character is cut off at that point.

## Installation

```
pip install .
```

## Usage

Start the server. It prints its process id and then waits for signals
until it is interrupted:

```
sigtalk-server
PID is = 12345
```

From another terminal, send a message to that process id:

```
sigtalk-client 12345 "hello there"
```

The server writes each character as it arrives, decoding UTF-8 and
replacing invalid sequences. When the NUL byte arrives it ends the line.
If the platform can report which process sent a signal (it has
`signal.sigwaitinfo`), the server then sends `SIGUSR1` back to the sender.
Otherwise it uses plain signal handlers and sends no acknowledgement.

The client pauses 420 microseconds after every signal so the server can
keep up. With the wrong number of arguments it prints the usage line
`./client <pid> <message>` and exits with status 1. It also exits with
status 1, after a message on standard error, if a signal cannot be
delivered. The process id is read the way `parse_int` reads it, so text
that is not a number becomes 0.

Both commands can also be run as `python -m sigtalk.server` and
`python -m sigtalk.client <pid> <message>`.

## Library use

`sigtalk.protocol` holds the wire format:

- `encode_bits(message)` yields the bits of a `str` or `bytes` message,
  including the closing NUL byte.
- `signal_for_bit(bit)` and `bit_for_signal(signum)` map between bits and
  signals. Both raise `ValueError` for anything else.
- `Decoder.feed(bit)` returns a completed byte after every eighth bit and
  `None` before then. `Decoder.pending` counts the bits received so far,
  and `Decoder.reset()` discards a partly received byte.

`sigtalk.client.send_message(pid, message, delay, kill)` sends a message and
returns the number of signals sent. `kill` is the function that delivers
each signal and defaults to `os.kill`.

`sigtalk.server.Server(output, kill)` writes to `output`, or to standard
output if none is given. `handle(signum, sender_pid)` takes one signal and
returns the byte it completed, if any. `install()` prepares signal
reception, and `run()` prints the process id and receives messages forever.

`sigtalk.fmt` has small formatting helpers:

- `render(template, *args)` and `printf(template, *args)` understand the
  conversions `%c %s %p %d %i %u %x %X %%`.
- `hex_digits(n, upper)` formats 32-bit unsigned hexadecimal.
- `address(value)` formats a pointer-like value.
- `put_str`, `put_line` and `put_number` write to a stream.

`sigtalk.textutil` has C-style string helpers: `parse_int`, `parse_long`,
`int_to_str`, the ASCII tests `is_space`, `is_digit`, `is_alpha`,
`is_alnum`, `is_ascii` and `is_print`, `to_lower`, `to_upper`, `split`,
`trim`, `substr`, `find_within`, `compare`, `compare_n`, `bounded_copy` and
`bounded_concat`.

## Limitations

The client does not wait for the server's acknowledgement. It sends every
signal and exits. Signals that arrive faster than the server handles them
can be merged by the operating system, which corrupts the message.

## Tests

```
pip install ".[test]"
pytest
```