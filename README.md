# minitalk

One process sends text to another using only two POSIX signals. Each
byte goes out as eight signals, least significant bit first. `SIGUSR1`
carries a 1 bit and `SIGUSR2` carries a 0 bit. The server rebuilds each
byte from its bits and writes it to standard output as soon as all
eight have arrived.

## Installation

```
pip install .
```

You need a POSIX system, because Windows has no `SIGUSR1` or `SIGUSR2`.

## Usage

Start the server in one terminal. It prints its process id and then
waits for signals until it is interrupted (Ctrl-C):

```
$ minitalk-server
pid : 12345
```

If the server is given any arguments, it first prints `Error` and then
runs anyway.

Send a message to it from another terminal:

```
$ minitalk-client 12345 "hello there"
```

The server prints `hello there`. The text is sent as UTF-8. If the
client does not get exactly two arguments, it prints a usage line,
`<PID> <STRING>`, and exits with status 1. It also exits with status 1
and an error message if the process id is not a positive number or if
the signals cannot be delivered. The process id is read the way `atoi`
reads it, so any text after the leading digits is ignored.

## Library

The pieces can also be used on their own:

- `minitalk.encoding.encode_bits(data)` yields the bits of each byte,
  least significant bit first. Text is encoded as UTF-8 first.
- `minitalk.encoding.BitDecoder` takes bits through `push(bit)` and
  returns the completed byte after every eighth bit, or `None` before
  that. `pending` tells how many bits of the current byte have
  arrived, and `reset()` throws away a partly received byte.
- `minitalk.client.send_byte(pid, byte, delay)` and
  `minitalk.client.send_message(pid, text, delay)` signal a process,
  pausing `delay` seconds (100 µs by default) after each signal.
  `send_message` returns the number of bytes sent.
- `minitalk.server.Server(output)` decodes the signals it receives and
  writes each byte to `output`, a binary stream (standard output by
  default). `handle(signum, frame)` takes one signal as a bit.
  `install()` and `uninstall()` register its handlers and put the old
  ones back. `serve()` prints the process id, installs the handlers and
  waits until `stop()` is called.
- `minitalk.printf.format_string(fmt, *args)` and
  `minitalk.printf.printf(fmt, *args, file=None)` are a small formatter
  for `%c`, `%s`, `%d`, `%i`, `%u`, `%x`, `%X`, `%p` and `%%`. Integers
  are reduced to 32 bits (64 for `%p`). A `None` string prints as
  `(null)` and a null pointer prints as `(nil)`. An unknown conversion
  letter prints nothing. `printf` returns the number of characters
  written.
- `minitalk.numbers` has `atoi`, `atol` (parsing with 32- and 64-bit
  wrap-around) and `itoa`.
- `minitalk.charclass` has ASCII tests and case conversion: `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower` and
  `to_upper`.
- `minitalk.textutils` has string and byte helpers: `find_char`,
  `rfind_char`, `compare_prefix`, `find_within`, `substr`, `strtrim`,
  `split`, `map_indexed`, `mem_find` and `mem_compare`.

## Limitations

Delivery is not confirmed. The client does not wait for the server to
acknowledge a bit, and it relies on the pause after each signal. If
signals arrive faster than the server handles them, bits can be lost
and the rest of the message will be garbled.

## Tests

```
pip install .[test]
pytest
```