# minprintf

A compact `printf`, along with small helpers for strings, byte buffers,
single characters and singly linked lists.

## Installing

```
pip install .
```

## Formatting

`minprintf.printf` provides two functions. `render` returns the expanded
text. `printf` writes it to `file`, which is standard output by default, and
returns the number of characters written.

```python
from minprintf.printf import printf, render

render("%s has %d items (%x)", "cart", 42, 255)   # 'cart has 42 items (ff)'
printf("%c%c%%\n", "o", "k")                       # prints 'ok%' and a newline, returns 4
```

Supported conversions:

| spec      | argument                               | output                              |
|-----------|----------------------------------------|-------------------------------------|
| `%c`      | a one-character string or an int code  | the character (codes taken mod 256) |
| `%s`      | a string or `None`                     | the text, or `(null)` for `None`    |
| `%d` `%i` | an int                                 | decimal, wrapped to signed 32 bits  |
| `%u`      | an int                                 | decimal, wrapped to unsigned 32 bits|
| `%x` `%X` | an int                                 | lower- or upper-case hex of the low 32 bits |
| `%p`      | an int address                         | `0x` followed by lower-case hex     |
| `%%`      | none                                   | `%`                                 |

Any other character after `%` produces no output and uses no argument.
`FormatError`, a subclass of `ValueError`, is raised when an argument is
missing or when the format ends with a lone `%`. An argument of the wrong
type raises `TypeError`. If the stream cannot be written, the stream's own
exception propagates.

Each conversion is also available on its own through `format_unsigned`,
`format_hex`, `format_pointer` and `format_conversion`.

## Other modules

- `minprintf.chars` provides `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper` and `to_lower`. Each accepts a one-character string
  or an integer code. The case converters return a value of the same kind
  they were given.
- `minprintf.memory` provides `memset`, `bzero`, `memcpy`, `memchr`, `memcmp`
  and `calloc`, which work on `bytearray` and `bytes`. It also provides
  `memmove(buf, dst, src, n)`, which copies between offsets within a single
  buffer and allows the regions to overlap. `memchr` returns an index or
  `None`.
- `minprintf.output` provides `put_char`, `put_str` and `put_nbr`, which write
  to a text stream (standard output by default) and return the number of
  characters written. `put_str(None)` writes `(null)`. `put_endl` writes a
  string followed by a newline, writes nothing for `None`, and returns
  `None`.
- `minprintf.strsearch` provides `strchr`, `strrchr` and `strnstr`, which
  return indices or `None`. It also provides `strncmp`, plus `strlcpy` and
  `strlcat`. The last two return a tuple of the resulting text and the full
  length the result would have had.
- `minprintf.strtools` provides `atoi` (the result wraps to signed 32 bits),
  `itoa`, `split` (empty pieces are dropped), `substr`, `strjoin`, `strtrim`
  and `strmapi`. It also provides `striteri`, which rewrites a mutable
  sequence of characters in place.
- `minprintf.linkedlist` provides a singly linked `LinkedList` built from
  `Node`s. It can be built from an iterable and offers `push_front`,
  `push_back`, `last`, `for_each`, `map`, `clear`, `len()` and iteration
  over contents.

```python
from minprintf.linkedlist import LinkedList
from minprintf.strtools import split

words = LinkedList(split("  alpha  beta gamma ", " "))
len(words)                                          # 3
list(words.map(str.upper, lambda content: None))    # ['ALPHA', 'BETA', 'GAMMA']
```

## What it does not do

The formatter has no flags, field widths, precision or length modifiers.
Only the conversions listed above are recognised. The package has no
command-line interface. It is a library.

## Running the tests

```
pip install .[test]
pytest
```