# miniprintf

A small printf-style formatter with a fixed set of conversions. It can render a
format string with its arguments into a string. It can also write the result to
a stream and return the number of characters written.

## Installation

```
pip install miniprintf
```

## Usage

```python
from miniprintf.printf import printf, render

render("%s is %d years old", "Alice", 30)
# 'Alice is 30 years old'

count = printf("hex: %x / %X\n", 255, 255)   # writes to sys.stdout
# prints "hex: ff / FF" and returns 13
```

`printf` takes a `file` keyword argument so you can write to any text stream
other than standard output. It returns the length of the rendered text.

## Conversions

| Specifier | Argument                              | Output                                             |
|-----------|---------------------------------------|----------------------------------------------------|
| `%c`      | a one-character string or an int code | the character (an int code is taken modulo 256)    |
| `%s`      | a string or `None`                    | the string up to its first NUL, or `(null)`        |
| `%p`      | an integer address or `None`          | `0x` and lowercase hex, or `(nil)` for 0 or `None` |
| `%d` `%i` | an integer                            | decimal, taken as a signed 32-bit value            |
| `%u`      | an integer                            | decimal, taken as an unsigned 32-bit value         |
| `%x`      | an integer                            | lowercase hex, taken as an unsigned 32-bit value   |
| `%X`      | an integer                            | uppercase hex, taken as an unsigned 32-bit value   |
| `%%`      | none                                  | a literal `%`                                      |

Integers outside the 32-bit range wrap around, so `render("%d", 2**31)` gives
`'-2147483648'` and `render("%u", -1)` gives `'4294967295'`. Pointer values
wrap at 64 bits.

A `%` followed by an unknown specifier produces no output and consumes no
argument. A `%` at the very end of the format string is printed as it is.
Flags, field widths and precision are not supported.

## Errors

- If a conversion needs an argument and none is left, `TypeError` is raised.
- If `%c` gets a string that is not exactly one character long, `ValueError`
  is raised.
- If `%c` gets anything other than a string or an integer, `TypeError` is
  raised.
- If `%s` gets anything other than a string or `None`, `TypeError` is raised.

## Single conversions

You can also call each conversion on its own from `miniprintf.conversions`:
`format_char`, `format_str`, `format_int`, `format_unsigned`,
`format_hex(n, uppercase)` and `format_pointer`. There is also
`convert(specifier, args)`, which formats one specifier and takes its argument
from an iterator when the specifier needs one.