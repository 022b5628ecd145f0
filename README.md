# sclexer

`sclexer` is a lexical analyser for a small teaching language. The language
uses its own names for C-style keywords. `sclexer` reads source text line by
line and prints one line per token. Each line gives the line number, the
token text and the kind of token.

## Installation

```
pip install .
```

To install the test suite too and run it:

```
pip install ".[test]"
pytest
```

## Command line

```
sclexer [path]
```

This reads the source file at `path` and prints its tokens to standard
output. If you leave out `path`, it reads `test.sc` in the current
directory. For example:

```
Line : 1 Token Text: Imw Token Type: Integer
Line : 1 Token Text: count Token Type: Identifier
Line : 1 Token Text: = Token Type: Assignment Operator
Line : 1 Token Text: 10 Token Type: Integer
```

Some characters do not form a valid token, such as `;` or a lone `!`. These
are reported as errors:

```
Line : 1 Error in Token Text: ; Token Type: Invalid Identifier
```

The lexer may be unable to advance past a character, for example `*` or `/`
directly before `@`. It then skips that character and logs a warning of the
form `Line N: Forcing skip of character 'c'`.

The exit status is 0 on success. If the file cannot be opened, the command
prints `Error opening file: ...` to standard error and exits with status 1.

## The language at a glance

| Keyword                  | Kind             |
|--------------------------|------------------|
| `IfTrue`, `Otherwise`    | Condition        |
| `Imw`                    | Integer          |
| `SIMw`                   | Signed Integer   |
| `Chj`                    | Character        |
| `Series`                 | String           |
| `IMwf`                   | Float            |
| `SIMwf`                  | Signed Float     |
| `NOReturn`               | Void             |
| `RepeatWhen`, `Reiterate`| Loop             |
| `Turnback`               | Return           |
| `OutLoop`                | Break            |
| `Loli`                   | Struct           |
| `Include`                | Inclusion        |

Any other word made of ASCII letters is an identifier. A word is at most 63
letters long; a longer run of letters is split into several words.

Numbers are read as follows:

| Example | Kind           |
|---------|----------------|
| `42`    | Integer        |
| `-7`    | Signed Integer |
| `3.14`  | Float          |
| `-0.5`  | Signed Float   |

Operators and separators:

| Tokens                        | Kind                |
|-------------------------------|---------------------|
| `+ - * /`                     | Arithmetic Operator |
| `&& \|\| & \|`                | Logic Operator      |
| `== != < > <= >=`             | Relational Operator |
| `=`                           | Assignment Operator |
| `->`                          | Access Operator     |
| `( ) [ ] { }`                 | Braces              |
| `"` and `'`                   | Quotation Mark      |

Any other character is reported as an error token.

A comment opens with `/@` and closes with `@/` on the same line. The lexer
reports three separate tokens:

- Comment Start, for the opening marker.
- Comment Content, for the text between the markers, if there is any.
- Comment End, for the closing marker.

If a line has no `@/`, the comment runs to the end of that line.

## Using it from Python

```python
import sys

from sclexer.lexer import tokenize, print_tokens

source = [
    "Imw total = 0\n",
    "RepeatWhen (total < 10) { total = total + 1 }\n",
]

tokens = list(tokenize(source))
for token in tokens:
    print(token.type, token.value, token.line)

print_tokens(tokens, sys.stdout)
```

- `tokenize(lines)` takes any iterable of lines, such as an open file, and
  numbers the lines from 1.
- `tokenize` yields frozen `Token` records from `sclexer.tokens`. Each has a
  `type` (a `TokenType`), a `value` (the token text) and a `line`.
- `TokenType.label` gives the kind as it is printed.
- `Token.format()` gives the same one-line description that the command
  prints.
- `print_tokens(tokens, out)` writes those lines to `out`, or to standard
  output if `out` is omitted.

For finer control, `sclexer.lexer` also has these functions:

- `tokenize_line(text, line)` yields the tokens of a single line.
- `read_word`, `read_number` and `read_symbol` each read one token at a
  given position. They return the token and the position just after it.
- `read_symbol` returns `None` and the unchanged position for `*` or `/`
  directly before `@`.

## What it does not do

`sclexer` only splits source text into tokens. It does not parse programs,
check their structure or run them. It also does not recognise comments
that span more than one line.