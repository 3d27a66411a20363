# opal

Tools for the Opal programming language: a lexer that turns Opal source
into tokens, and an interactive prompt for trying it out.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

Tokenize a file and print every token with its type, value, line and column:

```
opal program.opal
```

Each token is printed on its own line as
`Type: <number> Value: '<text>' Line: <line> Column: <column>`, where the
number is the integer value of its `TokenType`. If the file cannot be opened,
`File does not exist: <path>` goes to standard error and the exit status is 1.

Run `opal` with no arguments to start the interactive prompt (`Opal > `).
Each line you type is tokenized and the tokens are printed. The prompt also
understands a few commands, recognised by the first word on the line:

| Command        | Effect                     |
|----------------|----------------------------|
| `help` or `?`  | Display available commands |
| `clear`        | Clear the screen           |
| `exit`         | Exit the prompt            |

The prompt also stops at end of input.

## Library use

```python
from opal.lexer import Lexer
from opal.tokens import TokenType

lexer = Lexer("fn main() { ret 1..10; }")
for token in lexer.scan_tokens():
    print(token.type.name, token.value, token.line, token.column)
```

The token stream always ends with a `TokenType.EOF_TOKEN` token whose value is
`"EOF"`. Comments, both `// line` and nested `/* block */`, come out as
`TokenType.COMMENT` tokens. String tokens hold their text without the
surrounding quotes; there are no escape sequences. `Lexer.format_tokens()`
returns the printed listing as a string and `Lexer.print_tokens(out)` writes it
to a stream.

Lexical problems such as unexpected characters, unterminated strings and
unterminated block comments do not stop scanning. Each one is written to
standard error as `[line L, column C] Lexical error: message` and recorded in
the lexer's `errors`, an `opal.errors.ErrorLog`. Its `errors` list holds
`ErrorInfo` records, `had_error()` tells you whether anything went wrong and
`reset()` clears it. You can pass your own `ErrorLog` to `Lexer` to collect
errors across several runs or to send messages to another stream.

`opal.fileutil` offers `read_file`, `write_file` and `file_exists`; the first
two raise `OSError` when the file cannot be opened.

Keywords: `class fn if elif else while for foreach in try catch finally ret
this true false nil and or not const enum switch case default break continue
load`.

## What it does not do

Opal source is only tokenized. There is no parser and no evaluator: neither
the `opal` command nor the prompt runs programs, they list the tokens.